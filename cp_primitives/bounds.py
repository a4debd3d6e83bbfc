"""
bounds.py - Module to hold lower/upper bound search over sorted sequences.

Every search here is a partition_point over the sequence indices.
"""
from typing import Any, Optional, Sequence

from .errors import OutOfRangeError
from .search import partition_point
from .types import Comparator, Comparison, Selector


def compare_values(a: Any, b: Any) -> int:
    """Three-way compare two values, ordering None before everything else."""
    if a is b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return (a > b) - (a < b)


def _range_check(size: int, from_index: int, to_index: Optional[int]) -> int:
    if to_index is None:
        to_index = size
    if from_index < 0:
        raise OutOfRangeError(f"from_index ({from_index}) is less than zero.")
    if to_index > size:
        raise OutOfRangeError(f"to_index ({to_index}) is greater than size ({size}).")
    return to_index


def lower_bound(
    seq: Sequence[Any],
    element: Any,
    cmp: Optional[Comparator] = None,
    from_index: int = 0,
    to_index: Optional[int] = None,
) -> int:
    """Find the first index whose item is not less than element.

    Args:
        seq (Sequence[Any]): a sequence sorted by natural order, or by cmp if given.
        element (Any): the value to search for.
        cmp (Comparator, optional): a three-way comparator defining the order. Defaults to None.
        from_index (int, optional): the start of the searched range. Defaults to 0.
        to_index (int, optional): the end (exclusive) of the searched range. Defaults to len(seq).

    Returns:
        int: the lower bound of element within [from_index, to_index].
    """
    compare = cmp or compare_values
    to_index = _range_check(len(seq), from_index, to_index)
    return partition_point(from_index, to_index, lambda i: compare(seq[i], element) < 0)


def upper_bound(
    seq: Sequence[Any],
    element: Any,
    cmp: Optional[Comparator] = None,
    from_index: int = 0,
    to_index: Optional[int] = None,
) -> int:
    """Find the first index whose item is greater than element.

    Takes the same arguments as lower_bound.
    """
    compare = cmp or compare_values
    to_index = _range_check(len(seq), from_index, to_index)
    return partition_point(from_index, to_index, lambda i: compare(seq[i], element) <= 0)


def lower_bound_with(
    seq: Sequence[Any],
    comparison: Comparison,
    from_index: int = 0,
    to_index: Optional[int] = None,
) -> int:
    """Find the first index whose item does not compare below the implicit target.

    Args:
        seq (Sequence[Any]): a sequence sorted consistently with comparison.
        comparison (Comparison): returns a negative number for items below the target,
            zero for matches and a positive number for items above it.
        from_index (int, optional): the start of the searched range. Defaults to 0.
        to_index (int, optional): the end (exclusive) of the searched range. Defaults to len(seq).

    Returns:
        int: the lower bound within [from_index, to_index].
    """
    to_index = _range_check(len(seq), from_index, to_index)
    return partition_point(from_index, to_index, lambda i: comparison(seq[i]) < 0)


def upper_bound_with(
    seq: Sequence[Any],
    comparison: Comparison,
    from_index: int = 0,
    to_index: Optional[int] = None,
) -> int:
    """Find the first index whose item compares above the implicit target."""
    to_index = _range_check(len(seq), from_index, to_index)
    return partition_point(from_index, to_index, lambda i: comparison(seq[i]) <= 0)


def lower_bound_by(
    seq: Sequence[Any],
    key: Any,
    selector: Selector,
    from_index: int = 0,
    to_index: Optional[int] = None,
) -> int:
    """Find the first index whose selected key is not less than key."""
    return lower_bound_with(
        seq, lambda item: compare_values(selector(item), key), from_index, to_index
    )


def upper_bound_by(
    seq: Sequence[Any],
    key: Any,
    selector: Selector,
    from_index: int = 0,
    to_index: Optional[int] = None,
) -> int:
    """Find the first index whose selected key is greater than key."""
    return upper_bound_with(
        seq, lambda item: compare_values(selector(item), key), from_index, to_index
    )
