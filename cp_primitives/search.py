"""
search.py - Module to hold binary and ternary search over numeric domains.
"""
from typing import Callable

from .errors import InvalidArgumentError
from .types import Predicate

#: Width of the interval at which ternary search stops narrowing.
TERNARY_SEARCH_EPS = 1e-9


def partition_point(from_index: int, to_index: int, predicate: Predicate) -> int:
    """Find the first index in [from_index, to_index) where predicate turns False.

    The predicate must be monotonic: True on a prefix of the range and False on
    the rest. This is not validated.

    Args:
        from_index (int): the start of the range (inclusive).
        to_index (int): the end of the range (exclusive).
        predicate (Predicate): the monotonic predicate to split the range with.

    Raises:
        InvalidArgumentError: if from_index is greater than to_index.

    Returns:
        int: the partition point, to_index if the predicate holds everywhere.
    """
    if from_index > to_index:
        raise InvalidArgumentError(
            f"from_index ({from_index}) is greater than to_index ({to_index})."
        )

    low, high = from_index, to_index
    while low < high:
        mid = low + (high - low) // 2
        if predicate(mid):
            low = mid + 1
        else:
            high = mid
    return low


def ternary_search(
    left: float,
    right: float,
    f: Callable[[float], float],
    eps: float = TERNARY_SEARCH_EPS,
) -> float:
    """Find the argument maximising a unimodal function on [left, right].

    Args:
        left (float): the left bound of the interval.
        right (float): the right bound of the interval.
        f (Callable[[float], float]): a function that strictly increases then strictly decreases.
        eps (float, optional): the interval width to stop at. Defaults to TERNARY_SEARCH_EPS.

    Raises:
        InvalidArgumentError: if left is greater than right.

    Returns:
        float: the point at which f attains its maximum, up to eps.
    """
    if left > right:
        raise InvalidArgumentError(
            f"left bound ({left}) is greater than right bound ({right})."
        )

    while right - left > eps:
        third = (right - left) / 3
        m1 = left + third
        m2 = right - third
        if f(m1) < f(m2):
            if m1 <= left:  # Out of float resolution
                break
            left = m1
        else:
            if m2 >= right:
                break
            right = m2
    return left
