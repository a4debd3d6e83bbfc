"""
strings.py - Module to hold the prefix function and KMP substring search.
"""
from typing import Any, Callable, List, Sequence

from .errors import InvalidArgumentError

#: Separator placed between pattern and text; must occur in neither.
DEFAULT_DELIMITER = "#"


def prefix_function(length: int, at: Callable[[int], Any]) -> List[int]:
    """Compute the prefix (failure) function of an index-addressable sequence.

    pi[i] is the length of the longest proper prefix of the first i + 1
    elements that is also a suffix of them.

    Args:
        length (int): the number of elements in the sequence.
        at (Callable[[int], Any]): returns the element at a given index.

    Returns:
        List[int]: the prefix function, with pi[0] == 0.
    """
    pi = [0] * length
    for i in range(1, length):
        j = pi[i - 1]
        while j > 0 and at(i) != at(j):
            j = pi[j - 1]
        pi[i] = j + 1 if at(i) == at(j) else j
    return pi


def string_prefix_function(s: Sequence[Any]) -> List[int]:
    """Compute the prefix function of a string (or any indexable sequence)."""
    return prefix_function(len(s), s.__getitem__)


def all_indices_of(
    text: str, pattern: str, delimiter: str = DEFAULT_DELIMITER
) -> List[int]:
    """Find every (possibly overlapping) occurrence of pattern in text.

    The delimiter must be a single character that occurs in neither string;
    only its length is checked. An empty pattern reports the positions
    1..len(text).

    Args:
        text (str): the text to search in.
        pattern (str): the substring to search for.
        delimiter (str, optional): the separator between pattern and text. Defaults to "#".

    Raises:
        InvalidArgumentError: if delimiter is not exactly one character long.

    Returns:
        List[int]: the starting offsets of all occurrences, in increasing order.
    """
    if len(delimiter) != 1:
        raise InvalidArgumentError(
            f"delimiter ({delimiter!r}) must be a single character."
        )

    pi = string_prefix_function(pattern + delimiter + text)
    size = len(pattern)
    return [i - 2 * size for i, value in enumerate(pi) if value == size and i > size]
