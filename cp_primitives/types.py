from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")

# Associative binary operation combining two range results.
Operation = Callable[[T, T], T]

# Monotonic predicate over an integer domain: True on a prefix, False afterwards.
Predicate = Callable[[int], bool]

# Three-way comparator, negative / zero / positive like the old `cmp`.
Comparator = Callable[[Any, Any], int]

# Three-way comparison of an element against an implicit target.
Comparison = Callable[[Any], int]

# Key extractor used by the `*_by` bound searches.
Selector = Callable[[Any], Any]
