"""
cp_primitives - Generic algorithmic building blocks for puzzle solving.
"""
from .bounds import (
    compare_values,
    lower_bound,
    lower_bound_by,
    lower_bound_with,
    upper_bound,
    upper_bound_by,
    upper_bound_with,
)
from .data_structures import (
    DisjointSetUnion,
    MaxSegmentTree,
    MinSegmentTree,
    SegmentTree,
    SumSegmentTree,
)
from .errors import (
    CpPrimitivesError,
    EmptyStructureError,
    InvalidArgumentError,
    OutOfRangeError,
)
from .search import TERNARY_SEARCH_EPS, partition_point, ternary_search
from .strings import (
    DEFAULT_DELIMITER,
    all_indices_of,
    prefix_function,
    string_prefix_function,
)
from .utils import decrement, gcd, increment, lcm, sqr

__version__ = "0.1.0"
