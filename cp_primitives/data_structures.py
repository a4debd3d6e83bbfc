import logging
import operator
from typing import Any, Iterable, List, Optional

import numpy as np

from .errors import EmptyStructureError, InvalidArgumentError, OutOfRangeError
from .types import Operation

logger = logging.getLogger(__name__)

# Marks a node slot that holds no value, so that None stays a legal element.
_EMPTY = object()


class SegmentTree:
    """Implementation of a Segment Tree data structure."""

    def __init__(self, source: Iterable[Any], operation: Operation) -> None:
        """Implementation of a Segment Tree data structure.

        The operation must be associative. This is never checked; a
        non-associative operation yields undefined (but safe) query results.

        Args:
            source (Iterable[Any]): the elements to represent, in index order.
            operation (Operation): the associative operation to answer range queries for.
        """
        source = list(source)
        self.size = len(source)
        self.operation = operation
        self.data = [_EMPTY for _ in range(4 * self.size)]

        if self.size > 0:
            self._build(source, 1, 0, self.size - 1)
        logger.debug("Built segment tree over %d elements", self.size)

    def _build(self, source: List[Any], node: int, node_start: int, node_end: int):
        if node_start == node_end:  # Leaf
            self.data[node] = source[node_start]
            return

        node_mid = node_start + (node_end - node_start) // 2
        self._build(source, 2 * node, node_start, node_mid)
        self._build(source, 2 * node + 1, node_mid + 1, node_end)
        self.data[node] = self.operation(self.data[2 * node], self.data[2 * node + 1])

    def _reduce(
        self, start: int, end: int, node: int, node_start: int, node_end: int
    ) -> Any:
        """Recursively find the result of the operation in a given range.

        Args:
            start (int): the index at the start of the range.
            end (int): the index at the end of the range (inclusive).
            node (int): the index of the node the explorative call is at.
            node_start (int): the index at the start of the range the node is responsible for.
            node_end (int): the index at the end of the range the node is responsible for.

        Returns:
            Any: the result of the operation at the overlap of the given range and the
                node's range, or the empty marker if they do not overlap.
        """
        if start > end:  # No overlap
            return _EMPTY
        if start == node_start and end == node_end:  # Total overlap
            return self.data[node]

        node_mid = node_start + (node_end - node_start) // 2
        left = self._reduce(start, min(end, node_mid), 2 * node, node_start, node_mid)
        right = self._reduce(
            max(start, node_mid + 1), end, 2 * node + 1, node_mid + 1, node_end
        )

        if left is _EMPTY:
            return right
        if right is _EMPTY:
            return left
        return self.operation(left, right)

    def _update(
        self, index: int, item: Any, node: int, node_start: int, node_end: int
    ):
        if node_start == node_end:  # Reached the leaf
            self.data[node] = item
            return

        node_mid = node_start + (node_end - node_start) // 2
        if index <= node_mid:
            self._update(index, item, 2 * node, node_start, node_mid)
        else:
            self._update(index, item, 2 * node + 1, node_mid + 1, node_end)
        self.data[node] = self.operation(self.data[2 * node], self.data[2 * node + 1])

    def _check_range(self, start: int, end: int):
        if self.size == 0:
            raise EmptyStructureError("Cannot query an empty segment tree.")
        if start < 0:
            raise OutOfRangeError(f"start ({start}) is negative.")
        if end >= self.size:
            raise OutOfRangeError(
                f"end ({end}) is out of bounds for size {self.size}."
            )
        if start > end:
            raise InvalidArgumentError(f"start ({start}) is greater than end ({end}).")

    def get(self, start: int, end: Optional[int] = None) -> Any:
        """Combine all the elements in the inclusive range [start, end].

        Args:
            start (int): the index of the first element of the range.
            end (int, optional): the index of the last element of the range.
                Defaults to None, which queries the single element at start.

        Raises:
            EmptyStructureError: if the tree holds no elements.
            OutOfRangeError: if start is negative or end is not below the size.
            InvalidArgumentError: if start is greater than end.

        Returns:
            Any: the result of the operation over the range.
        """
        if end is None:
            end = start
        self._check_range(start, end)
        return self._reduce(start, end, 1, 0, self.size - 1)

    def get_or_none(self, start: int, end: Optional[int] = None) -> Any:
        """Like get, but return None instead of raising on a bad range."""
        return self.get_or_default(start, end, None)

    def get_or_default(self, start: int, end: Optional[int], default: Any) -> Any:
        """Like get, but return default instead of raising on a bad range.

        Args:
            start (int): the index of the first element of the range.
            end (int, optional): the index of the last element of the range.
            default (Any): the value to return when the range is invalid or the tree is empty.

        Returns:
            Any: the result of the operation over the range, or default.
        """
        try:
            return self.get(start, end)
        except (EmptyStructureError, OutOfRangeError, InvalidArgumentError):
            return default

    def set(self, index: int, item: Any):
        """Set an item on the given index and refresh its ancestors.

        Args:
            index (int): the index of the item to set.
            item (Any): the item to set.

        Raises:
            EmptyStructureError: if the tree holds no elements.
            OutOfRangeError: if index is outside [0, size).
        """
        if self.size == 0:
            raise EmptyStructureError("Cannot update an empty segment tree.")
        if not 0 <= index < self.size:
            raise OutOfRangeError(
                f"index ({index}) is out of bounds for size {self.size}."
            )
        self._update(index, item, 1, 0, self.size - 1)

    update = set

    def values(self) -> List[Any]:
        """Get the current leaf values of the segment tree.

        Returns:
            List[Any]: the saved values, in index order.
        """
        return [self.get(index) for index in range(self.size)]

    def __getitem__(self, key) -> Any:
        """Query a single index (tree[i]) or an inclusive range (tree[i, j]).

        Only int and (int, int) keys are accepted; slices are rejected.
        """
        if isinstance(key, slice):
            raise InvalidArgumentError(
                "Slices are not supported, use tree[start, end] for an inclusive range."
            )
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get(key)

    def __setitem__(self, index: int, item: Any):
        self.set(index, item)

    def __len__(self) -> int:
        return self.size

    def reduce(self, start: int = 0, end: Optional[int] = None) -> Any:
        """Find the result of the operation over the half-open range [start, end).

        Args:
            start (int, optional): the index at the start of the range. Defaults to 0.
            end (int, optional): the index one past the end of the range. Defaults to None.
                A negative value is relative to the end of the array.

        Returns:
            Any: the result of the operation at the given range.
        """
        if end is None:  # Argument not provided
            end = self.size
        if end < 0:  # Argument is relative to the end of the array
            end += self.size

        return self.get(start, end - 1)


class SumSegmentTree(SegmentTree):
    """A Segment Tree that allows for efficient sum queries."""

    def __init__(self, source: Iterable[Any]):
        super().__init__(source, operation=operator.add)

    def sum(self, start: int = 0, end: Optional[int] = None) -> Any:
        """Return the sum of the elements in the range [start, end).

        Args:
            start (int, optional): the index of the first element in the sum. Defaults to 0.
            end (int, optional): the index one past the final element in the sum. Defaults to None.

        Returns:
            Any: the sum in the given range.
        """
        return super().reduce(start, end)


class MinSegmentTree(SegmentTree):
    """A Segment Tree that allows for efficient min queries."""

    def __init__(self, source: Iterable[Any]):
        super().__init__(source, operation=min)

    def min(self, start: int = 0, end: Optional[int] = None) -> Any:
        """Return the minimum of all the elements in the range [start, end)."""
        return super().reduce(start, end)


class MaxSegmentTree(SegmentTree):
    """A Segment Tree that allows for efficient max queries."""

    def __init__(self, source: Iterable[Any]):
        super().__init__(source, operation=max)

    def max(self, start: int = 0, end: Optional[int] = None) -> Any:
        """Return the maximum of all the elements in the range [start, end)."""
        return super().reduce(start, end)


class DisjointSetUnion:
    """A Disjoint Set Union (union-find) over the integers [0, size).

    Uses path compression in find and union by rank in union.
    """

    def __init__(self, size: int):
        """A Disjoint Set Union over the integers [0, size).

        Args:
            size (int): the number of elements, each starting as its own singleton set.
        """
        if size < 0:
            raise InvalidArgumentError(f"size ({size}) is negative.")
        self.size = size
        self.parent = np.arange(size, dtype=np.int64)
        self.rank = np.zeros(size, dtype=np.int64)

    def _check_index(self, x: int):
        if not 0 <= x < self.size:
            raise OutOfRangeError(
                f"Element ({x}) is out of disjoint set bounds: [0..{self.size})"
            )

    def find(self, x: int) -> int:
        """Find the representative of the set holding x, compressing the path to it.

        Args:
            x (int): the element to look up.

        Returns:
            int: the root of the tree that x belongs to.
        """
        self._check_index(x)

        # Walk up to the root
        root = x
        while self.parent[root] != root:
            root = int(self.parent[root])

        # Point every visited node straight at the root
        while self.parent[x] != root:
            self.parent[x], x = root, int(self.parent[x])
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets holding x and y.

        Args:
            x (int): an element of the first set.
            y (int): an element of the second set.

        Returns:
            bool: True if two sets were merged, False if x and y were already connected.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        # Attach the lower rank tree under the higher rank root
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        logger.debug("Merged sets rooted at %d and %d", root_x, root_y)
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def count(self) -> int:
        """Count the disjoint sets by scanning for roots."""
        return int(np.count_nonzero(self.parent == np.arange(self.size)))

    def make_set(self, x: int):
        """Force x back to a singleton root.

        Elements that pointed at x keep pointing at it; only x's own parent and
        rank are reset.

        Args:
            x (int): the element to reset.
        """
        self._check_index(x)
        self.parent[x] = x
        self.rank[x] = 0
        logger.debug("Reset element %d to a singleton set", x)

    def __len__(self) -> int:
        return self.size
