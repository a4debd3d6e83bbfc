import math

import numpy as np
import pytest

from .errors import InvalidArgumentError
from .search import partition_point, ternary_search


class TestPartitionPoint:
    def test_empty_range(self):
        assert partition_point(5, 5, lambda i: True) == 5

    def test_all_true(self):
        assert partition_point(0, 10, lambda i: True) == 10

    def test_all_false(self):
        assert partition_point(0, 10, lambda i: False) == 0

    def test_partition_in_middle(self):
        assert partition_point(0, 10, lambda i: i < 5) == 5

    def test_sorted_list(self):
        items = [1, 3, 5, 7, 9, 11, 13, 15]
        assert partition_point(0, len(items), lambda i: items[i] < 10) == 5

    def test_negative_indices(self):
        assert partition_point(-10, 10, lambda i: i < 0) == 0

    def test_invalid_range(self):
        with pytest.raises(InvalidArgumentError):
            partition_point(10, 5, lambda i: True)

    @pytest.mark.parametrize("split", [0, 1, 2, 3])
    def test_three_elements(self, split):
        assert partition_point(0, 3, lambda i: i < split) == split

    def test_beyond_64_bits(self):
        target = 2**70 + 12345
        assert partition_point(0, 2**71, lambda i: i < target) == target

    def test_int64_boundaries(self):
        low = -(2**63)
        high = 2**63 - 1
        assert partition_point(low, low + 100, lambda i: i < low + 50) == low + 50
        assert partition_point(high - 1000, high, lambda i: i < high - 500) == high - 500

    def test_square_root(self):
        target = 625
        result = partition_point(0, target + 1, lambda i: i * i <= target)
        assert result - 1 == 25

    def test_monotonic_contract(self):
        for split in range(-3, 13):
            x = partition_point(-3, 12, lambda i: i < split)
            assert all(i < split for i in range(-3, x))
            assert not any(i < split for i in range(x, 12))

    def test_lower_and_upper_bound(self):
        items = [1, 3, 3, 3, 5, 7, 9]
        assert partition_point(0, len(items), lambda i: items[i] < 3) == 1
        assert partition_point(0, len(items), lambda i: items[i] <= 3) == 4


class TestTernarySearch:
    def test_invalid_range(self):
        with pytest.raises(InvalidArgumentError):
            ternary_search(10.0, 5.0, lambda x: x)

    def test_degenerate_range(self):
        def f(x):
            raise AssertionError("should not be called")

        assert ternary_search(3.0, 3.0, f) == 3.0

    @pytest.mark.parametrize(
        "left, right, f, expected",
        [
            (0.0, 10.0, lambda x: -((x - 5) ** 2), 5.0),
            (0.0, 10.0, lambda x: -x, 0.0),
            (0.0, 10.0, lambda x: x, 10.0),
            (0.0, math.pi, math.sin, math.pi / 2),
            (-math.pi, math.pi, math.cos, 0.0),
            (-10.0, 0.0, lambda x: -((x + 5) ** 2), -5.0),
            (1.0, 2.0, lambda x: -((x - 1.5) ** 2), 1.5),
            (0.0, 1000.0, lambda x: -((x - 999) ** 2), 999.0),
        ],
    )
    def test_maximum(self, left, right, f, expected):
        assert np.isclose(ternary_search(left, right, f), expected, atol=1e-6)

    def test_minimize_by_negation(self):
        result = ternary_search(-10.0, 10.0, lambda x: -((x - 2) ** 2 + 1))
        assert result == pytest.approx(2.0, abs=1e-6)

    def test_rectangle_with_fixed_perimeter(self):
        perimeter = 20.0
        width = ternary_search(0.0, perimeter / 2, lambda w: w * (perimeter / 2 - w))
        assert width == pytest.approx(5.0, abs=1e-6)

    def test_constant_function(self):
        assert 0.0 <= ternary_search(0.0, 10.0, lambda x: 1.0) <= 10.0

    def test_huge_magnitudes_terminate(self):
        result = ternary_search(1e20, 1e20 + 1e6, lambda x: -abs(x - 1e20))
        assert 1e20 <= result <= 1e20 + 1e6

    def test_custom_eps(self):
        result = ternary_search(0.0, 10.0, lambda x: -((x - 5) ** 2), eps=1e-3)
        assert result == pytest.approx(5.0, abs=1e-2)
