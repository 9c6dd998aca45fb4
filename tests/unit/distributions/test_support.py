from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf

import numpy as np
import pytest

from pysatl_probdist.distributions.support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerSupport,
    Support,
)
from pysatl_probdist.types import ContinuousSupportShape1D


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    def test_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    def test_bounds(self):
        support = ContinuousSupport(left=2.0)
        assert support.lower == 2.0
        assert support.upper == inf
        assert isinstance(support, Support)

    @pytest.mark.parametrize(
        "support, expected_shape",
        [
            (ContinuousSupport(0, 1), ContinuousSupportShape1D.BOUNDED_INTERVAL),
            (ContinuousSupport(left=0), ContinuousSupportShape1D.RAY_RIGHT),
            (ContinuousSupport(), ContinuousSupportShape1D.REAL_LINE),
        ],
        ids=["bounded", "ray_right", "real_line"],
    )
    def test_shape(self, support, expected_shape):
        assert support.shape == expected_shape


class TestIntegerSupport:
    def test_contains_integers_only(self):
        support = IntegerSupport(0, 3)
        assert 0 in support
        assert 3 in support
        assert 2.0 in support
        assert 1.5 not in support
        assert 4 not in support
        assert -1 not in support
        assert inf not in support

    def test_contains_array(self):
        result = IntegerSupport(1).contains(np.array([0, 1, 2.5, 1000]))
        assert result.tolist() == [False, True, False, True]

    def test_unbounded_right(self):
        support = IntegerSupport(1)
        assert support.lower == 1.0
        assert support.upper == inf
        assert support.is_left_bounded
        assert not support.is_right_bounded
        assert isinstance(support, DiscreteSupport)

    def test_navigation(self):
        support = IntegerSupport(2, 4)
        assert support.first() == 2
        assert support.last() == 4
        assert support.next(2) == 3
        assert support.next(4) is None
        assert support.next(-10) == 2
        assert support.prev(3) == 2
        assert support.prev(3.5) == 3
        assert support.prev(2) is None
        assert support.prev(100) == 4

    def test_iteration(self):
        assert list(IntegerSupport(-1, 2)) == [-1, 0, 1, 2]

    def test_iteration_requires_left_bound(self):
        with pytest.raises(RuntimeError, match="left-unbounded"):
            iter(IntegerSupport(None, 5))

    def test_rejects_reversed_bounds(self):
        with pytest.raises(ValueError, match="max_k must not be less than min_k"):
            IntegerSupport(3, 2)
