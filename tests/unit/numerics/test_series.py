from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
import math

import pytest

from pysatl_probdist.errors import ConvergenceError, PrecisionWarning
from pysatl_probdist.numerics.series import sum_series


def _geometric_terms(ratio: float):
    term = 1.0
    while True:
        term *= ratio
        yield term


class TestSumSeries:
    def test_converges_below_eps(self) -> None:
        total = sum_series(_geometric_terms(0.5), start=1.0, eps=1e-17, max_terms=1000)
        assert total == pytest.approx(2.0, rel=1e-15)

    def test_finite_iterable_is_summed_completely(self) -> None:
        assert sum_series([1.0, 2.0, 3.0], eps=0.0, max_terms=10) == 6.0

    def test_cap_warns_and_returns_partial_sum(self) -> None:
        with pytest.warns(PrecisionWarning, match="harmonic: no convergence after 50 terms"):
            total = sum_series(
                (1.0 / k for k in itertools.count(1)), eps=1e-16, max_terms=50, label="harmonic"
            )
        assert total == pytest.approx(sum(1.0 / k for k in range(1, 51)))

    def test_cap_raises_when_strict(self) -> None:
        with pytest.raises(ConvergenceError, match="no convergence"):
            sum_series(_geometric_terms(0.999), eps=1e-16, max_terms=20, strict=True)

    def test_term_on_threshold_stops(self) -> None:
        total = sum_series(iter([0.5, 0.25, math.inf]), eps=0.25, max_terms=10)
        assert total == 0.75

    def test_relative_threshold_follows_the_total(self) -> None:
        terms = [1e-20, 1e-25, 1e-37, 1.0]
        assert sum_series(terms, eps=1e-16, max_terms=10) == 1e-20
        assert sum_series(terms, eps=1e-16, max_terms=10, relative=True) == pytest.approx(
            1e-20 + 1e-25 + 1e-37, rel=1e-15
        )
