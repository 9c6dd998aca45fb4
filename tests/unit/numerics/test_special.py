from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import norm

from pysatl_probdist.numerics.special import (
    LN_DBL_MAX,
    bar_f01,
    cdf01,
    density01,
    gamma_ratio_half,
    inverse_f01,
    log_beta,
    log_gamma,
)


class TestStandardNormal:
    @pytest.mark.parametrize("x", [-40.0, -5.0, -1.0, 0.0, 0.5, 3.0, 9.0])
    def test_density_cdf_and_complement(self, x: float) -> None:
        assert density01(x) == pytest.approx(norm.pdf(x), rel=1e-12)
        assert cdf01(x) == pytest.approx(norm.cdf(x), rel=1e-12)
        assert bar_f01(x) == pytest.approx(norm.sf(x), rel=1e-12)

    def test_complement_is_accurate_in_upper_tail(self) -> None:
        # 1 - cdf01 would round to zero here
        assert bar_f01(10.0) > 0.0
        assert bar_f01(10.0) == pytest.approx(7.619853024160527e-24, rel=1e-10)

    @pytest.mark.parametrize("u", [1e-10, 0.025, 0.5, 0.975, 1 - 1e-10])
    def test_inverse(self, u: float) -> None:
        assert inverse_f01(u) == pytest.approx(norm.ppf(u), rel=1e-12, abs=1e-12)

    def test_inverse_endpoints(self) -> None:
        assert inverse_f01(0.0) == -math.inf
        assert inverse_f01(1.0) == math.inf

    @pytest.mark.parametrize("u", [-0.1, 1.1])
    def test_inverse_rejects_non_probability(self, u: float) -> None:
        with pytest.raises(ValueError, match="u not in"):
            inverse_f01(u)


class TestGammaFunctions:
    def test_log_gamma_and_log_beta(self) -> None:
        assert log_gamma(5.0) == pytest.approx(math.log(24.0), rel=1e-14)
        assert log_beta(2.0, 3.0) == pytest.approx(math.log(1.0 / 12.0), rel=1e-14)

    @pytest.mark.parametrize("x", [0.5, 1.0, 7.5, 1e6])
    def test_gamma_ratio_half(self, x: float) -> None:
        expected = math.exp(math.lgamma(x + 0.5) - math.lgamma(x))
        assert gamma_ratio_half(x) == pytest.approx(expected, rel=1e-7)

    def test_gamma_ratio_half_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            gamma_ratio_half(0.0)


def test_exp_overflow_threshold() -> None:
    assert math.isfinite(math.exp(LN_DBL_MAX - 1.0))
    with pytest.raises(OverflowError):
        math.exp(LN_DBL_MAX + 1.0)
