from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_probdist.distributions.computation import AnalyticalComputation
from pysatl_probdist.distributions.support import ContinuousSupport, IntegerSupport
from pysatl_probdist.types import CharacteristicName, Kind
from tests.utils.mocks import StandaloneUnivariateDistribution

PDF = CharacteristicName.PDF
CDF = CharacteristicName.CDF
PPF = CharacteristicName.PPF
MEAN = CharacteristicName.MEAN
VAR = CharacteristicName.VAR
STD = CharacteristicName.STD


def _uniform_pdf(x: float, **_) -> float:
    return 1.0 if 0.0 < x < 1.0 else 0.0


def _poisson_cdf(lam: float):
    def cdf(x: float, **_) -> float:
        if x < 0:
            return 0.0
        k = math.floor(x)
        return sum(math.exp(-lam) * lam**i / math.factorial(i) for i in range(k + 1))

    return cdf


class TestComputationStrategy:
    def test_analytical_is_returned_as_is(self) -> None:
        distr = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS, {PDF: _uniform_pdf}, ContinuousSupport(0.0, 1.0)
        )
        method = distr.query_method(PDF)
        assert isinstance(method, AnalyticalComputation)
        assert method(0.5) == 1.0

    def test_moments_from_pdf(self) -> None:
        distr = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS, {PDF: _uniform_pdf}, ContinuousSupport(0.0, 1.0)
        )
        assert distr.query_method(MEAN)(None) == pytest.approx(0.5, rel=1e-9)
        assert distr.query_method(VAR)(None) == pytest.approx(1.0 / 12.0, rel=1e-9)
        assert distr.query_method(STD)(None) == pytest.approx(math.sqrt(1.0 / 12.0), rel=1e-9)

    def test_analytical_mean_is_used_for_variance(self) -> None:
        distr = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS,
            {PDF: _uniform_pdf, MEAN: lambda _=None, **__: 0.25},
            ContinuousSupport(0.0, 1.0),
        )
        # ∫ (x - 1/4)² dx over (0, 1)
        assert distr.query_method(VAR)(None) == pytest.approx(7.0 / 48.0, rel=1e-9)

    def test_discrete_ppf_from_cdf(self) -> None:
        cdf = _poisson_cdf(3.0)
        distr = StandaloneUnivariateDistribution(Kind.DISCRETE, {CDF: cdf}, IntegerSupport(0))
        ppf = distr.query_method(PPF)

        for u in (0.01, 0.2, 0.5, 0.9, 0.999):
            k = int(ppf(u))
            assert cdf(k) >= u
            assert k == 0 or cdf(k - 1) < u

    def test_discrete_ppf_on_bounded_support(self) -> None:
        distr = StandaloneUnivariateDistribution(
            Kind.DISCRETE,
            {CDF: lambda x, **_: 0.0 if x < 2 else (0.5 if x < 3 else 1.0)},
            IntegerSupport(2, 3),
        )
        ppf = distr.query_method(PPF)
        assert ppf(0.0) == 2
        assert ppf(0.5) == 2
        assert ppf(0.6) == 3
        assert ppf(1.0) == 3

    def test_no_path_raises(self) -> None:
        distr = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS, {CDF: lambda x, **_: x}, ContinuousSupport(0.0, 1.0)
        )
        with pytest.raises(RuntimeError, match="No conversion path"):
            distr.query_method(PPF)

    def test_without_analytical_base_raises(self) -> None:
        distr = StandaloneUnivariateDistribution(Kind.CONTINUOUS, {})
        with pytest.raises(RuntimeError, match="no analytical computations"):
            distr.query_method(MEAN)

    def test_caching(self) -> None:
        distr = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS,
            {PDF: _uniform_pdf},
            ContinuousSupport(0.0, 1.0),
            enable_caching=True,
        )
        first = distr.query_method(MEAN)
        assert distr.query_method(MEAN) is first

        distr.computation_strategy.clear_cache()
        assert distr.query_method(MEAN) is not first

    def test_cache_is_per_distribution(self) -> None:
        a = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS, {PDF: _uniform_pdf}, ContinuousSupport(0.0, 1.0), enable_caching=True
        )
        b = StandaloneUnivariateDistribution(
            Kind.CONTINUOUS,
            {PDF: lambda x, **_: 0.5 if 0.0 < x < 2.0 else 0.0},
            ContinuousSupport(0.0, 2.0),
        )
        shared = a.computation_strategy
        assert shared.query_method(MEAN, a)(None) == pytest.approx(0.5)
        assert shared.query_method(MEAN, b)(None) == pytest.approx(1.0)

    def test_calculate_characteristic_forwards_options(self) -> None:
        seen = {}

        def cdf(x: float, **options) -> float:
            seen.update(options)
            return 0.5

        distr = StandaloneUnivariateDistribution(Kind.CONTINUOUS, {CDF: cdf})
        assert distr.calculate_characteristic(CDF, 0.0, strict=True) == 0.5
        assert seen == {"strict": True}
