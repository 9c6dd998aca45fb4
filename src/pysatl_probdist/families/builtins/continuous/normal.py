"""
Normal distribution family implementation.

Contains the static evaluators of the Normal distribution and the Normal
family with the mean-std and mean-precision parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.common import as_sample, check_positive, check_unit
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.special import bar_f01, cdf01, density01, inverse_f01
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from pysatl_probdist.types import SampleLike


def density(mu: float, sigma: float, x: float) -> float:
    """
    Probability density function of N(mu, sigma²).

    f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))
    """
    check_positive("sigma", sigma)
    return density01((x - mu) / sigma) / sigma


def cdf(mu: float, sigma: float, x: float) -> float:
    """Probability P(X <= x)."""
    check_positive("sigma", sigma)
    return cdf01((x - mu) / sigma)


def bar_f(mu: float, sigma: float, x: float) -> float:
    """Probability P(X > x), computed without cancellation in the right tail."""
    check_positive("sigma", sigma)
    return bar_f01((x - mu) / sigma)


def inverse_f(mu: float, sigma: float, u: float) -> float:
    """
    Quantile function.

    Returns ``-inf`` for ``u = 0`` and ``inf`` for ``u = 1``.

    Raises
    ------
    ValueError
        If sigma is not positive or ``u`` is outside ``[0, 1]``.
    """
    check_positive("sigma", sigma)
    check_unit(u)
    return mu + sigma * inverse_f01(u)


def mean(mu: float, sigma: float) -> float:
    check_positive("sigma", sigma)
    return mu


def variance(mu: float, sigma: float) -> float:
    check_positive("sigma", sigma)
    return sigma * sigma


def standard_deviation(mu: float, sigma: float) -> float:
    check_positive("sigma", sigma)
    return sigma


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate: sample mean and population standard deviation.

    Raises
    ------
    UnsupportedPreconditionError
        If fewer than two observations are used or all of them are equal.
    """
    data = as_sample(sample, n, minimum=2)
    mu = float(data.mean())
    sigma = math.sqrt(float(((data - mu) ** 2).mean()))
    if sigma == 0.0:
        raise UnsupportedPreconditionError("sample has zero variance")
    return {"mu": mu, "sigma": sigma}


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    Symmetric about its mean, defined by the mean (μ) and the standard
    deviation (σ). The evaluators delegate to the standard normal functions
    of :mod:`pysatl_probdist.numerics.special`.
    """

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_MeanStd, parameters)
        return density01((x - p.mu) / p.sigma) / p.sigma

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_MeanStd, parameters)
        return cdf01((x - p.mu) / p.sigma)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_MeanStd, parameters)
        return bar_f01((x - p.mu) / p.sigma)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_MeanStd, parameters)
        return inverse_f(p.mu, p.sigma, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return cast(_MeanStd, parameters).mu

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return cast(_MeanStd, parameters).sigma ** 2

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return cast(_MeanStd, parameters).sigma

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: ContinuousSupport(),
        estimator=mle,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=math.sqrt(1 / self.tau))

    ParametricFamilyRegister.register(Normal)
