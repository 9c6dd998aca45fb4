"""
Negative binomial distribution family implementation.

Number of failures before the ``γ``-th success, ``γ > 0`` real:

    P[X = x] = Γ(γ + x) / (Γ(γ) x!) p^γ (1 - p)^x,  x = 0, 1, ...

The distribution function is the regularized incomplete beta function
``I_p(γ, x + 1)``. Pascal is the special case of an integral ``γ``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy import special as _sp_special

from pysatl_probdist.distributions.fitters import MAX_INT, integer_quantile
from pysatl_probdist.distributions.support import IntegerSupport
from pysatl_probdist.families.builtins.common import above, check_positive, check_unit
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.special import inverse_f01
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def _check(gamma: float, p: float) -> None:
    check_positive("gamma", gamma)
    if not 0.0 < p <= 1.0:
        raise ValueError(f"p not in (0, 1], got {p!r}")


def _prob(gamma: float, p: float, x: float) -> float:
    if x < 0 or not float(x).is_integer() or math.isinf(x):
        return 0.0
    if p >= 1.0:
        return 1.0 if x == 0 else 0.0
    log_prob = (
        _sp_special.gammaln(gamma + x)
        - _sp_special.gammaln(gamma)
        - _sp_special.gammaln(x + 1.0)
        + gamma * math.log(p)
        + x * math.log1p(-p)
    )
    return math.exp(log_prob)


def _cdf(gamma: float, p: float, x: float) -> float:
    if x < 0:
        return 0.0
    if p >= 1.0 or math.isinf(x):
        return 1.0
    return float(_sp_special.betainc(gamma, math.floor(x) + 1.0, p))


def _bar_f(gamma: float, p: float, x: float) -> float:
    if x <= 0:
        return 1.0
    if p >= 1.0 or math.isinf(x):
        return 0.0
    return float(_sp_special.betainc(float(math.ceil(x)), gamma, 1.0 - p))


def _mean(gamma: float, p: float) -> float:
    return gamma * (1.0 - p) / p


def _variance(gamma: float, p: float) -> float:
    return gamma * (1.0 - p) / (p * p)


def _inverse_f(gamma: float, p: float, u: float) -> int:
    check_unit(u)
    if p >= 1.0 or u <= 0.0:
        return 0
    if u >= 1.0:
        return MAX_INT
    guess = _mean(gamma, p) + math.sqrt(_variance(gamma, p)) * inverse_f01(u)
    start = max(0, round(guess)) if math.isfinite(guess) else 0
    return integer_quantile(lambda k: _cdf(gamma, p, k), u, 0, start=start)


def prob(gamma: float, p: float, x: float) -> float:
    _check(gamma, p)
    return _prob(gamma, p, x)


def cdf(gamma: float, p: float, x: float) -> float:
    """``I_p(γ, ⌊x⌋ + 1)`` for ``x >= 0``."""
    _check(gamma, p)
    return _cdf(gamma, p, x)


def bar_f(gamma: float, p: float, x: float) -> float:
    """``P[X >= x] = I_{1-p}(⌈x⌉, γ)`` for ``x > 0``."""
    _check(gamma, p)
    return _bar_f(gamma, p, x)


def inverse_f(gamma: float, p: float, u: float) -> int:
    """
    Smallest ``k >= 0`` with ``cdf(k) >= u``.

    The search starts from the normal approximation of the quantile.
    Returns :data:`~pysatl_probdist.distributions.MAX_INT` for ``u = 1``
    unless ``p = 1``.
    """
    _check(gamma, p)
    return _inverse_f(gamma, p, u)


def mean(gamma: float, p: float) -> float:
    _check(gamma, p)
    return _mean(gamma, p)


def variance(gamma: float, p: float) -> float:
    _check(gamma, p)
    return _variance(gamma, p)


def standard_deviation(gamma: float, p: float) -> float:
    return math.sqrt(variance(gamma, p))


def configure_negative_binomial_family() -> None:
    """
    Configure and register the NegativeBinomial distribution family.

    The family has no estimator; use Pascal for integral ``γ``.
    """

    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _prob(p.gamma, p.p, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _cdf(p.gamma, p.p, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _bar_f(p.gamma, p.p, above(x))

    def ppf(parameters: Parametrization, u: float, **_: Any) -> int:
        p = cast(_Standard, parameters)
        return _inverse_f(p.gamma, p.p, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return _mean(p.gamma, p.p)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return _variance(p.gamma, p.p)

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=lambda _: IntegerSupport(0),
    )
    NegativeBinomial.__doc__ = __doc__

    @parametrization(family=NegativeBinomial, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        gamma : float
            Number of successes, any positive real
        p : float
            Probability of success in each trial
        """

        gamma: float
        p: float

        @constraint(description="gamma > 0")
        def check_gamma_positive(self) -> bool:
            return self.gamma > 0

        @constraint(description="0 < p <= 1")
        def check_p(self) -> bool:
            return 0.0 < self.p <= 1.0

    ParametricFamilyRegister.register(NegativeBinomial)
