"""
Johnson S_B distribution family implementation.

For ``y = (x - ξ)/λ`` in ``(0, 1)``, ``γ + δ ln(y/(1-y))`` is standard normal:

    f(x) = δ / (λ y (1-y) √(2π)) exp(-(γ + δ ln(y/(1-y)))² / 2),  ξ < x < ξ + λ

The moments have no closed form. The family leaves ``mean``, ``var`` and
``std`` to the characteristic graph, which integrates the density; the static
functions below integrate it directly.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy import integrate as _sp_integrate

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.families.builtins.common import check_positive, check_unit
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.special import LN_DBL_MAX, XBIG, bar_f01, cdf01, inverse_f01
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

_SQRT_2PI = math.sqrt(2.0 * math.pi)


def _check(delta: float, lam: float) -> None:
    check_positive("delta", delta)
    check_positive("lam", lam)


def _z(gamma: float, delta: float, y: float) -> float:
    return gamma + delta * math.log(y / (1.0 - y))


def _density(gamma: float, delta: float, xi: float, lam: float, x: float) -> float:
    y = (x - xi) / lam
    if y <= 0.0 or y >= 1.0:
        return 0.0
    z = _z(gamma, delta, y)
    return delta / (lam * y * (1.0 - y) * _SQRT_2PI) * math.exp(-z * z / 2.0)


def _cdf(gamma: float, delta: float, xi: float, lam: float, x: float) -> float:
    if x <= xi:
        return 0.0
    if x >= xi + lam:
        return 1.0
    return cdf01(_z(gamma, delta, (x - xi) / lam))


def _bar_f(gamma: float, delta: float, xi: float, lam: float, x: float) -> float:
    if x <= xi:
        return 1.0
    if x >= xi + lam:
        return 0.0
    return bar_f01(_z(gamma, delta, (x - xi) / lam))


def _inverse_f(gamma: float, delta: float, xi: float, lam: float, u: float) -> float:
    check_unit(u)
    if u == 1.0:
        return xi + lam
    if u == 0.0:
        return xi
    z = inverse_f01(u)
    v = (z - gamma) / delta
    if z >= XBIG or v >= LN_DBL_MAX:
        return xi + lam
    if z <= -XBIG or v <= -LN_DBL_MAX:
        return xi
    v = math.exp(v)
    return (xi + (xi + lam) * v) / (1.0 + v)


def _moment(gamma: float, delta: float, xi: float, lam: float, power: int, center: float) -> float:
    val, _ = _sp_integrate.quad(
        lambda t: (t - center) ** power * _density(gamma, delta, xi, lam, t),
        xi,
        xi + lam,
        limit=200,
    )
    return float(val)


def density(gamma: float, delta: float, xi: float, lam: float, x: float) -> float:
    _check(delta, lam)
    return _density(gamma, delta, xi, lam, x)


def cdf(gamma: float, delta: float, xi: float, lam: float, x: float) -> float:
    _check(delta, lam)
    return _cdf(gamma, delta, xi, lam, x)


def bar_f(gamma: float, delta: float, xi: float, lam: float, x: float) -> float:
    _check(delta, lam)
    return _bar_f(gamma, delta, xi, lam, x)


def inverse_f(gamma: float, delta: float, xi: float, lam: float, u: float) -> float:
    """
    Quantile function.

    Returns ``ξ`` for ``u = 0`` and ``ξ + λ`` for ``u = 1``; saturates to
    the nearer endpoint when the normal quantile or the logit exceeds the
    double-precision range.
    """
    _check(delta, lam)
    return _inverse_f(gamma, delta, xi, lam, u)


def mean(gamma: float, delta: float, xi: float, lam: float) -> float:
    """Mean by adaptive quadrature of ``x f(x)`` over ``(ξ, ξ + λ)``."""
    _check(delta, lam)
    return _moment(gamma, delta, xi, lam, 1, 0.0)


def variance(gamma: float, delta: float, xi: float, lam: float) -> float:
    """Variance by adaptive quadrature of ``(x - mean)² f(x)``."""
    m = mean(gamma, delta, xi, lam)
    return max(_moment(gamma, delta, xi, lam, 2, m), 0.0)


def standard_deviation(gamma: float, delta: float, xi: float, lam: float) -> float:
    return math.sqrt(variance(gamma, delta, xi, lam))


def configure_johnson_sb_family() -> None:
    """
    Configure and register the JohnsonSB distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.JOHNSON_SB):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _density(p.gamma, p.delta, p.xi, p.lam, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _cdf(p.gamma, p.delta, p.xi, p.lam, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _bar_f(p.gamma, p.delta, p.xi, p.lam, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _inverse_f(p.gamma, p.delta, p.xi, p.lam, u)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        p = cast(_Standard, parameters)
        return ContinuousSupport(left=p.xi, right=p.xi + p.lam)

    JohnsonSB = ParametricFamily(
        name=FamilyName.JOHNSON_SB,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
        },
        support_by_parametrization=_support,
    )
    JohnsonSB.__doc__ = __doc__

    @parametrization(family=JohnsonSB, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        gamma : float
            Shape (location of the normal variable)
        delta : float
            Shape (scale of the normal variable)
        xi : float
            Location
        lam : float
            Width of the support
        """

        gamma: float
        delta: float
        xi: float
        lam: float

        @constraint(description="delta > 0")
        def check_delta_positive(self) -> bool:
            return self.delta > 0

        @constraint(description="lam > 0")
        def check_lam_positive(self) -> bool:
            return self.lam > 0

    ParametricFamilyRegister.register(JohnsonSB)
