"""
Chi distribution family implementation.

The square root of a ChiSquare(ν) variable:

    f(x) = x^(ν-1) exp(-x²/2) / (2^(ν/2-1) Γ(ν/2)),  x > 0

Distribution functions and quantiles delegate to Gamma(ν/2, 1) through
``y = x²/2``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.families.builtins.common import (
    as_sample,
    check_integer,
    check_unit,
    is_integral,
    round_half_up,
)
from pysatl_probdist.families.builtins.continuous import gamma
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    derived,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.special import LN2, RAC2, gamma_ratio_half, log_gamma
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_probdist.types import SampleLike


def _c1(nu: int) -> float:
    return (nu / 2.0 - 1.0) * LN2 + log_gamma(nu / 2.0)


def _density(nu: int, c1: float, x: float) -> float:
    if x <= 0.0:
        return 0.0
    return math.exp((nu - 1) * math.log(x) - x * x / 2.0 - c1)


def _cdf(nu: int, x: float) -> float:
    if x <= 0.0:
        return 0.0
    return gamma.cdf(nu / 2.0, 1.0, x * x / 2.0)


def _bar_f(nu: int, x: float) -> float:
    if x <= 0.0:
        return 1.0
    return gamma.bar_f(nu / 2.0, 1.0, x * x / 2.0)


def _inverse_f(nu: int, u: float) -> float:
    check_unit(u)
    if u == 1.0:
        return math.inf
    return math.sqrt(2.0 * gamma.inverse_f(nu / 2.0, 1.0, u))


def _mean(nu: int) -> float:
    return RAC2 * gamma_ratio_half(nu / 2.0)


def density(nu: int, x: float) -> float:
    nu = check_integer("nu", nu, 1)
    return _density(nu, _c1(nu), x)


def cdf(nu: int, x: float) -> float:
    return _cdf(check_integer("nu", nu, 1), x)


def bar_f(nu: int, x: float) -> float:
    return _bar_f(check_integer("nu", nu, 1), x)


def inverse_f(nu: int, u: float) -> float:
    """Quantile ``√(2 G⁻¹(u))`` with ``G`` the Gamma(ν/2, 1) distribution function."""
    return _inverse_f(check_integer("nu", nu, 1), u)


def mean(nu: int) -> float:
    """``√2 Γ((ν+1)/2) / Γ(ν/2)``."""
    return _mean(check_integer("nu", nu, 1))


def variance(nu: int) -> float:
    nu = check_integer("nu", nu, 1)
    m = _mean(nu)
    return nu - m * m


def standard_deviation(nu: int) -> float:
    return math.sqrt(variance(nu))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, int]:
    """
    Maximum-likelihood estimate of ``nu``.

    Starting from ``s² + x̄²`` rounded half up, minus 5 (at least 1), ``k`` is incremented
    while ``Σ ln x_i + m (lnΓ(k/2) - ½ ln 2 - lnΓ((k+1)/2))`` is positive.
    Non-positive observations contribute ``-709`` to the sum.
    """
    data = as_sample(sample, n)
    m = data.size
    x_bar = float(data.mean())
    var = float(((data - x_bar) ** 2).mean())
    k = max(float(round_half_up(var + x_bar * x_bar)) - 5.0, 1.0)

    sum_log = sum(math.log(x) if x > 0.0 else -709.0 for x in data.tolist())

    def objective(k: float) -> float:
        return sum_log + m * (log_gamma(k / 2.0) - 0.5 * LN2 - log_gamma((k + 1.0) / 2.0))

    while objective(k) > 0.0:
        k += 1.0
    return {"nu": int(k)}


def configure_chi_family() -> None:
    """
    Configure and register the Chi distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return _density(p.nu, p.c1, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return _cdf(cast(_Dof, parameters).nu, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return _bar_f(cast(_Dof, parameters).nu, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        return _inverse_f(cast(_Dof, parameters).nu, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return cast(_Dof, parameters).mean

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Dof, parameters)
        return p.nu - p.mean * p.mean

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Dof, parameters)
        return math.sqrt(p.nu - p.mean * p.mean)

    Chi = ParametricFamily(
        name=FamilyName.CHI,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: ContinuousSupport(left=0.0),
        estimator=mle,
    )
    Chi.__doc__ = __doc__

    @parametrization(family=Chi, name="dof")
    class _Dof(Parametrization):
        """
        Parameters
        ----------
        nu : int
            Degrees of freedom
        """

        nu: int
        c1: float = derived()
        mean: float = derived()

        @constraint(description="nu is an integer >= 1")
        def check_nu(self) -> bool:
            return is_integral(self.nu) and self.nu >= 1

        def derive(self) -> Mapping[str, Any]:
            return {"c1": _c1(self.nu), "mean": _mean(self.nu)}

    ParametricFamilyRegister.register(Chi)
