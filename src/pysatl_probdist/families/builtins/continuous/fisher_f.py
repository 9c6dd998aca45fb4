"""
Fisher F distribution family implementation.

With ``n1`` and ``n2`` degrees of freedom:

    f(x) = n1^(n1/2) n2^(n2/2) x^(n1/2-1) / (B(n1/2, n2/2) (n2 + n1 x)^((n1+n2)/2))

Distribution functions and quantiles delegate to Beta(n1/2, n2/2) through
``y = n1 x / (n1 x + n2)``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.families.builtins.common import check_integer, check_unit, is_integral
from pysatl_probdist.families.builtins.continuous import beta
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    derived,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.special import log_beta
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


def _check(n1: int, n2: int) -> tuple[int, int]:
    return check_integer("n1", n1, 1), check_integer("n2", n2, 1)


def _c1(n1: int, n2: int) -> float:
    return 0.5 * n1 * math.log(n1) + 0.5 * n2 * math.log(n2) - log_beta(n1 / 2.0, n2 / 2.0)


def _density(n1: int, n2: int, c1: float, x: float) -> float:
    if x <= 0.0 or math.isinf(x):
        return 0.0
    return math.exp(c1 + 0.5 * (n1 - 2) * math.log(x) - 0.5 * (n1 + n2) * math.log(n2 + n1 * x))


def _cdf(n1: int, n2: int, x: float) -> float:
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    return beta.cdf(n1 / 2.0, n2 / 2.0, n1 * x / (n1 * x + n2))


def _bar_f(n1: int, n2: int, x: float) -> float:
    if x <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0
    return beta.bar_f(n1 / 2.0, n2 / 2.0, n1 * x / (n1 * x + n2))


def _inverse_f(n1: int, n2: int, u: float) -> float:
    check_unit(u)
    if u == 0.0:
        return 0.0
    if u == 1.0:
        return math.inf
    z = beta.inverse_f(n1 / 2.0, n2 / 2.0, u)
    return n2 * z / (n1 * (1.0 - z))


def _mean(n2: int) -> float:
    if n2 <= 2:
        raise ValueError("mean is defined for n2 > 2 only")
    return n2 / (n2 - 2.0)


def _variance(n1: int, n2: int) -> float:
    if n2 <= 4:
        raise ValueError("variance is defined for n2 > 4 only")
    return 2.0 * n2 * n2 * (n2 + n1 - 2.0) / (n1 * (n2 - 2.0) ** 2 * (n2 - 4.0))


def density(n1: int, n2: int, x: float) -> float:
    n1, n2 = _check(n1, n2)
    return _density(n1, n2, _c1(n1, n2), x)


def cdf(n1: int, n2: int, x: float) -> float:
    return _cdf(*_check(n1, n2), x)


def bar_f(n1: int, n2: int, x: float) -> float:
    return _bar_f(*_check(n1, n2), x)


def inverse_f(n1: int, n2: int, u: float) -> float:
    """Quantile ``n2 z / (n1 (1 - z))`` with ``z`` the Beta(n1/2, n2/2) quantile."""
    return _inverse_f(*_check(n1, n2), u)


def mean(n1: int, n2: int) -> float:
    """
    ``n2 / (n2 - 2)``.

    Raises
    ------
    ValueError
        If ``n2 <= 2``.
    """
    return _mean(_check(n1, n2)[1])


def variance(n1: int, n2: int) -> float:
    """
    ``2 n2² (n1 + n2 - 2) / (n1 (n2 - 2)² (n2 - 4))``.

    Raises
    ------
    ValueError
        If ``n2 <= 4``.
    """
    return _variance(*_check(n1, n2))


def standard_deviation(n1: int, n2: int) -> float:
    return math.sqrt(variance(n1, n2))


def configure_fisher_f_family() -> None:
    """
    Configure and register the FisherF distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.FISHER_F):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return _density(p.n1, p.n2, p.c1, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return _cdf(p.n1, p.n2, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return _bar_f(p.n1, p.n2, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return _inverse_f(p.n1, p.n2, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return _mean(cast(_Dof, parameters).n2)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Dof, parameters)
        return _variance(p.n1, p.n2)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Dof, parameters)
        return math.sqrt(_variance(p.n1, p.n2))

    FisherF = ParametricFamily(
        name=FamilyName.FISHER_F,
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
    )
    FisherF.__doc__ = __doc__

    @parametrization(family=FisherF, name="dof")
    class _Dof(Parametrization):
        """
        Parameters
        ----------
        n1 : int
            Numerator degrees of freedom
        n2 : int
            Denominator degrees of freedom
        """

        n1: int
        n2: int
        c1: float = derived()

        @constraint(description="n1 is an integer >= 1")
        def check_n1(self) -> bool:
            return is_integral(self.n1) and self.n1 >= 1

        @constraint(description="n2 is an integer >= 1")
        def check_n2(self) -> bool:
            return is_integral(self.n2) and self.n2 >= 1

        def derive(self) -> Mapping[str, Any]:
            return {"c1": _c1(self.n1, self.n2)}

    ParametricFamilyRegister.register(FisherF)
