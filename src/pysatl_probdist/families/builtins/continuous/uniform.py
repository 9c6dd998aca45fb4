"""
Uniform distribution family implementation.

Contains the static evaluators of the continuous uniform distribution on
``(a, b)`` and the family with the bounds and mean-width parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.common import as_sample, check_unit
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from pysatl_probdist.types import SampleLike


def _check(a: float, b: float) -> None:
    if not a < b:
        raise ValueError(f"a must be less than b, got a={a!r}, b={b!r}")


def density(a: float, b: float, x: float) -> float:
    """
    Probability density function.

    Zero for ``x <= a`` or ``x >= b``, ``1 / (b - a)`` otherwise.
    """
    _check(a, b)
    if x <= a or x >= b:
        return 0.0
    return 1.0 / (b - a)


def cdf(a: float, b: float, x: float) -> float:
    _check(a, b)
    if x <= a:
        return 0.0
    if x >= b:
        return 1.0
    return (x - a) / (b - a)


def bar_f(a: float, b: float, x: float) -> float:
    _check(a, b)
    if x <= a:
        return 1.0
    if x >= b:
        return 0.0
    return (b - x) / (b - a)


def inverse_f(a: float, b: float, u: float) -> float:
    """
    Quantile ``a + (b - a) u``; exactly ``a`` for ``u = 0`` and ``b`` for ``u = 1``.
    """
    _check(a, b)
    check_unit(u)
    if u == 1.0:
        return b
    return a + (b - a) * u


def mean(a: float, b: float) -> float:
    _check(a, b)
    return (a + b) / 2.0


def variance(a: float, b: float) -> float:
    _check(a, b)
    return (b - a) * (b - a) / 12.0


def standard_deviation(a: float, b: float) -> float:
    return math.sqrt(variance(a, b))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate ``(min, max)`` of the sample.

    Raises
    ------
    UnsupportedPreconditionError
        If the sample is empty or all observations are equal.
    """
    data = as_sample(sample, n)
    a, b = float(data.min()), float(data.max())
    if not a < b:
        raise UnsupportedPreconditionError("all observations are equal")
    return {"a": a, "b": b}


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    All intervals of the same length inside ``(a, b)`` are equally probable.

    Probability density function:
        f(x) = 1/(b - a) for x in (a, b), 0 otherwise
    """

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return density(p.a, p.b, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return cdf(p.a, p.b, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return bar_f(p.a, p.b, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return inverse_f(p.a, p.b, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return mean(p.a, p.b)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return variance(p.a, p.b)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return standard_deviation(p.a, p.b)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        p = cast(_Standard, parameters.transform_to_base_parametrization())
        return ContinuousSupport(left=p.a, right=p.b)

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=_support,
        estimator=mle,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Bounds parametrization.

        Parameters
        ----------
        a : float
            Lower bound
        b : float
            Upper bound
        """

        a: float
        b: float

        @constraint(description="a < b")
        def check_a_less_than_b(self) -> bool:
            return self.a < self.b

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization.

        Parameters
        ----------
        mean : float
            Center of the interval
        width : float
            Length of the interval
        """

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half_width = self.width / 2
            return _Standard(a=self.mean - half_width, b=self.mean + half_width)

    ParametricFamilyRegister.register(Uniform)
