"""
Discrete uniform distribution family implementation.

Every integer of ``{i, i + 1, ..., j}`` has probability ``1 / (j - i + 1)``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import IntegerSupport
from pysatl_probdist.families.builtins.common import (
    above,
    as_sample,
    check_integer,
    check_integer_sample,
    check_unit,
    is_integral,
)
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from pysatl_probdist.types import SampleLike


def _check(i: int, j: int) -> tuple[int, int]:
    i, j = check_integer("i", i), check_integer("j", j)
    if j < i:
        raise ValueError(f"j < i, got i={i}, j={j}")
    return i, j


def _prob(i: int, j: int, x: float) -> float:
    if x < i or x > j or not float(x).is_integer():
        return 0.0
    return 1.0 / (j - i + 1.0)


def _cdf(i: int, j: int, x: float) -> float:
    if x < i:
        return 0.0
    if x >= j:
        return 1.0
    return (math.floor(x) - i + 1) / (j - i + 1.0)


def _bar_f(i: int, j: int, x: float) -> float:
    if x <= i:
        return 1.0
    if x > j:
        return 0.0
    return (j - math.ceil(x) + 1.0) / (j - i + 1.0)


def _inverse_f(i: int, j: int, u: float) -> int:
    check_unit(u)
    if u <= 0.0:
        return i
    if u >= 1.0:
        return j
    return i + math.floor(u * (j - i + 1.0))


def _mean(i: int, j: int) -> float:
    return (i + j) / 2.0


def _variance(i: int, j: int) -> float:
    width = j - i + 1.0
    return (width * width - 1.0) / 12.0


def prob(i: int, j: int, x: float) -> float:
    return _prob(*_check(i, j), x)


def cdf(i: int, j: int, x: float) -> float:
    return _cdf(*_check(i, j), x)


def bar_f(i: int, j: int, x: float) -> float:
    """``P[X >= x]``."""
    return _bar_f(*_check(i, j), x)


def inverse_f(i: int, j: int, u: float) -> int:
    """``i + ⌊u (j - i + 1)⌋``; ``i`` for ``u = 0`` and ``j`` for ``u = 1``."""
    return _inverse_f(*_check(i, j), u)


def mean(i: int, j: int) -> float:
    return _mean(*_check(i, j))


def variance(i: int, j: int) -> float:
    """``((j - i + 1)² - 1) / 12``."""
    return _variance(*_check(i, j))


def standard_deviation(i: int, j: int) -> float:
    return math.sqrt(variance(i, j))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, int]:
    """
    Maximum-likelihood estimate ``(min, max)`` of the sample.

    Raises
    ------
    UnsupportedPreconditionError
        If the sample is empty.
    ValueError
        If an observation is not an integer.
    """
    data = as_sample(sample, n)
    check_integer_sample(data)
    return {"i": int(data.min()), "j": int(data.max())}


def configure_uniform_int_family() -> None:
    """
    Configure and register the DiscreteUniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _prob(p.i, p.j, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _cdf(p.i, p.j, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _bar_f(p.i, p.j, above(x))

    def ppf(parameters: Parametrization, u: float, **_: Any) -> int:
        p = cast(_Standard, parameters)
        return _inverse_f(p.i, p.j, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return _mean(p.i, p.j)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return _variance(p.i, p.j)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return math.sqrt(_variance(p.i, p.j))

    def _support(parameters: Parametrization) -> IntegerSupport:
        p = cast(_Standard, parameters)
        return IntegerSupport(int(p.i), int(p.j))

    UniformInt = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
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
    UniformInt.__doc__ = __doc__

    @parametrization(family=UniformInt, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        i : int
            Smallest value
        j : int
            Largest value
        """

        i: int
        j: int

        @constraint(description="i and j are integers")
        def check_integers(self) -> bool:
            return is_integral(self.i) and is_integral(self.j)

        @constraint(description="i <= j")
        def check_order(self) -> bool:
            return self.i <= self.j

    ParametricFamilyRegister.register(UniformInt)
