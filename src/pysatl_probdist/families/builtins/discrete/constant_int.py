"""
Degenerate integer distribution family implementation.

All the mass sits at the integer ``c``; every evaluator is the
DiscreteUniform one on ``{c}``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.support import IntegerSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.common import (
    above,
    as_sample,
    check_integer,
    check_integer_sample,
    is_integral,
)
from pysatl_probdist.families.builtins.discrete import uniform_int
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


def prob(c: int, x: float) -> float:
    return uniform_int.prob(c, c, x)


def cdf(c: int, x: float) -> float:
    return uniform_int.cdf(c, c, x)


def bar_f(c: int, x: float) -> float:
    return uniform_int.bar_f(c, c, x)


def inverse_f(c: int, u: float) -> int:
    return uniform_int.inverse_f(c, c, u)


def mean(c: int) -> float:
    return uniform_int.mean(c, c)


def variance(c: int) -> float:
    return uniform_int.variance(c, c)


def standard_deviation(c: int) -> float:
    return uniform_int.standard_deviation(c, c)


def mle(sample: SampleLike, n: int | None = None) -> dict[str, int]:
    """
    The common value of the observations.

    Raises
    ------
    UnsupportedPreconditionError
        If the sample is empty or its observations differ: the likelihood
        is then zero for every ``c``.
    ValueError
        If an observation is not an integer.
    """
    data = as_sample(sample, n)
    check_integer_sample(data)
    if data.min() != data.max():
        raise UnsupportedPreconditionError("observations are not all equal")
    return {"c": check_integer("c", float(data[0]))}


def configure_constant_int_family() -> None:
    """
    Configure and register the ConstantInt distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONSTANT_INT):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        c = cast(_Value, parameters).c
        return uniform_int._prob(c, c, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        c = cast(_Value, parameters).c
        return uniform_int._cdf(c, c, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        c = cast(_Value, parameters).c
        return uniform_int._bar_f(c, c, above(x))

    def ppf(parameters: Parametrization, u: float, **_: Any) -> int:
        c = cast(_Value, parameters).c
        return uniform_int._inverse_f(c, c, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return float(cast(_Value, parameters).c)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return 0.0

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return 0.0

    def _support(parameters: Parametrization) -> IntegerSupport:
        c = int(cast(_Value, parameters).c)
        return IntegerSupport(c, c)

    ConstantInt = ParametricFamily(
        name=FamilyName.CONSTANT_INT,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["value"],
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
    ConstantInt.__doc__ = __doc__

    @parametrization(family=ConstantInt, name="value")
    class _Value(Parametrization):
        """
        Parameters
        ----------
        c : int
            The only value taken
        """

        c: int

        @constraint(description="c is an integer")
        def check_c(self) -> bool:
            return is_integral(self.c)

    ParametricFamilyRegister.register(ConstantInt)
