"""
Bernoulli distribution family implementation.

Takes value 1 with probability ``p`` and 0 with probability ``q = 1 - p``.
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
    check_integer_sample,
    check_unit,
)
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    derived,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_probdist.types import SampleLike


def _check(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p not in [0, 1], got {p!r}")


def _prob(p: float, x: float) -> float:
    if x == 1:
        return p
    if x == 0:
        return 1.0 - p
    return 0.0


def _cdf(p: float, x: float) -> float:
    if x < 0:
        return 0.0
    if x < 1:
        return 1.0 - p
    return 1.0


def _bar_f(p: float, x: float) -> float:
    if x > 1:
        return 0.0
    if x > 0:
        return p
    return 1.0


def _inverse_f(p: float, u: float) -> int:
    check_unit(u)
    return 1 if u > 1.0 - p else 0


def prob(p: float, x: float) -> float:
    """Probability mass ``P[X = x]``."""
    _check(p)
    return _prob(p, x)


def cdf(p: float, x: float) -> float:
    _check(p)
    return _cdf(p, x)


def bar_f(p: float, x: float) -> float:
    """``P[X >= x]``."""
    _check(p)
    return _bar_f(p, x)


def inverse_f(p: float, u: float) -> int:
    """``1`` if ``u > 1 - p``, else ``0``."""
    _check(p)
    return _inverse_f(p, u)


def mean(p: float) -> float:
    _check(p)
    return p


def variance(p: float) -> float:
    _check(p)
    return p * (1.0 - p)


def standard_deviation(p: float) -> float:
    return math.sqrt(variance(p))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate of ``p``: the proportion of ones.

    Raises
    ------
    UnsupportedPreconditionError
        If fewer than two observations are used.
    ValueError
        If an observation is neither 0 nor 1.
    """
    data = as_sample(sample, n, minimum=2)
    check_integer_sample(data, minimum=0)
    if data.max() > 1:
        raise ValueError("Bernoulli observations must be 0 or 1")
    return {"p": float(data.mean())}


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        return _prob(cast(_Success, parameters).p, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return _cdf(cast(_Success, parameters).p, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return _bar_f(cast(_Success, parameters).p, above(x))

    def ppf(parameters: Parametrization, u: float, **_: Any) -> int:
        return _inverse_f(cast(_Success, parameters).p, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return cast(_Success, parameters).p

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Success, parameters)
        return p.p * p.q

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Success, parameters)
        return math.sqrt(p.p * p.q)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["success"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: IntegerSupport(0, 1),
        estimator=mle,
    )
    Bernoulli.__doc__ = __doc__

    @parametrization(family=Bernoulli, name="success")
    class _Success(Parametrization):
        """
        Parameters
        ----------
        p : float
            Probability of success
        """

        p: float
        q: float = derived()

        @constraint(description="0 <= p <= 1")
        def check_p(self) -> bool:
            return 0.0 <= self.p <= 1.0

        def derive(self) -> Mapping[str, Any]:
            return {"q": 1.0 - self.p}

    ParametricFamilyRegister.register(Bernoulli)
