"""
Geometric distribution family implementation.

Number of failures before the first success in independent trials with
success probability ``p``:

    P[X = x] = p (1 - p)^x,  x = 0, 1, ...

The degenerate cases are handled: ``p = 1`` puts all mass at 0 and ``p = 0``
pushes it to infinity.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_probdist.distributions.fitters import MAX_INT
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


def _vp(p: float) -> float:
    return math.log1p(-p) if p < 1.0 else -math.inf


def _prob(p: float, vp: float, x: float) -> float:
    if x < 0 or not float(x).is_integer() or p <= 0.0:
        return 0.0
    if p >= 1.0:
        return 1.0 if x == 0 else 0.0
    return p * math.exp(x * vp)


def _cdf(p: float, vp: float, x: float) -> float:
    if x < 0:
        return 0.0
    if p >= 1.0:
        return 1.0
    if p <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    return -math.expm1((math.floor(x) + 1) * vp)


def _bar_f(p: float, vp: float, x: float) -> float:
    if x <= 0:
        return 1.0
    if p >= 1.0:
        return 0.0
    if p <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0
    return math.exp(math.ceil(x) * vp)


def _inverse_f(p: float, vp: float, u: float) -> int:
    check_unit(u)
    if p >= 1.0 or u <= p:
        return 0
    if u >= 1.0 or p <= 0.0:
        return MAX_INT
    return math.floor(math.log1p(-u) / vp)


def _mean(p: float) -> float:
    if p <= 0.0:
        return math.inf
    return (1.0 - p) / p


def _variance(p: float) -> float:
    if p <= 0.0:
        return math.inf
    return (1.0 - p) / (p * p)


def prob(p: float, x: float) -> float:
    _check(p)
    return _prob(p, _vp(p), x)


def cdf(p: float, x: float) -> float:
    """``1 - (1 - p)^(⌊x⌋ + 1)`` for ``x >= 0``."""
    _check(p)
    return _cdf(p, _vp(p), x)


def bar_f(p: float, x: float) -> float:
    """``P[X >= x] = (1 - p)^⌈x⌉`` for ``x > 0``."""
    _check(p)
    return _bar_f(p, _vp(p), x)


def inverse_f(p: float, u: float) -> int:
    """
    Quantile ``⌊ln(1 - u) / ln(1 - p)⌋``.

    Returns ``0`` for ``u <= p`` and :data:`~pysatl_probdist.distributions.MAX_INT`
    for ``u = 1`` or ``p = 0``.
    """
    _check(p)
    return _inverse_f(p, _vp(p), u)


def mean(p: float) -> float:
    """``(1 - p) / p``; infinite for ``p = 0``."""
    _check(p)
    return _mean(p)


def variance(p: float) -> float:
    """``(1 - p) / p²``; infinite for ``p = 0``."""
    _check(p)
    return _variance(p)


def standard_deviation(p: float) -> float:
    return math.sqrt(variance(p))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate ``p = 1 / (x̄ + 1)``.

    Raises
    ------
    UnsupportedPreconditionError
        If the sample is empty.
    ValueError
        If an observation is negative or not an integer.
    """
    data = as_sample(sample, n)
    check_integer_sample(data, minimum=0)
    return {"p": 1.0 / (float(data.mean()) + 1.0)}


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Success, parameters)
        return _prob(p.p, p.vp, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Success, parameters)
        return _cdf(p.p, p.vp, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Success, parameters)
        return _bar_f(p.p, p.vp, above(x))

    def ppf(parameters: Parametrization, u: float, **_: Any) -> int:
        p = cast(_Success, parameters)
        return _inverse_f(p.p, p.vp, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return _mean(cast(_Success, parameters).p)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return _variance(cast(_Success, parameters).p)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return math.sqrt(_variance(cast(_Success, parameters).p))

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
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
        support_by_parametrization=lambda _: IntegerSupport(0),
        estimator=mle,
    )
    Geometric.__doc__ = __doc__

    @parametrization(family=Geometric, name="success")
    class _Success(Parametrization):
        """
        Parameters
        ----------
        p : float
            Probability of success in each trial
        """

        p: float
        vp: float = derived()

        @constraint(description="0 <= p <= 1")
        def check_p(self) -> bool:
            return 0.0 <= self.p <= 1.0

        def derive(self) -> Mapping[str, Any]:
            return {"vp": _vp(self.p)}

    ParametricFamilyRegister.register(Geometric)
