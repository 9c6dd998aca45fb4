"""
Erlang distribution family implementation.

Erlang(k, λ) is Gamma(k, λ) with an integral shape; all evaluators delegate
to :mod:`.gamma`.
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
    check_positive,
    is_integral,
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
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_probdist.types import SampleLike


def _check(k: int, lam: float) -> int:
    k = check_integer("k", k, 1)
    check_positive("lam", lam)
    return k


def density(k: int, lam: float, x: float) -> float:
    return gamma.density(_check(k, lam), lam, x)


def cdf(k: int, lam: float, x: float) -> float:
    return gamma.cdf(_check(k, lam), lam, x)


def bar_f(k: int, lam: float, x: float) -> float:
    return gamma.bar_f(_check(k, lam), lam, x)


def inverse_f(k: int, lam: float, u: float) -> float:
    return gamma.inverse_f(_check(k, lam), lam, u)


def mean(k: int, lam: float) -> float:
    return _check(k, lam) / lam


def variance(k: int, lam: float) -> float:
    return _check(k, lam) / (lam * lam)


def standard_deviation(k: int, lam: float) -> float:
    return math.sqrt(_check(k, lam)) / lam


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate of ``(k, lam)``.

    The Gamma estimate of the shape is rounded to the nearest integer (at
    least 1) and the rate is re-estimated for that shape as ``k / x̄``.
    """
    data = as_sample(sample, n, minimum=2)
    alpha = gamma.mle(data)["alpha"]
    k = max(1, round(alpha))
    return {"k": k, "lam": k / float(data.mean())}


def configure_erlang_family() -> None:
    """
    Configure and register the Erlang distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.ERLANG):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return gamma._density(p.k, p.lam, p.log_norm, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return gamma._cdf(p.k, p.lam, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return gamma._bar_f(p.k, p.lam, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return gamma._inverse_f(p.k, p.lam, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return p.k / p.lam

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return p.k / p.lam**2

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return math.sqrt(p.k) / p.lam

    Erlang = ParametricFamily(
        name=FamilyName.ERLANG,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate"],
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
    Erlang.__doc__ = __doc__

    @parametrization(family=Erlang, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Parameters
        ----------
        k : int
            Number of exponential phases
        lam : float
            Rate of each phase
        """

        k: int
        lam: float
        log_norm: float = derived()

        @constraint(description="k is an integer >= 1")
        def check_k(self) -> bool:
            return is_integral(self.k) and self.k >= 1

        @constraint(description="lam > 0")
        def check_lam_positive(self) -> bool:
            return self.lam > 0

        def derive(self) -> Mapping[str, Any]:
            return {"log_norm": gamma._log_norm(self.k, self.lam)}

    ParametricFamilyRegister.register(Erlang)
