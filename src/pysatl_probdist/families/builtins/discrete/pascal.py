"""
Pascal distribution family implementation.

Negative binomial distribution with an integral number of successes
``n >= 1``; every evaluator is the NegativeBinomial one at ``γ = n``.
Unlike the general family, Pascal is estimated by maximum likelihood.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_probdist.distributions.support import IntegerSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.common import (
    above,
    as_sample,
    check_integer,
    check_integer_sample,
    is_integral,
    round_half_up,
)
from pysatl_probdist.families.builtins.discrete import negative_binomial as nb
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.rootfinder import solve
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from pysatl_probdist.types import SampleLike

EPSI = 1.0e-10


def _check(n: int, p: float) -> int:
    n = check_integer("n", n, 1)
    nb._check(n, p)
    return n


def prob(n: int, p: float, x: float) -> float:
    return nb._prob(_check(n, p), p, x)


def cdf(n: int, p: float, x: float) -> float:
    return nb._cdf(_check(n, p), p, x)


def bar_f(n: int, p: float, x: float) -> float:
    """``P[X >= x]``."""
    return nb._bar_f(_check(n, p), p, x)


def inverse_f(n: int, p: float, u: float) -> int:
    return nb._inverse_f(_check(n, p), p, u)


def mean(n: int, p: float) -> float:
    return nb._mean(_check(n, p), p)


def variance(n: int, p: float) -> float:
    return nb._variance(_check(n, p), p)


def standard_deviation(n: int, p: float) -> float:
    return math.sqrt(variance(n, p))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float | int]:
    """
    Maximum-likelihood estimate of ``(n, p)``.

    With ``F_j`` the number of observations above ``j``, ``p`` solves

        Σ_j F_j / (s + j) + m ln p = 0,  s = p x̄ / (1 - p)

    on ``[1e-10, 1 - 1e-10]`` with tolerance ``1e-5``, and
    ``n = p x̄ / (1 - p)`` rounded half up, at least 1.

    Raises
    ------
    UnsupportedPreconditionError
        If the sample is empty, or its mean is not below its population
        variance (the sample is not overdispersed).
    ValueError
        If an observation is negative or not an integer.
    """
    data = as_sample(sample, n)
    check_integer_sample(data, minimum=0)
    m = data.size
    x_bar = float(data.mean())
    if x_bar >= float(data.var()):
        raise UnsupportedPreconditionError("mean >= variance, the sample is not overdispersed")

    upper = int(data.max())
    counts = np.bincount(data.astype(np.int64), minlength=upper + 1)
    exceedances = m - np.cumsum(counts)[:upper]
    j = np.arange(upper, dtype=np.float64)

    def _score(p: float) -> float:
        s = p * x_bar / (1.0 - p)
        return float(np.sum(exceedances / (s + j))) + m * math.log(p)

    p = solve(EPSI, 1.0 - EPSI, _score, 1.0e-5)
    if p >= 1.0:
        p = 1.0 - 1.0e-15
    return {"n": max(1, round_half_up(p * x_bar / (1.0 - p))), "p": p}


def configure_pascal_family() -> None:
    """
    Configure and register the Pascal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PASCAL):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return nb._prob(p.n, p.p, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return nb._cdf(p.n, p.p, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return nb._bar_f(p.n, p.p, above(x))

    def ppf(parameters: Parametrization, u: float, **_: Any) -> int:
        p = cast(_Standard, parameters)
        return nb._inverse_f(p.n, p.p, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return nb._mean(p.n, p.p)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return nb._variance(p.n, p.p)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return math.sqrt(nb._variance(p.n, p.p))

    Pascal = ParametricFamily(
        name=FamilyName.PASCAL,
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
        support_by_parametrization=lambda _: IntegerSupport(0),
        estimator=mle,
    )
    Pascal.__doc__ = __doc__

    @parametrization(family=Pascal, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        n : int
            Number of successes
        p : float
            Probability of success in each trial
        """

        n: int
        p: float

        @constraint(description="n is an integer >= 1")
        def check_n(self) -> bool:
            return is_integral(self.n) and self.n >= 1

        @constraint(description="0 < p <= 1")
        def check_p(self) -> bool:
            return 0.0 < self.p <= 1.0

    ParametricFamilyRegister.register(Pascal)
