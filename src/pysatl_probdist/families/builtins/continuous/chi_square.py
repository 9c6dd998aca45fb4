"""
Chi-square distribution family implementation.

ChiSquare(n) is Gamma(n/2, 1/2); every evaluator delegates to
:mod:`.gamma` with those parameters.
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
from pysatl_probdist.numerics.special import LN2, log_gamma
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_probdist.types import SampleLike

RATE = 0.5


def density(n: int, x: float) -> float:
    n = check_integer("n", n, 1)
    return gamma.density(n / 2.0, RATE, x)


def cdf(n: int, x: float) -> float:
    n = check_integer("n", n, 1)
    return gamma.cdf(n / 2.0, RATE, x)


def bar_f(n: int, x: float) -> float:
    n = check_integer("n", n, 1)
    return gamma.bar_f(n / 2.0, RATE, x)


def inverse_f(n: int, u: float) -> float:
    """Quantile function; ``0`` for ``u = 0`` and ``inf`` for ``u = 1``."""
    n = check_integer("n", n, 1)
    return gamma.inverse_f(n / 2.0, RATE, u)


def mean(n: int) -> float:
    return float(check_integer("n", n, 1))


def variance(n: int) -> float:
    return 2.0 * check_integer("n", n, 1)


def standard_deviation(n: int) -> float:
    return math.sqrt(variance(n))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, int]:
    """
    Maximum-likelihood estimate of the degrees of freedom.

    Starting from ``x̄`` rounded half up, minus 5 (at least 1), ``k`` is incremented while
    ``Σ ½ ln x_i + m (lnΓ(k/2) - ½ ln 2 - lnΓ((k+1)/2))`` is positive.
    Non-positive observations contribute ``-709`` to the sum.
    """
    data = as_sample(sample, n)
    m = data.size
    k = max(float(round_half_up(float(data.mean()))) - 5.0, 1.0)

    sum_log = sum(0.5 * math.log(x) if x > 0.0 else -709.0 for x in data.tolist())

    def objective(k: float) -> float:
        return sum_log + m * (log_gamma(k / 2.0) - 0.5 * LN2 - log_gamma((k + 1.0) / 2.0))

    while objective(k) > 0.0:
        k += 1.0
    return {"n": int(k)}


def configure_chi_square_family() -> None:
    """
    Configure and register the ChiSquare distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARE):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return gamma._density(p.n / 2.0, RATE, p.log_norm, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return gamma._cdf(cast(_Dof, parameters).n / 2.0, RATE, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return gamma._bar_f(cast(_Dof, parameters).n / 2.0, RATE, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        return gamma._inverse_f(cast(_Dof, parameters).n / 2.0, RATE, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return float(cast(_Dof, parameters).n)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return 2.0 * cast(_Dof, parameters).n

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return math.sqrt(2.0 * cast(_Dof, parameters).n)

    ChiSquare = ParametricFamily(
        name=FamilyName.CHI_SQUARE,
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
    ChiSquare.__doc__ = __doc__

    @parametrization(family=ChiSquare, name="dof")
    class _Dof(Parametrization):
        """
        Parameters
        ----------
        n : int
            Degrees of freedom
        """

        n: int
        log_norm: float = derived()

        @constraint(description="n is an integer >= 1")
        def check_n(self) -> bool:
            return is_integral(self.n) and self.n >= 1

        def derive(self) -> Mapping[str, Any]:
            return {"log_norm": gamma._log_norm(self.n / 2.0, RATE)}

    ParametricFamilyRegister.register(ChiSquare)
