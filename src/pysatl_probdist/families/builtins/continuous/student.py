"""
Student t distribution family implementation.

With ``n`` degrees of freedom:

    f(x) = Γ((n+1)/2) / (√(nπ) Γ(n/2)) (1 + x²/n)^(-(n+1)/2)

Distribution function and quantile come from ``scipy.special.stdtr`` and
``stdtrit``. StudentQuick falls back to this module for ``n <= 2``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import special as _sp_special

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.common import (
    as_sample,
    check_integer,
    check_unit,
    is_integral,
)
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    derived,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.special import log_gamma
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import NDArray

    from pysatl_probdist.types import SampleLike


def _log_norm(n: int) -> float:
    return log_gamma((n + 1) / 2.0) - log_gamma(n / 2.0) - 0.5 * math.log(n * math.pi)


def _density(n: int, log_norm: float, x: float) -> float:
    return math.exp(log_norm - (n + 1) / 2.0 * math.log1p(x * x / n))


def _cdf(n: int, x: float) -> float:
    return float(_sp_special.stdtr(n, x))


def _bar_f(n: int, x: float) -> float:
    return float(_sp_special.stdtr(n, -x))


def _inverse_f(n: int, u: float) -> float:
    check_unit(u)
    if u == 0.0:
        return -math.inf
    if u == 1.0:
        return math.inf
    return float(_sp_special.stdtrit(n, u))


def _mean(n: int) -> float:
    if n <= 1:
        raise ValueError("mean is defined for n > 1 only")
    return 0.0


def _variance(n: int) -> float:
    if n <= 2:
        raise ValueError("variance is defined for n > 2 only")
    return n / (n - 2.0)


def density(n: int, x: float) -> float:
    n = check_integer("n", n, 1)
    return _density(n, _log_norm(n), x)


def cdf(n: int, x: float) -> float:
    return _cdf(check_integer("n", n, 1), x)


def bar_f(n: int, x: float) -> float:
    return _bar_f(check_integer("n", n, 1), x)


def inverse_f(n: int, u: float) -> float:
    """Quantile function; ``-inf`` for ``u = 0`` and ``inf`` for ``u = 1``."""
    return _inverse_f(check_integer("n", n, 1), u)


def mean(n: int) -> float:
    """``0``; undefined (``ValueError``) for ``n <= 1``."""
    return _mean(check_integer("n", n, 1))


def variance(n: int) -> float:
    """``n / (n - 2)``; undefined (``ValueError``) for ``n <= 2``."""
    return _variance(check_integer("n", n, 1))


def standard_deviation(n: int) -> float:
    return math.sqrt(variance(n))


def _log_likelihood(data: NDArray[np.float64], k: int) -> float:
    return float(np.sum(_log_norm(k) - (k + 1) / 2.0 * np.log1p(data * data / k)))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, int]:
    """
    Maximum-likelihood estimate of the degrees of freedom.

    The search starts from the moment estimate ``round(2 v / (v - 1))`` with
    ``v`` the mean of squares, then walks one step at a time in the direction
    where the log-likelihood increases.

    Raises
    ------
    UnsupportedPreconditionError
        If the mean of squares is not above 1: the likelihood then keeps
        increasing with ``n``.
    """
    data = as_sample(sample, n)
    v = float((data * data).mean())
    if v <= 1.0:
        raise UnsupportedPreconditionError(
            "mean of squares <= 1, the likelihood has no finite maximum"
        )
    best = max(1, round(2.0 * v / (v - 1.0)))
    best_value = _log_likelihood(data, best)

    step = 1
    if best > 1 and _log_likelihood(data, best - 1) > best_value:
        step = -1
    k = best + step
    while k >= 1:
        value = _log_likelihood(data, k)
        if value <= best_value:
            break
        best, best_value = k, value
        k += step
    return {"n": best}


def configure_student_family() -> None:
    """
    Configure and register the Student distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Dof, parameters)
        return _density(p.n, p.log_norm, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return _cdf(cast(_Dof, parameters).n, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        return _bar_f(cast(_Dof, parameters).n, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        return _inverse_f(cast(_Dof, parameters).n, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return _mean(cast(_Dof, parameters).n)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return _variance(cast(_Dof, parameters).n)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return math.sqrt(_variance(cast(_Dof, parameters).n))

    Student = ParametricFamily(
        name=FamilyName.STUDENT,
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
        support_by_parametrization=lambda _: ContinuousSupport(),
        estimator=mle,
    )
    Student.__doc__ = __doc__

    @parametrization(family=Student, name="dof")
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
            return {"log_norm": _log_norm(self.n)}

    ParametricFamilyRegister.register(Student)
