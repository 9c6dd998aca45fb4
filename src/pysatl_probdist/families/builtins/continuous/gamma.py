"""
Gamma distribution family implementation.

Shape ``alpha`` and rate ``lam``:

    f(x) = λ^α x^(α-1) exp(-λx) / Γ(α),  x > 0

The distribution function is the regularized lower incomplete gamma function
from :mod:`scipy.special`. ChiSquare, Chi and Erlang delegate here.
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
from pysatl_probdist.families.builtins.common import as_sample, check_positive, check_unit
from pysatl_probdist.families.parametric_family import ParametricFamily
from pysatl_probdist.families.parametrizations import (
    Parametrization,
    constraint,
    derived,
    parametrization,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister
from pysatl_probdist.numerics.rootfinder import solve
from pysatl_probdist.numerics.special import log_gamma
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_probdist.types import SampleLike


def _check(alpha: float, lam: float) -> None:
    check_positive("alpha", alpha)
    check_positive("lam", lam)


def _log_norm(alpha: float, lam: float) -> float:
    return alpha * math.log(lam) - log_gamma(alpha)


def _density(alpha: float, lam: float, log_norm: float, x: float) -> float:
    if x < 0.0:
        return 0.0
    if x == 0.0:
        if alpha == 1.0:
            return lam
        return math.inf if alpha < 1.0 else 0.0
    return math.exp(log_norm + (alpha - 1.0) * math.log(x) - lam * x)


def _cdf(alpha: float, lam: float, x: float) -> float:
    if x <= 0.0:
        return 0.0
    return float(_sp_special.gammainc(alpha, lam * x))


def _bar_f(alpha: float, lam: float, x: float) -> float:
    if x <= 0.0:
        return 1.0
    return float(_sp_special.gammaincc(alpha, lam * x))


def _inverse_f(alpha: float, lam: float, u: float) -> float:
    check_unit(u)
    if u == 0.0:
        return 0.0
    if u == 1.0:
        return math.inf
    return float(_sp_special.gammaincinv(alpha, u)) / lam


def density(alpha: float, lam: float, x: float) -> float:
    _check(alpha, lam)
    return _density(alpha, lam, _log_norm(alpha, lam), x)


def cdf(alpha: float, lam: float, x: float) -> float:
    _check(alpha, lam)
    return _cdf(alpha, lam, x)


def bar_f(alpha: float, lam: float, x: float) -> float:
    _check(alpha, lam)
    return _bar_f(alpha, lam, x)


def inverse_f(alpha: float, lam: float, u: float) -> float:
    """
    Quantile function; ``0`` for ``u = 0`` and ``inf`` for ``u = 1``.

    Raises
    ------
    ValueError
        If a parameter is not positive or ``u`` is outside ``[0, 1]``.
    """
    _check(alpha, lam)
    return _inverse_f(alpha, lam, u)


def mean(alpha: float, lam: float) -> float:
    _check(alpha, lam)
    return alpha / lam


def variance(alpha: float, lam: float) -> float:
    _check(alpha, lam)
    return alpha / (lam * lam)


def standard_deviation(alpha: float, lam: float) -> float:
    _check(alpha, lam)
    return math.sqrt(alpha) / lam


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate of ``(alpha, lam)``.

    ``alpha`` solves ``ln α - ψ(α) = ln x̄ - mean(ln x)``, then ``lam = α / x̄``.

    Raises
    ------
    ValueError
        If an observation is not positive.
    UnsupportedPreconditionError
        If fewer than two observations are used or all of them are equal.
    """
    data = as_sample(sample, n, minimum=2)
    if np.any(data <= 0.0):
        raise ValueError("Gamma sample must contain positive observations only")
    x_bar = float(data.mean())
    s = math.log(x_bar) - float(np.log(data).mean())
    if s <= 0.0:
        raise UnsupportedPreconditionError("all observations are equal")

    def f(a: float) -> float:
        return math.log(a) - float(_sp_special.digamma(a)) - s

    # Minka's closed-form start, then widen until the root is bracketed
    guess = (3.0 - s + math.sqrt((s - 3.0) ** 2 + 24.0 * s)) / (12.0 * s)
    lower, upper = guess / 2.0, guess * 2.0
    while f(lower) < 0.0:
        lower /= 2.0
    while f(upper) > 0.0:
        upper *= 2.0
    alpha = solve(lower, upper, f, 1e-12 * guess)
    return {"alpha": alpha, "lam": alpha / x_bar}


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return _density(p.alpha, p.lam, p.log_norm, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return _cdf(p.alpha, p.lam, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return _bar_f(p.alpha, p.lam, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return _inverse_f(p.alpha, p.lam, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return p.alpha / p.lam

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return p.alpha / p.lam**2

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_ShapeRate, parameters)
        return math.sqrt(p.alpha) / p.lam

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
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
    Gamma.__doc__ = __doc__

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization.

        Parameters
        ----------
        alpha : float
            Shape
        lam : float
            Rate (inverse scale)
        """

        alpha: float
        lam: float
        log_norm: float = derived()

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="lam > 0")
        def check_lam_positive(self) -> bool:
            return self.lam > 0

        def derive(self) -> Mapping[str, Any]:
            return {"log_norm": _log_norm(self.alpha, self.lam)}

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization.

        Parameters
        ----------
        k : float
            Shape
        theta : float
            Scale
        """

        k: float
        theta: float

        @constraint(description="k > 0")
        def check_k_positive(self) -> bool:
            return self.k > 0

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            return self.theta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(alpha=self.k, lam=1.0 / self.theta)

    ParametricFamilyRegister.register(Gamma)
