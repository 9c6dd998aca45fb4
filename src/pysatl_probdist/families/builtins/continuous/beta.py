"""
Beta distribution family implementation.

Shape parameters ``alpha`` and ``beta`` on ``[0, 1]``:

    f(x) = x^(α-1) (1-x)^(β-1) / B(α, β)

FisherF delegates here.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import optimize as _sp_optimize
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
from pysatl_probdist.numerics.special import log_beta
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from numpy.typing import NDArray

    from pysatl_probdist.types import SampleLike


def _check(alpha: float, beta: float) -> None:
    check_positive("alpha", alpha)
    check_positive("beta", beta)


def _endpoint_density(shape: float, log_b: float) -> float:
    if shape < 1.0:
        return math.inf
    if shape == 1.0:
        return math.exp(-log_b)
    return 0.0


def _density(alpha: float, beta: float, log_b: float, x: float) -> float:
    if x < 0.0 or x > 1.0:
        return 0.0
    if x == 0.0:
        return _endpoint_density(alpha, log_b)
    if x == 1.0:
        return _endpoint_density(beta, log_b)
    return math.exp((alpha - 1.0) * math.log(x) + (beta - 1.0) * math.log1p(-x) - log_b)


def _cdf(alpha: float, beta: float, x: float) -> float:
    if x <= 0.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return float(_sp_special.betainc(alpha, beta, x))


def _bar_f(alpha: float, beta: float, x: float) -> float:
    if x <= 0.0:
        return 1.0
    if x >= 1.0:
        return 0.0
    return float(_sp_special.betaincc(alpha, beta, x))


def _inverse_f(alpha: float, beta: float, u: float) -> float:
    check_unit(u)
    if u == 0.0:
        return 0.0
    if u == 1.0:
        return 1.0
    return float(_sp_special.betaincinv(alpha, beta, u))


def density(alpha: float, beta: float, x: float) -> float:
    _check(alpha, beta)
    return _density(alpha, beta, log_beta(alpha, beta), x)


def cdf(alpha: float, beta: float, x: float) -> float:
    _check(alpha, beta)
    return _cdf(alpha, beta, x)


def bar_f(alpha: float, beta: float, x: float) -> float:
    _check(alpha, beta)
    return _bar_f(alpha, beta, x)


def inverse_f(alpha: float, beta: float, u: float) -> float:
    """Quantile function; exactly ``0`` and ``1`` at the ends."""
    _check(alpha, beta)
    return _inverse_f(alpha, beta, u)


def mean(alpha: float, beta: float) -> float:
    _check(alpha, beta)
    return alpha / (alpha + beta)


def variance(alpha: float, beta: float) -> float:
    _check(alpha, beta)
    s = alpha + beta
    return alpha * beta / (s * s * (s + 1.0))


def standard_deviation(alpha: float, beta: float) -> float:
    return math.sqrt(variance(alpha, beta))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate of ``(alpha, beta)``.

    Solves ``ψ(α) - ψ(α+β) = mean(ln x)`` and ``ψ(β) - ψ(α+β) = mean(ln(1-x))``
    in log-coordinates, started from the method of moments.

    Raises
    ------
    ValueError
        If an observation is outside ``(0, 1)``.
    UnsupportedPreconditionError
        If fewer than two observations are used, they are all equal, or the
        equations cannot be solved.
    """
    data = as_sample(sample, n, minimum=2)
    if np.any((data <= 0.0) | (data >= 1.0)):
        raise ValueError("Beta sample must lie in (0, 1)")
    m = float(data.mean())
    v = float(data.var())
    if v == 0.0:
        raise UnsupportedPreconditionError("all observations are equal")
    log_x = float(np.log(data).mean())
    log_1mx = float(np.log1p(-data).mean())

    common = max(m * (1.0 - m) / v - 1.0, 1e-3)

    def equations(t: NDArray[np.float64]) -> list[float]:
        a, b = math.exp(t[0]), math.exp(t[1])
        psi_ab = float(_sp_special.digamma(a + b))
        return [
            float(_sp_special.digamma(a)) - psi_ab - log_x,
            float(_sp_special.digamma(b)) - psi_ab - log_1mx,
        ]

    start = [math.log(m * common), math.log((1.0 - m) * common)]
    result = _sp_optimize.root(equations, start, method="hybr")
    if not result.success:
        raise UnsupportedPreconditionError(f"Beta likelihood equations: {result.message}")
    return {"alpha": math.exp(result.x[0]), "beta": math.exp(result.x[1])}


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    def pdf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Shapes, parameters)
        return _density(p.alpha, p.beta, p.log_b, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Shapes, parameters)
        return _cdf(p.alpha, p.beta, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Shapes, parameters)
        return _bar_f(p.alpha, p.beta, x)

    def ppf(parameters: Parametrization, u: float, **_: Any) -> float:
        p = cast(_Shapes, parameters)
        return _inverse_f(p.alpha, p.beta, u)

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Shapes, parameters)
        return mean(p.alpha, p.beta)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Shapes, parameters)
        return variance(p.alpha, p.beta)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Shapes, parameters)
        return standard_deviation(p.alpha, p.beta)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapes"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: ContinuousSupport(left=0.0, right=1.0),
        estimator=mle,
    )
    Beta.__doc__ = __doc__

    @parametrization(family=Beta, name="shapes")
    class _Shapes(Parametrization):
        """
        Parameters
        ----------
        alpha : float
            First shape
        beta : float
            Second shape
        """

        alpha: float
        beta: float
        log_b: float = derived()

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def derive(self) -> Mapping[str, Any]:
            return {"log_b": log_beta(self.alpha, self.beta)}

    ParametricFamilyRegister.register(Beta)
