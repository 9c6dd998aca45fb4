"""
Logarithmic distribution family implementation.

With ``0 < θ < 1`` and ``t = -1 / ln(1 - θ)``:

    P[X = x] = t θ^x / x,  x = 1, 2, ...

The distribution function is a finite sum and the upper tail a convergent
series, or an integral once the series would take too many terms (θ close
to 1). The quantile has no closed form; the family leaves ``ppf`` to the
characteristic graph, which searches the integer lattice.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy import integrate as _sp_integrate

from pysatl_probdist.distributions.fitters import MAX_INT, integer_quantile
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
from pysatl_probdist.numerics.rootfinder import solve
from pysatl_probdist.numerics.series import sum_series
from pysatl_probdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from typing import Any

    from pysatl_probdist.types import SampleLike

EPS = 0.5e-16
TAIL_MAX_TERMS = 100_000
DIRECT_TAIL = 1.0e-2
"""``bar_f(x)`` is ``1 - cdf(x - 1)`` while ``θ^x`` stays above this value."""


def _check(theta: float) -> None:
    if not 0.0 < theta < 1.0:
        raise ValueError(f"theta not in (0, 1), got {theta!r}")


def _t(theta: float) -> float:
    return -1.0 / math.log1p(-theta)


def _prob(theta: float, t: float, x: float) -> float:
    if x < 1 or not float(x).is_integer() or math.isinf(x):
        return 0.0
    return t * math.exp(x * math.log(theta)) / x


def _cdf(theta: float, t: float, x: float) -> float:
    if x < 1:
        return 0.0
    if math.isinf(x):
        return 1.0
    term = t * theta
    res = term
    for i in range(2, math.floor(x) + 1):
        term *= theta
        res += term / i
        # remaining terms sum to less than term / (1 - θ)
        if term / (1.0 - theta) < EPS * res:
            break
    return min(res, 1.0)


def _tail_terms(theta: float, first: float, x: int) -> Iterator[float]:
    term = first
    i = x + 1
    while True:
        term *= theta * (i - 1) / i
        yield term
        i += 1


def _tail_integral(theta: float, t: float, k: int) -> float:
    # Σ_{i>=k} θ^i / i = θ^k / k ∫_0^∞ e^{-z} / (1 - θ e^{-z/k}) dz
    log_theta = math.log(theta)
    scale = t * math.exp(k * log_theta) / k
    if scale == 0.0:
        return 0.0
    val, _ = _sp_integrate.quad(
        lambda z: math.exp(-z) / -math.expm1(log_theta - z / k),
        0.0,
        math.inf,
        epsabs=0.0,
        epsrel=1e-11,
        limit=200,
    )
    return scale * float(val)


def _bar_f(theta: float, t: float, x: float) -> float:
    if x <= 1:
        return 1.0
    if math.isinf(x):
        return 0.0
    k = math.ceil(x)
    if math.exp(k * math.log(theta)) >= DIRECT_TAIL:
        return 1.0 - _cdf(theta, t, k - 1)
    # terms shrink at least by θ, the remainder after a term is below term / (1 - θ)
    eps = EPS * (1.0 - theta)
    if math.log(eps) / math.log(theta) > TAIL_MAX_TERMS:
        return _tail_integral(theta, t, k)
    first = _prob(theta, t, k)
    return sum_series(
        _tail_terms(theta, first, k),
        start=first,
        eps=eps,
        max_terms=TAIL_MAX_TERMS,
        relative=True,
        label="Logarithmic.bar_f",
    )


def _inverse_f(theta: float, t: float, u: float) -> int:
    check_unit(u)
    if u >= 1.0:
        return MAX_INT
    return integer_quantile(lambda k: _cdf(theta, t, k), u, 1)


def _mean(theta: float, t: float) -> float:
    return t * theta / (1.0 - theta)


def _variance(theta: float) -> float:
    v = math.log1p(-theta)
    return -theta * (theta + v) / ((1.0 - theta) * (1.0 - theta) * v * v)


def prob(theta: float, x: float) -> float:
    """``-θ^x / (x ln(1 - θ))`` for integer ``x >= 1``."""
    _check(theta)
    return _prob(theta, _t(theta), x)


def cdf(theta: float, x: float) -> float:
    _check(theta)
    return _cdf(theta, _t(theta), x)


def bar_f(theta: float, x: float) -> float:
    """
    ``P[X >= x]``.

    Close to the mode the complement of the distribution function is used;
    further out the tail series is summed until a term drops below ``1e-16``.

    Warns
    -----
    PrecisionWarning
        If the tail series stops at its term cap.
    """
    _check(theta)
    return _bar_f(theta, _t(theta), x)


def inverse_f(theta: float, u: float) -> int:
    """
    Smallest ``k >= 1`` with ``cdf(k) >= u``.

    Returns :data:`~pysatl_probdist.distributions.MAX_INT` for ``u = 1``.
    """
    _check(theta)
    return _inverse_f(theta, _t(theta), u)


def mean(theta: float) -> float:
    _check(theta)
    return _mean(theta, _t(theta))


def variance(theta: float) -> float:
    _check(theta)
    return _variance(theta)


def standard_deviation(theta: float) -> float:
    return math.sqrt(variance(theta))


def mle(sample: SampleLike, n: int | None = None) -> dict[str, float]:
    """
    Maximum-likelihood estimate of ``θ``.

    Solves ``θ + x̄ (1 - θ) ln(1 - θ) = 0`` on ``[1e-15, 1 - 1e-15]`` with
    tolerance ``1e-7``.

    Raises
    ------
    UnsupportedPreconditionError
        If the sample is empty.
    ValueError
        If an observation is not an integer ``>= 1``.
    """
    data = as_sample(sample, n)
    check_integer_sample(data, minimum=1)
    m = float(data.mean())

    def _score(theta: float) -> float:
        if theta <= 0.0 or theta >= 1.0:
            return 1.0e200
        return theta + m * (1.0 - theta) * math.log1p(-theta)

    return {"theta": solve(1.0e-15, 1.0 - 1.0e-15, _score, 1.0e-7)}


def configure_logarithmic_family() -> None:
    """
    Configure and register the Logarithmic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGARITHMIC):
        return

    def pmf(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _prob(p.theta, p.t, x)

    def cdf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _cdf(p.theta, p.t, x)

    def sf_func(parameters: Parametrization, x: float, **_: Any) -> float:
        p = cast(_Standard, parameters)
        return _bar_f(p.theta, p.t, above(x))

    def mean_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        p = cast(_Standard, parameters)
        return _mean(p.theta, p.t)

    def var_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return _variance(cast(_Standard, parameters).theta)

    def std_func(parameters: Parametrization, _: Any = None, **__: Any) -> float:
        return math.sqrt(_variance(cast(_Standard, parameters).theta))

    Logarithmic = ParametricFamily(
        name=FamilyName.LOGARITHMIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf_func,
            CharacteristicName.SF: sf_func,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
        },
        support_by_parametrization=lambda _: IntegerSupport(1),
        estimator=mle,
    )
    Logarithmic.__doc__ = __doc__

    @parametrization(family=Logarithmic, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        theta : float
            Shape, ``0 < theta < 1``
        """

        theta: float
        t: float = derived()

        @constraint(description="0 < theta < 1")
        def check_theta(self) -> bool:
            return 0.0 < self.theta < 1.0

        def derive(self) -> Mapping[str, Any]:
            return {"t": _t(self.theta)}

    ParametricFamilyRegister.register(Logarithmic)
