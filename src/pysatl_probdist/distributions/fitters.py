from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from collections.abc import Callable
from math import isfinite, sqrt
from typing import TYPE_CHECKING, Any, cast

from mypy_extensions import KwArg
from scipy import integrate as _sp_integrate

from pysatl_probdist.distributions.computation import FittedComputationMethod
from pysatl_probdist.distributions.support import DiscreteSupport
from pysatl_probdist.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_probdist.distributions.distribution import Distribution
    from pysatl_probdist.types import GenericCharacteristicName

MAX_INT = sys.maxsize
"""Quantile returned by unbounded integer families for ``u = 1``."""


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> Callable[..., float]:
    """
    Resolve a scalar characteristic from the distribution.

    Raises
    ------
    RuntimeError
        If the distribution does not provide a suitable computation strategy.
    """
    try:
        fn = distribution.query_method(name)
    except AttributeError as e:
        raise RuntimeError(
            "Distribution must provide computation_strategy.query_method(name, distribution)."
        ) from e

    def _wrap(x: Any, **kwargs: Any) -> float:
        return float(fn(x, **kwargs))

    return _wrap


def integer_quantile(
    cdf: Callable[[int], float],
    u: float,
    first: int,
    *,
    start: int | None = None,
    last: int | None = None,
) -> int:
    """
    Smallest integer ``k >= first`` with ``cdf(k) >= u``.

    Parameters
    ----------
    cdf : Callable[[int], float]
        Non-decreasing distribution function on the integers.
    u : float
        Probability in ``[0, 1]``.
    first : int
        Smallest support point.
    start : int, optional
        Initial guess; the search walks from there with doubling steps, then
        bisects the bracket.
    last : int, optional
        Largest support point, returned when ``cdf`` never reaches ``u``.

    Returns
    -------
    int
        The step quantile; :data:`MAX_INT` when the bracket outgrows the
        integers and no ``last`` is given.
    """
    ceiling = MAX_INT if last is None else last
    if u <= 0.0:
        return first

    k = first if start is None else min(max(first, start), ceiling)
    if cdf(k) >= u:
        hi = k
        step = 1
        while True:
            if hi == first:
                return first
            lo = max(first, hi - step)
            if cdf(lo) < u:
                break
            hi = lo
            step *= 2
    else:
        lo = k
        step = 1
        while True:
            if lo >= ceiling:
                return ceiling
            hi = min(ceiling, lo + step)
            if cdf(hi) >= u:
                break
            lo = hi
            step *= 2

    # cdf(lo) < u <= cdf(hi)
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if cdf(mid) >= u:
            hi = mid
        else:
            lo = mid
    return hi


def fit_cdf_to_ppf_1D(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[float, float]:
    """
    Fit a discrete ``ppf`` from a resolvable ``cdf`` on an integer support.

    Semantics
    ---------
    For ``u ∈ [0, 1]`` returns the **leftmost** support point ``k`` such that
    ``cdf(k) >= u``; ``u = 1`` maps to the last support point, or
    :data:`MAX_INT` for right-unbounded supports.

    Raises
    ------
    RuntimeError
        If the distribution has no left-bounded discrete support.
    """
    support = distribution.support
    if not isinstance(support, DiscreteSupport):
        raise RuntimeError("Discrete support is required for cdf->ppf.")
    first = support.first()
    if first is None:
        raise RuntimeError("cdf->ppf requires a left-bounded discrete support.")
    last = getattr(support, "max_k", None)

    cdf_func = _resolve(distribution, CharacteristicName.CDF)

    def _ppf(u: float, **kwargs: Any) -> float:
        if not 0.0 <= u <= 1.0:
            raise ValueError("u not in [0, 1]")
        if u >= 1.0:
            return float(MAX_INT if last is None else last)
        return float(integer_quantile(lambda k: cdf_func(k, **kwargs), u, first, last=last))

    ppf_func = cast(Callable[[float, KwArg(Any)], float], _ppf)
    return FittedComputationMethod[float, float](
        target=CharacteristicName.PPF, sources=[CharacteristicName.CDF], func=ppf_func
    )


def _integrate_pdf(distribution: Distribution, weight: Callable[[float], float]) -> float:
    pdf_func = _resolve(distribution, CharacteristicName.PDF)
    support = distribution.support
    lower = float("-inf") if support is None else support.lower
    upper = float("inf") if support is None else support.upper
    val, _ = _sp_integrate.quad(lambda t: weight(t) * pdf_func(t), lower, upper, limit=200)
    return float(val)


def fit_pdf_to_mean_1C(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit the mean as ``∫ x f(x) dx`` over the support by adaptive quadrature.
    """

    def _mean(_data: Any = None, **__: Any) -> float:
        return _integrate_pdf(distribution, lambda t: t)

    return FittedComputationMethod[Any, float](
        target=CharacteristicName.MEAN, sources=[CharacteristicName.PDF], func=_mean
    )


def fit_mean_to_var_1C(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit the variance as ``∫ (x - mean)² f(x) dx``.

    The mean is resolved through the strategy, so an analytical mean is used
    when the family provides one.
    """
    mean_func = _resolve(distribution, CharacteristicName.MEAN)

    def _var(_data: Any = None, **__: Any) -> float:
        m = mean_func(None)
        return max(_integrate_pdf(distribution, lambda t: (t - m) * (t - m)), 0.0)

    return FittedComputationMethod[Any, float](
        target=CharacteristicName.VAR, sources=[CharacteristicName.MEAN], func=_var
    )


def fit_var_to_std(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """Fit the standard deviation as the square root of the variance."""
    var_func = _resolve(distribution, CharacteristicName.VAR)

    def _std(_data: Any = None, **__: Any) -> float:
        v = var_func(None)
        if not isfinite(v):
            return v
        return sqrt(v)

    return FittedComputationMethod[Any, float](
        target=CharacteristicName.STD, sources=[CharacteristicName.VAR], func=_std
    )
