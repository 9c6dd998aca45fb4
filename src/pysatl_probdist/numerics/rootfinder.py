"""
Bracketing Root-Finder
======================

Brent-Dekker root search on a fixed interval, as used by the MLE estimators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import copysign, isnan

from scipy import optimize as _sp_optimize

from pysatl_probdist.types import ScalarFunc


def solve(
    lower: float,
    upper: float,
    f: ScalarFunc,
    tolerance: float = 1e-12,
    *,
    max_iter: int = 200,
) -> float:
    """
    Find a root of ``f`` in ``[lower, upper]``.

    Parameters
    ----------
    lower, upper : float
        Bracketing interval, ``lower < upper``.
    f : Callable[[float], float]
        Continuous scalar function.
    tolerance : float, default 1e-12
        Absolute tolerance on the root.
    max_iter : int, default 200
        Maximum number of Brent iterations.

    Returns
    -------
    float
        A root of ``f``. When ``f`` does not change sign over the interval,
        the endpoint where ``|f|`` is smallest is returned, which is where
        Brent-Dekker converges in that case.

    Raises
    ------
    ValueError
        If the interval is empty or ``f`` is not a number at an endpoint.
    """
    if not lower < upper:
        raise ValueError("lower must be less than upper")
    if tolerance <= 0.0:
        raise ValueError("tolerance must be positive")

    f_lower = float(f(lower))
    f_upper = float(f(upper))
    if isnan(f_lower) or isnan(f_upper):
        raise ValueError("f is not a number at the interval ends")

    if f_lower == 0.0:
        return lower
    if f_upper == 0.0:
        return upper
    if copysign(1.0, f_lower) == copysign(1.0, f_upper):
        return lower if abs(f_lower) <= abs(f_upper) else upper

    return float(_sp_optimize.brentq(f, lower, upper, xtol=tolerance, maxiter=max_iter))
