"""
Special Functions
=================

Thin scalar wrappers over :mod:`scipy.special` used by the family modules,
together with the double-precision constants the approximations rely on.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

from scipy import special as _sp_special

LN2 = math.log(2.0)
"""Natural logarithm of 2."""

RAC2 = math.sqrt(2.0)
"""Square root of 2."""

DBL_MAX_EXP = sys.float_info.max_exp
"""Largest binary exponent of a finite double (1024)."""

LN_DBL_MAX = DBL_MAX_EXP * LN2
"""Exponent beyond which ``exp`` overflows."""

XBIG = 100.0
"""Normal quantiles beyond this magnitude are treated as infinite."""


def log_gamma(x: float) -> float:
    """Natural logarithm of the gamma function."""
    return float(_sp_special.gammaln(x))


def log_beta(a: float, b: float) -> float:
    """Natural logarithm of the beta function ``B(a, b)``."""
    return float(_sp_special.betaln(a, b))


def gamma_ratio_half(x: float) -> float:
    """
    Return ``Γ(x + 1/2) / Γ(x)``.

    Evaluated as a Pochhammer symbol, which stays accurate for large ``x``
    where the difference of two log-gammas cancels.
    """
    if x <= 0.0:
        raise ValueError("x must be positive")
    return float(_sp_special.poch(x, 0.5))


def density01(x: float) -> float:
    """Standard normal density."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def cdf01(x: float) -> float:
    """Standard normal distribution function."""
    return float(_sp_special.ndtr(x))


def bar_f01(x: float) -> float:
    """Standard normal complementary distribution function."""
    return float(_sp_special.ndtr(-x))


def inverse_f01(u: float) -> float:
    """
    Standard normal quantile.

    Returns ``-inf`` for ``u = 0`` and ``inf`` for ``u = 1``.

    Raises
    ------
    ValueError
        If ``u`` is outside ``[0, 1]``.
    """
    if not 0.0 <= u <= 1.0:
        raise ValueError("u not in [0, 1]")
    return float(_sp_special.ndtri(u))
