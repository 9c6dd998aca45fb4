"""
Series Summation
================

Bounded-iteration summation shared by the tail-probability evaluators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from collections.abc import Iterable

from pysatl_probdist.errors import ConvergenceError, PrecisionWarning


def sum_series(
    terms: Iterable[float],
    *,
    start: float = 0.0,
    eps: float,
    max_terms: int,
    relative: bool = False,
    strict: bool = False,
    label: str = "series",
) -> float:
    """
    Add ``terms`` to ``start`` until a term drops to ``eps`` in magnitude.

    With ``relative`` the threshold is ``eps`` times the running total.

    Parameters
    ----------
    terms : Iterable[float]
        Increments of the series, usually produced by a generator.
    start : float, default 0.0
        Value the increments are added to.
    eps : float
        Threshold on the last increment.
    max_terms : int
        Number of increments after which the summation stops regardless.
    relative : bool, default False
        Compare the increment with ``eps * |total|`` instead of ``eps``.
    strict : bool, default False
        Raise instead of warning when ``max_terms`` is reached.
    label : str, default "series"
        Name used in the diagnostic.

    Returns
    -------
    float
        The partial sum. When the cap is reached the partial sum is still
        returned and a :class:`~pysatl_probdist.errors.PrecisionWarning` is
        issued.

    Raises
    ------
    ConvergenceError
        If ``strict`` is set and the cap is reached.
    """
    total = start
    count = 0
    for term in terms:
        total += term
        count += 1
        if abs(term) <= (eps * abs(total) if relative else eps):
            return total
        if count >= max_terms:
            message = f"{label}: no convergence after {max_terms} terms"
            if strict:
                raise ConvergenceError(message)
            warnings.warn(message, PrecisionWarning, stacklevel=3)
            return total
    return total
