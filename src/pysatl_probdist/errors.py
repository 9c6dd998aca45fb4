"""
Error and warning taxonomy.

Invalid arguments are reported with the builtin :class:`ValueError`, as in
the rest of PySATL. The classes below cover the remaining conditions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class UnsupportedPreconditionError(RuntimeError):
    """Raised when an estimator precondition fails (sample too small, moments mismatch)."""


class ConvergenceError(ArithmeticError):
    """Raised by strict evaluations when an iteration cap is reached."""


class PrecisionWarning(RuntimeWarning):
    """Issued when a bounded approximation stops before reaching its tolerance."""


__all__ = [
    "UnsupportedPreconditionError",
    "ConvergenceError",
    "PrecisionWarning",
]
