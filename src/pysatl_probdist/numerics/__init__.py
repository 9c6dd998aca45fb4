"""
Numerical collaborators used by the distribution families.

- special functions and machine constants (:mod:`.special`);
- bracketing root-finder (:mod:`.rootfinder`);
- bounded-iteration series summation (:mod:`.series`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .rootfinder import solve
from .series import sum_series
from .special import (
    bar_f01,
    cdf01,
    density01,
    gamma_ratio_half,
    inverse_f01,
    log_beta,
    log_gamma,
)

__all__ = [
    "solve",
    "sum_series",
    "bar_f01",
    "cdf01",
    "density01",
    "gamma_ratio_half",
    "inverse_f01",
    "log_beta",
    "log_gamma",
]
