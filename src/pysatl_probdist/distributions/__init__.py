"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL ProbDist:

- computation primitives (:mod:`.computation`);
- distribution protocol (:mod:`.distribution`);
- numerical fitters (:mod:`.fitters`);
- characteristic graph registry (:mod:`.registry`);
- pluggable strategies (:mod:`.strategies`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .fitters import MAX_INT, integer_quantile
from .registry import DEFAULT_COMPUTATION_KEY, GraphInvariantError, distribution_type_register
from .strategies import ComputationStrategy, DefaultComputationStrategy
from .support import ContinuousSupport, DiscreteSupport, IntegerSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    # fitters
    "MAX_INT",
    "integer_quantile",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    # registry
    "DEFAULT_COMPUTATION_KEY",
    "GraphInvariantError",
    "distribution_type_register",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerSupport",
]
