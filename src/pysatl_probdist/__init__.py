"""
PySATL probdist
===============

Univariate probability distributions: static evaluators of the density or
mass function, distribution function, complementary distribution function,
quantile and moments, parametric families built on them, and
maximum-likelihood estimators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import ConvergenceError, PrecisionWarning, UnsupportedPreconditionError
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-probdist")
__all__ = [
    "__version__",
    "ConvergenceError",
    "PrecisionWarning",
    "UnsupportedPreconditionError",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
