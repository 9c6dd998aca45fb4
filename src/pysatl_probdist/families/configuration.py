"""
Distribution Families Configuration
====================================

Registers the built-in parametric families in the global
:class:`ParametricFamilyRegister`:

- continuous: Normal, Uniform, Gamma, Beta, ChiSquare, ChiSquareQuick, Chi,
  Erlang, FisherF, Student, StudentQuick, JohnsonSB;
- discrete: Bernoulli, Geometric, Logarithmic, NegativeBinomial, Pascal,
  DiscreteUniform, ConstantInt.

Notes
-----
- Configuring is idempotent: a family already present is left untouched.
- Characteristics a family does not provide analytically are resolved
  through the characteristic graph of its distribution type.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_probdist.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_chi_family,
    configure_chi_square_family,
    configure_chi_square_quick_family,
    configure_constant_int_family,
    configure_erlang_family,
    configure_fisher_f_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_johnson_sb_family,
    configure_logarithmic_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_pascal_family,
    configure_student_family,
    configure_student_quick_family,
    configure_uniform_family,
    configure_uniform_int_family,
)
from pysatl_probdist.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all built-in distribution families.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_gamma_family()
    configure_beta_family()
    configure_chi_square_family()
    configure_chi_square_quick_family()
    configure_chi_family()
    configure_erlang_family()
    configure_fisher_f_family()
    configure_student_family()
    configure_student_quick_family()
    configure_johnson_sb_family()

    configure_bernoulli_family()
    configure_geometric_family()
    configure_logarithmic_family()
    configure_negative_binomial_family()
    configure_pascal_family()
    configure_uniform_int_family()
    configure_constant_int_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
