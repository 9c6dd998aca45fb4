"""
Built-in distribution families for PySATL probdist.

This package contains implementations of the statistical distribution
families that are available by default: continuous ones in
:mod:`.continuous`, integer-valued ones in :mod:`.discrete`.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.continuous import (
    configure_beta_family,
    configure_chi_family,
    configure_chi_square_family,
    configure_chi_square_quick_family,
    configure_erlang_family,
    configure_fisher_f_family,
    configure_gamma_family,
    configure_johnson_sb_family,
    configure_normal_family,
    configure_student_family,
    configure_student_quick_family,
    configure_uniform_family,
)
from pysatl_probdist.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_constant_int_family,
    configure_geometric_family,
    configure_logarithmic_family,
    configure_negative_binomial_family,
    configure_pascal_family,
    configure_uniform_int_family,
)

__all__ = [
    "configure_beta_family",
    "configure_chi_family",
    "configure_chi_square_family",
    "configure_chi_square_quick_family",
    "configure_erlang_family",
    "configure_fisher_f_family",
    "configure_gamma_family",
    "configure_johnson_sb_family",
    "configure_normal_family",
    "configure_student_family",
    "configure_student_quick_family",
    "configure_uniform_family",
    "configure_bernoulli_family",
    "configure_constant_int_family",
    "configure_geometric_family",
    "configure_logarithmic_family",
    "configure_negative_binomial_family",
    "configure_pascal_family",
    "configure_uniform_int_family",
]
