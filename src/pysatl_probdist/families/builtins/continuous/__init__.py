"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
Each submodule exposes the static evaluators of one distribution and a
``configure_*_family`` function registering the family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.continuous.beta import configure_beta_family
from pysatl_probdist.families.builtins.continuous.chi import configure_chi_family
from pysatl_probdist.families.builtins.continuous.chi_square import configure_chi_square_family
from pysatl_probdist.families.builtins.continuous.chi_square_quick import (
    configure_chi_square_quick_family,
)
from pysatl_probdist.families.builtins.continuous.erlang import configure_erlang_family
from pysatl_probdist.families.builtins.continuous.fisher_f import configure_fisher_f_family
from pysatl_probdist.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_probdist.families.builtins.continuous.johnson_sb import configure_johnson_sb_family
from pysatl_probdist.families.builtins.continuous.normal import configure_normal_family
from pysatl_probdist.families.builtins.continuous.student import configure_student_family
from pysatl_probdist.families.builtins.continuous.student_quick import (
    configure_student_quick_family,
)
from pysatl_probdist.families.builtins.continuous.uniform import configure_uniform_family

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
]
