"""
Built-in discrete distribution families.

All of them live on the integers. Each submodule exposes the static
evaluators of one distribution (``prob`` in place of ``density``) and a
``configure_*_family`` function registering the family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_probdist.families.builtins.discrete.bernoulli import configure_bernoulli_family
from pysatl_probdist.families.builtins.discrete.constant_int import configure_constant_int_family
from pysatl_probdist.families.builtins.discrete.geometric import configure_geometric_family
from pysatl_probdist.families.builtins.discrete.logarithmic import configure_logarithmic_family
from pysatl_probdist.families.builtins.discrete.negative_binomial import (
    configure_negative_binomial_family,
)
from pysatl_probdist.families.builtins.discrete.pascal import configure_pascal_family
from pysatl_probdist.families.builtins.discrete.uniform_int import configure_uniform_int_family

__all__ = [
    "configure_bernoulli_family",
    "configure_constant_int_family",
    "configure_geometric_family",
    "configure_logarithmic_family",
    "configure_negative_binomial_family",
    "configure_pascal_family",
    "configure_uniform_int_family",
]
