"""
Tests for JohnsonSB Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import johnsonsb

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.continuous import johnson_sb
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

PARAMS = {"gamma": 0.5, "delta": 1.3, "xi": -1.0, "lam": 4.0}
POINTS = [-2.0, -1.0, -0.5, 0.3, 1.0, 2.5, 2.99, 3.0, 5.0]
PROBS = [0.0, 0.01, 0.25, 0.5, 0.75, 0.99, 1.0]


class TestJohnsonSBFamily(BaseDistributionTest):
    def setup_method(self):
        self.family = configure_families_register().get(FamilyName.JOHNSON_SB)
        self.dist = self.family(**PARAMS)
        self.reference = johnsonsb(a=0.5, b=1.3, loc=-1.0, scale=4.0)

    def test_characteristics_match_scipy(self):
        for name, method in (
            (CharacteristicName.PDF, self.reference.pdf),
            (CharacteristicName.CDF, self.reference.cdf),
            (CharacteristicName.SF, self.reference.sf),
        ):
            self.assert_arrays_almost_equal(
                self.evaluate(self.dist.query_method(name), POINTS), method(POINTS)
            )
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.query_method(CharacteristicName.PPF), PROBS),
            self.reference.ppf(PROBS),
        )

    def test_moments_come_from_the_graph(self):
        assert CharacteristicName.MEAN not in self.dist.analytical_computations

        mean = self.dist.query_method(CharacteristicName.MEAN)(None)
        var = self.dist.query_method(CharacteristicName.VAR)(None)
        std = self.dist.query_method(CharacteristicName.STD)(None)

        assert mean == pytest.approx(self.reference.mean(), rel=1e-6)
        assert var == pytest.approx(self.reference.var(), rel=1e-6)
        assert std == pytest.approx(np.sqrt(var))

    def test_static_moments(self):
        assert johnson_sb.mean(**PARAMS) == pytest.approx(self.reference.mean(), rel=1e-6)
        assert johnson_sb.variance(**PARAMS) == pytest.approx(self.reference.var(), rel=1e-6)

    def test_quantile_saturates(self):
        assert johnson_sb.inverse_f(0.0, 1e-3, 0.0, 1.0, 0.999) == 1.0
        assert johnson_sb.inverse_f(0.0, 1e-3, 0.0, 1.0, 0.001) == 0.0

    def test_support(self):
        assert self.dist.support == ContinuousSupport(left=-1.0, right=3.0)

    def test_constraints(self):
        with pytest.raises(ValueError, match="delta > 0"):
            self.family(gamma=0.0, delta=0.0, xi=0.0, lam=1.0)
        with pytest.raises(ValueError, match="lam must be > 0"):
            johnson_sb.cdf(0.0, 1.0, 0.0, -1.0, 0.5)

    def test_no_estimator(self):
        with pytest.raises(UnsupportedPreconditionError):
            self.family.mle([0.1, 0.2])
