"""
Tests for Bernoulli Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest
from scipy.stats import bernoulli as bernoulli_dist

from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.discrete import bernoulli
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

POINTS = [-1.0, -0.5, 0.0, 0.5, 1.0, 1.5, 2.0]
PROBS = [0.1, 0.5, 0.69, 0.71, 0.99, 1.0]


class TestBernoulliFamily(BaseDistributionTest):
    def setup_method(self):
        self.family = configure_families_register().get(FamilyName.BERNOULLI)
        self.dist = self.family(p=0.3)
        self.reference = bernoulli_dist(0.3)

    def test_characteristics_match_scipy(self):
        for name, method in (
            (CharacteristicName.PMF, self.reference.pmf),
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

    def test_moments(self):
        assert self.dist.query_method(CharacteristicName.MEAN)(None) == 0.3
        assert self.dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(0.21)
        assert self.dist.query_method(CharacteristicName.STD)(None) == pytest.approx(0.21**0.5)
        assert self.dist.parameters.q == pytest.approx(0.7)

    def test_static_functions(self):
        assert bernoulli.prob(0.3, 1) == 0.3
        assert bernoulli.bar_f(0.3, 1) == 0.3
        assert bernoulli.bar_f(0.3, 0) == 1.0
        assert bernoulli.inverse_f(0.3, 0.0) == 0
        with pytest.raises(ValueError, match=r"p not in \[0, 1\]"):
            bernoulli.cdf(1.5, 0.0)

    def test_constraints(self):
        with pytest.raises(ValueError, match="0 <= p <= 1"):
            self.family(p=-0.1)


class TestBernoulliEstimation:
    def test_mle(self):
        assert bernoulli.mle([0, 1, 1, 0, 1]) == {"p": 0.6}
        assert bernoulli.mle([0, 1, 1, 0, 1], 2) == {"p": 0.5}

    def test_mle_preconditions(self):
        with pytest.raises(ValueError, match="0 or 1"):
            bernoulli.mle([0, 2])
        with pytest.raises(ValueError, match="integer"):
            bernoulli.mle([0, 0.5])
        with pytest.raises(UnsupportedPreconditionError):
            bernoulli.mle([1])
