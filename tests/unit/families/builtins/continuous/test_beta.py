"""
Tests for Beta Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.special import digamma
from scipy.stats import beta as beta_dist

from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.continuous import beta
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

POINTS = [-0.5, 0.0, 0.05, 0.3, 0.5, 0.8, 0.99, 1.0, 1.5]
PROBS = [0.0, 0.01, 0.25, 0.5, 0.75, 0.99, 1.0]


class TestBetaFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.beta_family = registry.get(FamilyName.BETA)
        self.beta_dist_example = self.beta_family(alpha=2.0, beta=5.0)

    def test_parametrization(self):
        dist = self.beta_dist_example
        assert dist.parametrization_name == "shapes"
        assert dist.parameters.parameters == {"alpha": 2.0, "beta": 5.0}
        assert dist.parameters.log_b == pytest.approx(math.log(1.0 / 30.0))
        with pytest.raises(ValueError, match="beta > 0"):
            self.beta_family(alpha=1.0, beta=0.0)

    def test_characteristics_match_scipy(self):
        dist = self.beta_dist_example
        reference = beta_dist(2.0, 5.0)

        for name, method in (
            (CharacteristicName.PDF, reference.pdf),
            (CharacteristicName.CDF, reference.cdf),
            (CharacteristicName.SF, reference.sf),
        ):
            self.assert_arrays_almost_equal(
                self.evaluate(dist.query_method(name), POINTS), method(POINTS)
            )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.query_method(CharacteristicName.PPF), PROBS), reference.ppf(PROBS)
        )

    def test_moments(self):
        dist = self.beta_dist_example
        reference = beta_dist(2.0, 5.0)
        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(reference.mean())
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(reference.var())
        assert dist.query_method(CharacteristicName.STD)(None) == pytest.approx(reference.std())

    @pytest.mark.parametrize(
        "alpha, b, x, expected",
        [(0.5, 2.0, 0.0, math.inf), (1.0, 2.0, 0.0, 2.0), (2.0, 1.0, 1.0, 2.0), (2.0, 3.0, 1.0, 0.0)],
    )
    def test_density_at_endpoints(self, alpha, b, x, expected):
        assert beta.density(alpha, b, x) == pytest.approx(expected)


class TestBetaEstimation:
    def test_mle(self):
        sample = np.random.default_rng(4).beta(2.0, 5.0, 5000)
        estimate = beta.mle(sample)

        assert estimate["alpha"] == pytest.approx(2.0, rel=0.1)
        assert estimate["beta"] == pytest.approx(5.0, rel=0.1)

    def test_mle_solves_likelihood_equations(self):
        sample = np.random.default_rng(5).beta(0.8, 1.7, 400)
        estimate = beta.mle(sample)
        a, b = estimate["alpha"], estimate["beta"]

        assert digamma(a) - digamma(a + b) == pytest.approx(np.log(sample).mean(), abs=1e-6)
        assert digamma(b) - digamma(a + b) == pytest.approx(np.log1p(-sample).mean(), abs=1e-6)

    def test_mle_preconditions(self):
        with pytest.raises(ValueError, match=r"\(0, 1\)"):
            beta.mle([0.2, 1.0])
        with pytest.raises(UnsupportedPreconditionError):
            beta.mle([0.3, 0.3, 0.3])
