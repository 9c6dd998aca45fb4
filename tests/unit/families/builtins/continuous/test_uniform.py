"""
Tests for Uniform Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import uniform

from pysatl_probdist.distributions.support import ContinuousSupport
from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.continuous import uniform as uniform_module
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, ContinuousSupportShape1D, FamilyName

from ..base import BaseDistributionTest

POINTS = [-5.0, -2.0, -1.0, 0.5, 2.75, 3.0, 10.0]
PROBS = [0.0, 0.1, 0.5, 0.9, 1.0]


class TestUniformFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(a=-2.0, b=3.0)

    def test_family_properties(self):
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert self.uniform_family.parametrization_names == ["standard", "meanWidth"]

    def test_parametrization_constraints(self):
        with pytest.raises(ValueError, match="a < b"):
            self.uniform_family(a=1.0, b=1.0)
        with pytest.raises(ValueError, match="width > 0"):
            self.uniform_family(mean=0.0, width=-1.0, parametrization_name="meanWidth")

    def test_characteristics_match_scipy(self):
        dist = self.uniform_dist_example
        reference = uniform(loc=-2.0, scale=5.0)

        self.assert_arrays_almost_equal(
            self.evaluate(dist.query_method(CharacteristicName.PDF), [-1.0, 0.5, 2.75]),
            reference.pdf([-1.0, 0.5, 2.75]),
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.query_method(CharacteristicName.CDF), POINTS), reference.cdf(POINTS)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.query_method(CharacteristicName.SF), POINTS), reference.sf(POINTS)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(dist.query_method(CharacteristicName.PPF), PROBS), reference.ppf(PROBS)
        )

    def test_density_is_zero_at_bounds(self):
        pdf = self.uniform_dist_example.query_method(CharacteristicName.PDF)
        assert pdf(-2.0) == 0.0
        assert pdf(3.0) == 0.0

    def test_moments(self):
        dist = self.uniform_dist_example
        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(0.5)
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(25.0 / 12.0)
        assert dist.query_method(CharacteristicName.STD)(None) == pytest.approx(
            np.sqrt(25.0 / 12.0)
        )

    def test_mean_width_parametrization(self):
        dist = self.uniform_family(mean=0.5, width=5.0, parametrization_name="meanWidth")
        cdf = dist.query_method(CharacteristicName.CDF)
        self.assert_arrays_almost_equal(
            self.evaluate(cdf, POINTS),
            self.evaluate(self.uniform_dist_example.query_method(CharacteristicName.CDF), POINTS),
        )

    def test_support(self):
        support = self.uniform_dist_example.support
        assert isinstance(support, ContinuousSupport)
        assert (support.lower, support.upper) == (-2.0, 3.0)
        assert support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL


class TestUniformFunctions:
    def test_inverse_endpoints_are_exact(self):
        assert uniform_module.inverse_f(0.1, 0.3, 0.0) == 0.1
        assert uniform_module.inverse_f(0.1, 0.3, 1.0) == 0.3

    def test_invalid_bounds(self):
        with pytest.raises(ValueError, match="a must be less than b"):
            uniform_module.cdf(1.0, 0.0, 0.5)

    def test_mle(self):
        sample = np.random.default_rng(1).uniform(-1.0, 4.0, 1000)
        assert uniform_module.mle(sample) == {"a": sample.min(), "b": sample.max()}
        with pytest.raises(UnsupportedPreconditionError):
            uniform_module.mle([1.0, 1.0])
        with pytest.raises(UnsupportedPreconditionError):
            uniform_module.mle([])
