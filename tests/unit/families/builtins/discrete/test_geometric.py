"""
Tests for Geometric Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import geom

from pysatl_probdist.distributions.fitters import MAX_INT
from pysatl_probdist.families.builtins.discrete import geometric
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

POINTS = [-1.0, 0.0, 0.5, 1.0, 2.0, 2.5, 7.0, 40.0]
PROBS = [0.1, 0.25, 0.5, 0.77, 0.999]


class TestGeometricFamily(BaseDistributionTest):
    def setup_method(self):
        self.family = configure_families_register().get(FamilyName.GEOMETRIC)
        self.dist = self.family(p=0.3)
        self.reference = geom(0.3, loc=-1)

    def test_characteristics_match_scipy(self):
        for name, method in (
            (CharacteristicName.PMF, self.reference.pmf),
            (CharacteristicName.CDF, self.reference.cdf),
            (CharacteristicName.SF, self.reference.sf),
        ):
            np.testing.assert_allclose(
                self.evaluate(self.dist.query_method(name), POINTS),
                method(POINTS),
                rtol=1e-12,
                atol=1e-300,
            )
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.query_method(CharacteristicName.PPF), PROBS),
            self.reference.ppf(PROBS),
        )

    def test_moments(self):
        assert self.dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(7.0 / 3.0)
        assert self.dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(0.7 / 0.09)

    def test_bar_f_is_upper_tail_from_x(self):
        assert geometric.bar_f(0.3, 2) == pytest.approx(0.49)
        assert geometric.bar_f(0.3, 0) == 1.0
        assert geometric.bar_f(0.3, math.inf) == 0.0

    def test_quantile_endpoints(self):
        assert geometric.inverse_f(0.3, 0.0) == 0
        assert geometric.inverse_f(0.3, 1.0) == MAX_INT

    def test_certain_success(self):
        dist = self.family(p=1.0)
        assert dist.calculate_characteristic(CharacteristicName.PMF, 0) == 1.0
        assert dist.calculate_characteristic(CharacteristicName.PMF, 1) == 0.0
        assert dist.calculate_characteristic(CharacteristicName.CDF, 0) == 1.0
        assert dist.calculate_characteristic(CharacteristicName.SF, 0) == 0.0
        assert dist.calculate_characteristic(CharacteristicName.PPF, 0.9) == 0
        assert dist.query_method(CharacteristicName.MEAN)(None) == 0.0
        assert dist.query_method(CharacteristicName.VAR)(None) == 0.0

    def test_no_success(self):
        dist = self.family(p=0.0)
        assert dist.calculate_characteristic(CharacteristicName.PMF, 3) == 0.0
        assert dist.calculate_characteristic(CharacteristicName.CDF, 1e6) == 0.0
        assert dist.calculate_characteristic(CharacteristicName.SF, 1e6) == 1.0
        assert dist.calculate_characteristic(CharacteristicName.PPF, 0.5) == MAX_INT
        assert dist.query_method(CharacteristicName.MEAN)(None) == math.inf


class TestGeometricEstimation:
    def test_mle(self):
        assert geometric.mle([0, 1, 2, 3]) == {"p": pytest.approx(0.4)}

    def test_mle_preconditions(self):
        with pytest.raises(ValueError, match="below 0"):
            geometric.mle([1, -1])
