"""
Tests for FisherF Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import f as f_dist

from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.continuous import beta, fisher_f
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

POINTS = [-1.0, 0.1, 0.5, 1.0, 2.5, 8.0]
PROBS = [0.0, 0.01, 0.5, 0.9, 0.999]


class TestFisherFFamily(BaseDistributionTest):
    def setup_method(self):
        self.family = configure_families_register().get(FamilyName.FISHER_F)

    @pytest.mark.parametrize("n1, n2", [(3, 7), (10, 20), (2, 1)])
    def test_characteristics_match_scipy(self, n1, n2):
        dist = self.family(n1=n1, n2=n2)
        reference = f_dist(n1, n2)

        for name, method in (
            (CharacteristicName.PDF, reference.pdf),
            (CharacteristicName.CDF, reference.cdf),
            (CharacteristicName.SF, reference.sf),
        ):
            np.testing.assert_allclose(
                self.evaluate(dist.query_method(name), POINTS), method(POINTS), rtol=1e-9
            )
        np.testing.assert_allclose(
            self.evaluate(dist.query_method(CharacteristicName.PPF), PROBS),
            reference.ppf(PROBS),
            rtol=1e-9,
        )
        assert dist.query_method(CharacteristicName.PPF)(1.0) == math.inf

    @pytest.mark.parametrize("n1, n2", [(1, 1), (2, 5), (4, 9), (30, 3)])
    def test_static_functions_delegate_to_beta(self, n1, n2):
        for x in POINTS[1:]:
            y = n1 * x / (n1 * x + n2)
            assert fisher_f.cdf(n1, n2, x) == beta.cdf(n1 / 2.0, n2 / 2.0, y)
            assert fisher_f.bar_f(n1, n2, x) == beta.bar_f(n1 / 2.0, n2 / 2.0, y)
        for u in PROBS[1:]:
            z = beta.inverse_f(n1 / 2.0, n2 / 2.0, u)
            assert fisher_f.inverse_f(n1, n2, u) == n2 * z / (n1 * (1.0 - z))

    @pytest.mark.parametrize("n1, n2", [(1, 1), (2, 5), (4, 9), (30, 3)])
    def test_infinite_argument(self, n1, n2):
        assert fisher_f.cdf(n1, n2, math.inf) == 1.0
        assert fisher_f.bar_f(n1, n2, math.inf) == 0.0
        assert fisher_f.density(n1, n2, math.inf) == 0.0

        dist = self.family(n1=n1, n2=n2)
        assert dist.calculate_characteristic(CharacteristicName.CDF, math.inf) == 1.0
        assert dist.calculate_characteristic(CharacteristicName.SF, math.inf) == 0.0
        assert dist.calculate_characteristic(CharacteristicName.PDF, math.inf) == 0.0

    def test_moments(self):
        dist = self.family(n1=3, n2=9)
        reference = f_dist(3, 9)
        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(reference.mean())
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(reference.var())
        assert dist.query_method(CharacteristicName.STD)(None) == pytest.approx(reference.std())

    def test_undefined_moments(self):
        with pytest.raises(ValueError, match="n2 > 2"):
            self.family(n1=3, n2=2).query_method(CharacteristicName.MEAN)(None)
        with pytest.raises(ValueError, match="n2 > 4"):
            self.family(n1=3, n2=4).query_method(CharacteristicName.VAR)(None)
        with pytest.raises(ValueError, match="n2 > 4"):
            fisher_f.standard_deviation(3, 3)

    def test_constraints(self):
        with pytest.raises(ValueError, match="n2 is an integer >= 1"):
            self.family(n1=3, n2=0)
        with pytest.raises(ValueError, match="n1 must be an integer"):
            fisher_f.cdf(1.5, 3, 1.0)

    def test_no_estimator(self):
        with pytest.raises(UnsupportedPreconditionError):
            self.family.mle([1.0, 2.0, 3.0])
