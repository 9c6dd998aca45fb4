"""
Tests for Chi Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import chi as chi_dist

from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.continuous import chi, gamma
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

POINTS = [-1.0, 0.2, 1.0, 1.7, 3.0, 6.0]
PROBS = [0.0, 0.01, 0.3, 0.5, 0.9, 0.999]


class TestChiFamily(BaseDistributionTest):
    def setup_method(self):
        self.family = configure_families_register().get(FamilyName.CHI)

    @pytest.mark.parametrize("nu", [1, 3, 10])
    def test_characteristics_match_scipy(self, nu):
        dist = self.family(nu=nu)
        reference = chi_dist(nu)

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
        assert dist.query_method(CharacteristicName.PPF)(1.0) == math.inf

    @pytest.mark.parametrize("nu", [1, 2, 5, 30])
    def test_moments(self, nu):
        dist = self.family(nu=nu)
        reference = chi_dist(nu)

        assert dist.query_method(CharacteristicName.MEAN)(None) == pytest.approx(reference.mean())
        assert dist.query_method(CharacteristicName.VAR)(None) == pytest.approx(reference.var())
        assert dist.query_method(CharacteristicName.STD)(None) == pytest.approx(reference.std())
        assert dist.parameters.mean == pytest.approx(chi.mean(nu))

    def test_constraints(self):
        with pytest.raises(ValueError, match="nu is an integer >= 1"):
            self.family(nu=1.5)
        with pytest.raises(ValueError, match="nu must be an integer"):
            chi.density(0.5, 1.0)

    @pytest.mark.parametrize("nu", [1, 4, 9])
    def test_static_functions_delegate_to_gamma(self, nu):
        for x in POINTS[1:]:
            assert chi.cdf(nu, x) == gamma.cdf(nu / 2.0, 1.0, x * x / 2.0)
            assert chi.bar_f(nu, x) == gamma.bar_f(nu / 2.0, 1.0, x * x / 2.0)
        for u in PROBS[1:]:
            assert chi.inverse_f(nu, u) == math.sqrt(2.0 * gamma.inverse_f(nu / 2.0, 1.0, u))

    @pytest.mark.parametrize("nu, seed", [(4, 7), (9, 17)])
    def test_mle(self, nu, seed):
        sample = np.random.default_rng(seed).chisquare(nu, 4000) ** 0.5
        estimate = chi.mle(sample)

        assert estimate == {"nu": nu}
        assert isinstance(estimate["nu"], int)

    def test_mle_rejects_empty_sample(self):
        with pytest.raises(UnsupportedPreconditionError):
            chi.mle([])
