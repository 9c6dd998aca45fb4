"""
Tests for ChiSquare and ChiSquareQuick Distribution Families
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import chi2

from pysatl_probdist.errors import UnsupportedPreconditionError
from pysatl_probdist.families.builtins.continuous import chi_square, chi_square_quick
from pysatl_probdist.families.configuration import configure_families_register
from pysatl_probdist.types import CharacteristicName, FamilyName

from ..base import BaseDistributionTest

POINTS = [-1.0, 0.0, 0.3, 1.0, 4.0, 7.0, 15.0, 40.0]
PROBS = [0.001, 0.05, 0.5, 0.95, 0.999]


class TestChiSquareFamily(BaseDistributionTest):
    def setup_method(self):
        self.registry = configure_families_register()
        self.family = self.registry.get(FamilyName.CHI_SQUARE)

    def test_parametrization(self):
        dist = self.family(n=4)
        assert dist.parametrization_name == "dof"
        assert dist.parameters.parameters == {"n": 4}
        with pytest.raises(ValueError, match="n is an integer >= 1"):
            self.family(n=2.5)
        with pytest.raises(ValueError, match="n is an integer >= 1"):
            self.family(n=0)

    @pytest.mark.parametrize("n", [1, 4, 17])
    def test_characteristics_match_scipy(self, n):
        dist = self.family(n=n)
        reference = chi2(n)
        points = POINTS[2:] if n == 1 else POINTS

        for name, method in (
            (CharacteristicName.PDF, reference.pdf),
            (CharacteristicName.CDF, reference.cdf),
            (CharacteristicName.SF, reference.sf),
        ):
            np.testing.assert_allclose(
                self.evaluate(dist.query_method(name), points), method(points), rtol=1e-10
            )
        np.testing.assert_allclose(
            self.evaluate(dist.query_method(CharacteristicName.PPF), PROBS),
            reference.ppf(PROBS),
            rtol=1e-10,
        )

    def test_moments(self):
        dist = self.family(n=7)
        assert dist.query_method(CharacteristicName.MEAN)(None) == 7.0
        assert dist.query_method(CharacteristicName.VAR)(None) == 14.0
        assert dist.query_method(CharacteristicName.STD)(None) == pytest.approx(math.sqrt(14.0))

    def test_static_functions(self):
        assert chi_square.density(3, 2.0) == pytest.approx(chi2.pdf(2.0, 3))
        assert chi_square.inverse_f(3, 0.0) == 0.0
        assert chi_square.inverse_f(3, 1.0) == math.inf
        with pytest.raises(ValueError, match="n must be an integer"):
            chi_square.cdf(1.5, 2.0)

    def test_mle(self):
        sample = np.random.default_rng(6).chisquare(6, 2000)
        estimate = chi_square.mle(sample)
        assert set(estimate) == {"n"}
        assert isinstance(estimate["n"], int) and estimate["n"] >= 1
        with pytest.raises(UnsupportedPreconditionError):
            chi_square.mle([])


class TestChiSquareQuickFamily(BaseDistributionTest):
    def setup_method(self):
        self.family = configure_families_register().get(FamilyName.CHI_SQUARE_QUICK)

    def test_exact_characteristics_delegate(self):
        dist = self.family(n=6)
        reference = chi2(6)
        np.testing.assert_allclose(
            self.evaluate(dist.query_method(CharacteristicName.CDF), POINTS),
            reference.cdf(POINTS),
            rtol=1e-10,
        )
        assert dist.query_method(CharacteristicName.MEAN)(None) == 6.0
        assert chi_square_quick.mle is chi_square.mle

    @pytest.mark.parametrize("n", [1, 2])
    def test_closed_forms_are_exact(self, n):
        np.testing.assert_allclose(
            [chi_square_quick.inverse_f(n, u) for u in PROBS], chi2.ppf(PROBS, n), rtol=1e-10
        )

    @pytest.mark.parametrize("n", [10, 50, 200])
    def test_central_quantiles(self, n):
        probs = [0.03, 0.2, 0.5, 0.8, 0.97]
        np.testing.assert_allclose(
            [chi_square_quick.inverse_f(n, u) for u in probs], chi2.ppf(probs, n), rtol=1e-3
        )

    def test_probability_error_at_ten_degrees(self):
        probs = [0.01, 0.015, 0.03, 0.2, 0.5, 0.8, 0.97, 0.985, 0.99]
        for u in probs:
            assert chi_square.cdf(10, chi_square_quick.inverse_f(10, u)) == pytest.approx(
                u, abs=1e-5
            )

    def test_tail_quantiles_large_n(self):
        probs = [0.001, 0.01, 0.99, 0.999]
        np.testing.assert_allclose(
            [chi_square_quick.inverse_f(20, u) for u in probs], chi2.ppf(probs, 20), rtol=1e-3
        )

    @pytest.mark.parametrize("n", [3, 7])
    def test_tail_quantiles_small_n_are_exact(self, n):
        probs = [0.001, 0.01, 0.99, 0.999]
        np.testing.assert_allclose(
            [chi_square_quick.inverse_f(n, u) for u in probs], chi2.ppf(probs, n), rtol=1e-9
        )

    def test_family_ppf_uses_quick_quantile(self):
        ppf = self.family(n=50).query_method(CharacteristicName.PPF)
        assert ppf(0.5) == chi_square_quick.inverse_f(50, 0.5)
        assert ppf(0.0) == 0.0
        assert ppf(1.0) == math.inf

    def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="u not in"):
            chi_square_quick.inverse_f(5, -0.1)
        with pytest.raises(ValueError, match="n must be >= 1"):
            chi_square_quick.inverse_f(0, 0.5)
