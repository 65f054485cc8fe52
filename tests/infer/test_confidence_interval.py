"""
Tests for bootstrap confidence intervals.

Tests the percentile, standard-error and bias-corrected methods against
hand-computed values, plus the boundary and validation behaviour.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from bootsim.core.exceptions import (
    InsufficientDataError,
    InvalidParameterError,
    ValidationError,
)
from bootsim.infer import (
    ConfidenceInterval,
    bootstrap_null_distribution,
    confidence_interval,
)
from bootsim.sample import mean_of


# ---------------------------------------------------------------------------
# Tests: Percentile
# ---------------------------------------------------------------------------

class TestPercentileCI:

    def test_known_quantiles(self):
        """101 evenly spaced values: the 5% and 95% quantiles are exact."""
        ci = confidence_interval(np.arange(1.0, 102.0), level=0.90)
        assert ci.lower == pytest.approx(6.0)
        assert ci.upper == pytest.approx(96.0)
        assert ci.level == 0.90
        assert ci.type == "percentile"

    def test_linear_interpolation(self):
        ci = confidence_interval([0.0, 1.0], level=0.5)
        assert ci.lower == pytest.approx(0.25)
        assert ci.upper == pytest.approx(0.75)

    def test_matches_numpy_quantile(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 1000, 0.5, seed=123)
        ci = confidence_interval(null_distn, level=0.95)
        assert ci.lower == pytest.approx(np.quantile(null_distn.stats, 0.025), rel=1e-12)
        assert ci.upper == pytest.approx(np.quantile(null_distn.stats, 0.975), rel=1e-12)

    def test_ordered_and_within_distribution(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 1000, 0.5, seed=3)
        ci = confidence_interval(null_distn, 0.95)
        assert ci.lower <= ci.upper
        assert ci.lower >= null_distn.stats.min()
        assert ci.upper <= null_distn.stats.max()

    def test_default_scenario_bounds_in_unit_interval(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 1000, 0.5, seed=123)
        ci = confidence_interval(null_distn, 0.95)
        assert 0.0 < ci.lower < ci.upper < 1.0
        assert ci.contains(0.5)

    def test_width_stable_in_reps(self, beta_sample):
        """
        Percentile width converges to the sampling spread of the mean
        rather than shrinking with more replicates.
        """
        expected = 2 * sp_stats.norm.ppf(0.975) * np.std(beta_sample.values) / np.sqrt(25)
        for reps in (1000, 10000):
            null_distn = bootstrap_null_distribution(beta_sample, reps, 0.5, seed=123)
            ci = confidence_interval(null_distn, 0.95)
            assert 0.0 < ci.lower < ci.upper < 1.0
            assert ci.width == pytest.approx(expected, rel=0.15)

    def test_higher_level_is_wider(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 2000, 0.5, seed=5)
        ci80 = confidence_interval(null_distn, 0.80)
        ci99 = confidence_interval(null_distn, 0.99)
        assert ci99.lower <= ci80.lower
        assert ci99.upper >= ci80.upper


# ---------------------------------------------------------------------------
# Tests: Standard error
# ---------------------------------------------------------------------------

class TestSECI:

    def test_formula(self):
        stats = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        ci = confidence_interval(stats, 0.95, type="se", point_estimate=3.0)
        half = sp_stats.norm.ppf(0.975) * np.std(stats, ddof=1)
        assert ci.lower == pytest.approx(3.0 - half)
        assert ci.upper == pytest.approx(3.0 + half)
        assert ci.type == "se"

    def test_centred_on_point_estimate(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 500, 0.5, seed=1)
        observed = mean_of(beta_sample)
        ci = confidence_interval(null_distn, type="se", point_estimate=observed)
        assert (ci.lower + ci.upper) / 2 == pytest.approx(observed)

    def test_requires_point_estimate(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            confidence_interval([1.0, 2.0, 3.0], type="se")
        assert exc_info.value.parameter == "point_estimate"


# ---------------------------------------------------------------------------
# Tests: Bias-corrected
# ---------------------------------------------------------------------------

class TestBiasCorrectedCI:

    def test_no_bias_equals_percentile(self):
        """Half the distribution at or below the estimate gives z0 = 0."""
        stats = np.arange(1.0, 101.0)
        bc = confidence_interval(stats, 0.95, type="bias-corrected", point_estimate=50.5)
        perc = confidence_interval(stats, 0.95)
        assert bc.lower == pytest.approx(perc.lower, rel=1e-9)
        assert bc.upper == pytest.approx(perc.upper, rel=1e-9)
        assert bc.type == "bias-corrected"

    def test_estimate_below_distribution(self):
        """No replicate <= estimate collapses both bounds to the minimum."""
        stats = np.arange(1.0, 101.0)
        ci = confidence_interval(stats, 0.95, type="bias-corrected", point_estimate=0.0)
        assert ci.lower == pytest.approx(1.0)
        assert ci.upper == pytest.approx(1.0)

    def test_shifts_towards_bias(self):
        stats = np.arange(1.0, 101.0)
        perc = confidence_interval(stats, 0.95)
        bc = confidence_interval(stats, 0.95, type="bias-corrected", point_estimate=60.0)
        assert bc.lower > perc.lower
        assert bc.upper > perc.upper

    def test_requires_point_estimate(self):
        with pytest.raises(InvalidParameterError):
            confidence_interval([1.0, 2.0, 3.0], type="bias-corrected")


# ---------------------------------------------------------------------------
# Tests: Boundaries and validation
# ---------------------------------------------------------------------------

class TestValidation:

    def test_single_statistic(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            confidence_interval([0.5], 0.95)
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1

    def test_empty_distribution(self):
        with pytest.raises(InsufficientDataError):
            confidence_interval([], 0.95)

    def test_single_replicate_solution(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 1, 0.5, seed=1)
        with pytest.raises(InsufficientDataError):
            confidence_interval(null_distn)

    @pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 1.2, np.nan])
    def test_bad_level(self, level):
        with pytest.raises(InvalidParameterError) as exc_info:
            confidence_interval([1.0, 2.0, 3.0], level)
        assert exc_info.value.parameter == "level"

    def test_unknown_type(self):
        with pytest.raises(InvalidParameterError):
            confidence_interval([1.0, 2.0, 3.0], type="bca")

    def test_non_finite_distribution(self):
        with pytest.raises(ValidationError):
            confidence_interval([1.0, np.inf, 3.0])

    def test_2d_distribution(self):
        with pytest.raises(ValidationError):
            confidence_interval(np.ones((3, 2)))


class TestConfidenceIntervalValue:

    def test_accessors(self):
        ci = ConfidenceInterval(lower=0.4, upper=0.6, level=0.95)
        assert ci.width == pytest.approx(0.2)
        assert ci.as_tuple() == (0.4, 0.6)
        assert ci.contains(0.4)
        assert ci.contains(0.6)
        assert not ci.contains(0.61)
        assert ci.type == "percentile"

    def test_idempotent(self, beta_sample):
        null_distn = bootstrap_null_distribution(beta_sample, 300, 0.5, seed=2)
        assert confidence_interval(null_distn) == confidence_interval(null_distn)
