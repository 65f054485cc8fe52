"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from bootsim.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParameterError,
    ValidationError,
)
from bootsim.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_finite,
    check_finite_scalar,
    check_level,
    check_min_samples,
    check_not_empty,
    check_positive_int,
    check_positive_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# Array checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_empty_list(self):
        result = check_array([], "x")
        assert result.shape == (0,)

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([1.0, "a", None], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_array(np.array([1 + 2j]), "x")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([0.0, 1.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "x")


class TestShapeChecks:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_fails(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_not_empty(self):
        with pytest.raises(EmptyInputError) as exc_info:
            check_not_empty(np.array([]), "sample")
        assert exc_info.value.name == "sample"

    def test_min_samples(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            check_min_samples(np.array([1.0]), 2, "distribution")
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1

    def test_min_samples_passes(self):
        check_min_samples(np.array([1.0, 2.0]), 2, "distribution")


# ═══════════════════════════════════════════════════════════════════════
# Scalar checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositiveInt:

    def test_returns_python_int(self):
        result = check_positive_int(np.int64(5), "reps")
        assert result == 5
        assert type(result) is int

    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive(self, value):
        with pytest.raises(InvalidParameterError, match="reps must be >= 1"):
            check_positive_int(value, "reps")

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_non_integer(self, value):
        with pytest.raises(InvalidParameterError, match="integer"):
            check_positive_int(value, "reps")


class TestCheckScalars:

    def test_finite_scalar(self):
        assert check_finite_scalar(np.float32(0.5), "mu") == pytest.approx(0.5)

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite(self, value):
        with pytest.raises(InvalidParameterError, match="finite"):
            check_finite_scalar(value, "mu")

    def test_non_number(self):
        with pytest.raises(InvalidParameterError):
            check_finite_scalar("0.5", "mu")

    def test_positive_scalar(self):
        assert check_positive_scalar(3, "beta") == 3.0
        with pytest.raises(InvalidParameterError, match="> 0"):
            check_positive_scalar(0.0, "beta")


class TestCheckLevel:

    def test_valid(self):
        assert check_level(0.95) == 0.95

    @pytest.mark.parametrize("value", [0, 1, -0.1, 1.5])
    def test_outside_open_interval(self, value):
        with pytest.raises(InvalidParameterError) as exc_info:
            check_level(value)
        assert exc_info.value.parameter == "level"


class TestCheckChoice:

    def test_valid(self):
        assert check_choice("mean", ("mean", "median"), "stat") == "mean"

    def test_invalid_lists_options(self):
        with pytest.raises(InvalidParameterError, match="'mean', 'median'"):
            check_choice("mode", ("mean", "median"), "stat")
