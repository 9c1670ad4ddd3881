"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from mathlab.core.exceptions import DimensionError, ValidationError
from mathlab.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_in_open_interval,
    check_min_count,
    check_min_samples,
    check_non_negative,
    check_positive,
    check_square,
)


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "x")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_nested_list_to_2d(self):
        assert check_array([[1, 2], [3, 4]], "A").shape == (2, 2)

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "A")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")


class TestShapeChecks:

    def test_check_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 1)), "x")

    def test_check_2d(self):
        check_2d(np.zeros((2, 3)), "A")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_check_square(self):
        check_square(np.eye(3), "A")
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((2, 3)), "A")

    def test_consistent_length(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("x", "y"))
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.zeros(4), names=("x", "y"))

    def test_names_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("x", "y"))


class TestValueChecks:

    def test_check_finite(self):
        check_finite(np.array([1.0, 2.0]), "x")
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "x")

    def test_check_min_samples(self):
        with pytest.raises(ValidationError, match="at least 3"):
            check_min_samples(np.zeros(2), 3, "x")

    def test_check_positive(self):
        check_positive(0.5, "df")
        for bad in (0.0, -1.0, float("nan"), float("inf")):
            with pytest.raises(ValidationError):
                check_positive(bad, "df")

    def test_check_non_negative(self):
        check_non_negative(0.0, "std")
        with pytest.raises(ValidationError):
            check_non_negative(-0.1, "std")

    def test_check_in_open_interval(self):
        check_in_open_interval(0.95, 0.0, 1.0, "confidence")
        with pytest.raises(ValidationError):
            check_in_open_interval(1.0, 0.0, 1.0, "confidence")

    def test_check_min_count(self):
        check_min_count(5, 1, "n")
        with pytest.raises(ValidationError, match=">= 1"):
            check_min_count(0, 1, "n")
        with pytest.raises(ValidationError, match="integer"):
            check_min_count(2.5, 1, "n")
        with pytest.raises(ValidationError, match="integer"):
            check_min_count(True, 0, "n")
