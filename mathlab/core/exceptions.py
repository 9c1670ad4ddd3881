"""
Exception hierarchy for MathLab.

All exceptions inherit from MathLabError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MathLabError(Exception):
    """Base exception for all MathLab errors."""
    pass


class ValidationError(MathLabError):
    """
    Input validation failed.

    Raised when user-provided inputs (arrays, distribution parameters,
    lab parameters) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, e.g. when
    multiplying matrices whose inner dimensions differ.
    """
    pass


class UnsupportedDistributionError(ValidationError):
    """
    Sampler was given a distribution it does not know how to draw from.

    Attributes:
        distribution: The offending object
    """

    def __init__(self, message: str, distribution: object | None = None):
        super().__init__(message)
        self.distribution = distribution


class NumericalError(MathLabError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by Gauss-Jordan inversion and elimination solves when the
    selected pivot falls below the pivot tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column in which elimination broke down
        pivot_value: The selected pivot (largest remaining entry)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value


class DegenerateRegressorError(NumericalError):
    """
    Regressor has (numerically) zero variance.

    Raised by simple OLS when the centered sum of squares of the regressor
    is below the degeneracy tolerance, so the slope is undefined.

    Attributes:
        regressor_name: Name of the regressor
        sum_of_squares: The centered sum of squares that was found
    """

    def __init__(
        self,
        message: str,
        regressor_name: str | None = None,
        sum_of_squares: float | None = None,
    ):
        super().__init__(message)
        self.regressor_name = regressor_name
        self.sum_of_squares = sum_of_squares


class LabStateError(MathLabError):
    """
    Lab registry or lab lifecycle misuse.

    Raised when a lab identifier has no registered implementation.
    """
    pass
