"""
Dense linear algebra kernels.

Gauss-Jordan inversion and pivoted elimination are implemented directly
(rather than delegating to LAPACK) so that singularity is decided by one
explicit rule: the pivot selected by partial pivoting must satisfy
|pivot| >= PIVOT_TOLERANCE.

Inputs are never modified; every kernel works on a float64 copy and
returns a new array.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from mathlab.core.compute.tolerances import PIVOT_TOLERANCE
from mathlab.core.exceptions import DimensionError, SingularMatrixError
from mathlab.core.validation import check_2d, check_array, check_finite, check_square


def _as_matrix(A: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    M = check_array(A, name)
    check_2d(M, name)
    return M


def _select_pivot(M: NDArray, col: int, matrix_name: str) -> int:
    """
    Row index (>= col) holding the largest |entry| in column ``col``.

    Ties keep the earliest row.

    Raises:
        SingularMatrixError: If that entry is below PIVOT_TOLERANCE
    """
    pivot_row = col + int(np.argmax(np.abs(M[col:, col])))
    pivot_value = float(M[pivot_row, col])
    if abs(pivot_value) < PIVOT_TOLERANCE:
        raise SingularMatrixError(
            f"{matrix_name} is singular: pivot {pivot_value:.3e} in column {col} "
            f"is below tolerance {PIVOT_TOLERANCE:.0e}",
            matrix_name=matrix_name,
            pivot_index=col,
            pivot_value=pivot_value,
        )
    return pivot_row


def transpose(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """Transpose of a rectangular matrix (new array)."""
    M = _as_matrix(A, 'A')
    return np.ascontiguousarray(M.T)


def multiply(A: ArrayLike, B: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Matrix product A @ B.

    ``B`` may be 1D, in which case it is treated as a column vector and
    the result is 1D.

    Raises:
        DimensionError: If cols(A) != rows(B)
    """
    M = _as_matrix(A, 'A')
    N = check_array(B, 'B')
    if N.ndim not in (1, 2):
        raise DimensionError(f"B: expected 1D or 2D array, got {N.ndim}D with shape {N.shape}")
    if M.shape[1] != N.shape[0]:
        raise DimensionError(
            f"Dimension mismatch: A is {M.shape[0]}x{M.shape[1]}, "
            f"B has {N.shape[0]} rows (expected {M.shape[1]})"
        )
    return M @ N


def invert(A: ArrayLike, *, name: str = 'A') -> NDArray[np.floating[Any]]:
    """
    Inverse of a square matrix by Gauss-Jordan elimination.

    Algorithm:
        1. Form the augmented matrix [A | I]
        2. For each column i: pick the row in i..n-1 with the largest
           |entry| in column i, swap it into row i, divide row i by the
           pivot, and eliminate column i from every other row
        3. The right half is A⁻¹

    Args:
        A: Square matrix (array-like)
        name: Matrix name used in error messages

    Returns:
        The inverse as a new (n, n) array

    Raises:
        DimensionError: If A is not square
        SingularMatrixError: If a pivot falls below PIVOT_TOLERANCE
    """
    M = _as_matrix(A, name)
    check_square(M, name)
    check_finite(M, name)
    n = M.shape[0]

    aug = np.hstack([M, np.eye(n)])
    for i in range(n):
        p = _select_pivot(aug, i, name)
        if p != i:
            aug[[i, p]] = aug[[p, i]]
        aug[i, i:] /= aug[i, i]
        for k in range(n):
            if k != i:
                factor = aug[k, i]
                if factor != 0.0:
                    aug[k, i:] -= factor * aug[i, i:]

    return aug[:, n:].copy()


def solve(A: ArrayLike, B: ArrayLike, *, name: str = 'A') -> NDArray[np.floating[Any]]:
    """
    Solve A X = B by pivoted forward elimination and back substitution.

    Args:
        A: Square coefficient matrix
        B: Right-hand side, a vector (n,) or a matrix (n, m) of several
           right-hand sides
        name: Matrix name used in error messages

    Returns:
        X with the same shape as B

    Raises:
        DimensionError: If A is not square or B's row count differs
        SingularMatrixError: If a pivot falls below PIVOT_TOLERANCE
    """
    M = _as_matrix(A, name)
    check_square(M, name)
    check_finite(M, name)
    rhs = check_array(B, 'B')
    check_finite(rhs, 'B')

    vector_rhs = rhs.ndim == 1
    if vector_rhs:
        rhs = rhs.reshape(-1, 1)
    elif rhs.ndim != 2:
        raise DimensionError(f"B: expected 1D or 2D array, got {rhs.ndim}D with shape {rhs.shape}")

    n = M.shape[0]
    if rhs.shape[0] != n:
        raise DimensionError(
            f"Dimension mismatch: {name} is {n}x{n}, B has {rhs.shape[0]} rows"
        )

    aug = np.hstack([M, rhs])

    # Forward elimination to upper triangular form
    for i in range(n):
        p = _select_pivot(aug, i, name)
        if p != i:
            aug[[i, p]] = aug[[p, i]]
        for k in range(i + 1, n):
            factor = aug[k, i] / aug[i, i]
            if factor != 0.0:
                aug[k, i:] -= factor * aug[i, i:]

    # Back substitution
    U = aug[:, :n]
    Y = aug[:, n:]
    X = np.zeros_like(Y)
    for i in range(n - 1, -1, -1):
        X[i] = (Y[i] - U[i, i + 1:] @ X[i + 1:]) / U[i, i]

    return X.ravel() if vector_rhs else X
