"""
Linear algebra kernel.

Dense, stateless operations on in-memory matrices:
    transpose(A)
    multiply(A, B)   - DimensionError on cols(A) != rows(B)
    invert(A)        - Gauss-Jordan with partial pivoting
    solve(A, B)      - pivoted elimination + back substitution

invert and solve raise SingularMatrixError when a pivot is below
PIVOT_TOLERANCE (1e-12).
"""

from mathlab.linalg.kernels import transpose, multiply, invert, solve

__all__ = [
    "transpose",
    "multiply",
    "invert",
    "solve",
]
