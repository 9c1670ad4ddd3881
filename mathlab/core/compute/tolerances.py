"""
Numerical thresholds shared across MathLab.

Every fixed cut-off used by the kernels, estimators and samplers lives here
so tests and callers refer to one definition.
"""

# Gauss-Jordan / elimination: |pivot| below this is treated as singular
PIVOT_TOLERANCE = 1e-12

# Simple OLS: centered sum of squares of the regressor below this is degenerate
DEGENERATE_TOLERANCE = 1e-9

# Floor on chi/df in the Student-t sampler. A numerical safety clamp,
# not part of the textbook construction.
STUDENT_T_CHI_FLOOR = 0.1

# Illustrative unit-root rejection threshold (not a Dickey-Fuller table lookup)
ADF_CRITICAL_VALUE = -3.0

