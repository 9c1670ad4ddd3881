"""Regression backends."""

from mathlab.regression.backends.cpu import CPUClosedFormBackend, CPUNormalEquationsBackend

__all__ = [
    "CPUClosedFormBackend",
    "CPUNormalEquationsBackend",
]
