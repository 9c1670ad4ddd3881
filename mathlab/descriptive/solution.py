"""
Descriptive statistics solution types.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any

from mathlab.core.result import Result


@dataclass(frozen=True)
class DescriptiveParams:
    """Parameter payload for describe()."""
    n: int
    mean: float
    variance: float
    sd: float
    skewness: float
    kurtosis: float
    minimum: float
    maximum: float


@dataclass
class DescriptiveSolution:
    """User-facing descriptive statistics."""
    _result: Result[DescriptiveParams]

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def skewness(self) -> float:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        return self._result.params.kurtosis

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    def to_dict(self) -> dict[str, Any]:
        """Statistics as a plain mapping."""
        return asdict(self._result.params)

    def summary(self) -> str:
        p = self._result.params
        return "\n".join([
            "Descriptive Statistics",
            "=" * 40,
            f"n:        {p.n}",
            f"mean:     {p.mean:.6f}",
            f"variance: {p.variance:.6f}",
            f"sd:       {p.sd:.6f}",
            f"skewness: {p.skewness:.6f}",
            f"kurtosis: {p.kurtosis:.6f}",
            f"min/max:  {p.minimum:.6f} / {p.maximum:.6f}",
        ])

    def __repr__(self) -> str:
        return f"DescriptiveSolution(n={self.n}, mean={self.mean:.4f}, sd={self.sd:.4f})"
