"""
Unit-root test solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mathlab.core.result import Result


@dataclass(frozen=True)
class ADFParams:
    """
    Parameter payload for the ADF-style unit-root test.

    statistic is the t-statistic on the lagged level. When a lenient test
    failed it is the 0.0 sentinel and gamma is NaN.
    """
    statistic: float
    gamma: float
    lags: int
    n_obs: int
    critical_value: float


@dataclass
class ADFSolution:
    """User-facing unit-root test results."""
    _result: Result[ADFParams]

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def gamma(self) -> float:
        """Coefficient on the lagged level y_{t-1}."""
        return self._result.params.gamma

    @property
    def lags(self) -> int:
        return self._result.params.lags

    @property
    def n_obs(self) -> int:
        """Observations used in the test regression."""
        return self._result.params.n_obs

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def failed(self) -> bool:
        """True when a lenient test substituted the sentinel statistic."""
        return bool(self._result.info.get('failed', False))

    @property
    def is_stationary(self) -> bool:
        """Reject the unit root: statistic below the critical value."""
        return self.statistic < self.critical_value

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        verdict = "stationary (unit root rejected)" if self.is_stationary else "unit root not rejected"
        lines = [
            "Augmented Dickey-Fuller style test",
            "=" * 60,
            f"Statistic: {self.statistic:.4f}   Critical value: {self.critical_value:.2f}",
            f"Lags: {self.lags}   Observations: {self.n_obs}",
            f"Result: {verdict}",
        ]
        if self.failed:
            lines.append("Note: test regression failed; statistic is the 0.0 sentinel")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"ADFSolution(statistic={self.statistic:.4f}, lags={self.lags}, failed={self.failed})"
