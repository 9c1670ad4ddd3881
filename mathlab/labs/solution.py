"""
Lab result wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from mathlab.core.result import Result
from mathlab.labs._common import LabId, LabOutput


@dataclass
class LabResult:
    """
    User-facing result of a lab simulation.

    Ephemeral: every simulate() call produces a fresh LabResult.
    """
    _result: Result[LabOutput]

    @property
    def lab(self) -> LabId:
        return self._result.params.lab

    @property
    def series(self) -> dict[str, NDArray[np.floating[Any]]]:
        return self._result.params.series

    @property
    def statistics(self) -> dict[str, float]:
        return self._result.params.statistics

    @property
    def parameters(self) -> Any:
        return self._result.params.parameters

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        lines = [
            f"{self.lab.value} lab",
            "=" * 40,
        ]
        for name, values in self.series.items():
            lines.append(f"series {name}: {values.shape[0]} points")
        lines.append("-" * 40)
        for name, value in self.statistics.items():
            lines.append(f"{name:<24} {value: .6f}")
        for w in self.warnings:
            lines.append(f"warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LabResult(lab={self.lab.value}, series={sorted(self.series)}, "
            f"statistics={len(self.statistics)})"
        )
