"""
Lab base class.

Every lab is a small state machine over a frozen parameter dataclass:

    IDLE --configure()--> CONFIGURED --simulate()--> RENDERED
                                ^                        |
                                +------configure()-------+

simulate() may be called repeatedly; each call continues the session's
random stream rather than reseeding it. Calling simulate() while IDLE
configures the defaults first.

Conditions a lab raises through _alert() are recorded in the result's
warnings and also emitted as RuntimeWarning at the caller of simulate().
"""

from __future__ import annotations

import dataclasses
import warnings
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

import numpy as np
from numpy.typing import NDArray

from mathlab.core.compute.timing import Timer
from mathlab.core.exceptions import ValidationError
from mathlab.core.result import Result
from mathlab.labs._common import LabId, LabOutput, LabState
from mathlab.labs.solution import LabResult
from mathlab.rng.sfc32 import SFC32

P = TypeVar('P')

Series = dict[str, NDArray[np.floating[Any]]]
Statistics = dict[str, float]


class Lab(ABC, Generic[P]):
    """
    Base class for lab simulators.

    Subclasses set ``lab_id`` and ``params_type`` and implement ``_run``.
    The generator is borrowed, not owned: the lab mutates it on every
    draw and never reseeds it.
    """

    lab_id: ClassVar[LabId]
    params_type: ClassVar[type]

    def __init__(self, rng: SFC32):
        self._rng = rng
        self._params: P = self.params_type()
        self._state = LabState.IDLE
        self._last_result: LabResult | None = None
        self._alerts: list[str] = []

    @property
    def rng(self) -> SFC32:
        return self._rng

    @property
    def params(self) -> P:
        return self._params

    @property
    def state(self) -> LabState:
        return self._state

    @property
    def last_result(self) -> LabResult | None:
        """Result of the most recent simulate(), or None."""
        return self._last_result

    def bind(self, rng: SFC32) -> None:
        """Point the lab at a different generator (used on session reseed)."""
        self._rng = rng

    def configure(self, **overrides: Any) -> P:
        """
        Store parameters and move to CONFIGURED.

        Unspecified fields keep their current values.

        Raises:
            ValidationError: Unknown parameter name or invalid value
        """
        known = {f.name for f in dataclasses.fields(self.params_type)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValidationError(
                f"{self.lab_id.value}: unknown parameter(s) {unknown}; "
                f"expected a subset of {sorted(known)}"
            )
        self._params = dataclasses.replace(self._params, **overrides)
        self._state = LabState.CONFIGURED
        return self._params

    def simulate(self) -> LabResult:
        """
        Draw a fresh dataset and move to RENDERED.

        Returns:
            LabResult with series, statistics and any warnings
        """
        return self._simulate(warn_stacklevel=3)

    def _simulate(self, *, warn_stacklevel: int) -> LabResult:
        # warn_stacklevel counts frames from here to the user's call site
        state_before = self._state
        if state_before is LabState.IDLE:
            self.configure()

        self._alerts = []
        timer = Timer()
        timer.start()
        series, statistics, notes = self._run(self._params, timer)
        timer.stop()

        for msg in self._alerts:
            warnings.warn(msg, RuntimeWarning, stacklevel=warn_stacklevel)

        output = LabOutput(
            lab=self.lab_id,
            series=series,
            statistics=statistics,
            parameters=self._params,
        )
        result = Result(
            params=output,
            info={'lab': self.lab_id.value, 'state_before': state_before.value},
            timing=timer.result(),
            backend_name='cpu_sfc32',
            warnings=tuple(notes) + tuple(self._alerts),
        )
        self._last_result = LabResult(_result=result)
        self._state = LabState.RENDERED
        return self._last_result

    def _alert(self, msg: str) -> None:
        """Record a condition the caller should see as a RuntimeWarning."""
        self._alerts.append(msg)

    @abstractmethod
    def _run(self, params: P, timer: Timer) -> tuple[Series, Statistics, list[str]]:
        """Generate series and statistics for ``params``."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state.value}, params={self._params!r})"
