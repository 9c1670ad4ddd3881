"""
Wall-clock timing for estimators and lab runs.

Every Result carries a timing mapping: 'total_seconds' plus one entry per
named section (e.g. 'draws', 'estimation').
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total elapsed time plus accumulated named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('draws'):
            path = simulate_path(rng)
        with timer.section('estimation'):
            fit = ols(path[:-1], np.diff(path))
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'draws': ..., 'estimation': ...}

    A section entered twice accumulates; sections are not required to
    partition the total.
    """

    def __init__(self):
        self._began: float | None = None
        self._total: float | None = None
        self._sections: dict[str, float] = {}

    @property
    def running(self) -> bool:
        return self._began is not None and self._total is None

    def start(self) -> None:
        self._began = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section ``name``."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        Timing mapping for a Result.

        Raises:
            RuntimeError: If the timer was never stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}

