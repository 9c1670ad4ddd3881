"""
Tests for the Result[P] envelope and Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
    - Timer section accumulation
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from mathlab.core.compute.timing import Timer
from mathlab.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_default_warnings_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("ADF test regression failed, statistic set to 0.0",),
        )
        assert result.has_warning("regression failed")
        assert not result.has_warning("singular")


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        assert not timer.running
        timer.start()
        assert timer.running
        with timer.section("a"):
            pass
        with timer.section("a"):
            pass
        with timer.section("b"):
            pass
        timer.stop()
        assert not timer.running
        out = timer.result()
        assert set(out) == {"total_seconds", "a", "b"}
        assert out["total_seconds"] >= 0.0

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()
