"""Tests for clock advancement, TickContext generation and time sources."""

import pytest
from cue.clock import Clock, FixedTimeSource, MonotonicTimeSource
from cue.types import TickContext


def _noop() -> None:
    pass


def test_clock_initialization():
    """Clock starts at tick 0 with dt = 1 / tps."""
    clock = Clock(tps=20)
    assert clock.tps == 20
    assert clock.tick_number == 0
    assert clock.elapsed == 0.0
    assert abs(clock.dt - 0.05) < 1e-9


def test_clock_rejects_non_positive_tps():
    """tps must be a positive integer."""
    with pytest.raises(ValueError):
        Clock(tps=0)
    with pytest.raises(ValueError):
        Clock(tps=-5)


def test_advance_without_delta_uses_nominal_dt():
    """advance() with no delta steps by 1 / tps."""
    clock = Clock(tps=10)
    assert clock.advance() == 1
    assert clock.last_dt == pytest.approx(0.1)
    assert clock.elapsed == pytest.approx(0.1)


def test_advance_accumulates_variable_deltas():
    """Host-supplied deltas are summed into elapsed."""
    clock = Clock(tps=60)
    clock.advance(0.016)
    clock.advance(0.034)
    clock.advance(0.0)
    assert clock.tick_number == 3
    assert clock.elapsed == pytest.approx(0.05)
    assert clock.last_dt == 0.0


def test_advance_rejects_negative_delta():
    """Negative deltas raise and leave the tick counter alone."""
    clock = Clock(tps=60)
    with pytest.raises(ValueError):
        clock.advance(-0.01)
    assert clock.tick_number == 0


def test_context_reflects_last_tick():
    """The context carries the latest tick number, delta and elapsed time."""
    clock = Clock(tps=20)
    clock.advance(0.25)
    ctx = clock.context(_noop)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt == 0.25
    assert ctx.elapsed == 0.25
    assert ctx.request_stop is _noop


def test_context_is_frozen():
    """TickContext fields cannot be reassigned."""
    ctx = Clock(tps=20).context(_noop)
    with pytest.raises(AttributeError):
        ctx.dt = 1.0  # type: ignore[misc]


class TestTimeSources:
    """Test fixed and wall-clock delta sources."""

    def test_fixed_source_repeats_delta(self):
        """A fixed source reports the same delta on every call."""
        source = FixedTimeSource(0.1)
        assert [source.delta_time() for _ in range(3)] == [0.1, 0.1, 0.1]

    def test_fixed_source_rejects_negative(self):
        """A negative fixed delta is rejected at construction."""
        with pytest.raises(ValueError):
            FixedTimeSource(-1.0)

    def test_monotonic_source_first_call_is_zero(self):
        """The first reading has no previous frame to diff against."""
        readings = iter([10.0, 10.5, 10.75])
        source = MonotonicTimeSource(clock=lambda: next(readings))
        assert source.delta_time() == 0.0
        assert source.delta_time() == pytest.approx(0.5)
        assert source.delta_time() == pytest.approx(0.25)

    def test_monotonic_source_never_negative(self):
        """A clock that goes backwards yields 0.0 instead of a negative delta."""
        readings = iter([5.0, 4.0])
        source = MonotonicTimeSource(clock=lambda: next(readings))
        source.delta_time()
        assert source.delta_time() == 0.0
