"""Tests for TweenSpec, Tween handles and engine integration."""

import pytest
from cue import Engine, InvalidDuration
from cue_tween import Tween, TweenSpec, TweenStep, advance, create_tween


class TestConstruction:
    """Duration and easing validation."""

    @pytest.mark.parametrize("duration", [0.0, -1.0, float("nan")])
    def test_non_positive_duration_rejected(self, duration):
        """Zero, negative and NaN durations raise InvalidDuration."""
        with pytest.raises(InvalidDuration):
            create_tween(0.0, 1.0, duration)

    def test_invalid_duration_is_value_error(self):
        """InvalidDuration can be caught as ValueError."""
        with pytest.raises(ValueError):
            TweenSpec(0.0, 1.0, 0.0)

    def test_unknown_easing_rejected(self):
        """An easing name that is not registered is rejected up front."""
        with pytest.raises(ValueError, match="Unknown easing"):
            create_tween(0.0, 1.0, 1.0, easing="bounce")

    def test_spec_is_immutable(self):
        """TweenSpec fields cannot be reassigned."""
        spec = TweenSpec(0.0, 1.0, 1.0)
        with pytest.raises(AttributeError):
            spec.end = 2.0  # type: ignore[misc]


class TestLinearInterpolation:
    """Linear value progression."""

    def test_intermediate_value(self):
        """Half the duration gives half the range."""
        tween = create_tween(0.0, 100.0, 1.0)
        step = advance(tween, 0.5)
        assert step == TweenStep(50.0, False)

    def test_reaches_end_exactly(self):
        """The last step reports the end value and done."""
        tween = create_tween(0.0, 1.0, 0.5)
        steps = [tween.advance(0.1) for _ in range(5)]
        assert steps[-1] == TweenStep(1.0, True)
        assert all(not s.done for s in steps[:-1])

    def test_float_accumulation_still_completes(self):
        """Ten 0.1s frames complete a 1s tween even though they sum to 0.999..."""
        tween = create_tween(1.0, 0.0, 1.0)
        for _ in range(9):
            assert not tween.advance(0.1).done
        assert tween.advance(0.1) == TweenStep(0.0, True)

    def test_descending_range(self):
        """A tween may run from a larger value to a smaller one."""
        tween = create_tween(1.0, 0.0, 2.0)
        assert tween.advance(0.5).value == pytest.approx(0.75)

    def test_zero_delta_keeps_value(self):
        """Advancing by zero leaves the value unchanged."""
        tween = create_tween(0.0, 10.0, 1.0)
        tween.advance(0.3)
        before = tween.value
        assert tween.advance(0.0).value == before


class TestCompletion:
    """Idempotent terminal state."""

    @pytest.mark.parametrize(
        "duration, deltas",
        [
            (1.0, [2.0]),
            (1.0, [0.3, 0.3, 0.3, 0.3]),
            (0.25, [0.1, 0.1, 0.1]),
            (3.0, [1.0, 1.0, 1.0]),
        ],
    )
    def test_end_reached_and_held(self, duration, deltas):
        """Once done, further advances keep returning the end value."""
        tween = create_tween(-2.0, 7.5, duration)
        for dt in deltas:
            tween.advance(dt)
        for _ in range(5):
            assert tween.advance(0.5) == TweenStep(7.5, True)

    def test_overshoot_frame_clamps(self):
        """A frame longer than the tween clamps progress to 1."""
        tween = create_tween(0.0, 1.0, 1.0)
        step = tween.advance(10.0)
        assert step.value == 1.0
        assert tween.progress == 1.0

    def test_elapsed_stops_accumulating(self):
        """Elapsed time stops growing once the tween is done."""
        tween = create_tween(0.0, 1.0, 1.0)
        tween.advance(1.5)
        tween.advance(1.5)
        assert tween.elapsed == 1.5

    def test_negative_delta_rejected(self):
        """Negative deltas raise ValueError."""
        tween = create_tween(0.0, 1.0, 1.0)
        with pytest.raises(ValueError):
            tween.advance(-0.1)


class TestEasedTween:
    """Tweens with a non-linear curve."""

    def test_ease_in_midpoint(self):
        """Ease-in at half time gives a quarter of the range."""
        tween = Tween(TweenSpec(0.0, 100.0, 1.0, easing="ease_in"))
        assert tween.advance(0.5).value == pytest.approx(25.0)

    def test_eased_end_is_exact(self):
        """Eased tweens still finish on the exact end value."""
        tween = create_tween(0.0, 3.0, 1.0, easing="ease_in_out")
        assert tween.advance(1.0).value == 3.0


class TestEngineIntegration:
    """Tweens advanced by engine ticks."""

    def test_tween_driven_by_engine_deltas(self):
        """A system applying tween values each tick ends on the end value."""
        engine = Engine(tps=20)
        tween = create_tween(0.0, 1.0, 0.5)
        done_at = []

        def fade_system(stage, ctx):
            step = tween.advance(ctx.dt)
            stage.set_opacity("overlay", step.value)
            if step.done and not done_at:
                done_at.append(ctx.tick_number)

        engine.add_system(fade_system)
        engine.run(15)
        assert engine.stage.node("overlay").opacity == 1.0
        assert done_at == [10]
