"""Integration tests: panel, slideshow and reveal systems on a running engine."""

from cue import Engine
from cue_panels import (
    PanelOrchestrator,
    RevealLatch,
    Slideshow,
    SlideshowConfig,
    TransitionConfig,
    TransitionState,
    make_panel_system,
    make_reveal_system,
    make_slideshow_system,
)
from cue_signal import SignalBus, make_signal_system


class _Keys:
    """Scripted key presses: pressed on the listed tick numbers only."""

    def __init__(self, engine: Engine, ticks: set[int]) -> None:
        self._engine = engine
        self._ticks = ticks

    def __call__(self) -> bool:
        return self._engine.clock.tick_number in self._ticks


class TestPanelSystem:
    """Test panel transitions driven by an engine."""

    def test_trigger_runs_transition(self):
        """A polled trigger runs one full transition."""
        engine = Engine(tps=10)
        stage = engine.stage
        orch = PanelOrchestrator(
            ["p0", "p1", "p2"], stage, TransitionConfig(), overlay="static"
        )
        engine.add_system(make_panel_system(orch, _Keys(engine, {1})))
        engine.run(40)
        assert orch.state is TransitionState.IDLE
        assert orch.current_index == 1
        assert stage.node("p1").active is True

    def test_rapid_presses_do_not_queue(self):
        """Presses on every tick of a transition still yield one advance."""
        engine = Engine(tps=10)
        orch = PanelOrchestrator(["p0", "p1", "p2"], engine.stage, overlay="static")
        engine.add_system(make_panel_system(orch, _Keys(engine, set(range(1, 31)))))
        engine.run(31)
        assert orch.current_index == 1
        assert orch.state is TransitionState.IDLE
        # Nothing pending: further idle ticks change nothing.
        engine.run(10)
        assert orch.current_index == 1

    def test_without_trigger_only_ticks(self):
        """Without a trigger predicate the system only ticks."""
        engine = Engine(tps=10)
        orch = PanelOrchestrator(["a", "b"], engine.stage)
        engine.add_system(make_panel_system(orch))
        orch.trigger_transition()
        engine.run(40)
        assert orch.current_index == 1


class TestRevealAndSlideshow:
    """Test the reveal key starting the slideshow."""

    def test_reveal_starts_slideshow(self):
        """Revealing starts the slideshow and fires the animation trigger once."""
        engine = Engine(tps=10)
        stage = engine.stage
        bus = SignalBus()
        latch = RevealLatch(stage, "canvas", light="lamp", animated="figure", bus=bus)
        show = Slideshow("frame", ["s0", "s1"], stage, SlideshowConfig(1.0, 0.5))
        triggers = []
        bus.subscribe("animation_trigger", lambda n, d: triggers.append(d["target"]))

        engine.add_system(make_reveal_system(latch, _Keys(engine, {2, 3}), on_reveal=show.start))
        engine.add_system(make_slideshow_system(show))
        engine.add_system(make_signal_system(bus))

        engine.run(1)
        assert not show.running
        engine.run(10)
        assert latch.revealed
        assert show.running
        assert stage.node("frame").image == "s0"
        assert triggers == ["figure"]
