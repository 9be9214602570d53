"""Tests for BlinkProcess and make_typewriter_system."""

from cue import Engine, Stage
from cue_typewriter import BlinkProcess, Typewriter, TypewriterConfig, make_typewriter_system


class TestBlinkProcess:
    """Test the cancellable cursor toggle."""

    def test_start_hides_cursor_immediately(self):
        """The first flip happens on start, leaving the text without a cursor."""
        stage = Stage()
        blink = BlinkProcess(stage, "label", rate=0.5)
        blink.start("hi")
        assert blink.cursor_visible is False
        assert blink.toggles == 1
        assert stage.node("label").text == "hi"

    def test_next_toggle_after_one_interval(self):
        """After the opening flip, the cursor toggles every rate seconds."""
        stage = Stage()
        blink = BlinkProcess(stage, "label", rate=0.5)
        blink.start("hi")
        assert blink.tick(0.25) == 0
        assert blink.cursor_visible is False
        assert blink.tick(0.25) == 1
        assert blink.cursor_visible is True
        assert stage.node("label").text == "hi|"
        blink.tick(0.5)
        assert stage.node("label").text == "hi"

    def test_cancel_stops_toggles(self):
        """A cancelled process ignores further ticks."""
        stage = Stage()
        blink = BlinkProcess(stage, "label", rate=0.1)
        blink.start("hi")
        blink.tick(0.1)
        assert blink.cancel() is True
        assert blink.running is False
        assert blink.tick(5.0) == 0
        assert blink.toggles == 2

    def test_cancel_not_started_is_noop(self):
        """Cancelling before start returns False."""
        blink = BlinkProcess(Stage(), "label", rate=0.1)
        assert blink.cancel() is False

    def test_cancel_twice_is_noop(self):
        """Cancelling an already cancelled process returns False."""
        blink = BlinkProcess(Stage(), "label", rate=0.1)
        blink.start("x")
        blink.cancel()
        assert blink.cancel() is False

    def test_restart_resets_cursor(self):
        """Each start flips from a visible cursor, whatever the last run ended on."""
        stage = Stage()
        blink = BlinkProcess(stage, "label", rate=0.1, cursor="_")
        blink.start("a")
        blink.tick(0.1)
        assert stage.node("label").text == "a_"
        blink.cancel()
        blink.start("b")
        assert blink.cursor_visible is False
        assert stage.node("label").text == "b"
        blink.tick(0.1)
        assert stage.node("label").text == "b_"


class TestTypewriterSystem:
    """Test the typewriter driven by engine ticks."""

    def test_engine_drives_typewriter(self):
        """One character per tick, with one key sound per step."""
        engine = Engine(tps=20)
        stage = engine.stage
        tw = Typewriter(
            ["hello"],
            stage,
            "label",
            sound=stage,
            clip="key",
            config=TypewriterConfig(start_delay=0.0, type_speed=0.05),
        )
        tw.start()
        engine.add_system(make_typewriter_system(tw))
        engine.run(6)
        assert stage.node("label").text == "hello|"
        assert len(stage.sounds) == 6
        assert [e.tick_number for e in stage.sounds] == [1, 2, 3, 4, 5, 6]
