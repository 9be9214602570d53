"""Tests for RevealLatch."""

from cue import Stage
from cue_panels import RevealLatch
from cue_signal import SignalBus


def test_construction_hides_canvas_and_light():
    """Building the latch hides the canvas and the light."""
    stage = Stage()
    RevealLatch(stage, "canvas", light="lamp")
    assert stage.node("canvas").active is False
    assert stage.node("lamp").active is False


def test_reveal_shows_once():
    """reveal() shows the canvas and the light."""
    stage = Stage()
    latch = RevealLatch(stage, "canvas", light="lamp")
    assert latch.reveal() is True
    assert latch.revealed
    assert stage.node("canvas").active is True
    assert stage.node("lamp").active is True


def test_second_reveal_is_noop():
    """A second reveal returns False and writes nothing."""
    stage = Stage()
    latch = RevealLatch(stage, "canvas")
    latch.reveal()
    stage.set_active("canvas", False)
    assert latch.reveal() is False
    assert stage.node("canvas").active is False


def test_animation_trigger_published():
    """The animation trigger is published on the first reveal only."""
    stage = Stage()
    bus = SignalBus()
    received = []
    bus.subscribe("animation_trigger", lambda n, d: received.append(d))
    latch = RevealLatch(stage, "canvas", animated="figure", trigger_name="Wake", bus=bus)
    latch.reveal()
    latch.reveal()
    bus.flush()
    assert received == [{"target": "figure", "trigger": "Wake"}]


def test_without_light():
    """Without a light only the canvas is touched."""
    stage = Stage()
    RevealLatch(stage, "canvas").reveal()
    assert stage.targets() == ["canvas"]
