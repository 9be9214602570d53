"""Scene wiring: every engine bound to one stage and one signal bus."""
from __future__ import annotations

import logging

from cue import Engine, Stage
from cue_hover import FixedViewer, HoverMoveController, make_hover_system
from cue_panels import (
    PanelOrchestrator,
    RevealLatch,
    Slideshow,
    SlideshowConfig,
    TransitionConfig,
    make_panel_system,
    make_reveal_system,
    make_slideshow_system,
)
from cue_schedule import Scheduler, make_schedule_system
from cue_signal import ANY, SignalBus, make_signal_system
from cue_typewriter import Typewriter, TypewriterConfig, make_typewriter_system

from game.input import PygameInput
from ui.constants import PANEL_COLORS, SLIDE_COLORS, TPS

logger = logging.getLogger(__name__)

PANELS = list(PANEL_COLORS)
SLIDES = list(SLIDE_COLORS)
LINES = [
    "The house was quiet when you arrived.",
    "Someone left the study lamp burning.",
    "Press E to see what they were looking at.",
]

CUBE = "keepsake"
CUBE_ORIGIN = (1.6, -0.6, 3.0)
VIEWER = FixedViewer(position=(0.0, 0.0, -5.0), forward=(0.0, 0.0, 1.0))

AUTO_ADVANCE_SECONDS = 8.0


class Scene:
    """Holds the engine, the stage it draws from, and every scene script."""

    def __init__(self, controls: PygameInput) -> None:
        self.engine = Engine(tps=TPS)
        self.stage: Stage = self.engine.stage
        self.bus = SignalBus()
        self.scheduler = Scheduler()
        self.controls = controls

        self.auto_advance = False
        self.transitions = 0
        self.slides = 0
        self.last_signal = ""

        self.panels = PanelOrchestrator(
            PANELS,
            self.stage,
            TransitionConfig(transition_duration=0.8, static_transition_duration=0.3),
            overlay="static",
            sound=self.stage,
            press_clip="button_click",
            bus=self.bus,
        )
        self.slideshow = Slideshow(
            "canvas_image",
            SLIDES,
            self.stage,
            SlideshowConfig(display_time=2.5, fade_duration=0.4),
            bus=self.bus,
        )
        self.reveal = RevealLatch(
            self.stage, "canvas", light="lamp", animated="figure", bus=self.bus
        )
        self.typewriter = Typewriter(
            LINES,
            self.stage,
            "caption",
            sound=self.stage,
            clip="key_tick",
            config=TypewriterConfig(start_delay=0.5),
            bus=self.bus,
        )
        self.stage.add(CUBE, position=CUBE_ORIGIN)
        self.hover = HoverMoveController(CUBE, self.stage, VIEWER, CUBE_ORIGIN, bus=self.bus)

        self.bus.subscribe("transition_finished", self._on_transition_finished)
        self.bus.subscribe("slide_advanced", self._on_slide_advanced)
        self.bus.subscribe(ANY, self._on_any)

        # Wire systems (order matters)
        self.engine.add_system(make_panel_system(self.panels, controls.is_trigger_pressed))
        self.engine.add_system(
            make_reveal_system(self.reveal, controls.is_reveal_pressed, on_reveal=self.slideshow.start)
        )
        self.engine.add_system(make_slideshow_system(self.slideshow))
        self.engine.add_system(make_typewriter_system(self.typewriter))
        self.engine.add_system(make_hover_system(self.hover, controls.pointer_for(CUBE)))
        self.engine.add_system(make_schedule_system(self.scheduler))
        self.engine.add_system(self._sound_system)
        self.engine.add_system(make_signal_system(self.bus))

        self.typewriter.start()

    def _on_transition_finished(self, signal: str, data: dict) -> None:
        self.transitions += 1

    def _on_slide_advanced(self, signal: str, data: dict) -> None:
        self.slides += 1

    def _on_any(self, signal: str, data: dict) -> None:
        self.last_signal = signal

    def _sound_system(self, stage, ctx) -> None:
        """Stand-in mixer: log one-shots and drop them."""
        for event in stage.sounds:
            if event.clip != "key_tick":
                logger.info("tick %d: play %s", event.tick_number, event.clip)
        stage.clear_sounds()

    def toggle_auto_advance(self) -> None:
        self.auto_advance = not self.auto_advance
        if self.auto_advance:
            self.scheduler.every(
                "auto_advance",
                AUTO_ADVANCE_SECONDS,
                lambda ctx, name: self.panels.trigger_transition(),
            )
        else:
            self.scheduler.cancel("auto_advance")
