"""Stage - in-memory record of every target's display state."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from cue.types import Target, Vec3

# Hook callback signature: (stage, target, attribute name, new value).
HookCallback = Callable[["Stage", Target, str, Any], None]


@dataclass
class Node:
    """Display state of one target as last written by the engines."""

    opacity: float = 1.0
    active: bool = True
    text: str = ""
    image: Target | None = None
    interactable: bool = True
    blocks_input: bool = True
    position: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)


@dataclass
class SoundEvent:
    tick_number: int
    clip: Target


class Stage:
    """Implements the display, position and sound sinks without a renderer.

    Nodes are created on first write. Renderers read them back with
    :meth:`node`; tests inspect them directly.

    Only the latest ``max_sounds`` one-shots are kept; hosts that mix audio
    drain them each tick with :meth:`clear_sounds`.
    """

    def __init__(self, max_sounds: int = 256) -> None:
        if max_sounds <= 0:
            raise ValueError(f"max_sounds must be > 0, got {max_sounds}")
        self._nodes: dict[Target, Node] = {}
        self._order: list[Target] = []
        self._sounds: deque[SoundEvent] = deque(maxlen=max_sounds)
        self._tick_number: int = 0
        self._on_change: list[HookCallback] = []

    # --- Nodes ---

    def add(self, target: Target, **initial: Any) -> Node:
        """Create (or update) a node with explicit initial values."""
        node = self._ensure(target)
        for name, value in initial.items():
            if not hasattr(node, name):
                raise TypeError(f"Node has no attribute {name!r}")
            setattr(node, name, value)
        return node

    def node(self, target: Target) -> Node:
        """Return the node for ``target``. Raises KeyError if never written."""
        try:
            return self._nodes[target]
        except KeyError:
            raise KeyError(f"Stage has no node {target!r}") from None

    def has(self, target: Target) -> bool:
        return target in self._nodes

    def targets(self) -> list[Target]:
        """All known targets in creation order."""
        return list(self._order)

    def on_change(self, callback: HookCallback) -> None:
        self._on_change.append(callback)

    # --- DisplaySink ---

    def set_opacity(self, target: Target, value: float) -> None:
        self._write(target, "opacity", value)

    def set_active(self, target: Target, active: bool) -> None:
        self._write(target, "active", active)

    def set_text(self, target: Target, text: str) -> None:
        self._write(target, "text", text)

    def set_interactable(
        self, target: Target, interactable: bool, blocks_input: bool
    ) -> None:
        self._write(target, "interactable", interactable)
        self._write(target, "blocks_input", blocks_input)

    def set_image(self, target: Target, image: Target) -> None:
        self._write(target, "image", image)

    # --- PositionSink ---

    def set_position(self, target: Target, position: Vec3) -> None:
        self._write(target, "position", tuple(position))

    def set_scale(self, target: Target, scale: Vec3) -> None:
        self._write(target, "scale", tuple(scale))

    # --- SoundSink ---

    def play_one_shot(self, clip: Target) -> None:
        self._sounds.append(SoundEvent(tick_number=self._tick_number, clip=clip))

    @property
    def sounds(self) -> list[SoundEvent]:
        return list(self._sounds)

    def clear_sounds(self) -> None:
        self._sounds.clear()

    # --- Internal ---

    def _sync_tick(self, tick_number: int) -> None:
        """Called by the engine so sound events carry the tick they fired on."""
        self._tick_number = tick_number

    def _ensure(self, target: Target) -> Node:
        node = self._nodes.get(target)
        if node is None:
            node = Node()
            self._nodes[target] = node
            self._order.append(target)
        return node

    def _write(self, target: Target, name: str, value: Any) -> None:
        node = self._ensure(target)
        setattr(node, name, value)
        for cb in self._on_change:
            cb(self, target, name, value)
