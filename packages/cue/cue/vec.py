"""Vector math helpers operating on tuple[float, ...]."""
from __future__ import annotations

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    """Linear interpolation. ``t`` is clamped; t >= 1 returns ``b`` itself."""
    if t >= 1.0:
        return tuple(b)
    if t <= 0.0:
        return tuple(a)
    return tuple(ai + (bi - ai) * t for ai, bi in zip(a, b, strict=True))
