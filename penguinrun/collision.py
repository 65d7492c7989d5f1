"""Axis-aligned box contacts between elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Side(IntEnum):
    """Edge of the moving box that touches the other box."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    NONE = 4


@dataclass
class Collision:
    """One touching edge and the length of the contact along it."""

    side: Side
    distance: float
    percentage: int = 0


def _overlap(a1: float, a2: float, b1: float, b2: float) -> float | None:
    if a1 <= b1 and a2 >= b2:
        return b2 - b1
    if a1 >= b1 and a2 <= b2:
        return a2 - a1
    if b1 < a1 < b2:
        return b2 - a1
    if b1 < a2 < b2:
        return a2 - b1
    return None


def collide(source: Any, other: Any) -> list[Collision]:
    """Return every edge of ``source`` that lies on ``other``.

    Each collision's percentage is its share of the total contact length.
    """
    x1, y1 = source.x, source.y
    x2, y2 = x1 + source.w, y1 + source.h
    ox1, oy1 = other.x, other.y
    ox2, oy2 = ox1 + other.w, oy1 + other.h

    checks = (
        (Side.UP, oy1 <= y1 <= oy2, (x1, x2, ox1, ox2)),
        (Side.DOWN, oy1 <= y2 <= oy2, (x1, x2, ox1, ox2)),
        (Side.LEFT, ox1 <= x1 <= ox2, (y1, y2, oy1, oy2)),
        (Side.RIGHT, ox1 <= x2 <= ox2, (y1, y2, oy1, oy2)),
    )
    found: list[Collision] = []
    for side, edge_inside, spans in checks:
        if not edge_inside:
            continue
        distance = _overlap(*spans)
        if distance is not None:
            found.append(Collision(side, distance))

    total = sum(c.distance for c in found)
    for c in found:
        c.percentage = int(c.distance / total * 100.0) if total else 0
    return found


def max_collisions(source: Any, other: Any) -> list[Collision]:
    """Return the collisions with the longest contact, in edge order."""
    found = collide(source, other)
    if not found:
        return []
    longest = max(c.distance for c in found)
    return [c for c in found if c.distance == longest]