"""Animated title-screen pieces: a particle burst and a button menu."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Sequence

POINT_SIZE = 4
POINT_COLOR = (255, 255, 255)
POINT_SPEED = 5
POINTS_PER_FRAME = 2
START_STOPPER = 40

BUTTON_W = 200
BUTTON_H = 50
BUTTON_GAP = 2
BUTTON_COLOR = (60, 148, 255)
DEFAULT_TITLES = ("Boton 1", "Boton 2", "Boton 3", "Boton 4")


class Point:
    """A particle flying away from where it was born, speeding up as it goes."""

    def __init__(self, x: int, y: int, angle: int, speed: int) -> None:
        self.x = x
        self.y = y
        self.angle = angle
        self.speed = speed
        self.stopper = START_STOPPER
        self.loops = 0

    def update(self) -> None:
        """Move one step; the first step is twice as long."""
        mult = 2 if self.loops == 0 else 1
        radians = self.angle * math.pi / 180
        self.x = int(self.x + mult * math.sin(radians) * self.speed)
        self.y = int(self.y + mult * math.cos(radians) * self.speed)
        if self.loops % self.stopper == 0:
            self.speed += 1
            if self.stopper > 1:
                self.stopper //= 2
        self.loops += 1

    def inside(self, width: int, height: int) -> bool:
        """Whether the point is strictly within a screen of the given size."""
        return 0 < self.x < width and 0 < self.y < height


class ParticleField:
    """Spawns particles at the screen centre and drops those that leave it."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.points: list[Point] = []
        self.loops = 0

    def update(self) -> None:
        """Add new particles, move them and remove those off screen.

        A particle that follows one that was just removed is kept but not
        moved this frame.
        """
        for _ in range(POINTS_PER_FRAME):
            self.points.append(
                Point(self.width // 2, self.height // 2, self.rng.randrange(361), POINT_SPEED)
            )
        kept: list[Point] = []
        pending = iter(self.points)
        for point in pending:
            point.update()
            if point.inside(self.width, self.height):
                kept.append(point)
            else:
                skipped = next(pending, None)
                if skipped is not None:
                    kept.append(skipped)
        self.points = kept
        self.loops += 1


@dataclass
class MenuButton:
    """A rectangular menu entry."""

    x: int
    y: int
    w: int
    h: int
    title: str
    color: tuple[int, int, int] = BUTTON_COLOR
    texture: Any = None

    def hover(self, x: int, y: int) -> bool:
        """Whether (x, y) lies strictly inside the button."""
        return self.x < x < self.x + self.w and self.y < y < self.y + self.h


@dataclass
class Menu:
    """A column of buttons centred on the screen."""

    width: int
    height: int
    buttons: list[MenuButton] = field(default_factory=list)

    def start(self, titles: Sequence[str] = DEFAULT_TITLES) -> list[MenuButton]:
        """Lay out one button per title and return the menu's buttons."""
        count = len(titles)
        y = self.height // 2 - (count * (BUTTON_H + BUTTON_GAP) - BUTTON_GAP) // 2
        for title in titles:
            self.buttons.append(
                MenuButton(self.width // 2 - BUTTON_W // 2, y, BUTTON_W, BUTTON_H, title)
            )
            y += BUTTON_H + BUTTON_GAP
        return self.buttons