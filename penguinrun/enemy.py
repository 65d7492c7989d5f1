"""Enemies that roam the stage and hurt the player."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Any, Iterable, Sequence

from penguinrun.collision import Collision, Side, max_collisions
from penguinrun.element import Element, ElementType, Tag


class Enemy(Element):
    """A moving element that reacts to walls and players it touches."""

    def __init__(self, x: float, y: float) -> None:
        super().__init__()
        self.angle = 10.0
        self.speed = 6.0
        self.type = ElementType.ENEMY
        self.set_position(x, y)
        self.destroying = False
        self.w = 50
        self.h = 50

    def update(self) -> None:
        self.check_collision()
        self.move_by(math.sin(self.angle) * self.speed, math.cos(self.angle) * self.speed)
        self.enemy_update()
        if self.destroying:
            self.destroy_sequence()

    def check_collision(self) -> None:
        """Handle the strongest contacts with walls, players and composite walls."""
        stage = self.stage
        if stage is None:
            return
        for other in list(stage.container):
            if other.has_tag(Tag.WALL) or other.has_tag(Tag.PLAYER):
                for hit in max_collisions(self, other):
                    self.handle_collision(hit, other)
        for tecnowall in list(stage.types[ElementType.TECNOWALL]):
            for box in tecnowall.wall_boxes():
                for hit in max_collisions(self, box):
                    self.handle_collision(hit, tecnowall)

    def handle_collision(self, collision: Collision, other: Element) -> None:
        self.enemy_collision(collision, other)

    @abstractmethod
    def enemy_update(self) -> None:
        """Per-frame behaviour of the specific enemy."""

    @abstractmethod
    def enemy_collision(self, collision: Collision, other: Element) -> None:
        """React to touching ``other``."""

    def destroy(self) -> None:
        """Start the destruction sequence."""
        self.destroying = True

    def destroy_sequence(self) -> None:
        """One step of the destruction sequence; nothing by default."""


class ClassicEnemy(Enemy):
    """Bounces off walls and explodes on contact with a player."""

    def __init__(self, x: float, y: float, frames: Sequence[Any]) -> None:
        super().__init__(x, y)
        if not frames:
            raise ValueError("a classic enemy needs at least one frame")
        self.frames = list(frames)
        self.image = self.frames[0]
        self.timer = 0
        self.frame_index = 0

    def enemy_update(self) -> None:
        """Classic enemies just keep their heading."""

    def enemy_collision(self, collision: Collision, other: Element) -> None:
        if other.has_tag(Tag.WALL):
            if collision.side in (Side.UP, Side.DOWN):
                self.angle = math.pi - self.angle
            elif collision.side in (Side.LEFT, Side.RIGHT):
                self.angle = self.angle + (math.pi - self.angle) * 2
        elif other.has_tag(Tag.PLAYER):
            self.destroy()
            other.lose_life()

    def destroy_sequence(self) -> None:
        """Play the explosion frames, then leave the stage."""
        self.timer += 1
        if self.timer > 2:
            self.frame_index += 1
            self.timer = 0
            self.image = self.frames[self.frame_index]
            if self.frame_index == len(self.frames) - 1:
                self.kill()


class SequentialEnemy(Enemy):
    """An enemy given a route of waypoints to visit in order."""

    def __init__(self, x: float, y: float, areas: Iterable[tuple[int, int]]) -> None:
        super().__init__(x, y)
        self.route = [tuple(area) for area in areas]
        if not self.route:
            raise ValueError("a sequential enemy needs at least one waypoint")
        self.current = 0
        self.target = self.route[0]
        self.distance = (0, 0)

    def enemy_update(self) -> None:
        """Track the distance to the current waypoint; the heading is kept."""
        self.target = self.route[self.current]
        tx, ty = self.target
        self.distance = (abs(int(tx - self.x)), abs(int(ty - self.y)))

    def enemy_collision(self, collision: Collision, other: Element) -> None:
        """Sequential enemies ignore contacts."""

    def destroy_sequence(self) -> None:
        """Sequential enemies have no destruction animation."""