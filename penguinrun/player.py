"""The player character steered by a handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from penguinrun.collision import Side, collide
from penguinrun.element import Element, ElementType, Tag

PLAYER_SPEED = 3
HIT_TIMEOUT = 400
HIT_ENERGY = 2


@dataclass(frozen=True)
class PlayerAnimations:
    """Frames for each walking direction; ``down`` also gives the idle frame."""

    down: Sequence[Any] = ("tux",)
    up: Sequence[Any] = ("tux_up",)
    right: Sequence[Any] = ("tux_side",)
    left: Sequence[Any] = ("tux_side_back",)


class Player(Element):
    """A walking character that stops at walls and picks up money."""

    def __init__(self, animations: PlayerAnimations | None = None) -> None:
        super().__init__()
        self.animations = animations if animations is not None else PlayerAnimations()
        self.image = self.animations.down[0]
        self.w = 64 * 0.75
        self.h = 100 * 0.75
        self.speed = PLAYER_SPEED
        self.going_up = False
        self.going_down = False
        self.going_left = False
        self.going_right = False
        self.loops = 0
        self.add_tag(Tag.PLAYER)
        self.type = ElementType.PLAYER
        self._blocked: set[Side] = set()
        self._obtained = False
        self.timeout = 0
        self.weapons: list[Element] = []
        self.controller: Any = None

    def _require_controller(self) -> Any:
        if self.controller is None:
            raise RuntimeError("player has no controller")
        return self.controller

    def _gather_collisions(self) -> None:
        """Work out blocked sides once per frame and handle pickups."""
        if self._obtained:
            return
        blocked: set[Side] = set()
        stage = self.stage
        if stage is not None:
            for element in list(stage.container):
                if element is not self and element.has_tag(Tag.WALL):
                    blocked.update(c.side for c in collide(self, element))
            for cash in list(stage.types[ElementType.CASH]):
                if collide(self, cash):
                    self._require_controller().give_money(cash.value)
                    cash.kill()
            for tecnowall in list(stage.types[ElementType.TECNOWALL]):
                for box in tecnowall.wall_boxes():
                    blocked.update(c.side for c in collide(self, box))
            for point in list(stage.types[ElementType.CHECK_POINT]):
                if collide(self, point):
                    point.tick()
        self._blocked = blocked
        self._obtained = True

    def move_up(self) -> None:
        self._gather_collisions()
        if Side.DOWN in self._blocked:
            return
        self.going_up = True
        self.y += self.speed

    def move_down(self) -> None:
        self._gather_collisions()
        if Side.UP in self._blocked:
            return
        self.going_down = True
        self.y -= self.speed

    def move_left(self) -> None:
        self._gather_collisions()
        if Side.LEFT in self._blocked:
            return
        self.going_left = True
        self.x -= self.speed

    def move_right(self) -> None:
        self._gather_collisions()
        if Side.RIGHT in self._blocked:
            return
        self.going_right = True
        self.x += self.speed

    def _frame(self, frames: Sequence[Any]) -> Any:
        return frames[self.loops // 10 % len(frames)]

    def update(self) -> None:
        """Pick the animation frame and run down the hit timeout."""
        self._obtained = False
        anim = self.animations
        if self.going_left and not self.going_right:
            self.image = self._frame(anim.left)
        elif self.going_right and not self.going_left:
            self.image = self._frame(anim.right)
        elif self.going_up and not self.going_down:
            self.image = self._frame(anim.up)
        elif self.going_down and not self.going_up:
            self.image = self._frame(anim.down)
        else:
            self.image = anim.down[0]

        self.loops += 1
        self.reset_going()

        if self.timeout > 0:
            self.timeout -= 1
            self.draw_enabled = self.timeout % 20 < 10

    def reset_going(self) -> None:
        self.going_up = False
        self.going_down = False
        self.going_left = False
        self.going_right = False

    def lose_life(self) -> None:
        """Take a hit unless still blinking from the previous one."""
        if self.timeout == 0:
            self._require_controller().lose_energy(HIT_ENERGY)
            self.timeout = HIT_TIMEOUT