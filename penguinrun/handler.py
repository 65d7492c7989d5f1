"""Player controller: keyboard state, lives, energy and money."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

DEFAULT_NAME = "Tux Kernel"


class Key(IntEnum):
    """Direction keys a handler reacts to."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_MOVES = (
    (Key.UP, "move_up"),
    (Key.DOWN, "move_down"),
    (Key.LEFT, "move_left"),
    (Key.RIGHT, "move_right"),
)


def format_money(amount: float) -> str:
    """Return the short label shown for an amount of money."""
    if amount < 1.0:
        return f"{int(amount * 100)} c"
    if amount < 1000:
        units = int(amount)
        decimal = int((amount - int(amount)) * 10)
        return f"{units}.{decimal} $"
    if amount < 1000 * 1000:
        scaled = amount / 1000
        return f"{int(scaled)}.{int((scaled - int(scaled)) * 10)} k"
    if amount < 1000 * 1000 * 1000:
        scaled = amount / 1000000
        return f"{int(scaled)}.{int((scaled - int(scaled)) * 10)} M"
    whole = int(amount / 100000000000)
    scaled = amount / 1000000000
    return f"{whole}.{int((scaled - int(scaled)) * 10)} MM"


class Handler:
    """Turns key presses into player movement and keeps the score."""

    def __init__(self, name: str = DEFAULT_NAME) -> None:
        self.name = name
        self.player: Any = None
        self.lives = 5
        self.energy = 10
        self.money = 0.0
        self._pressed: set[Key] = set()

    def set_player(self, player: Any) -> None:
        self.player = player

    def keydown(self, key: Any) -> None:
        """Start moving in the key's direction; other keys are ignored."""
        if key in Key.__members__.values():
            self._pressed.add(Key(key))

    def keyup(self, key: Any) -> None:
        """Stop moving in the key's direction; other keys are ignored."""
        if key in Key.__members__.values():
            self._pressed.discard(Key(key))

    def take_action(self) -> None:
        """Move the player in every held direction."""
        if not self._pressed:
            return
        if self.player is None:
            raise RuntimeError("handler has no player to move")
        for key, method in _MOVES:
            if key in self._pressed:
                getattr(self.player, method)()

    def add_life(self) -> None:
        self.lives += 1

    def kill_life(self) -> None:
        """Take a life away; with none left, kill the player."""
        if self.lives >= 0:
            self.lives -= 1
        elif self.player is not None:
            self.player.kill()

    def lose_energy(self, amount: int) -> None:
        """Drain energy; a life is lost when it hits exactly zero."""
        self.energy -= amount
        if self.energy == 0:
            self.kill_life()

    def give_money(self, amount: float) -> None:
        self.money += amount

    def money_label(self) -> str:
        return format_money(self.money)

    def lives_label(self) -> str:
        return str(self.lives)