"""Collectable money and check points."""

from __future__ import annotations

from typing import Mapping

from penguinrun.element import Element, ElementType, ElementWithImages, ImagePlacement, Sprite

_TIERS = (
    (1.0, "cent"),
    (10.0, "unit"),
    (200.0, "units"),
    (1500.0, "units7"),
    (7500.0, "units9"),
    (45000.0, "malet"),
    (650000.0, "malet3"),
    (1000000.0, "malet4"),
    (50000000.0, "check"),
)

CHECK_POINT_WORD = "checkpoint"


def money_tier(value: float) -> str:
    """Return the name of the picture used for a money value."""
    for limit, name in _TIERS:
        if value < limit:
            return name
    return "check2"


class Money(Element):
    """A coin or note that bobs up and down until collected."""

    def __init__(self, value: float, x: float, y: float) -> None:
        super().__init__()
        self.set_position(x, 40)
        self.original_y = y
        self._value = value
        self._offset = 0
        self._rising = False
        self.tier = money_tier(value)
        self.image = self.tier
        self.type = ElementType.CASH

    @property
    def value(self) -> float:
        return self._value

    def update(self) -> None:
        if self._rising:
            self._offset += 1
            if self._offset > 40:
                self._rising = False
        else:
            self._offset -= 1
            if self._offset <= 0:
                self._rising = True
        self.y = self.original_y + self._offset


class CheckPoint(ElementWithImages):
    """An invisible spot that spells out a word once touched."""

    def __init__(self, letters: Mapping[str, Sprite]) -> None:
        super().__init__()
        self._letters = letters
        self.loops = 0
        self.w = 75
        self.h = 75
        self.draw_enabled = False
        self.type = ElementType.MULTI_IMAGES
        self.ticked = False
        self.speed = 7

    def update(self) -> None:
        if self.ticked:
            self.loops += 1

    def tick(self) -> None:
        """Activate the check point; the word is added only once."""
        if not self.ticked:
            for letter in CHECK_POINT_WORD:
                sprite = self._letters[letter]
                self._images.append(ImagePlacement(sprite.texture, 0, 0, sprite.w, sprite.h))
        self.ticked = True