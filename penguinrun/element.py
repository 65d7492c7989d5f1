"""Base game objects that live on a stage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Hashable

AMOUNT_TYPES = 10


class ElementType(IntEnum):
    """Kind of an element; also the drawing layer it belongs to."""

    BACKGROUND = 0
    ELEMENT = 1
    WALL = 2
    PLAYER = 3
    CHECK_POINT = 4
    CASH = 5
    ENEMY = 6
    TECNOWALL = 7
    MULTI_IMAGES = 9


class Tag(IntEnum):
    """Flags that other elements look for when they collide."""

    WALL = 0
    PLAYER = 1
    TECNOWALL = 7


@dataclass(frozen=True)
class Sprite:
    """A drawable image with its natural size."""

    texture: Any
    w: int
    h: int


class Element(ABC):
    """Anything with a position and a size that a stage updates."""

    def __init__(self) -> None:
        self.x: float = 0.0
        self.y: float = 0.0
        self._w = 40
        self._h = 40
        self.image: Any = None
        self.rx = 1
        self.ry = 1
        self.type: int = ElementType.ELEMENT
        self.tags: set[Hashable] = set()
        self.draw_enabled = True
        self.alive = True
        self.stage: Any = None

    @property
    def w(self) -> int:
        return self._w

    @w.setter
    def w(self, value: float) -> None:
        self._w = int(value)

    @property
    def h(self) -> int:
        return self._h

    @h.setter
    def h(self, value: float) -> None:
        self._h = int(value)

    def attach(self, stage: Any) -> None:
        """Remember the stage this element was added to."""
        self.stage = stage

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def add_tag(self, tag: Hashable) -> None:
        self.tags.add(tag)

    def has_tag(self, tag: Hashable) -> bool:
        return tag in self.tags

    def kill(self) -> None:
        """Mark the element dead and drop it from its stage's lists."""
        self.alive = False
        stage = self.stage
        if stage is None:
            return
        stage.container[:] = [e for e in stage.container if e is not self]
        bucket = stage.types[self.type]
        bucket[:] = [e for e in bucket if e is not self]

    @abstractmethod
    def update(self) -> None:
        """Advance the element by one frame."""


class Root(Element):
    """A plain element, mostly used as a bounding box."""

    def __init__(self) -> None:
        super().__init__()
        self.type = ElementType.ELEMENT

    def update(self) -> None:
        """A root element has no behaviour of its own."""


@dataclass
class ImagePlacement:
    """An image drawn at an offset from its owner's position."""

    image: Any
    x: float
    y: float
    w: int
    h: int


class ElementWithImages(Element, ABC):
    """An element drawn as several images instead of one."""

    def __init__(self) -> None:
        super().__init__()
        self._images: list[ImagePlacement] = []

    def images(self) -> list[ImagePlacement]:
        """Return a copy of the placed images."""
        return list(self._images)