"""Walls, backgrounds and composite walls built from segments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from penguinrun.element import Element, ElementType, Root, Sprite, Tag

MAX_WALLS = 1000


class Orientation(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1


class Direction(IntEnum):
    """Sides used when attaching wall segments and corners."""

    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5


class Wall(Element):
    """A solid block made of a repeated sprite."""

    def __init__(self, rx: int, ry: int, sprite: Sprite, orientation: Orientation) -> None:
        super().__init__()
        self.add_tag(Tag.WALL)
        self.type = ElementType.WALL
        self.orientation = Orientation(orientation)
        self.image = sprite.texture
        self.w = sprite.w * rx
        self.h = sprite.h * ry
        self.rx = rx
        self.ry = ry

    def update(self) -> None:
        """Walls do not change."""


def classic_wall_horizontal(ax: int, ay: int, sprite: Sprite) -> Wall:
    return Wall(ax, ay, sprite, Orientation.HORIZONTAL)


def classic_wall_vertical(ax: int, ay: int, sprite: Sprite) -> Wall:
    return Wall(ax, ay, sprite, Orientation.VERTICAL)


class Background(Element):
    """A tiled background image."""

    def __init__(self, sprite: Sprite, ax: int, ay: int, w: int, h: int, x: float, y: float) -> None:
        super().__init__()
        self.image = sprite.texture
        self.type = ElementType.BACKGROUND
        self.set_position(x, y)
        self.w = w
        self.h = h
        self.rx = ax
        self.ry = ay

    def update(self) -> None:
        """Backgrounds do not change."""


@dataclass
class AdvancedWall:
    """One segment of a composite wall."""

    x: int
    y: int
    cx: int
    cy: int
    sprite: Sprite
    orientation: Orientation


@dataclass
class Corner:
    """A square corner piece rotated by a multiple of 90 degrees."""

    x: int
    y: int
    angle: int
    size: int


class Tecnowall(Element):
    """A wall assembled from perpendicular segments joined by corners."""

    def __init__(self, horizontal: Sprite, vertical: Sprite) -> None:
        super().__init__()
        self.type = ElementType.TECNOWALL
        self.add_tag(Tag.TECNOWALL)
        self.add_tag(Tag.WALL)
        self._horizontal = horizontal
        self._vertical = vertical
        self.walls_size = (horizontal.w, horizontal.h)
        self.walls: list[AdvancedWall] = []
        self.corners: list[Corner] = []

    def sprite_for(self, orientation: Orientation) -> Sprite:
        """Return the segment sprite, sized for the given orientation."""
        w, h = self.walls_size
        if orientation == Orientation.HORIZONTAL:
            return Sprite(self._horizontal.texture, w, h)
        return Sprite(self._vertical.texture, h, w)

    def add_first_wall(self, cx: int, cy: int, orientation: Orientation, x: int, y: int) -> int:
        """Start over with a single segment; returns its index."""
        orientation = Orientation(orientation)
        self.walls = [AdvancedWall(x, y, cx, cy, self.sprite_for(orientation), orientation)]
        return 0

    def add_wall(self, cx: int, cy: int, side: Direction, position: int, reference: int) -> int:
        """Attach a perpendicular segment to wall ``reference``; returns its index."""
        if len(self.walls) >= MAX_WALLS:
            raise ValueError(f"a tecnowall holds at most {MAX_WALLS} walls")
        ant = self.walls[reference]
        orientation = (
            Orientation.VERTICAL if ant.orientation == Orientation.HORIZONTAL else Orientation.HORIZONTAL
        )
        sprite = self.sprite_for(orientation)
        thickness = self.sprite_for(Orientation.HORIZONTAL).h
        dif = thickness if position == 0 else thickness // 2

        limit = ant.cx if orientation == Orientation.VERTICAL else ant.cy
        if position >= limit:
            position = limit
            dif = 0

        if orientation == Orientation.VERTICAL:
            x = ant.x + position * sprite.h - dif
            y = ant.y + ant.sprite.h if side == Direction.LEFT else ant.y - cy * sprite.h
        else:
            y = ant.y + position * sprite.w - dif
            x = ant.x - cx * sprite.w if side == Direction.LEFT else ant.x + ant.sprite.w
        added = AdvancedWall(x, y, cx, cy, sprite, orientation)

        size = sprite.w if orientation == Orientation.VERTICAL else sprite.h
        corner: Corner | None = None
        left = side == Direction.LEFT
        if position == 0:
            if orientation == Orientation.VERTICAL:
                corner = Corner(ant.x - thickness, ant.y, 90 if left else 0, size)
            else:
                corner = Corner(ant.x, y, 180 if left else 90, size)
        else:
            end = ant.cx if ant.orientation == Orientation.HORIZONTAL else ant.cy
            if position >= end:
                if orientation == Orientation.VERTICAL:
                    corner = Corner(x, ant.y, 180 if left else 270, size)
                else:
                    corner = Corner(ant.x, y, 270 if left else 0, size)
        if corner is not None:
            self.corners.append(corner)

        self.walls.append(added)
        return len(self.walls) - 1

    def add_corner(self, reference: int, vertical_side: Direction, horizontal_side: Direction) -> Corner:
        """Put a corner at one end of wall ``reference`` and return it."""
        ref = self.walls[reference]
        left = horizontal_side == Direction.LEFT
        up = vertical_side == Direction.UP
        if ref.orientation == Orientation.VERTICAL:
            size = ref.sprite.w
            if up:
                corner = Corner(ref.x, ref.y + ref.cy * ref.sprite.h, 270 if left else 0, size)
            else:
                corner = Corner(ref.x, ref.y - size, 180 if left else 90, size)
        else:
            size = ref.sprite.h
            if left:
                corner = Corner(ref.x - size, ref.y, 90 if up else 0, size)
            else:
                corner = Corner(ref.x + ref.cx * ref.sprite.w, ref.y, 180 if up else 270, size)
        self.corners.append(corner)
        return corner

    def resize_walls(self, w: int, h: int) -> None:
        """Change the size used for segments added from now on."""
        self.walls_size = (w, h)

    def wall_boxes(self) -> list[Root]:
        """Return a bounding box for every segment."""
        boxes = []
        for wall in self.walls:
            box = Root()
            box.set_position(wall.x, wall.y)
            box.w = wall.cx * wall.sprite.w
            box.h = wall.cy * wall.sprite.h
            boxes.append(box)
        return boxes

    def update(self) -> None:
        """Composite walls do not change."""