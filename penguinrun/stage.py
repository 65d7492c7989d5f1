"""The stage that owns elements and players, and its camera."""

from __future__ import annotations

from typing import Any

from penguinrun.element import AMOUNT_TYPES, Element
from penguinrun.player import Player, PlayerAnimations

HALF_VIEW_W = 400
HALF_VIEW_H = 300
CAMERA_STEP = 3
CAMERA_SLACK = 100
MIN_ZOOM = 0.1
MAX_ZOOM = 2


class Stage:
    """Holds every element, grouped by type, and the players' handlers."""

    def __init__(self) -> None:
        self.container: list[Element] = []
        self.types: list[list[Element]] = [[] for _ in range(AMOUNT_TYPES)]
        self.level_players: list[Any] = []
        self.player_animations = PlayerAnimations()
        self.check_point: tuple[float, float] | None = None

    def add_player(self, x: float, y: float, controller: Any) -> Player:
        """Create a player at (x, y) driven by ``controller`` and add it."""
        player = Player(self.player_animations)
        player.set_position(x, y)
        controller.set_player(player)
        player.controller = controller
        self.add_element(player)
        self.level_players.append(controller)
        return player

    def add_element(self, element: Element) -> None:
        element.attach(self)
        self.container.append(element)
        self.types[element.type].append(element)

    def remove_element(self, element: Element) -> None:
        """Drop ``element`` from the stage; unknown elements are ignored."""
        if not any(e is element for e in self.container):
            return
        element.alive = False
        self.container[:] = [e for e in self.container if e is not element]
        bucket = self.types[element.type]
        bucket[:] = [e for e in bucket if e is not element]

    def check_delete(self) -> None:
        """Remove every element that is no longer alive."""
        self.container[:] = [e for e in self.container if e.alive]
        for bucket in self.types:
            bucket[:] = [e for e in bucket if e.alive]

    def update(self) -> None:
        """Advance all elements, then let every handler move its player."""
        for element in list(self.container):
            if element.alive:
                element.update()
        for handler in list(self.level_players):
            handler.take_action()

    def save_check_point(self, x: float, y: float) -> None:
        self.check_point = (x, y)


class GraphicStage(Stage):
    """A stage with a camera that follows one player."""

    def __init__(self) -> None:
        super().__init__()
        self.focus: int | None = None
        self.camera_x = HALF_VIEW_W
        self.camera_y = HALF_VIEW_H
        self.zoom = 1.0

    def set_focus_player(self, index: int) -> None:
        self.focus = index
        self.zoom = 1.0

    def update_camera(self) -> None:
        """Nudge the camera towards the focused player."""
        if self.focus is None:
            return
        player = self.level_players[self.focus].player
        px = int(player.x)
        py = int(player.y)
        if px + CAMERA_SLACK < self.camera_x:
            self.camera_x -= CAMERA_STEP
        if px - CAMERA_SLACK > self.camera_x:
            self.camera_x += CAMERA_STEP
        if py + CAMERA_SLACK < self.camera_y:
            self.camera_y -= CAMERA_STEP
        if py - CAMERA_SLACK > self.camera_y:
            self.camera_y += CAMERA_STEP

    def view_bounds(self) -> tuple[int, int, int, int]:
        """Return (left, right, bottom, top) of the visible area."""
        return (
            self.camera_x - HALF_VIEW_W,
            self.camera_x + HALF_VIEW_W,
            self.camera_y - HALF_VIEW_H,
            self.camera_y + HALF_VIEW_H,
        )

    def set_zoom(self, factor: float) -> None:
        self.zoom = factor

    def sum_zoom(self, value: float) -> None:
        """Change the zoom unless that leaves the allowed range."""
        new = self.zoom + value
        if not new < MIN_ZOOM and not new > MAX_ZOOM:
            self.zoom = new

    def drawable(self) -> list[Element]:
        """Move the camera for a frame and list the visible elements by layer."""
        self.update_camera()
        visible = [e for layer in self.types for e in layer if e.draw_enabled]
        self.update_camera()
        return visible