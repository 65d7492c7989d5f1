import pytest

from penguinrun.element import ElementType, Root
from penguinrun.handler import Handler, Key
from penguinrun.stage import GraphicStage, Stage
from penguinrun.walls import Background
from penguinrun.element import Sprite


def test_add_element_files_by_type():
    stage = Stage()
    box = Root()
    stage.add_element(box)
    assert stage.container == [box]
    assert stage.types[ElementType.ELEMENT] == [box]
    assert box.stage is stage


def test_add_player_links_controller():
    stage = Stage()
    handler = Handler()
    player = stage.add_player(10, 20, handler)
    assert handler.player is player
    assert player.controller is handler
    assert stage.level_players == [handler]
    assert (player.x, player.y) == (10, 20)
    assert player in stage.types[ElementType.PLAYER]


def test_remove_element():
    stage = Stage()
    box = Root()
    stage.add_element(box)
    stage.remove_element(box)
    assert stage.container == []
    assert stage.types[ElementType.ELEMENT] == []
    stage.remove_element(Root())
    assert stage.container == []


def test_check_delete_drops_dead():
    stage = Stage()
    keep, drop = Root(), Root()
    stage.add_element(keep)
    stage.add_element(drop)
    drop.alive = False
    stage.check_delete()
    assert stage.container == [keep]
    assert stage.types[ElementType.ELEMENT] == [keep]


def test_update_moves_player_from_keys():
    stage = Stage()
    handler = Handler()
    player = stage.add_player(0, 0, handler)
    handler.keydown(Key.RIGHT)
    stage.update()
    assert player.x == player.speed


def test_save_check_point():
    stage = Stage()
    stage.save_check_point(5, 6)
    assert stage.check_point == (5, 6)


def test_sum_zoom_respects_limits():
    stage = GraphicStage()
    stage.set_zoom(1.0)
    stage.sum_zoom(1.5)
    assert stage.zoom == 1.0
    stage.sum_zoom(0.5)
    assert stage.zoom == 1.5
    stage.sum_zoom(-1.45)
    assert stage.zoom == 1.5


def test_camera_follows_focused_player():
    stage = GraphicStage()
    handler = Handler()
    stage.add_player(1000, 300, handler)
    stage.set_focus_player(0)
    before = stage.camera_x
    stage.update_camera()
    assert stage.camera_x > before
    left, right, bottom, top = stage.view_bounds()
    assert right - left == 800
    assert top - bottom == 600


def test_camera_without_focus_stays():
    stage = GraphicStage()
    before = stage.view_bounds()
    stage.update_camera()
    assert stage.view_bounds() == before


def test_bad_focus_raises():
    stage = GraphicStage()
    stage.set_focus_player(2)
    with pytest.raises(IndexError):
        stage.update_camera()


def test_drawable_in_layer_order_and_hides_disabled():
    stage = GraphicStage()
    handler = Handler()
    player = stage.add_player(0, 0, handler)
    back = Background(Sprite("bg", 10, 10), 1, 1, 100, 100, 0, 0)
    hidden = Root()
    hidden.draw_enabled = False
    stage.add_element(back)
    stage.add_element(hidden)
    assert stage.drawable() == [back, player]