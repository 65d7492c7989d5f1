import pytest

from penguinrun.element import (
    AMOUNT_TYPES,
    Element,
    ElementType,
    ElementWithImages,
    ImagePlacement,
    Root,
    Sprite,
    Tag,
)


class FakeStage:
    def __init__(self):
        self.container = []
        self.types = [[] for _ in range(AMOUNT_TYPES)]

    def add(self, element):
        element.attach(self)
        self.container.append(element)
        self.types[element.type].append(element)


class Multi(ElementWithImages):
    def update(self):
        self._images.append(ImagePlacement("img", 1, 2, 3, 4))


def test_defaults():
    root = Root()
    assert (root.x, root.y) == (0, 0)
    assert (root.w, root.h) == (40, 40)
    assert (root.rx, root.ry) == (1, 1)
    assert root.type == ElementType.ELEMENT
    assert root.draw_enabled is True
    assert root.alive is True


def test_element_is_abstract():
    with pytest.raises(TypeError):
        Element()


def test_root_lands_in_element_layer():
    stage = FakeStage()
    root = Root()
    stage.add(root)
    assert root.type == 1
    assert stage.types[1] == [root]
    assert all(not layer for index, layer in enumerate(stage.types) if index != 1)


def test_size_truncates_to_int():
    root = Root()
    root.w = 64 * 0.75
    root.h = 7.9
    assert root.w == int(64 * 0.75)
    assert root.h == int(7.9)


def test_set_position_and_move_by():
    root = Root()
    root.set_position(10, 20)
    root.move_by(2.5, -4)
    assert root.x == 12.5
    assert root.y == 16


def test_tags():
    root = Root()
    assert not root.has_tag(Tag.WALL)
    root.add_tag(Tag.WALL)
    assert root.has_tag(Tag.WALL)
    assert not root.has_tag(Tag.PLAYER)


def test_kill_removes_from_stage():
    stage = FakeStage()
    first, second = Root(), Root()
    stage.add(first)
    stage.add(second)
    first.kill()
    assert stage.container == [second]
    assert stage.types[ElementType.ELEMENT] == [second]
    assert first.alive is False
    assert second.alive is True


def test_kill_without_stage_marks_dead():
    root = Root()
    root.kill()
    assert root.alive is False


def test_attach_records_stage():
    stage = FakeStage()
    root = Root()
    root.attach(stage)
    assert root.stage is stage


def test_images_returns_copy():
    multi = Multi()
    multi.update()
    images = multi.images()
    assert images == [ImagePlacement("img", 1, 2, 3, 4)]
    images.clear()
    assert len(multi.images()) == 1


def test_sprite_is_value():
    assert Sprite("tex", 3, 4) == Sprite("tex", 3, 4)
    assert Sprite("tex", 3, 4).w == 3