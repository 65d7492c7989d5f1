import random

from penguinrun.intro import Menu, MenuButton, ParticleField, Point


def test_point_straight_up_keeps_x():
    p = Point(100, 100, 0, 5)
    p.update()
    assert p.x == 100
    assert p.y > 100


def test_point_first_step_is_doubled():
    p = Point(0, 0, 0, 5)
    p.update()
    assert p.y == 10


def test_point_speeds_up_and_halves_stopper():
    p = Point(0, 0, 90, 5)
    p.update()
    assert p.speed == 6
    assert p.stopper == 20
    assert p.loops == 1


def test_point_stopper_never_below_one():
    p = Point(0, 0, 45, 1)
    for _ in range(200):
        p.update()
    assert p.stopper == 1


def test_field_spawns_points_at_centre_region():
    field = ParticleField(800, 600, random.Random(3))
    field.update()
    assert len(field.points) == 2
    assert all(pt.inside(800, 600) for pt in field.points)


def test_field_eventually_drops_points():
    field = ParticleField(200, 200, random.Random(7))
    for _ in range(300):
        field.update()
    assert field.loops == 300
    assert len(field.points) < 2 * 300


def test_field_is_deterministic_with_seed():
    a = ParticleField(800, 600, random.Random(11))
    b = ParticleField(800, 600, random.Random(11))
    for _ in range(20):
        a.update()
        b.update()
    assert [(p.x, p.y) for p in a.points] == [(p.x, p.y) for p in b.points]


def test_button_hover_is_strict():
    button = MenuButton(10, 10, 200, 50, "Boton 1")
    assert button.hover(11, 11)
    assert not button.hover(10, 20)
    assert not button.hover(210, 20)
    assert not button.hover(50, 60)


def test_menu_default_titles():
    menu = Menu(800, 600)
    buttons = menu.start()
    assert [b.title for b in buttons] == ["Boton 1", "Boton 2", "Boton 3", "Boton 4"]


def test_menu_layout_centred_and_stacked():
    menu = Menu(800, 600)
    buttons = menu.start(["a", "b", "c"])
    for b in buttons:
        assert b.x + b.w // 2 == 400
        assert b.color == (60, 148, 255)
    for upper, lower in zip(buttons, buttons[1:]):
        assert lower.y - upper.y == upper.h + 2
    top = buttons[0].y
    bottom = buttons[-1].y + buttons[-1].h
    assert abs((top + bottom) - 600) <= 1


def test_menu_start_accumulates():
    menu = Menu(800, 600)
    menu.start(["a"])
    menu.start(["b"])
    assert [b.title for b in menu.buttons] == ["a", "b"]