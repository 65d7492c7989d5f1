import pytest

from penguinrun.handler import Handler, Key, format_money


class FakePlayer:
    def __init__(self):
        self.moves = []
        self.killed = False

    def move_up(self):
        self.moves.append("up")

    def move_down(self):
        self.moves.append("down")

    def move_left(self):
        self.moves.append("left")

    def move_right(self):
        self.moves.append("right")

    def kill(self):
        self.killed = True


@pytest.fixture
def handler():
    h = Handler()
    h.set_player(FakePlayer())
    return h


def test_default_name():
    assert Handler().name == "Tux Kernel"


def test_take_action_moves_in_fixed_order(handler):
    handler.keydown(Key.RIGHT)
    handler.keydown(Key.UP)
    handler.take_action()
    assert handler.player.moves == ["up", "right"]


def test_keyup_releases_direction(handler):
    handler.keydown(Key.LEFT)
    handler.keyup(Key.LEFT)
    handler.take_action()
    assert handler.player.moves == []


def test_unknown_key_is_ignored(handler):
    handler.keydown(99)
    handler.take_action()
    assert handler.player.moves == []


def test_take_action_without_player_raises():
    h = Handler()
    h.keydown(Key.DOWN)
    with pytest.raises(RuntimeError):
        h.take_action()


def test_add_life(handler):
    before = handler.lives
    handler.add_life()
    assert handler.lives == before + 1


def test_kill_life_until_player_dies(handler):
    while handler.lives >= 0:
        handler.kill_life()
        assert handler.player.killed is False
    remaining = handler.lives
    handler.kill_life()
    assert handler.player.killed is True
    assert handler.lives == remaining


def test_energy_reaching_zero_costs_a_life(handler):
    lives = handler.lives
    handler.lose_energy(handler.energy)
    assert handler.energy == 0
    assert handler.lives == lives - 1


def test_partial_energy_loss_keeps_lives(handler):
    lives = handler.lives
    handler.lose_energy(1)
    assert handler.lives == lives


def test_overshooting_zero_keeps_lives(handler):
    lives = handler.lives
    handler.lose_energy(handler.energy + 1)
    assert handler.energy < 0
    assert handler.lives == lives


def test_format_money_pinned_values():
    assert format_money(0.5) == "50 c"
    assert format_money(1000.03) == "1.0 k"
    assert format_money(2.5) == "2.5 $"


@pytest.mark.parametrize(
    "amount,suffix",
    [(0.2, " c"), (12.0, " $"), (45000.0, " k"), (5000000.0, " M"), (2e9, " MM")],
)
def test_format_money_units(amount, suffix):
    label = format_money(amount)
    assert label.endswith(suffix)
    assert label[: -len(suffix)].replace(".", "").isdigit()


def test_give_money_accumulates(handler):
    handler.give_money(0.5)
    handler.give_money(0.6)
    assert handler.money == pytest.approx(1.1)
    assert handler.money_label() == format_money(handler.money)


def test_lives_label(handler):
    handler.add_life()
    assert handler.lives_label() == str(handler.lives)