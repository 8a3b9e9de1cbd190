import pytest

from mermaidgame.game import (
    CoinAnimator,
    Direction,
    Game,
    Outcome,
    direction_for_key,
)
from mermaidgame.mapfile import parse_map


def make_game(text):
    return Game(parse_map(text))


def test_collect_then_win():
    game = make_game("11111\n1PCE1\n11111\n")
    assert game.move(Direction.RIGHT) is Outcome.PLAYING
    assert game.collectibles == 0
    assert game.moves == 1
    assert game.player == (1, 2)
    assert game.rows[1] == "10PE1"
    assert game.move(Direction.RIGHT) is Outcome.WON
    assert game.moves == 1


def test_walls_block_movement():
    game = make_game("11111\n1PCE1\n11111\n")
    assert game.move(Direction.UP) is Outcome.PLAYING
    assert game.move(Direction.LEFT) is Outcome.PLAYING
    assert game.player == (1, 1)
    assert game.moves == 0


def test_exit_is_restored_when_walked_over():
    game = make_game("111111\n1PEC01\n111111\n")
    game.move(Direction.RIGHT)
    assert game.player == (1, 2)
    assert game.rows[1] == "10EC01"
    game.move(Direction.RIGHT)
    assert game.collectibles == 0
    assert game.rows[1] == "10EP01"
    assert game.move(Direction.LEFT) is Outcome.WON


def test_villain_loses():
    game = make_game("111111\n1PVCE1\n111111\n")
    assert game.move(Direction.RIGHT) is Outcome.LOST
    assert game.outcome is Outcome.LOST
    assert game.move(Direction.RIGHT) is Outcome.LOST
    assert game.player == (1, 1)


@pytest.mark.parametrize(
    "keycode, direction",
    [
        (0, Direction.LEFT), (123, Direction.LEFT), (97, Direction.LEFT),
        (13, Direction.UP), (126, Direction.UP), (119, Direction.UP),
        (2, Direction.RIGHT), (124, Direction.RIGHT), (100, Direction.RIGHT),
        (1, Direction.DOWN), (125, Direction.DOWN), (115, Direction.DOWN),
    ],
)
def test_direction_for_key(keycode, direction):
    assert direction_for_key(keycode) is direction


def test_unbound_key_has_no_direction():
    assert direction_for_key(42) is None


def test_escape_quits():
    game = make_game("11111\n1PCE1\n11111\n")
    assert game.press(53) is Outcome.QUIT


def test_press_sets_facing_even_when_blocked():
    game = make_game("11111\n1PCE1\n11111\n")
    assert game.press(97) is Outcome.PLAYING
    assert game.facing is Direction.LEFT
    assert game.player == (1, 1)
    game.press(100)
    assert game.facing is Direction.RIGHT
    assert game.player == (1, 2)


def test_unknown_key_changes_nothing():
    game = make_game("11111\n1PCE1\n11111\n")
    before = game.rows
    assert game.press(42) is Outcome.PLAYING
    assert game.rows == before
    assert game.moves == 0


def test_coin_animation_cycle():
    animator = CoinAnimator()
    frames = [animator.tick() for _ in range(81)]
    assert all(frames[0:20])
    assert not any(frames[20:40])
    assert all(frames[40:60])
    assert not any(frames[60:80])
    assert frames[80] is True