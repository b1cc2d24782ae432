import pytest

from solong.game import (
    KEY_ESCAPE,
    Direction,
    Game,
    MoveOutcome,
    key_to_direction,
)
from solong.mapcheck import validate_rows


def make_game(rows):
    return Game(validate_rows(rows))


@pytest.mark.parametrize(
    "keycode, direction",
    [
        (119, Direction.UP),
        (65362, Direction.UP),
        (97, Direction.LEFT),
        (65361, Direction.LEFT),
        (115, Direction.DOWN),
        (65364, Direction.DOWN),
        (100, Direction.RIGHT),
        (65363, Direction.RIGHT),
    ],
)
def test_key_to_direction(keycode, direction):
    assert key_to_direction(keycode) is direction


def test_key_to_direction_unknown():
    assert key_to_direction(120) is None
    assert key_to_direction(KEY_ESCAPE) is None


def test_direction_deltas_are_unit_steps():
    up, left, down, right = (key_to_direction(k) for k in (119, 97, 115, 100))
    for direction in (up, left, down, right):
        assert abs(direction.dx) + abs(direction.dy) == 1
    assert up.dy == -down.dy
    assert left.dx == -right.dx


def test_initial_state_matches_map():
    rows = ["11111", "1PCE1", "11111"]
    game = make_game(rows)
    assert game.rows == tuple(rows)
    assert game.player == (1, 1)
    assert game.cell(1, 1) == "P"
    assert game.moves == 0
    assert game.collected == 0


def test_collect_then_win():
    game = make_game(["11111", "1PCE1", "11111"])
    assert game.move(Direction.RIGHT) is MoveOutcome.COLLECTED
    assert game.collected == game.total_collectibles
    assert game.rows[1] == "10PE1"
    assert game.move(Direction.RIGHT) is MoveOutcome.WON
    assert game.won
    assert game.moves == 2


def test_wall_blocks_without_counting():
    rows = ["11111", "1PCE1", "11111"]
    game = make_game(rows)
    assert game.move(Direction.UP) is MoveOutcome.BLOCKED
    assert game.move(Direction.LEFT) is MoveOutcome.BLOCKED
    assert game.moves == 0
    assert game.rows == tuple(rows)


def test_locked_exit_counts_move_but_player_stays():
    rows = ["1111111", "1EP0C01", "1111111"]
    game = make_game(rows)
    assert game.move(Direction.LEFT) is MoveOutcome.EXIT_LOCKED
    assert game.moves == 1
    assert game.player == (2, 1)
    assert game.rows == tuple(rows)
    assert not game.won


def test_plain_move_leaves_floor_behind():
    game = make_game(["1111111", "1EP0C01", "1111111"])
    assert game.move(Direction.RIGHT) is MoveOutcome.MOVED
    assert game.cell(1, 2) == "0"
    assert game.cell(1, 3) == "P"
    assert "".join(game.rows).count("P") == 1


def test_full_round_through_keys():
    game = make_game(["1111111", "1EP0C01", "1111111"])
    outcomes = [game.handle_key(k) for k in (100, 65363, 97, 97, 97)]
    assert outcomes == [
        MoveOutcome.MOVED,
        MoveOutcome.COLLECTED,
        MoveOutcome.MOVED,
        MoveOutcome.MOVED,
        MoveOutcome.WON,
    ]
    assert game.moves == len(outcomes)


def test_handle_key_escape_and_unknown():
    rows = ["11111", "1PCE1", "11111"]
    game = make_game(rows)
    assert game.handle_key(KEY_ESCAPE) is MoveOutcome.QUIT
    assert game.handle_key(32) is MoveOutcome.IGNORED
    assert game.moves == 0
    assert game.rows == tuple(rows)


def test_game_does_not_change_map():
    rows = ["11111", "1PCE1", "11111"]
    game_map = validate_rows(rows)
    game = Game(game_map)
    game.move(Direction.RIGHT)
    assert game_map.rows == tuple(rows)
    assert game.rows != game_map.rows