import pytest

from solong.game import Direction, Game, Key
from solong.game_map import MapError, parse_map

CORRIDOR = "1111111\n1P0C0E1\n1000001\n1111111\n"
EXIT_FIRST = "111111\n1PEC01\n111111\n"


def make_game(text=CORRIDOR):
    lines = []
    return Game.from_map(parse_map(text), log=lines.append), lines


def test_from_map_places_player_on_floor():
    game, _ = make_game()
    assert game.player == (1, 1)
    assert game.board.tile(1, 1) == "0"
    assert game.moves == 0
    assert not game.exit_opened


def test_from_map_leaves_input_map_untouched():
    game_map = parse_map(CORRIDOR)
    Game.from_map(game_map, log=lambda line: None)
    assert game_map.tile(1, 1) == "P"


def test_from_map_rejects_invalid_map():
    with pytest.raises(MapError):
        Game.from_map(parse_map("11111\n1P0E1\n11111\n"), log=lambda line: None)


def test_right_key_moves_and_logs():
    game, lines = make_game()
    game.handle_key(Key.D)
    assert game.player == (2, 1)
    assert game.moves == 1
    assert lines == ["move_count: 1"]


def test_w_moves_to_next_row():
    game, _ = make_game()
    game.handle_key(Key.W)
    assert game.player == (1, 2)


def test_wall_blocks_and_does_not_count():
    game, lines = make_game()
    game.handle_key(Key.S)
    game.handle_key(Key.A)
    assert game.player == (1, 1)
    assert game.moves == 0
    assert lines == []


def test_closed_exit_blocks():
    game, _ = make_game(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is False
    assert game.player == (1, 1)


def test_collecting_opens_exit_and_finishes():
    game, lines = make_game()
    for _ in range(2):
        game.handle_key(Key.D)
    assert game.collectibles == 0
    assert game.exit_opened
    assert game.board.tile(*game.exit) == "e"
    assert not game.finished()
    for _ in range(2):
        game.handle_key(Key.D)
    assert game.player == game.exit
    assert game.finished()
    assert len(lines) == game.moves


def test_move_returns_true_when_moving():
    game, _ = make_game()
    assert game.move(Direction.DOWN) is True
    assert game.player == (1, 2)


def test_escape_closes_game():
    game, _ = make_game()
    game.handle_key(Key.ESC)
    assert game.closed


def test_unknown_key_does_nothing():
    game, lines = make_game()
    game.handle_key(99)
    assert game.player == (1, 1)
    assert not game.closed
    assert lines == []


def test_plain_int_key_codes_work():
    game, _ = make_game()
    game.handle_key(int(Key.D))
    assert game.player == (2, 1)