import pytest

from solong.game_map import (
    GameMap,
    MapError,
    MapSummary,
    check_map,
    count_reachable,
    count_tiles,
    parse_map,
    read_map,
    validate_map,
)

VALID = "11111\n1PCE1\n11111\n"
BEHIND_EXIT = "111111\n1PEC01\n111111\n"
BLOCKED = "1111111\n1PE1C01\n1111111\n"


def test_parse_map_dimensions_and_tiles():
    game_map = parse_map(VALID)
    assert game_map.height == 3
    assert game_map.width == 5
    assert game_map.tile(1, 1) == "P"
    assert game_map.tile(3, 1) == "E"


def test_parse_map_without_trailing_newline_matches():
    assert parse_map(VALID.rstrip("\n")).rows == parse_map(VALID).rows


def test_str_round_trip():
    assert str(parse_map(VALID)) == VALID.rstrip("\n")


def test_parse_empty_text_raises():
    with pytest.raises(MapError):
        parse_map("")


def test_tile_outside_map_raises():
    game_map = parse_map(VALID)
    with pytest.raises(IndexError):
        game_map.tile(-1, 0)
    with pytest.raises(IndexError):
        game_map.tile(0, game_map.height)


def test_set_tile_changes_tile():
    game_map = parse_map(VALID)
    game_map.set_tile(2, 1, "0")
    assert game_map.tile(2, 1) == "0"


def test_set_tile_rejects_long_value():
    with pytest.raises(ValueError):
        parse_map(VALID).set_tile(2, 1, "00")


def test_copy_is_independent():
    game_map = parse_map(VALID)
    clone = game_map.copy()
    clone.set_tile(2, 1, "0")
    assert game_map.tile(2, 1) == "C"


def test_read_map_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert read_map(path).rows == parse_map(VALID).rows


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map(tmp_path / "missing.ber")


def test_count_tiles_positions():
    summary = count_tiles(parse_map(VALID))
    assert summary.player == (1, 1)
    assert summary.exit == (3, 1)
    assert summary.players == 1
    assert summary.exits == 1
    assert summary.collectibles == 1


def test_check_map_returns_summary():
    game_map = parse_map(VALID)
    assert check_map(game_map) == count_tiles(game_map)


def test_check_map_does_not_modify_map():
    game_map = parse_map(VALID)
    check_map(game_map)
    assert str(game_map) == VALID.rstrip("\n")


@pytest.mark.parametrize(
    "text",
    [
        "11111\n1PCE\n11111\n",
        "11111\n1PPE1\n1C111\n",
        "11111\n1PC01\n11111\n",
        "11111\n1PEE1\n1C111\n",
        "11111\n1P0E1\n11111\n",
        "00000\n0PCE0\n00000\n",
        "11111\n1PCX1\n11E11\n",
    ],
)
def test_check_map_rejects(text):
    with pytest.raises(MapError):
        check_map(parse_map(text))


def test_reachable_equals_goals_on_valid_map():
    game_map = parse_map(VALID)
    summary = count_tiles(game_map)
    assert count_reachable(game_map, summary.player) == summary.collectibles + 1


def test_exit_does_not_block_reachability():
    game_map = parse_map(BEHIND_EXIT)
    summary = validate_map(game_map)
    assert count_reachable(game_map, summary.player) == summary.collectibles + 1


def test_walls_block_reachability():
    game_map = parse_map(BLOCKED)
    summary = count_tiles(game_map)
    assert count_reachable(game_map, summary.player) < summary.collectibles + 1


def test_validate_map_rejects_unreachable_collectible():
    with pytest.raises(MapError):
        validate_map(parse_map(BLOCKED))


def test_validate_map_accepts_valid_map():
    summary = validate_map(parse_map(VALID))
    assert isinstance(summary, MapSummary)
    assert summary.walls == count_tiles(parse_map(VALID)).walls


def test_count_reachable_outside_start_raises():
    with pytest.raises(IndexError):
        count_reachable(GameMap([list("111")]), (5, 5))