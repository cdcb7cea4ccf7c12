import pygame
import pytest

from solong.game import Direction, Game
from solong.game_map import parse_map
from solong.render import PIXEL, Sprites, draw_map, load_sprites, tile_sprite, xpm_to_surface
from solong.xpm import XpmError, parse_xpm_lines

COLORS = {
    "player": (200, 10, 10, 255),
    "coin": (10, 200, 10, 255),
    "wall": (10, 10, 200, 255),
    "field": (100, 100, 100, 255),
    "exit": (50, 60, 70, 255),
    "exit_opened": (90, 80, 70, 255),
}

MAP_TEXT = "111111\n1PC0E1\n111111\n"


def _solid(color):
    surface = pygame.Surface((PIXEL, PIXEL), pygame.SRCALPHA)
    surface.fill(color)
    return surface


@pytest.fixture
def sprites():
    return Sprites(**{name: _solid(color) for name, color in COLORS.items()})


def _color_at(surface, x, y):
    return tuple(surface.get_at((x * PIXEL + 1, y * PIXEL + 1)))


def test_xpm_to_surface_colours_and_transparency():
    image = parse_xpm_lines(["2 1 2 1", "a c #102030", "b c None", "ab"])
    surface = xpm_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (0x10, 0x20, 0x30, 255)
    assert surface.get_at((1, 0)).a == 0


def test_tile_sprite_mapping(sprites):
    assert tile_sprite(sprites, "1") is sprites.wall
    assert tile_sprite(sprites, "0") is sprites.field
    assert tile_sprite(sprites, "P") is sprites.field
    assert tile_sprite(sprites, "C") is sprites.coin
    assert tile_sprite(sprites, "E") is sprites.exit
    assert tile_sprite(sprites, "e") is sprites.exit_opened
    assert tile_sprite(sprites, "X") is None


def test_draw_map_places_tiles_and_player(sprites):
    game = Game.from_map(parse_map(MAP_TEXT), log=lambda line: None)
    surface = pygame.Surface((6 * PIXEL, 3 * PIXEL), pygame.SRCALPHA)
    draw_map(surface, game, sprites)
    assert _color_at(surface, 0, 0) == COLORS["wall"]
    assert _color_at(surface, 1, 1) == COLORS["player"]
    assert _color_at(surface, 2, 1) == COLORS["coin"]
    assert _color_at(surface, 3, 1) == COLORS["field"]
    assert _color_at(surface, 4, 1) == COLORS["exit"]


def test_draw_map_after_collecting_shows_open_exit(sprites):
    game = Game.from_map(parse_map(MAP_TEXT), log=lambda line: None)
    game.move(Direction.RIGHT)
    surface = pygame.Surface((6 * PIXEL, 3 * PIXEL), pygame.SRCALPHA)
    draw_map(surface, game, sprites)
    assert _color_at(surface, 1, 1) == COLORS["field"]
    assert _color_at(surface, 2, 1) == COLORS["player"]
    assert _color_at(surface, 4, 1) == COLORS["exit_opened"]


def test_load_sprites_reads_every_file(tmp_path):
    names = [
        "field1x32.xpm",
        "wall32.xpm",
        "coin_bg32.xpm",
        "exit_closed_bg32.xpm",
        "knight_front_bg32.xpm",
        "exit_opened_bg32.xpm",
    ]
    for name in names:
        (tmp_path / name).write_text('"1 1 1 1",\n"a c #00FF00",\n"a"\n')
    loaded = load_sprites(tmp_path)
    for surface in (loaded.player, loaded.coin, loaded.wall, loaded.field,
                    loaded.exit, loaded.exit_opened):
        assert surface.get_size() == (1, 1)
        assert tuple(surface.get_at((0, 0))) == (0, 255, 0, 255)


def test_load_sprites_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_sprites(tmp_path)