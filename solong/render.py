"""Drawing the map and the player with sprites."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pygame

from solong.game import Game
from solong.game_map import COLLECTIBLE, EXIT, FLOOR, OPEN_EXIT, PLAYER, WALL
from solong.xpm import XpmImage, load_xpm

PIXEL = 32
"""Side of one tile in pixels."""

DEFAULT_IMAGE_DIR = Path("images") / "xpm"

_SPRITE_FILES = {
    "field": "field1x32.xpm",
    "wall": "wall32.xpm",
    "coin": "coin_bg32.xpm",
    "exit": "exit_closed_bg32.xpm",
    "player": "knight_front_bg32.xpm",
    "exit_opened": "exit_opened_bg32.xpm",
}


@dataclass
class Sprites:
    """The images the game draws with."""

    player: pygame.Surface
    coin: pygame.Surface
    wall: pygame.Surface
    field: pygame.Surface
    exit: pygame.Surface
    exit_opened: pygame.Surface


def xpm_to_surface(image: XpmImage) -> pygame.Surface:
    """Turn a decoded XPM image into a surface with per-pixel alpha."""
    surface = pygame.Surface((image.width, image.height), pygame.SRCALPHA)
    for y, row in enumerate(image.pixels):
        for x, value in enumerate(row):
            transparency = (value >> 24) & 0xFF
            surface.set_at(
                (x, y),
                ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 255 - transparency),
            )
    return surface


def load_sprites(image_dir: Union[str, os.PathLike] = DEFAULT_IMAGE_DIR) -> Sprites:
    """Load every sprite from ``image_dir``; raises XpmError if one cannot be read."""
    base = Path(image_dir)
    return Sprites(
        **{
            name: xpm_to_surface(load_xpm(base / filename))
            for name, filename in _SPRITE_FILES.items()
        }
    )


def tile_sprite(sprites: Sprites, tile: str) -> Optional[pygame.Surface]:
    """Return the sprite for a map tile, or None for a tile drawn as nothing."""
    return {
        WALL: sprites.wall,
        FLOOR: sprites.field,
        PLAYER: sprites.field,
        COLLECTIBLE: sprites.coin,
        EXIT: sprites.exit,
        OPEN_EXIT: sprites.exit_opened,
    }.get(tile)


def draw_map(surface: pygame.Surface, game: Game, sprites: Sprites) -> None:
    """Draw every tile of the game's board, then the player on top."""
    for x, y, tile in game.board.positions():
        sprite = tile_sprite(sprites, tile)
        if sprite is not None:
            surface.blit(sprite, (x * PIXEL, y * PIXEL))
    px, py = game.player
    surface.blit(sprites.player, (px * PIXEL, py * PIXEL))