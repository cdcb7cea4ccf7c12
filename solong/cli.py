"""Command line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

import pygame

from solong.game import Game, Key
from solong.game_map import MapError, read_map
from solong.render import DEFAULT_IMAGE_DIR, PIXEL, draw_map, load_sprites
from solong.xpm import XpmError

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_ESCAPE: Key.ESC,
}

_FRAME_RATE = 60


def load_game(
    argv: Optional[Sequence[str]] = None,
    log: Optional[Callable[[str], None]] = None,
) -> Game:
    """Start a game from the single map path in ``argv``.

    Raises ValueError for a wrong argument count, FileNotFoundError when the
    map cannot be opened and MapError when it is not playable.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        raise ValueError("wrong number of arguments")
    try:
        game_map = read_map(args[0])
    except OSError as exc:
        raise FileNotFoundError("map file not found") from exc
    except ValueError as exc:
        raise MapError("Map isn't playable") from exc
    try:
        return Game.from_map(game_map, log)
    except MapError as exc:
        raise MapError("Map isn't playable") from exc


def _report(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def _run(screen: pygame.Surface, game: Game, sprites) -> None:
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                code = _KEYS.get(event.key)
                if code is not None:
                    game.handle_key(code)
        if game.closed:
            return
        draw_map(screen, game, sprites)
        pygame.display.flip()
        if game.finished():
            return
        clock.tick(_FRAME_RATE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play the map named on the command line; return the exit status."""
    try:
        game = load_game(argv)
    except (ValueError, OSError) as exc:
        _report(str(exc))
        return 1
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.board.width * PIXEL, game.board.height * PIXEL)
        )
        pygame.display.set_caption("so_long")
        try:
            sprites = load_sprites(DEFAULT_IMAGE_DIR)
        except XpmError:
            _report("initialization failed")
            return 1
        _run(screen, game, sprites)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())