"""A tile-based puzzle game: collect the coins, then reach the exit.

Holds map reading and validation, the game rules, an XPM image reader,
X11 colour names, pygame drawing and the so_long command.
"""

__version__ = "1.0.0"
__all__ = ["colors", "game_map", "game", "xpm", "render", "cli"]