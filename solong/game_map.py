"""Map files: reading, validation and reachability of the goals."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Optional, Union

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
OPEN_EXIT = "e"
PLAYER = "P"

TILES = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, OPEN_EXIT, PLAYER})

Position = tuple[int, int]

_NEIGHBOURS: tuple[Position, ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))


class MapError(ValueError):
    """Raised when a map cannot be read or is not playable."""


@dataclass
class GameMap:
    """A grid of tile characters, addressed by column ``x`` and row ``y``."""

    rows: list[list[str]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def contains(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies on the map."""
        return 0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])

    def tile(self, x: int, y: int) -> str:
        """Return the tile at (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def set_tile(self, x: int, y: int, value: str) -> None:
        """Replace the tile at (x, y) with a single character."""
        if len(value) != 1:
            raise ValueError(f"a tile is one character, got {value!r}")
        if not self.contains(x, y):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        self.rows[y][x] = value

    def positions(self) -> Iterator[tuple[int, int, str]]:
        """Yield (x, y, tile) for every tile, row by row."""
        for y, row in enumerate(self.rows):
            for x, tile in enumerate(row):
                yield x, y, tile

    def copy(self) -> GameMap:
        """Return an independent copy of the map."""
        return GameMap([list(row) for row in self.rows])

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


@dataclass(frozen=True)
class MapSummary:
    """Tile counts of a map and where its player and exit stand."""

    player: Optional[Position]
    exit: Optional[Position]
    players: int
    exits: int
    collectibles: int
    walls: int


def parse_map(text: str) -> GameMap:
    """Build a map from its text, one row per line."""
    if not text:
        raise MapError("map is empty")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return GameMap([list(line) for line in lines])


def read_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read a map file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_map(handle.read())


def count_tiles(game_map: GameMap) -> MapSummary:
    """Count players, exits, collectibles and walls; the last player and exit found win."""
    player: Optional[Position] = None
    exit_: Optional[Position] = None
    players = exits = collectibles = walls = 0
    for x, y, tile in game_map.positions():
        if tile == PLAYER:
            player = (x, y)
            players += 1
        elif tile == EXIT:
            exit_ = (x, y)
            exits += 1
        elif tile == COLLECTIBLE:
            collectibles += 1
        elif tile == WALL:
            walls += 1
    return MapSummary(player, exit_, players, exits, collectibles, walls)


def check_map(game_map: GameMap) -> MapSummary:
    """Check the shape and tile counts of a map and return its summary."""
    width = game_map.width
    if any(len(row) != width for row in game_map.rows):
        raise MapError("map is not rectangular")
    unknown = sorted({tile for _, _, tile in game_map.positions() if tile not in TILES})
    if unknown:
        raise MapError(f"unknown tiles in map: {''.join(unknown)}")
    summary = count_tiles(game_map)
    if summary.players != 1:
        raise MapError("map must have exactly one player")
    if summary.exits != 1:
        raise MapError("map must have exactly one exit")
    if summary.collectibles < 1:
        raise MapError("map must have at least one collectible")
    if summary.walls < 1:
        raise MapError("map must have walls")
    return summary


def count_reachable(game_map: GameMap, start: Position) -> int:
    """Count the exits and collectibles reachable from ``start`` without crossing walls."""
    if not game_map.contains(*start):
        raise IndexError(f"position {start} is outside the map")
    seen = {start}
    stack = [start]
    found = 0
    while stack:
        x, y = stack.pop()
        if game_map.tile(x, y) in (EXIT, COLLECTIBLE):
            found += 1
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if (
                (nx, ny) not in seen
                and game_map.contains(nx, ny)
                and game_map.tile(nx, ny) != WALL
            ):
                seen.add((nx, ny))
                stack.append((nx, ny))
    return found


def validate_map(game_map: GameMap) -> MapSummary:
    """Check a map fully, including that every goal can be reached."""
    summary = check_map(game_map)
    if summary.player is None:
        raise MapError("map must have exactly one player")
    if count_reachable(game_map, summary.player) != summary.collectibles + 1:
        raise MapError("not every collectible and the exit can be reached")
    return summary