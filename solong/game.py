"""Game state: the player's moves, collecting and the exit."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Optional

from solong.game_map import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    OPEN_EXIT,
    WALL,
    GameMap,
    Position,
    validate_map,
)


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    W = 1
    D = 2
    S = 13
    ESC = 53


class Direction(Enum):
    """A step on the map in screen terms (rows grow downward)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# W steps to the next row and S to the previous one.
_KEY_DIRECTIONS = {
    Key.W: Direction.DOWN,
    Key.S: Direction.UP,
    Key.A: Direction.LEFT,
    Key.D: Direction.RIGHT,
}


def _stderr_log(line: str) -> None:
    sys.stderr.write(line + "\n")


@dataclass
class Game:
    """A running game on a validated map."""

    board: GameMap
    player: Position
    exit: Position
    collectibles: int
    moves: int = 0
    exit_opened: bool = False
    closed: bool = False
    log: Callable[[str], None] = field(default=_stderr_log, repr=False)

    @classmethod
    def from_map(
        cls, game_map: GameMap, log: Optional[Callable[[str], None]] = None
    ) -> Game:
        """Start a game on a copy of ``game_map``; raises MapError if it is not playable."""
        summary = validate_map(game_map)
        board = game_map.copy()
        player = summary.player
        exit_ = summary.exit
        if player is None or exit_ is None:
            raise ValueError("validated map lacks a player or an exit")
        board.set_tile(*player, FLOOR)
        return cls(
            board=board,
            player=player,
            exit=exit_,
            collectibles=summary.collectibles,
            log=log or _stderr_log,
        )

    def move(self, direction: Direction) -> bool:
        """Step the player one tile; return False when a wall or closed exit is in the way."""
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        if not self.board.contains(nx, ny) or self.board.tile(nx, ny) in (WALL, EXIT):
            return False
        self.player = (nx, ny)
        self.moves += 1
        if self.board.tile(nx, ny) == COLLECTIBLE:
            self.board.set_tile(nx, ny, FLOOR)
            self.collectibles -= 1
        self.log(f"move_count: {self.moves}")
        self._open_exit_if_done()
        return True

    def handle_key(self, key_code: int) -> None:
        """React to a key code: move, or close the game on ESC."""
        if key_code == Key.ESC:
            self.closed = True
            return
        direction = _KEY_DIRECTIONS.get(key_code)
        if direction is not None:
            self.move(direction)
        self._open_exit_if_done()

    def finished(self) -> bool:
        """Tell whether every collectible is taken and the player stands on the open exit."""
        return self.collectibles == 0 and self.board.tile(*self.player) == OPEN_EXIT

    def _open_exit_if_done(self) -> None:
        if self.collectibles == 0:
            self.board.set_tile(*self.exit, OPEN_EXIT)
            self.exit_opened = True