"""Data models."""

from enum import Enum
from typing import NamedTuple

from .constants import DIRECTIONS, OPPOSITES


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Command(Enum):
    RESTART = "restart"
    QUIT = "quit"


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"
    WON = "won"


class Position(NamedTuple):
    x: int
    y: int

    def offset(self, direction: Direction) -> "Position":
        dx, dy = DIRECTIONS[direction.value]
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


def offset(position: Position, direction: Direction) -> Position:
    return position.offset(direction)


def opposite(direction: Direction) -> Direction:
    return Direction(OPPOSITES[direction.value])
