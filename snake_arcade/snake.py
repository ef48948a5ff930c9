"""Snake entity: body, heading and movement."""

from collections import deque
from itertools import islice
from typing import Iterable, Iterator

from .models import Direction, Position, opposite


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        body: deque of Position from head at index 0 to tail at the end
        direction: direction applied on the most recent tick
        next_direction: direction that will be applied on the next tick
        growing: set after eating, consumed by the next advance()
    """

    def __init__(self, positions: Iterable[tuple[int, int]], direction: Direction = Direction.RIGHT):
        self.body: deque[Position] = deque(Position(*p) for p in positions)
        if not self.body:
            raise ValueError("snake body must contain at least one segment")
        self.direction = direction
        self.next_direction = direction
        self.growing = False

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    @property
    def head(self) -> Position:
        return self.body[0]

    def occupied(self) -> set[Position]:
        return set(self.body)

    def set_direction(self, requested: Direction):
        # Length 1 may reverse in place.
        if len(self.body) > 1 and requested == opposite(self.direction):
            return
        self.next_direction = requested

    def advance(self) -> Position:
        new_head = self.head.offset(self.next_direction)
        self.direction = self.next_direction
        self.body.appendleft(new_head)
        if self.growing:
            self.growing = False
        else:
            self.body.pop()
        return new_head

    def grow(self):
        self.growing = True

    def collides_with_self(self, point: Position) -> bool:
        """True if point lies on a segment behind the head.

        After advance() those segments are the previous body minus the tail
        vacated on this tick, so moving into the old tail cell is legal.
        """
        return point in islice(self.body, 1, None)
