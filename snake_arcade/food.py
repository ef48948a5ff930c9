"""Food placement."""

import logging
import random
from typing import Optional

from .constants import FOOD_SPAWN_ATTEMPTS
from .models import Position

logger = logging.getLogger(__name__)


class BoardFull(Exception):
    """Raised when every cell of the grid is covered by the snake."""


class Food:
    """
    The single piece of food on the board.

    Attributes:
        position: cell holding the food, None once the board is full
        rng: random source used for placement (the random module by default)
    """

    def __init__(self, position: Optional[Position] = None, rng=None):
        self.position = position
        self.rng = rng or random

    def respawn(self, grid_width: int, grid_height: int, occupied: set[Position],
                attempts: int = FOOD_SPAWN_ATTEMPTS) -> Position:
        for _ in range(attempts):
            cell = Position(self.rng.randrange(grid_width), self.rng.randrange(grid_height))
            if cell not in occupied:
                self.position = cell
                return cell

        # Crowded board: choose among the remaining free cells.
        free = [
            Position(x, y)
            for x in range(grid_width)
            for y in range(grid_height)
            if (x, y) not in occupied
        ]
        if not free:
            raise BoardFull(f"no free cell left on {grid_width}x{grid_height} grid")
        logger.debug("Food sampling exhausted after %d attempts, %d free cells left", attempts, len(free))
        self.position = self.rng.choice(free)
        return self.position
