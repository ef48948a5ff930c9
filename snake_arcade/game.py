"""Core game state and logic."""

import logging
import random
from typing import Optional, Union

from .constants import GRID_W, GRID_H, REFRESH_RATE_MS, SCORE_PER_FOOD
from .food import BoardFull, Food
from .models import Command, Direction, GameStatus, Position
from .snake import Snake

logger = logging.getLogger(__name__)


class Game:
    """
    One single-player session.

    Attributes:
        grid_width, grid_height: board dimensions in cells
        refresh_rate_ms: tick interval the driver should honour
        snake, food: the session's entities
        score: +SCORE_PER_FOOD for every food eaten
        status: RUNNING until the snake dies (GAME_OVER) or fills the board (WON)
        death_reason: 'wall' or 'self' once the game is over
        events: what happened during the most recent tick ('eat', 'game_over', 'won')
    """

    def __init__(self, grid_width: int = GRID_W, grid_height: int = GRID_H,
                 refresh_rate_ms: int = REFRESH_RATE_MS, rng: Optional[random.Random] = None):
        if grid_width < 1 or grid_height < 1:
            raise ValueError(f"grid must be at least 1x1, got {grid_width}x{grid_height}")
        if refresh_rate_ms <= 0:
            raise ValueError(f"refresh rate must be positive, got {refresh_rate_ms}")
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.refresh_rate_ms = refresh_rate_ms
        self.rng = rng or random.Random()
        self.reset()

    @property
    def start_position(self) -> Position:
        return Position(self.grid_width // 2, self.grid_height // 2)

    @property
    def is_running(self) -> bool:
        return self.status == GameStatus.RUNNING

    def reset(self):
        self.snake = Snake([self.start_position], Direction.RIGHT)
        self.food = Food(rng=self.rng)
        self.score = 0
        self.status = GameStatus.RUNNING
        self.death_reason: Optional[str] = None
        self.events: list[str] = []
        try:
            self.food.respawn(self.grid_width, self.grid_height, self.snake.occupied())
        except BoardFull:
            # A 1x1 grid is full before the first move.
            self._win()

    def tick(self) -> bool:
        """Advance the session by one step. Returns False when nothing moved."""
        if not self.is_running:
            return False

        self.events.clear()
        new_head = self.snake.advance()

        if not new_head.in_bounds(self.grid_width, self.grid_height):
            self._end("wall")
            return True
        if self.snake.collides_with_self(new_head):
            self._end("self")
            return True

        if new_head == self.food.position:
            self.score += SCORE_PER_FOOD
            self.snake.grow()
            self.events.append("eat")
            logger.debug("Ate food at %s, score %d", new_head, self.score)
            try:
                self.food.respawn(self.grid_width, self.grid_height, self.snake.occupied())
            except BoardFull:
                self._win()
        return True

    def handle_input(self, action: Union[Direction, Command, None]):
        if action is Command.RESTART:
            self.restart()
        elif isinstance(action, Direction) and self.is_running:
            self.snake.set_direction(action)

    def restart(self):
        if self.is_running:
            return
        logger.info("Restarting %dx%d game (previous score %d)", self.grid_width, self.grid_height, self.score)
        self.reset()

    def _end(self, reason: str):
        self.status = GameStatus.GAME_OVER
        self.death_reason = reason
        self.events.append("game_over")
        logger.info("Game over (%s) with score %d, length %d", reason, self.score, len(self.snake))

    def _win(self):
        self.status = GameStatus.WON
        self.food.position = None
        self.events.append("won")
        logger.info("Board full, game won with score %d", self.score)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first; segments outside the grid are skipped.
        """
        board = [['.' for _ in range(self.grid_width)] for _ in range(self.grid_height)]

        if self.food.position is not None:
            fx, fy = self.food.position
            board[fy][fx] = 'F'

        # Tail first so the head wins on a self-collision.
        for i, segment in reversed(list(enumerate(self.snake))):
            if segment.in_bounds(self.grid_width, self.grid_height):
                board[segment.y][segment.x] = 'H' if i == 0 else 'S'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<Game {self.grid_width}x{self.grid_height} status={self.status.value}, "
            f"score={self.score}, length={len(self.snake)}, food={self.food.position}>"
        )


def new_game(grid_width: int = GRID_W, grid_height: int = GRID_H,
             refresh_rate_ms: int = REFRESH_RATE_MS, rng: Optional[random.Random] = None) -> Game:
    return Game(grid_width, grid_height, refresh_rate_ms, rng)
