"""Tests for food placement."""

import random

import pytest

from snake_arcade.food import BoardFull, Food
from snake_arcade.models import Position


class TestRespawn:
    def test_avoids_occupied_cells(self):
        food = Food(rng=random.Random(0))
        occupied = {Position(x, 0) for x in range(4)}
        for _ in range(50):
            cell = food.respawn(4, 2, occupied)
            assert cell not in occupied
            assert cell.in_bounds(4, 2)

    def test_sets_position(self):
        food = Food(rng=random.Random(1))
        cell = food.respawn(5, 5, set())
        assert food.position == cell

    def test_falls_back_to_free_cells_when_sampling_exhausted(self):
        food = Food(rng=random.Random(2))
        occupied = {Position(x, y) for x in range(3) for y in range(3)} - {Position(2, 1)}
        assert food.respawn(3, 3, occupied, attempts=0) == Position(2, 1)

    def test_board_full(self):
        food = Food(rng=random.Random(3))
        occupied = {Position(x, y) for x in range(2) for y in range(2)}
        with pytest.raises(BoardFull):
            food.respawn(2, 2, occupied)

    def test_uses_module_random_by_default(self):
        assert Food().rng is random

    def test_starts_without_position(self):
        food = Food()
        assert food.position is None
        assert "position" in Food.__doc__
