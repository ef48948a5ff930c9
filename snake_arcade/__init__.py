"""
Snake Arcade game engine.

The core entities here are independent of the web driver in main.py.
"""

from .models import Command, Direction, GameStatus, Position, offset, opposite
from .snake import Snake
from .food import BoardFull, Food
from .game import Game, new_game

__all__ = [
    'Command', 'Direction', 'GameStatus', 'Position', 'offset', 'opposite',
    'Snake',
    'BoardFull', 'Food',
    'Game', 'new_game',
]
