from .config import Settings
from .game import Food, Game, State
from .snake import Cell, Direction, Snake

__all__ = ["Cell", "Direction", "Food", "Game", "Settings", "Snake", "State"]
