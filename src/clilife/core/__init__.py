"""Core cellular automata logic."""

from .board import Board, neighbor_coordinates
from .cell import Cell
from .errors import InvalidDimension, LifeError, MalformedState
from .state import BoardState, load_state, save_state

__all__ = [
    "Board",
    "Cell",
    "BoardState",
    "LifeError",
    "InvalidDimension",
    "MalformedState",
    "neighbor_coordinates",
    "load_state",
    "save_state",
]
