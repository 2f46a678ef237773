"""Conway's Game of Life on a toroidal board, rendered to the console."""

__version__ = "0.1.0"

from .core.board import Board
from .core.cell import Cell
from .core.errors import InvalidDimension, LifeError, MalformedState
from .core.state import BoardState

__all__ = ["Board", "Cell", "BoardState", "LifeError", "InvalidDimension", "MalformedState"]
