"""Toroidal board of cells for Conway's Game of Life."""

import logging
from numbers import Integral
from typing import Sequence, Tuple, Union

import numpy as np

from .cell import Cell, Coordinate
from .errors import InvalidDimension, MalformedState
from .state import ALIVE, DEAD, BoardState, PathLike, load_state, save_state

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def neighbor_coordinates(x: int, y: int, width: int, height: int) -> Tuple[Coordinate, ...]:
    """Get the Moore neighborhood of a cell on a torus.

    Args:
        x: Column coordinate
        y: Row coordinate
        width: Board width
        height: Board height

    Returns:
        The 8 neighbor coordinates: top row left to right, then left and
        right, then bottom row left to right
    """
    x_left = (x - 1 + width) % width
    x_right = (x + 1) % width
    y_top = (y - 1 + height) % height
    y_bottom = (y + 1) % height

    return (
        (x_left, y_top),
        (x, y_top),
        (x_right, y_top),
        (x_left, y),
        (x_right, y),
        (x_left, y_bottom),
        (x, y_bottom),
        (x_right, y_bottom),
    )


class Board:
    """A fixed-size wrap-around grid of cells.

    Cells are indexed ``[x][y]`` and owned by the board. Each cell knows its
    neighbors by coordinate; the wiring is done once when the board is built
    and is never persisted.
    """

    def __init__(
        self,
        width: int,
        height: int,
        live_density: float = 0.1,
        rng: RandomSource = None,
    ) -> None:
        """Create a randomly seeded board.

        Args:
            width: Number of columns
            height: Number of rows
            live_density: Chance each cell starts alive. Not clamped, so
                values <= 0 give an empty board and values >= 1 a full one.
            rng: numpy Generator or seed used for seeding

        Raises:
            InvalidDimension: If width or height is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
                raise InvalidDimension(f"Board {name} must be a positive integer, got {value!r}")

        self._build(int(width), int(height), rng)
        self.randomize(live_density)
        logger.debug("Created %dx%d board with live density %s", self.width, self.height, live_density)

    def _build(self, width: int, height: int, rng: RandomSource) -> None:
        self._width = width
        self._height = height
        self._rng = np.random.default_rng(rng)
        self._cells: Tuple[Tuple[Cell, ...], ...] = tuple(
            tuple(Cell() for _ in range(height)) for _ in range(width)
        )
        self._connect_neighbors()

    def _connect_neighbors(self) -> None:
        for x in range(self._width):
            for y in range(self._height):
                self._cells[x][y].connect(neighbor_coordinates(x, y, self._width, self._height))

    @classmethod
    def from_state(cls, state: BoardState, rng: RandomSource = None) -> "Board":
        """Build a board from a saved state.

        Args:
            state: Saved cell states
            rng: numpy Generator or seed for later calls to randomize()

        Returns:
            New Board instance

        Raises:
            MalformedState: If the fields have the wrong types or the rows
                don't match the declared dimensions
        """
        for name, value in (("width", state.width), ("height", state.height)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise MalformedState(f"Board state {name} must be an integer, got {value!r}")

        if isinstance(state.rows, str) or not isinstance(state.rows, Sequence):
            raise MalformedState(f"Board state rows must be a sequence of strings, got {state.rows!r}")
        if not all(isinstance(row, str) for row in state.rows):
            raise MalformedState("Board state rows must be a sequence of strings")

        if state.width <= 0 or state.height <= 0:
            raise MalformedState(f"Board state has invalid size {state.width}x{state.height}")

        if len(state.rows) != state.height:
            raise MalformedState(f"Board state declares {state.height} rows but has {len(state.rows)}")

        for y, row in enumerate(state.rows):
            if len(row) != state.width:
                raise MalformedState(f"Row {y} has length {len(row)}, expected {state.width}")

        board = cls.__new__(cls)
        board._build(int(state.width), int(state.height), rng)
        for x in range(board.width):
            for y in range(board.height):
                board._cells[x][y].alive = state.rows[y][x] == ALIVE

        return board

    @classmethod
    def load(cls, path: PathLike, rng: RandomSource = None) -> "Board":
        """Build a board from a JSON state file.

        Raises:
            MalformedState: If the file is not a valid board state
            OSError: If the file cannot be read
        """
        board = cls.from_state(load_state(path), rng)
        logger.debug("Loaded %dx%d board with %d living cells", board.width, board.height, board.population)
        return board

    def to_state(self) -> BoardState:
        """Snapshot the current cell states."""
        rows = tuple(
            "".join(ALIVE if self._cells[x][y].alive else DEAD for x in range(self._width))
            for y in range(self._height)
        )
        return BoardState(width=self._width, height=self._height, rows=rows)

    def save(self, path: PathLike) -> None:
        """Write the current cell states to a JSON state file."""
        save_state(self.to_state(), path)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        """The cell array, indexed ``[x][y]``. Its shape can't be changed."""
        return self._cells

    def cell(self, x: int, y: int) -> Cell:
        """Get the cell at a coordinate, wrapping around the edges."""
        return self._cells[x % self._width][y % self._height]

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell, wrapping around the edges.

        Returns:
            True if cell is alive, False if dead
        """
        return self.cell(x, y).alive

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return sum(cell.alive for column in self._cells for cell in column)

    def alive_matrix(self) -> np.ndarray:
        """Get cell states as a boolean array of shape (width, height)."""
        return np.array([[cell.alive for cell in column] for column in self._cells], dtype=bool)

    def randomize(self, live_density: float = 0.1) -> None:
        """Randomly reseed every cell.

        Args:
            live_density: Chance each cell will be alive
        """
        draws = self._rng.random((self._width, self._height))
        for x, column in enumerate(self._cells):
            for y, cell in enumerate(column):
                cell.alive = bool(draws[x, y] < live_density)

    def advance(self) -> None:
        """Advance every cell by one generation.

        All cells are prepared before any cell commits, so each decision sees
        only the previous generation.
        """
        for column in self._cells:
            for cell in column:
                cell.prepare_step(self._cells)

        for column in self._cells:
            for cell in column:
                cell.commit_step()

    def __eq__(self, other: object) -> bool:
        """Check if two boards have the same shape and cell states."""
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.alive_matrix(), other.alive_matrix())

    def __str__(self) -> str:
        """Rows of '*' for living cells and ' ' for dead ones."""
        return "\n".join(self.to_state().rows)

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, population={self.population})"
