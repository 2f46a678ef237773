"""A single site of the Game of Life board."""

from typing import Optional, Sequence, Tuple

Coordinate = Tuple[int, int]


class Cell:
    """One automaton site.

    Neighbors are stored as ``(x, y)`` coordinates into the owning board's
    cell array rather than as references to other cells. They are wired once
    by the board and never change afterwards.
    """

    __slots__ = ("alive", "pending_alive", "_neighbors")

    def __init__(self, alive: bool = False) -> None:
        self.alive = alive
        self.pending_alive = False
        self._neighbors: Optional[Tuple[Coordinate, ...]] = None

    @property
    def neighbors(self) -> Tuple[Coordinate, ...]:
        """Coordinates of the 8 neighboring cells (empty until wired)."""
        return self._neighbors or ()

    def connect(self, neighbors: Sequence[Coordinate]) -> None:
        """Wire this cell to its neighbors.

        Args:
            neighbors: The 8 neighbor coordinates, in a stable order

        Raises:
            RuntimeError: If the cell has already been wired
            ValueError: If the number of neighbors is not 8
        """
        if self._neighbors is not None:
            raise RuntimeError("Cell neighbors are already connected")
        if len(neighbors) != 8:
            raise ValueError(f"A cell needs exactly 8 neighbors, got {len(neighbors)}")
        self._neighbors = tuple(neighbors)

    def live_neighbors(self, cells: Sequence[Sequence["Cell"]]) -> int:
        """Count living neighbors.

        Args:
            cells: The board's cell array, indexed ``[x][y]``

        Returns:
            Number of living neighbors (0-8)
        """
        return sum(1 for x, y in self.neighbors if cells[x][y].alive)

    def prepare_step(self, cells: Sequence[Sequence["Cell"]]) -> None:
        """Decide the next state from the neighbors' current state.

        Only ``pending_alive`` is written, so every cell of a board can be
        prepared before any of them commits.
        """
        count = self.live_neighbors(cells)
        if self.alive:
            self.pending_alive = count == 2 or count == 3
        else:
            self.pending_alive = count == 3

    def commit_step(self) -> None:
        """Make the prepared state current."""
        self.alive = self.pending_alive

    def __repr__(self) -> str:
        return f"Cell(alive={self.alive})"
