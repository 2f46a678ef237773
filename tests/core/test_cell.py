"""Tests for the Cell class."""

import pytest
from clilife.core.cell import Cell


def make_cells(width, height):
    """Build an unwired [x][y] array of dead cells."""
    return [[Cell() for _ in range(height)] for _ in range(width)]


# Neighbors of the cell at (1, 1) in a 3x3 array
NEIGHBORS = ((0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2))


class TestCell:
    """Test cases for the Cell class."""

    def test_initialization(self):
        """Test a new cell is dead and unwired."""
        cell = Cell()
        assert cell.alive is False
        assert cell.pending_alive is False
        assert cell.neighbors == ()

        assert Cell(alive=True).alive is True

    def test_connect(self):
        """Test neighbor wiring."""
        cell = Cell()
        cell.connect(list(NEIGHBORS))
        assert cell.neighbors == NEIGHBORS

    def test_connect_only_once(self):
        """Test the neighbor list can't be rewired."""
        cell = Cell()
        cell.connect(NEIGHBORS)

        with pytest.raises(RuntimeError):
            cell.connect(NEIGHBORS)

        assert cell.neighbors == NEIGHBORS

    def test_connect_requires_eight(self):
        """Test wiring with the wrong number of neighbors fails."""
        cell = Cell()
        with pytest.raises(ValueError):
            cell.connect(NEIGHBORS[:7])
        assert cell.neighbors == ()

    def test_live_neighbors(self):
        """Test counting living neighbors."""
        cells = make_cells(3, 3)
        center = cells[1][1]
        center.connect(NEIGHBORS)
        assert center.live_neighbors(cells) == 0

        cells[0][0].alive = True
        cells[2][2].alive = True
        assert center.live_neighbors(cells) == 2

        # The cell itself is not one of its neighbors
        center.alive = True
        assert center.live_neighbors(cells) == 2

    def test_repeated_neighbor_counts_each_time(self):
        """Test a neighbor listed twice is counted twice."""
        cells = make_cells(2, 1)
        cells[1][0].alive = True
        cells[0][0].connect([(1, 0)] * 4 + [(0, 0)] * 4)
        assert cells[0][0].live_neighbors(cells) == 4

    @pytest.mark.parametrize("count, expected", [(0, False), (1, False), (2, False), (3, True), (4, False), (8, False)])
    def test_birth_rule(self, count, expected):
        """Test a dead cell is born only with exactly 3 neighbors."""
        cells = make_cells(3, 3)
        center = cells[1][1]
        center.connect(NEIGHBORS)
        for x, y in NEIGHBORS[:count]:
            cells[x][y].alive = True

        center.prepare_step(cells)
        assert center.pending_alive is expected

    @pytest.mark.parametrize(
        "count, expected",
        [(0, False), (1, False), (2, True), (3, True), (4, False), (5, False), (8, False)],
    )
    def test_survival_rule(self, count, expected):
        """Test a living cell survives only with 2 or 3 neighbors."""
        cells = make_cells(3, 3)
        center = cells[1][1]
        center.alive = True
        center.connect(NEIGHBORS)
        for x, y in NEIGHBORS[:count]:
            cells[x][y].alive = True

        center.prepare_step(cells)
        assert center.pending_alive is expected

    def test_prepare_does_not_change_state(self):
        """Test preparing only sets the pending state."""
        cells = make_cells(3, 3)
        center = cells[1][1]
        center.connect(NEIGHBORS)
        for x, y in NEIGHBORS[:3]:
            cells[x][y].alive = True

        center.prepare_step(cells)
        assert center.alive is False
        assert center.pending_alive is True

        center.commit_step()
        assert center.alive is True

    def test_commit_without_change(self):
        """Test committing a prepared death."""
        cell = Cell(alive=True)
        cell.pending_alive = False
        cell.commit_step()
        assert cell.alive is False
