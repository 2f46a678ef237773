"""Compare board stepping against a convolution-based reference."""

import numpy as np
import pytest
import torch
import torch.nn.functional as F
from clilife.core.board import Board


def reference_step(alive: np.ndarray) -> np.ndarray:
    """Apply one generation to a (width, height) boolean array.

    Neighbors are counted with a 3x3 convolution over a circularly padded
    copy, which wraps every edge of the board.
    """
    kernel = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

    # PyTorch expects (height, width), so transpose
    cells = torch.from_numpy(np.ascontiguousarray(alive.T, dtype=np.float32)).unsqueeze(0).unsqueeze(0)
    padded = F.pad(cells, (1, 1, 1, 1), mode="circular")
    counts = F.conv2d(padded, kernel)[0, 0].numpy().astype(np.int8).T

    return (alive & ((counts == 2) | (counts == 3))) | (~alive & (counts == 3))


class TestReferenceStep:
    """Test Board.advance against the convolution reference."""

    @pytest.mark.parametrize(
        "width, height, density, seed",
        [(3, 3, 0.5, 0), (8, 5, 0.3, 1), (16, 12, 0.35, 2), (31, 17, 0.2, 3), (40, 40, 0.5, 4)],
    )
    def test_matches_reference(self, width, height, density, seed):
        """Test several generations of random boards."""
        board = Board(width, height, live_density=density, rng=seed)
        expected = board.alive_matrix()

        for _ in range(12):
            expected = reference_step(expected)
            board.advance()
            assert np.array_equal(board.alive_matrix(), expected)
