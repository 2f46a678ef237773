#!/usr/bin/env python3
"""
Example usage of the clilife package.
"""

from pathlib import Path

from clilife import Board
from clilife.frontends.cli import ConsoleLife


def main():
    """Demonstrate programmatic usage of the clilife package."""
    # A hive is a still life, so it should look the same every generation
    hive = Board.load(Path(__file__).parent / "hive.json")
    ConsoleLife(hive, clear_screen=False).run(generations=3, interval=0.2)

    # A random board, reproducible through its seed
    board = Board(30, 15, live_density=0.25, rng=2024)
    print(f"Population: {board.population}")

    for _ in range(10):
        board.advance()

    print(f"Population after 10 generations: {board.population}")
    print(board)

    # Save it and check it comes back unchanged
    board.save("random_board.json")
    restored = Board.load("random_board.json")
    print(f"Restored board matches: {restored == board}")


if __name__ == "__main__":
    main()
