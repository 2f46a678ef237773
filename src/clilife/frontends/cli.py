"""Command-line interface that plays a board in the console."""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, TextIO

from ..core.board import Board
from ..core.errors import LifeError

# Erase the screen and move the cursor home.
CLEAR_SCREEN = "\033[2J\033[H"


class ConsoleLife:
    """Renders successive generations of a board to a text stream."""

    def __init__(
        self,
        board: Board,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        clear_screen: bool = True,
    ) -> None:
        """Initialize the console driver.

        Args:
            board: Board to play
            out: Stream to write frames to (default: sys.stdout at write time)
            sleep: Function used to wait between generations
            clear_screen: Whether to clear the console before each frame
        """
        self.board = board
        self.out = out
        self.sleep = sleep
        self.clear_screen = clear_screen
        self.iteration = 0

    @property
    def stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def render(self) -> str:
        """Format the current generation as an iteration header and the board rows."""
        return f"Iter: {self.iteration}\n{self.board}"

    def show(self) -> None:
        """Write the current generation to the stream."""
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(self.render() + "\n")
        self.stream.flush()

    def run(self, generations: Optional[int] = None, interval: float = 1.0) -> int:
        """Show and advance the board until enough generations have passed.

        Args:
            generations: Number of generations to play (None: until interrupted)
            interval: Seconds to wait after each generation

        Returns:
            Number of generations advanced
        """
        advanced = 0
        while generations is None or advanced < generations:
            self.show()
            self.board.advance()
            self.iteration += 1
            advanced += 1
            self.sleep(interval)

        return advanced


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="clilife",
        description="Play Conway's Game of Life on a wrap-around board in the console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 20x20 board with 10% living cells, one generation per second
  clilife

  # Larger, denser board with a reproducible seed
  clilife -W 60 -H 30 -p 0.3 --seed 42

  # Play a saved board for 100 generations, then save the result
  clilife --load hive.json -m 100 --save hive_after.json
        """,
    )

    # Board configuration
    parser.add_argument("-W", "--width", type=int, default=20, help="Board width (default: 20)")

    parser.add_argument("-H", "--height", type=int, default=20, help="Board height (default: 20)")

    parser.add_argument(
        "-p",
        "--density",
        type=float,
        default=0.1,
        help="Chance each cell starts alive (default: 0.1)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Non-negative random seed for a reproducible board",
    )

    # State files
    parser.add_argument(
        "-l",
        "--load",
        type=str,
        metavar="FILE",
        help="Load the board from a JSON state file instead of seeding it randomly (--width and --height are ignored)",
    )

    parser.add_argument(
        "-s",
        "--save",
        type=str,
        metavar="FILE",
        help="Save the final board to a JSON state file",
    )

    # Run loop configuration
    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between generations (default: 1.0)",
    )

    # Output configuration
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the console between generations",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug logging",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    # A loaded board takes its size from the state file
    if not getattr(args, "load", None):
        if args.width <= 0:
            errors.append("Width must be positive")

        if args.height <= 0:
            errors.append("Height must be positive")

    if getattr(args, "seed", None) is not None and args.seed < 0:
        errors.append("Seed must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    if not validate_args(args):
        return 1

    try:
        if args.load:
            board = Board.load(args.load, rng=args.seed)
        else:
            board = Board(args.width, args.height, args.density, rng=args.seed)
    except (LifeError, OSError) as e:
        print(f"Error: {e}")
        return 1

    console = ConsoleLife(board, clear_screen=not args.no_clear)
    try:
        console.run(args.max_generations, args.interval)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")

    if args.save:
        try:
            board.save(args.save)
        except OSError as e:
            print(f"Error: {e}")
            return 1
        print(f"Board saved to: {args.save}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
