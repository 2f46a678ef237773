"""Serializable projection of a board and its JSON file format.

A saved board is a JSON object with three fields::

    {"width": 3, "height": 2, "cellstext": ["** ", " * "]}

``cellstext`` holds one string per row, one character per column. ``'*'``
marks a living cell, any other character a dead one. Neighbor wiring is not
saved; it is rebuilt whenever a board is loaded.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .errors import MalformedState

logger = logging.getLogger(__name__)

ALIVE = "*"
DEAD = " "

PathLike = Union[str, Path]


@dataclass(frozen=True)
class BoardState:
    """Cell states of a board, one string per row."""

    width: int
    height: int
    rows: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk dictionary layout."""
        return {
            "width": self.width,
            "height": self.height,
            "cellstext": list(self.rows),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "BoardState":
        """Create a state from its on-disk dictionary layout.

        Only the structure is checked here; whether the rows agree with the
        declared dimensions is checked when a board is built from the state.

        Args:
            data: Decoded JSON value

        Returns:
            New BoardState instance

        Raises:
            MalformedState: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedState(f"Board state must be an object, got {type(data).__name__}")

        missing = [key for key in ("width", "height", "cellstext") if key not in data]
        if missing:
            raise MalformedState(f"Board state is missing field(s): {', '.join(missing)}")

        width, height, rows = data["width"], data["height"], data["cellstext"]
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedState(f"Board state {name} must be an integer, got {value!r}")

        if not isinstance(rows, list) or not all(isinstance(row, str) for row in rows):
            raise MalformedState("Board state cellstext must be a list of strings")

        return cls(width=width, height=height, rows=tuple(rows))


def load_state(path: PathLike) -> BoardState:
    """Read a board state from a JSON file.

    Args:
        path: File to read

    Returns:
        The decoded state

    Raises:
        MalformedState: If the file is not a valid board state
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedState(f"Cannot parse board state {path}: {e}") from e

    state = BoardState.from_dict(data)
    logger.debug("Loaded %dx%d board state from %s", state.width, state.height, path)
    return state


def save_state(state: BoardState, path: PathLike) -> None:
    """Write a board state to a JSON file."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(state.to_dict(), f, indent=2)
    logger.debug("Saved %dx%d board state to %s", state.width, state.height, path)
