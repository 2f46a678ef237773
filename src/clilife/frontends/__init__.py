"""Frontend interfaces for clilife."""

from .cli import ConsoleLife

__all__ = ["ConsoleLife"]
