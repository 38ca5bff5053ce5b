"""
logplus exceptions.

Nothing here is raised from a write call; these only surface from
configuration mistakes made before the logger exists.
"""

from __future__ import annotations


class LogplusError(Exception):
    """Base class for logplus errors."""


class DestinationError(LogplusError, ValueError):
    """Unknown destination mode."""

    def __init__(self, mode: str) -> None:
        super().__init__(f"unknown log mode {mode!r}; expected one of: console, file, rolling")
        self.mode = mode
