"""
Output destinations, decided once at initialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional, Union

from .exceptions import DestinationError
from .rotation import RotationPolicy

Mode = Literal["console", "file", "rolling"]

MODE_CONSOLE = "console"
MODE_FILE = "file"
MODE_ROLLING = "rolling"

DEFAULT_LOG_DIR = "./logs"
DEFAULT_FILE_STAMP = "%Y-%m-%d_%H-%M-%S"


@dataclass(frozen=True)
class Console:
    pass


@dataclass(frozen=True)
class SingleFile:
    path: str


@dataclass(frozen=True)
class Rotating:
    path: str
    max_age_days: int = 1
    max_backups: int = 30
    max_size_mb: int = 100
    compress: bool = False

    def policy(self) -> RotationPolicy:
        return RotationPolicy(
            path=self.path,
            max_age_days=self.max_age_days,
            max_backups=self.max_backups,
            max_size_mb=self.max_size_mb,
            compress=self.compress,
        )


Destination = Union[Console, SingleFile, Rotating]


def default_file_path(now: Optional[datetime] = None) -> str:
    """``./logs/<YYYY-MM-DD_hh-mm-ss>.log`` for the given (or current) time."""
    stamp = (now or datetime.now()).strftime(DEFAULT_FILE_STAMP)
    return f"{DEFAULT_LOG_DIR}/{stamp}.log"


def destination_from_mode(mode: str, file_path: str = "", *, now: Optional[datetime] = None) -> Destination:
    """Translate the ``console|file|rolling`` mode string into a Destination."""
    if mode == MODE_CONSOLE:
        return Console()
    if mode not in (MODE_FILE, MODE_ROLLING):
        raise DestinationError(mode)

    path = file_path or default_file_path(now)
    if mode == MODE_FILE:
        return SingleFile(path=path)
    return Rotating(path=path)
