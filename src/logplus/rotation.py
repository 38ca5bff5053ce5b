"""
Rotation policy for rolling log files.

Rotation itself is delegated to ``logging.handlers.RotatingFileHandler``
(size trigger + numbered backups); this module only configures it and adds
age-based expiry of backups and optional gzip compression.
"""

from __future__ import annotations

import gzip
import os
import shutil
import time
from contextlib import suppress
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

MEGABYTE = 1024 * 1024
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class RotationPolicy:
    path: str
    max_age_days: int = 1
    max_backups: int = 30
    max_size_mb: int = 100
    compress: bool = False

    @property
    def max_bytes(self) -> int:
        return self.max_size_mb * MEGABYTE


def _gzip_namer(name: str) -> str:
    return name + ".gz"


def _gzip_rotator(source: str, dest: str) -> None:
    with open(source, "rb") as src, gzip.open(dest, "wb") as dst:
        shutil.copyfileobj(src, dst)
    os.remove(source)


class RotationHandler(RotatingFileHandler):
    """RotatingFileHandler that also expires backups older than ``max_age_days``.

    The file is opened lazily on first write; expired backups are removed on
    that first open and after every rollover.
    """

    terminator = ""

    def __init__(self, policy: RotationPolicy) -> None:
        super().__init__(
            policy.path,
            mode="a",
            maxBytes=policy.max_bytes,
            backupCount=policy.max_backups,
            encoding="utf-8",
            delay=True,
        )
        self.policy = policy
        self._opened = False
        if policy.compress:
            self.namer = _gzip_namer
            self.rotator = _gzip_rotator

    def _open(self):
        stream = super()._open()
        if not self._opened:
            # Stale backups from a previous run expire on first open too.
            self._opened = True
            self.remove_expired()
        return stream

    def backups(self) -> list[Path]:
        base = Path(self.baseFilename)
        return sorted(p for p in base.parent.glob(base.name + ".*") if p != base)

    def doRollover(self) -> None:
        super().doRollover()
        self.remove_expired()

    def remove_expired(self, now: float | None = None) -> list[Path]:
        if self.policy.max_age_days <= 0:
            return []
        cutoff = (now if now is not None else time.time()) - self.policy.max_age_days * SECONDS_PER_DAY
        removed = []
        for backup in self.backups():
            with suppress(FileNotFoundError):
                if backup.stat().st_mtime < cutoff:
                    backup.unlink()
                    removed.append(backup)
        return removed
