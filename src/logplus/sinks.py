"""
Log sink abstractions and concrete implementations.

Sinks receive fully rendered lines (bytes, newline included) and own the
serialization of concurrent writes to their destination.
"""

from __future__ import annotations

import io
import logging
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .rotation import RotationHandler, RotationPolicy

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def emit(self, line: bytes) -> None:
        """Write one rendered line to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Standard I/O sink.

    Args:
        stream: Output stream (default: stdout). Binary streams and text
            streams with a ``buffer`` receive raw bytes; other text streams
            receive the decoded line.
    """

    def __init__(self, stream: Any = None):
        self._stream = stream or sys.stdout
        self._lock = threading.Lock()

    @property
    def stream(self) -> Any:
        return self._stream

    def emit(self, line: bytes) -> None:
        with self._lock:
            binary = getattr(self._stream, "buffer", None)
            if binary is None and isinstance(self._stream, (io.RawIOBase, io.BufferedIOBase)):
                binary = self._stream

            if binary is not None:
                # Drain pending text first so bytes land in order.
                if binary is not self._stream:
                    self._stream.flush()
                binary.write(line)
                binary.flush()
            else:
                self._stream.write(line.decode("utf-8"))
                self._stream.flush()

    def close(self) -> None:
        pass


class FileSink(BaseSink):
    """Append-only local file sink.

    The file is opened on construction so that an unwritable path fails fast
    with ``OSError``.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._file = open(self._path, "ab")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, line: bytes) -> None:
        with self._lock:
            self._file.write(line)
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            self._file.close()


class RotatingFileSink(BaseSink):
    """Local file sink rotated by size and expired by age (see ``RotationPolicy``)."""

    def __init__(self, policy: RotationPolicy):
        self._policy = policy
        self._handler = RotationHandler(policy)

    @property
    def policy(self) -> RotationPolicy:
        return self._policy

    @property
    def handler(self) -> RotationHandler:
        return self._handler

    def emit(self, line: bytes) -> None:
        # The handler serializes writes and rollovers under its own lock.
        record = logging.makeLogRecord({"msg": line.decode("utf-8"), "levelno": logging.INFO})
        self._handler.handle(record)

    def close(self) -> None:
        self._handler.close()
