"""
Core logging configuration and initialization logic.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, WrappedLogger

from .caller import capture_caller
from .config import LoggingSettings
from .destinations import Console, Destination, Rotating, SingleFile
from .formatters import LineFormatter, LineRenderer
from .records import join_args, level_from_method
from .sinks import BaseSink, FileSink, RotatingFileSink, StdioSink

# =============================================================================
# Structlog Processors
# =============================================================================


def add_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Record the Level the event was logged at."""
    event_dict["level"] = level_from_method(method_name)
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add a local-time timestamp to the log event."""
    event_dict["timestamp"] = datetime.now().astimezone()
    return event_dict


def add_caller(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Attach the function identifier and line of the application code that logged."""
    frame = capture_caller()
    if frame is not None:
        event_dict["caller_function_id"] = frame.function_id
        event_dict["caller_line"] = frame.line
    return event_dict


# =============================================================================
# Wrapped Logger
# =============================================================================


class SinkLogger:
    """Final structlog logger: hands rendered lines to a sink."""

    def __init__(self, sink: BaseSink) -> None:
        self._sink = sink

    def msg(self, message: bytes) -> None:
        try:
            self._sink.emit(message)
        except Exception as exc:
            # Logging must never break the caller.
            sys.stderr.write(f"logplus: failed to write log line: {exc!r}\n")

    log = debug = info = warn = warning = err = error = exception = fatal = critical = msg


# =============================================================================
# Facade
# =============================================================================


class Logger:
    """Leveled logging facade owned by the caller of ``init``."""

    def __init__(self, sink: BaseSink, formatter: LineFormatter, *, level: str = "info") -> None:
        self._sink = sink
        self._formatter = formatter
        self._bound = structlog.wrap_logger(
            SinkLogger(sink),
            processors=[add_level, add_timestamp, add_caller, LineRenderer(formatter)],
            wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
            cache_logger_on_first_use=True,
        )

    @property
    def sink(self) -> BaseSink:
        return self._sink

    @property
    def formatter(self) -> LineFormatter:
        return self._formatter

    def debug(self, *args: Any) -> None:
        self._bound.debug(join_args(args))

    def info(self, *args: Any) -> None:
        self._bound.info(join_args(args))

    def warn(self, *args: Any) -> None:
        self._bound.warning(join_args(args))

    warning = warn

    def error(self, *args: Any) -> None:
        self._bound.error(join_args(args))

    def close(self) -> None:
        self._sink.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


# =============================================================================
# Configuration Logic
# =============================================================================


def _open_sink(destination: Destination, stream: Any, warnings: list[str]) -> tuple[BaseSink, bool]:
    """Open the sink for a destination; returns ``(sink, color_enabled)``."""
    if isinstance(destination, SingleFile):
        try:
            return FileSink(destination.path), False
        except OSError as exc:
            warnings.append(f"could not open log file '{destination.path}', using console: {exc}")
            return StdioSink(stream), False

    if isinstance(destination, Rotating):
        return RotatingFileSink(destination.policy()), False

    return StdioSink(stream), True


def build_logger(
    destination: Destination,
    *,
    service_name: str,
    level: str = "info",
    stream: Any = None,
) -> Logger:
    """
    Create a Logger writing to ``destination``.

    Args:
        destination: Console(), SingleFile(path) or Rotating(path, ...)
        service_name: First field of the caller hierarchy
        level: Minimum level (debug, info, warning, error, critical)
        stream: Console stream (default: stdout); also used for the file fallback
    """
    warnings: list[str] = []

    if not isinstance(destination, Console):
        directory = Path(destination.path).parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            warnings.append(f"could not create log directory '{directory}': {exc}")

    sink, color_enabled = _open_sink(destination, stream, warnings)
    logger = Logger(sink, LineFormatter(service_name, color_enabled=color_enabled), level=level)

    if warnings:
        # Init warnings always land on the console.
        notices = logger
        if not isinstance(sink, StdioSink):
            notices = Logger(StdioSink(stream), LineFormatter(service_name, color_enabled=False), level=level)
        for message in warnings:
            notices.warn(message)
    return logger


def init(settings: Optional[LoggingSettings] = None, *, stream: Any = None) -> Logger:
    """
    Initialize a Logger from settings (``LOGPLUS_*`` environment when omitted).

    File and rolling modes without a path log to ``./logs/<timestamp>.log``.
    """
    settings = settings or LoggingSettings()
    return build_logger(
        settings.destination(),
        service_name=settings.service_name,
        level=settings.level.value,
        stream=stream,
    )
