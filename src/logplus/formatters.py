"""
Line formatter and color utilities.
"""

from __future__ import annotations

from structlog.typing import EventDict, WrappedLogger

from .caller import ResolvedCaller, decompose
from .records import Level, LogRecord

# =============================================================================
# Levels & Colors
# =============================================================================

RESET = "\x1b[0m"

LEVEL_LABELS = {
    Level.TRACE: "DEBUG",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARN",
    Level.ERROR: "ERROR",
    Level.FATAL: "ERROR",
    Level.PANIC: "ERROR",
}

LEVEL_COLORS = {
    Level.TRACE: "\x1b[36m",  # Cyan
    Level.DEBUG: "\x1b[36m",
    Level.INFO: "\x1b[32m",  # Green
    Level.WARNING: "\x1b[33m",  # Yellow
    Level.ERROR: "\x1b[31m",  # Red
    Level.FATAL: "\x1b[31m",
    Level.PANIC: "\x1b[31m",
}

TIMESTAMP_FORMAT = "%Y.%m.%d %H:%M:%S"


def level_label(level: Level | str) -> str:
    return LEVEL_LABELS.get(level, "UNKNOWN")  # type: ignore[call-overload]


def level_color(level: Level | str) -> str:
    return LEVEL_COLORS.get(level, "")  # type: ignore[call-overload]


def hierarchy(service_name: str, caller: ResolvedCaller) -> str:
    """Render ``service:package:type:function:line``."""
    return f"{service_name}:{caller.package}:{caller.type_name}:{caller.function}:{caller.line}"


# =============================================================================
# Line Formatter
# =============================================================================


class LineFormatter:
    """Renders a LogRecord as one newline-terminated line.

    Layout without color::

        [INFO] 2024.01.15 10:30:00 svc:store:Store:connect:12: message

    With color the bracketed label is wrapped in the level color and a reset.
    """

    __slots__ = ("_service_name", "_color_enabled")

    def __init__(self, service_name: str, *, color_enabled: bool = True) -> None:
        self._service_name = service_name
        self._color_enabled = color_enabled

    @property
    def service_name(self) -> str:
        return self._service_name

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def format(self, record: LogRecord) -> bytes:
        label = level_label(record.level)
        timestamp = record.timestamp.strftime(TIMESTAMP_FORMAT)
        caller = decompose(record.caller_function_id, record.caller_line)
        trail = f"{timestamp} {hierarchy(self._service_name, caller)}: {record.message}\n"

        if self._color_enabled:
            line = f"{level_color(record.level)}[{label}]{RESET} {trail}"
        else:
            line = f"[{label}] {trail}"
        return line.encode("utf-8")


class LineRenderer:
    """structlog processor that turns the event dict into formatted bytes.

    Must be the last processor of the chain.
    """

    def __init__(self, formatter: LineFormatter) -> None:
        self._formatter = formatter

    @property
    def formatter(self) -> LineFormatter:
        return self._formatter

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> bytes:
        record = LogRecord(
            level=event_dict["level"],
            timestamp=event_dict["timestamp"],
            message=str(event_dict.get("event", "")),
            caller_function_id=event_dict.get("caller_function_id", ""),
            caller_line=event_dict.get("caller_line", 0),
        )
        return self._formatter.format(record)
