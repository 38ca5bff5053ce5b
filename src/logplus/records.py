"""
Log record model and level vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Level(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"
    PANIC = "panic"


# structlog method names -> Level
_METHOD_LEVELS = {
    "trace": Level.TRACE,
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "msg": Level.INFO,
    "warn": Level.WARNING,
    "warning": Level.WARNING,
    "err": Level.ERROR,
    "error": Level.ERROR,
    "exception": Level.ERROR,
    "fatal": Level.FATAL,
    "critical": Level.FATAL,
    "panic": Level.PANIC,
}


def level_from_method(method_name: str) -> Level | str:
    """Map a structlog method name onto a Level; unknown names pass through."""
    return _METHOD_LEVELS.get(method_name.lower(), method_name)


@dataclass(frozen=True)
class LogRecord:
    """One log call, captured once and never mutated."""

    level: Level | str
    timestamp: datetime
    message: str
    caller_function_id: str = ""
    caller_line: int = 0


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception as exc:
        return f"<unprintable {type(value).__name__}: {exc!r}>"


def join_args(args: tuple[Any, ...]) -> str:
    """Stringify variadic log arguments.

    A space separates two neighbouring operands only when neither is a string,
    so ``("user", 42)`` gives ``"user42"`` and ``(1, 2)`` gives ``"1 2"``.
    """
    parts: list[str] = []
    previous: Any = None
    for index, arg in enumerate(args):
        if index > 0 and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(_safe_str(arg))
        previous = arg
    return "".join(parts)
