"""
logplus: a leveled logging facade on top of structlog.

Every line carries the application caller as a colon-delimited hierarchy::

    [INFO] 2024.01.15 10:30:00 my_service:store:Store:connect:12: connected

Destinations:
- console: stdout, colored by level
- file: single append-only file
- rolling: file rotated by size, backups expired by age and count

Usage:
    from logplus import LoggingSettings, init

    log = init(LoggingSettings(service_name="my_service", mode="rolling"))
    log.info("App is booting up")
"""

from .caller import UNKNOWN_CALLER, CallerFrame, ResolvedCaller, decompose, resolve_caller
from .config import LoggingSettings, LogLevel
from .core import Logger, build_logger, init
from .destinations import Console, Destination, Rotating, SingleFile, destination_from_mode
from .exceptions import DestinationError, LogplusError
from .formatters import LineFormatter
from .records import Level, LogRecord

__all__ = [
    "CallerFrame",
    "Console",
    "Destination",
    "DestinationError",
    "Level",
    "LineFormatter",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LoggingSettings",
    "LogplusError",
    "ResolvedCaller",
    "Rotating",
    "SingleFile",
    "UNKNOWN_CALLER",
    "build_logger",
    "decompose",
    "destination_from_mode",
    "init",
    "resolve_caller",
]
