"""
Caller resolution: find the application frame behind a log call and split its
function identifier into package, type and function.

A function identifier is the dotted module path with its separators turned into
slashes, followed by the code object's qualified name::

    app.db.store  +  Store.connect   ->   "app/db/store.Store.connect"
    main          +  boot            ->   "main.boot"
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from types import FrameType
from typing import Iterable, Iterator, Optional, Sequence

# Frames of the facade itself (capture_caller + the structlog processor).
SKIP_FRAMES = 2
EXCLUDED_MODULES: tuple[str, ...] = ("logplus", "structlog")
TYPE_DECORATIONS = "()*"
EMPTY_TYPE = " "


@dataclass(frozen=True)
class CallerFrame:
    function_id: str
    line: int


@dataclass(frozen=True)
class ResolvedCaller:
    package: str
    type_name: str
    function: str
    line: int


UNKNOWN_CALLER = ResolvedCaller(package="unknown", type_name=EMPTY_TYPE, function="unknown", line=0)


def function_id(frame: FrameType) -> str:
    """Build the slash/dot function identifier of a live frame."""
    module = frame.f_globals.get("__name__") or ""
    code = frame.f_code
    qualname = getattr(code, "co_qualname", code.co_name)
    return f"{module.replace('.', '/')}.{qualname}"


def iter_frames(frame: Optional[FrameType]) -> Iterator[CallerFrame]:
    """Walk a live stack from ``frame`` outward."""
    while frame is not None:
        yield CallerFrame(function_id=function_id(frame), line=frame.f_lineno)
        frame = frame.f_back


def find_caller_frame(
    frames: Iterable[CallerFrame],
    *,
    skip: int = SKIP_FRAMES,
    excludes: Sequence[str] = EXCLUDED_MODULES,
) -> Optional[CallerFrame]:
    """Return the first frame past ``skip`` whose identifier mentions none of ``excludes``."""
    for index, frame in enumerate(frames):
        if index < skip:
            continue
        if not any(name in frame.function_id for name in excludes):
            return frame
    return None


def decompose(function_id: str, line: int) -> ResolvedCaller:
    """Split ``path/to/pkg.Type.func`` into its hierarchy parts.

    Only ``pkg.func`` and ``pkg.Type.func`` shapes are understood; anything
    else yields ``UNKNOWN_CALLER`` as a whole.
    """
    last_segment = function_id.split("/")[-1]
    parts = last_segment.split(".")
    if len(parts) == 3:
        package, type_name, function = parts
        return ResolvedCaller(package, type_name.strip(TYPE_DECORATIONS), function, line)
    if len(parts) == 2:
        package, function = parts
        return ResolvedCaller(package, EMPTY_TYPE, function, line)
    return UNKNOWN_CALLER


def resolve_caller(
    frames: Iterable[CallerFrame],
    *,
    skip: int = SKIP_FRAMES,
    excludes: Sequence[str] = EXCLUDED_MODULES,
) -> ResolvedCaller:
    frame = find_caller_frame(frames, skip=skip, excludes=excludes)
    if frame is None:
        return UNKNOWN_CALLER
    return decompose(frame.function_id, frame.line)


def capture_caller(
    *,
    skip: int = SKIP_FRAMES,
    excludes: Sequence[str] = EXCLUDED_MODULES,
) -> Optional[CallerFrame]:
    """Locate the application frame that issued the current log call.

    ``skip`` counts this function's own frame, so the default also skips the
    processor that calls it.
    """
    frame = inspect.currentframe()
    try:
        return find_caller_frame(iter_frames(frame), skip=skip, excludes=excludes)
    finally:
        del frame
