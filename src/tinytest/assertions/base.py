"""Call-site locations for check diagnostics."""

from __future__ import annotations

import inspect
from collections.abc import Collection
from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticLocation:
    """Where a check was made.

    Attributes:
        filename: Source file of the calling code.
        line: 1-based line number.
        column: 1-based column of the call, or 0 when the interpreter does
            not report column positions.
    """

    filename: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename}, line {self.line}:{self.column}"


def capture_location(skip_modules: Collection[str] = ()) -> DiagnosticLocation | None:
    """Return the location of the first caller outside ``skip_modules``.

    The frame of whoever called this function is the starting point; frames
    whose module name is in ``skip_modules`` are walked past so that helpers
    calling each other still report the user's line.
    """
    frame = inspect.currentframe()
    try:
        frame = frame.f_back if frame is not None else None
        while frame is not None and frame.f_globals.get("__name__") in skip_modules:
            frame = frame.f_back
        if frame is None:
            return None

        info = inspect.getframeinfo(frame, context=0)
        column = 0
        positions = getattr(info, "positions", None)
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1
        return DiagnosticLocation(info.filename, info.lineno, column)
    finally:
        del frame
