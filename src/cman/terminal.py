"""Terminal size query."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO

from .errors import TerminalQueryError


@dataclass(frozen=True)
class TerminalSize:
    columns: int
    lines: int


def get_terminal_size(streams: tuple[TextIO, ...] | None = None) -> TerminalSize:
    """Return the size of the terminal attached to stdout or stdin.

    Streams are tried in order and the first one reporting a usable width
    wins. There is no default size: raises TerminalQueryError when no stream
    is a terminal with a usable size.
    """
    if streams is None:
        streams = (sys.stdout, sys.stdin)

    failures: list[str] = []
    for stream in streams:
        name = getattr(stream, "name", repr(stream))
        try:
            fd = stream.fileno()
            size = os.get_terminal_size(fd)
        except (AttributeError, ValueError, OSError) as exc:
            failures.append(f"{name}: {exc}")
            continue
        if size.columns <= 0:
            failures.append(f"{name}: unusable width {size.columns}")
            continue
        return TerminalSize(columns=size.columns, lines=size.lines)

    detail = "; ".join(failures) if failures else "no streams to query"
    raise TerminalQueryError(f"Could not determine the terminal width ({detail}).")


def get_display_width() -> int:
    """Return the width of the current terminal in character cells."""
    return get_terminal_size().columns
