"""Text measuring and padding utilities for terminal output."""

from __future__ import annotations

from prompt_toolkit.utils import get_cwidth


def display_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies.

    Wide characters (CJK, most emoji) count as two cells, combining marks as
    zero, so padded columns stay aligned on screen.
    """
    return get_cwidth(text)


def pad_right(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* cells.

    Text already at or beyond *width* is returned unchanged, never truncated.
    """
    return text + " " * max(0, width - display_width(text))
