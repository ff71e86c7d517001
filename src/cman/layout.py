"""Column layout of a cheatsheet for terminal display.

Headings are laid out left to right in a uniform grid: every column is as
wide as the widest title or command in the whole sheet, plus a one-cell
gutter. Headings that don't fit on one row wrap to the next row block.
"""

from __future__ import annotations

from .constants import ANSI_INVERSE, ANSI_RESET
from .models import HeadingSet
from .text import pad_right


def column_width(heading_set: HeadingSet) -> int:
    """Return the width of one heading column, including its gutter."""
    return heading_set.heading_width() + 1


def headings_per_row(heading_set: HeadingSet, available_width: int) -> int:
    """Return how many heading columns fit in *available_width* cells.

    Always at least 1: a column wider than the display still gets a row of
    its own and simply overflows.
    """
    return max(1, available_width // column_width(heading_set))


def render(heading_set: HeadingSet, available_width: int) -> str:
    """Render *heading_set* as text fitted to *available_width* cells."""
    width = column_width(heading_set)
    per_row = headings_per_row(heading_set, available_width)
    blocks: list[str] = []
    for start in range(0, len(heading_set.headings), per_row):
        blocks.append(render_row_block(heading_set, start, start + per_row, width) + "\n")
    return "".join(blocks)


def render_row_block(heading_set: HeadingSet, start: int, end: int, width: int) -> str:
    """Render headings[start:end] as a header line and their command rows.

    The number of command rows considered is the height of the tallest
    heading in the whole sheet; rows where no heading in this block has a
    command are skipped. There is no trailing newline.
    """
    headings = heading_set.headings[start:end]
    end = start + len(headings)

    header = "".join(
        f"{ANSI_INVERSE}{pad_right(h.title, width - 1)}{ANSI_RESET} " for h in headings
    )
    lines = [header]

    for row in range(heading_set.commands_height()):
        if not heading_set.row_has_commands(start, end, row):
            continue
        cells: list[str] = []
        for heading in headings:
            if row < len(heading.commands):
                cells.append(pad_right(heading.commands[row], width))
            else:
                cells.append(" " * width)
        lines.append("".join(cells))

    return "\n".join(lines)
