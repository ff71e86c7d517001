"""Domain models for cman."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .text import display_width


class Heading(BaseModel):
    """One titled group of commands."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    commands: tuple[str, ...] = ()

    def width(self) -> int:
        """Return the display width of the widest of the title and commands."""
        return max([display_width(self.title), *(display_width(c) for c in self.commands)])


class HeadingSet(BaseModel):
    """A whole cheatsheet, in display order."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    headings: tuple[Heading, ...]

    def heading_width(self) -> int:
        """Return the width every heading column is padded to, minus the gutter."""
        return max((h.width() for h in self.headings), default=0)

    def commands_height(self) -> int:
        """Return the number of commands in the heading with the most commands."""
        return max((len(h.commands) for h in self.headings), default=0)

    def row_has_commands(self, start: int, end: int, row: int) -> bool:
        """Return True if any heading in headings[start:end] has a command at *row*."""
        return any(len(h.commands) > row for h in self.headings[start:end])
