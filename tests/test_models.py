"""Tests for cheatsheet models."""

import pytest
from pydantic import ValidationError

from cman.models import Heading, HeadingSet


def make_heading_set(*headings: tuple[str, list[str]]) -> HeadingSet:
    return HeadingSet(headings=[Heading(title=t, commands=c) for t, c in headings])


def test_heading_width_uses_longest_command() -> None:
    heading = Heading(title="Git", commands=["git status", "git log"])
    assert heading.width() == len("git status")


def test_heading_width_uses_title_when_longer() -> None:
    heading = Heading(title="Version control", commands=["git log"])
    assert heading.width() == len("Version control")


def test_heading_width_without_commands() -> None:
    assert Heading(title="Empty", commands=[]).width() == 5


def test_heading_width_counts_wide_characters_as_two_cells() -> None:
    heading = Heading(title="ab", commands=["日本"])
    assert heading.width() == 4


def test_heading_set_widths_and_height() -> None:
    hs = make_heading_set(("A", ["x", "yyyy"]), ("Bbbbbb", ["z"]), ("C", []))
    assert hs.heading_width() == 6
    assert hs.commands_height() == 2


def test_empty_heading_set() -> None:
    hs = HeadingSet(headings=[])
    assert hs.heading_width() == 0
    assert hs.commands_height() == 0


def test_row_has_commands() -> None:
    hs = make_heading_set(("A", ["1", "2", "3"]), ("B", ["1"]), ("C", ["1"]))
    assert hs.row_has_commands(0, 3, 2)
    assert hs.row_has_commands(1, 3, 0)
    assert not hs.row_has_commands(1, 3, 1)


def test_row_has_commands_clamps_end() -> None:
    hs = make_heading_set(("A", ["1"]))
    assert hs.row_has_commands(0, 10, 0)
    assert not hs.row_has_commands(0, 10, 1)


def test_models_are_immutable() -> None:
    heading = Heading(title="A", commands=["x"])
    with pytest.raises(ValidationError):
        heading.title = "B"  # type: ignore[misc]
    assert isinstance(heading.commands, tuple)


def test_unknown_fields_ignored() -> None:
    heading = Heading.model_validate({"title": "A", "commands": ["x"], "extra": 1})
    assert heading == Heading(title="A", commands=["x"])


def test_commands_default_to_empty() -> None:
    heading = Heading.model_validate({"title": "A"})
    assert heading.commands == ()
    assert heading.width() == 1


def test_non_string_command_rejected() -> None:
    with pytest.raises(ValidationError):
        Heading.model_validate({"title": "A", "commands": [1]})
