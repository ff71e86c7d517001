"""Cheatsheet lookup and JSON decoding."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .constants import BUNDLED_CHEATSHEETS_DIR, CHEATSHEET_FILE_EXTENSION
from .errors import DecodeError, NotFoundError, PathMappingError, UsageError
from .models import HeadingSet
from .path_mapping import get_app_root, map_path


def cheatsheet_filename(name: str) -> str:
    """Return the file name for *name*, appending the extension if missing."""
    if name.lower().endswith(CHEATSHEET_FILE_EXTENSION):
        return name
    return name + CHEATSHEET_FILE_EXTENSION


def candidate_paths(name: str, *, base_dir: Path | None = None) -> list[Path]:
    """Return the paths searched for *name*, in lookup order.

    The name is first mapped relative to *base_dir* (the current directory by
    default), then looked up among the cheatsheets bundled with the package.
    """
    app_root = get_app_root()
    filename = cheatsheet_filename(name)
    try:
        local = map_path(filename, app_root_abs=app_root, base_dir=base_dir or Path.cwd())
        bundled = map_path(
            f"{BUNDLED_CHEATSHEETS_DIR}/{filename}", app_root_abs=app_root
        )
    except PathMappingError as exc:
        raise UsageError(f"Invalid cheatsheet name '{name}': {exc}") from exc

    paths = [local]
    if bundled != local:
        paths.append(bundled)
    return paths


def resolve_cheatsheet_path(name: str, *, base_dir: Path | None = None) -> Path:
    """Return the first existing cheatsheet file for *name*.

    Raises NotFoundError when no candidate exists.
    """
    for path in candidate_paths(name, base_dir=base_dir):
        if path.is_file():
            return path
    raise NotFoundError(name)


def parse_heading_set(text: str, *, source: str = "<string>") -> HeadingSet:
    """Decode a cheatsheet JSON document.

    Raises DecodeError when the text is not JSON or does not match the
    ``{"headings": [{"title": ..., "commands": [...]}]}`` shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(source, str(exc)) from exc

    try:
        return HeadingSet.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(source, _summarize_validation_error(exc)) from exc


def load_heading_set(name: str, *, base_dir: Path | None = None) -> HeadingSet:
    """Resolve *name* to a cheatsheet file and decode it."""
    return read_heading_set(resolve_cheatsheet_path(name, base_dir=base_dir), name=name)


def read_heading_set(path: Path, *, name: str) -> HeadingSet:
    """Read and decode the cheatsheet file at *path*, looked up as *name*."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(str(path), f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise NotFoundError(name, exc.strerror or str(exc)) from exc
    return parse_heading_set(text, source=str(path))


def _summarize_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "document"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
