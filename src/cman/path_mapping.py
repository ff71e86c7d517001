"""Path mapping for cheatsheet names and the log file setting.

``~`` expands to the home directory and ``@`` to the app root, the installed
``cman`` package directory that holds the bundled cheatsheets.
"""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import PathMappingError

_SEPARATORS_RE = re.compile(r"[\\/]+")


def get_app_root() -> Path:
    """Return the installed ``cman`` package directory."""
    return Path(__file__).resolve().parent


def map_path(
    raw: str,
    *,
    app_root_abs: Path,
    base_dir: Path | None = None,
) -> Path:
    """Map a user-provided path string to an absolute resolved Path.

    The text is NFC-normalized and must not contain NUL. Slashes and
    backslashes both separate segments. ``~`` and ``@`` prefixes are expanded,
    absolute paths are kept, and relative paths are joined onto *base_dir*
    (a PathMappingError when there is none). Dot segments are resolved.
    """
    if not app_root_abs.is_absolute():
        raise PathMappingError("app_root_abs must be an absolute path.")

    text = unicodedata.normalize("NFC", raw)
    if "\0" in text:
        raise PathMappingError("Path contains NUL (\\0) character.")

    head, _, rest = _SEPARATORS_RE.sub("/", text).partition("/")
    if head == "~":
        mapped = Path.home() / rest
    elif head == "@":
        mapped = app_root_abs / rest
    else:
        mapped = Path(_SEPARATORS_RE.sub("/", text))

    if not mapped.is_absolute():
        if base_dir is None:
            raise PathMappingError(
                "Relative path requires an explicit base directory. "
                "Use ~ (home), @ (app root), or an absolute path."
            )
        mapped = base_dir / mapped

    return mapped.resolve()
