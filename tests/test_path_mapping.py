"""Tests for path mapping."""

from pathlib import Path

import pytest

from cman.errors import PathMappingError
from cman.path_mapping import get_app_root, map_path

APP_ROOT = Path("/app/root")


def test_absolute_path() -> None:
    assert map_path("/usr/local/git.json", app_root_abs=APP_ROOT) == Path("/usr/local/git.json")


def test_tilde_expansion(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    result = map_path("~/sheets/git.json", app_root_abs=APP_ROOT)

    assert result == tmp_path.resolve() / "sheets" / "git.json"


def test_tilde_backslash_form(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    result = map_path("~\\sheets\\git.json", app_root_abs=APP_ROOT)

    assert result == tmp_path.resolve() / "sheets" / "git.json"


def test_at_root() -> None:
    assert map_path("@/cheatsheets/git.json", app_root_abs=APP_ROOT) == Path(
        "/app/root/cheatsheets/git.json"
    )


def test_at_root_bare() -> None:
    assert map_path("@", app_root_abs=APP_ROOT) == Path("/app/root")


def test_relative_with_base_dir() -> None:
    result = map_path("sub/git.json", app_root_abs=APP_ROOT, base_dir=Path("/base"))
    assert result == Path("/base/sub/git.json")


def test_relative_without_base_dir_raises() -> None:
    with pytest.raises(PathMappingError, match="Relative path"):
        map_path("git.json", app_root_abs=APP_ROOT)


def test_relative_app_root_raises() -> None:
    with pytest.raises(PathMappingError, match="app_root_abs"):
        map_path("/x.json", app_root_abs=Path("relative"))


def test_nul_character_raises() -> None:
    with pytest.raises(PathMappingError, match="NUL"):
        map_path("/path/to\0file", app_root_abs=APP_ROOT)


def test_bare_tilde_is_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert map_path("~", app_root_abs=APP_ROOT) == tmp_path.resolve()


def test_backslashes_separate_segments() -> None:
    result = map_path("sub\\dir\\git.json", app_root_abs=APP_ROOT, base_dir=Path("/base"))
    assert result == Path("/base/sub/dir/git.json")


def test_at_root_collapses_repeated_separators() -> None:
    assert map_path("@//cheatsheets\\\\git.json", app_root_abs=APP_ROOT) == Path(
        "/app/root/cheatsheets/git.json"
    )


def test_dot_segments_resolved() -> None:
    result = map_path("/app/data/../other/git.json", app_root_abs=APP_ROOT)
    assert result == Path("/app/other/git.json")


def test_app_root_is_package_directory() -> None:
    root = get_app_root()
    assert root.name == "cman"
    assert (root / "cheatsheets" / "git.json").is_file()
