"""Preferred field order for structured log events."""

from __future__ import annotations

DEFAULT_EVENT_KEY_ORDER: tuple[str, ...] = ("ts_utc", "ts", "level", "logger", "message")

EVENT_KEY_ORDER: dict[str, tuple[str, ...]] = {
    "app_start": ("ts_utc", "ts", "level", "logger", "cheatsheet", "log_file", "cwd"),
    "cheatsheet_loaded": (
        "ts_utc",
        "ts",
        "level",
        "logger",
        "cheatsheet",
        "cheatsheet_file",
        "heading_count",
        "commands_height",
    ),
    "layout_rendered": (
        "ts_utc",
        "ts",
        "level",
        "logger",
        "display_width",
        "column_width",
        "headings_per_row",
        "row_blocks",
        "output_chars",
    ),
    "app_stop": (
        "ts_utc",
        "ts",
        "level",
        "logger",
        "reason",
        "exit_code",
        "error_type",
        "error",
        "uptime_ms",
    ),
}

LOG_PATH_FIELDS = frozenset({"cheatsheet_file", "log_file", "cwd"})
