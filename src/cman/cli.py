"""CLI argument parsing and application entry point."""

from __future__ import annotations

import logging
import math
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from .constants import (
    ARG_HELP_LONG,
    ARG_HELP_SHORT,
    CLI_HELP_HINT,
    CLI_USAGE,
    ENV_LOG_FILE,
    ExitCode,
)
from .errors import CmanError, ConfigError, PathMappingError, UsageError
from .layout import column_width, headings_per_row, render
from .loader import read_heading_set, resolve_cheatsheet_path
from .logging import log_event, setup_logging
from .path_mapping import get_app_root, map_path
from .terminal import get_display_width


@dataclass
class AppArgs:
    name: str


def parse_args(argv: list[str] | None = None) -> AppArgs | None:
    """Parse CLI arguments. Returns None if --help was requested."""
    args = argv if argv is not None else sys.argv[1:]

    if ARG_HELP_LONG in args or ARG_HELP_SHORT in args:
        print(CLI_USAGE, end="")
        return None

    if not args:
        raise UsageError("Missing cheatsheet name.")
    for arg in args:
        if arg.startswith("-"):
            raise UsageError(f"Unknown option: {arg}")
    if len(args) > 1:
        raise UsageError(f"Expected one cheatsheet name, got {len(args)}.")

    return AppArgs(name=args[0])


def resolve_log_file(environ: dict[str, str] | None = None) -> Path | None:
    """Return the log file configured in the environment, if any."""
    env = environ if environ is not None else os.environ
    raw = env.get(ENV_LOG_FILE, "").strip()
    if not raw:
        return None
    try:
        return map_path(raw, app_root_abs=get_app_root(), base_dir=Path.cwd())
    except PathMappingError as exc:
        raise ConfigError(f"{ENV_LOG_FILE} is invalid: {exc}") from exc


def run(app_args: AppArgs) -> str:
    """Load and lay out the requested cheatsheet. Returns the text to print."""
    path = resolve_cheatsheet_path(app_args.name)
    heading_set = read_heading_set(path, name=app_args.name)
    log_event(
        "cheatsheet_loaded",
        cheatsheet=app_args.name,
        cheatsheet_file=path,
        heading_count=len(heading_set.headings),
        commands_height=heading_set.commands_height(),
    )

    width = get_display_width()
    text = render(heading_set, width)
    per_row = headings_per_row(heading_set, width)
    log_event(
        "layout_rendered",
        display_width=width,
        column_width=column_width(heading_set),
        headings_per_row=per_row,
        row_blocks=math.ceil(len(heading_set.headings) / per_row),
        output_chars=len(text),
    )
    return text


def main() -> None:
    """Application entry point."""
    app_started = time.perf_counter()

    try:
        app_args = parse_args()
    except UsageError as exc:
        _die(str(exc), exc.exit_code, hint=True)
    if app_args is None:
        sys.exit(ExitCode.OK)

    try:
        log_file = resolve_log_file()
        setup_logging(log_file)
    except ConfigError as exc:
        _die(str(exc), exc.exit_code)
    except OSError as exc:
        _die(f"Could not open log file: {exc}", ExitCode.CONFIG)

    try:
        log_event("app_start", cheatsheet=app_args.name, log_file=log_file, cwd=Path.cwd())
        text = run(app_args)
    except KeyboardInterrupt:
        _stop(app_started, "keyboard_interrupt", ExitCode.INTERRUPTED)
        print()
        sys.exit(ExitCode.INTERRUPTED)
    except CmanError as exc:
        _stop(app_started, "error", exc.exit_code, exc)
        _die(str(exc), exc.exit_code, hint=isinstance(exc, UsageError))
    except Exception as exc:  # noqa: BLE001
        _stop(app_started, "fatal_error", ExitCode.FAILURE, exc)
        logging.getLogger("cman").error("Fatal error: %s", exc, exc_info=True)
        _die(f"Unexpected: {exc}", ExitCode.FAILURE)

    try:
        print(text)
        sys.stdout.flush()
    except BrokenPipeError:
        # The reader went away (e.g. `cman git | head -1`).
        _detach_stdout()
        _stop(app_started, "broken_pipe", ExitCode.FAILURE)
        sys.exit(ExitCode.FAILURE)
    _stop(app_started, "normal", ExitCode.OK)


def _detach_stdout() -> None:
    # Point stdout at devnull so the flush at interpreter exit can't fail again.
    try:
        fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, fd)
    except (OSError, ValueError):
        return


def _stop(
    app_started: float,
    reason: str,
    exit_code: ExitCode,
    error: BaseException | None = None,
) -> None:
    log_event(
        "app_stop",
        level=logging.INFO if error is None else logging.ERROR,
        reason=reason,
        exit_code=int(exit_code),
        error_type=type(error).__name__ if error is not None else None,
        error=str(error) if error is not None else None,
        uptime_ms=round((time.perf_counter() - app_started) * 1000, 1),
    )


def _die(message: str, exit_code: ExitCode, *, hint: bool = False) -> NoReturn:
    print(f"ERROR: {message}", file=sys.stderr)
    if hint:
        print(CLI_HELP_HINT, file=sys.stderr)
    sys.exit(exit_code)
