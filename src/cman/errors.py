"""Custom exception types for cman."""

from __future__ import annotations

from .constants import ExitCode


class CmanError(Exception):
    """Base class for all cman errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class UsageError(CmanError):
    exit_code = ExitCode.USAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NotFoundError(CmanError):
    exit_code = ExitCode.NOT_FOUND

    def __init__(self, name: str, detail: str | None = None) -> None:
        self.name = name
        message = f"Cheatsheet does not exist for {name}."
        if detail:
            message = f"Could not read cheatsheet for {name}: {detail}"
        super().__init__(message)


class DecodeError(CmanError):
    exit_code = ExitCode.DECODE

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        super().__init__(f"Malformed cheatsheet {source}: {detail}")


class TerminalQueryError(CmanError):
    exit_code = ExitCode.TERMINAL

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(CmanError):
    exit_code = ExitCode.CONFIG

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PathMappingError(CmanError):
    exit_code = ExitCode.USAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
