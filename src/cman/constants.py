"""Centralized constants for cman."""

from __future__ import annotations

from enum import IntEnum

# Application identity
APP_NAME = "cman"

# Cheatsheet files
CHEATSHEET_FILE_EXTENSION = ".json"
BUNDLED_CHEATSHEETS_DIR = "@/cheatsheets"

# ANSI escape sequences
ANSI_INVERSE = "\033[7m"
ANSI_RESET = "\033[0m"

# Environment
ENV_LOG_FILE = "CMAN_LOG"

# CLI args
ARG_HELP_LONG = "--help"
ARG_HELP_SHORT = "-h"
CLI_USAGE = """\
Usage: cman <program>

Shows the cheatsheet for <program>, laid out to fit the terminal width.

Cheatsheets are looked up as <program>.json in the current directory,
then among the cheatsheets bundled with cman. <program> may also be a
path using ~ (home) or @ (app root), e.g. cman ~/sheets/git

Options:
  --help, -h       Show this help message and exit.

Environment:
  CMAN_LOG         Path of a log file to append structured events to.
"""
CLI_HELP_HINT = "Run 'cman --help' for usage."


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    USAGE = 2
    NOT_FOUND = 3
    DECODE = 4
    TERMINAL = 5
    CONFIG = 6
    INTERRUPTED = 130
