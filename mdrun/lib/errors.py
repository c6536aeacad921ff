"""Shared error handling for mdrun."""

from __future__ import annotations

import sys
from typing import NoReturn, Sequence

import typer


class MdrunError(Exception):
    """Base exception for mdrun operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class DocumentNotFoundError(MdrunError):
    """Raised when no markdown document can be located."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(f"{', '.join(self.candidates)} not found")


class ConfigError(MdrunError):
    """Raised when the user configuration file is invalid."""


class ResolutionError(MdrunError):
    """Raised when a heading path element matches no node."""

    def __init__(self, element: str, path: Sequence[str]) -> None:
        self.element = element
        self.path = list(path)
        super().__init__(
            f"Heading not found: {element} (in path '{' > '.join(self.path)}')"
        )


class UnsupportedLanguageError(MdrunError):
    """Raised when a code block's language has no registered interpreter."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unsupported language: {tag}")


class NoCodeBlocksError(MdrunError):
    """Raised when the resolved heading has nothing to run."""

    def __init__(self, heading: str) -> None:
        self.heading = heading
        super().__init__(f"No code blocks found under heading: {heading}")


class ExecutionError(MdrunError):
    """Raised when a code block's interpreter fails to run or exits non-zero."""

    def __init__(self, command: str, exit_code: int = 1, reason: str | None = None):
        self.command = command
        self.reason = reason
        if reason is None:
            message = f"Command failed with status {exit_code}: {command}"
        else:
            message = f"Command failed ({reason}): {command}"
        super().__init__(message, exit_code=exit_code)


def error_hint(error: MdrunError) -> str | None:
    """A follow-up line pointing at the failing element, if there is one."""
    if isinstance(error, ResolutionError):
        return "Run mdrun without a heading path to list the available headings."
    if isinstance(error, NoCodeBlocksError):
        return f"Add a fenced code block under '{error.heading}' to make it runnable."
    if isinstance(error, UnsupportedLanguageError):
        return f"Register '{error.tag}' under 'languages' in the mdrun config file."
    if isinstance(error, DocumentNotFoundError):
        return "Use -f/--file to point at a markdown document."
    if isinstance(error, ExecutionError) and error.reason is None:
        return "Run with --dry-run to print the command without executing it."
    return None


def handle_error(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with its status."""
    if not isinstance(error, MdrunError):
        typer.secho(f"Unexpected error: {error}", err=True, fg=typer.colors.RED)
        sys.exit(1)

    typer.secho(f"Error: {error.message}", err=True, fg=typer.colors.RED)
    hint = error_hint(error)
    if hint:
        typer.echo(hint, err=True)
    sys.exit(error.exit_code)
