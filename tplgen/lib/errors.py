"""Shared error handling for tplgen."""

import sys
from typing import NoReturn

import typer


class TplgenError(Exception):
    """Base exception for tplgen operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class CodeGenerationError(TplgenError):
    """Raised when plugin arguments cannot be turned into code."""

    pass


class PluginNotFoundError(TplgenError):
    """Raised when a plugin reference does not resolve."""

    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(f"Unknown plugin: {ref}", exit_code=2)


class ConfigError(TplgenError):
    """Raised when tplgen.yaml cannot be loaded."""

    pass


def handle_error(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with its code (1 if unexpected)."""
    if isinstance(error, TplgenError):
        typer.echo(f"Error: {error.message}", err=True)
        sys.exit(error.exit_code)
    typer.echo(f"Unexpected error: {error}", err=True)
    sys.exit(1)
