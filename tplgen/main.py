"""tplgen CLI Main Entry Point

tplgen - expression plugins for a template compiler.
Compiles template plugin calls (default, whitespace, array) to Python
expressions ready to be spliced into a rendering function.

Usage:
    tplgen list                                 # List built-in plugins
    tplgen compile default "self.scope['x']"    # Compile a call
    tplgen compile array a=1 b=2                # Named arguments
    tplgen compile whitespace v --charset ISO-8859-1
    tplgen --version                            # Show version
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ._version import __version__
from .commands import compile_command, list_command
from .commands.utils import setup_logging

typer_app = typer.Typer(no_args_is_help=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tplgen {__version__}")
        raise typer.Exit()


@typer_app.callback()
def cli(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Compile template plugin calls to Python source."""
    setup_logging(verbose)


@typer_app.command("list")
def list_cmd() -> None:
    """List built-in plugins and their parameters."""
    list_command()


@typer_app.command("compile")
def compile_cmd(
    plugin: str = typer.Argument(..., help="Plugin name or namespace/name."),
    args: Optional[List[str]] = typer.Argument(
        None, help="Arguments as EXPR or KEY=EXPR (Python source)."
    ),
    charset: Optional[str] = typer.Option(
        None, "--charset", help="Template charset (overrides config)."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to tplgen.yaml."
    ),
    module: bool = typer.Option(
        False, "--module", help="Emit a complete rendering function module."
    ),
) -> None:
    """Compile one plugin call and print the generated expression.

    Examples:
        tplgen compile default "self.scope['name']" "'anonymous'"
        tplgen compile whitespace "self.scope['text']" "with='-'"
        tplgen compile array "'a'" "'b'" "c=5"
        tplgen compile default "self.scope['x']" --module
    """
    compile_command(
        plugin,
        list(args) if args is not None else [],
        charset,
        config_path,
        module=module,
    )


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
