"""Compile command - compile one plugin call to a Python expression"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from tplgen.lib.arguments import parse_cli_arguments
from tplgen.lib.compiler import RenderCompiler
from tplgen.lib.context import CompileContext
from tplgen.lib.errors import handle_error
from tplgen.lib.plugin import compile_plugin_call

from .utils import resolve_config

log = logging.getLogger(__name__)


def compile_command(
    plugin_ref: str,
    args: list[str],
    charset: Optional[str] = None,
    config_path: Optional[Path] = None,
    module: bool = False,
) -> None:
    """Compile a plugin call and print the generated expression.

    With ``module`` the call is wrapped in a complete rendering function
    named after the configured ``function_name``.
    """
    try:
        config = resolve_config(config_path, charset)
        arguments = parse_cli_arguments(args)
        if module:
            compiler = RenderCompiler.from_config(config)
            compiler.add_call(plugin_ref, arguments)
            code = compiler.compile()
        else:
            context = CompileContext.from_config(config)
            code = compile_plugin_call(context, plugin_ref, arguments)
    except Exception as e:
        handle_error(e)

    log.info("compiled %s with %d argument(s)", plugin_ref, len(args))
    typer.echo(code)
