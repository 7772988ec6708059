"""Render function compiler.

Splices plugin output into a self-contained Python module holding one
rendering function. The function is meant to be bound to a template object
exposing ``scope`` and ``charset``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .arguments import ArgumentLike
from .config import TplgenConfig
from .context import CompileContext, CompilerContext
from .plugin import Plugin, compile_plugin_call, get_plugin

log = logging.getLogger(__name__)

OUTPUT_VAR = "_out"


class RenderCompiler:
    """Compiles a sequence of text and plugin calls to Python source.

    The compiled module contains:
    - Imports: only those required by the plugins actually used
    - The rendering function, appending each piece to an output list
    """

    def __init__(self, context: CompilerContext, function_name: str = "render"):
        self.context = context
        self.function_name = function_name
        self.imports: set[str] = set()
        self.pieces: list[str] = []  # source expressions, in output order

    @classmethod
    def from_config(cls, config: TplgenConfig) -> RenderCompiler:
        """Build a compiler using the configured charset and function name."""
        return cls(CompileContext.from_config(config), function_name=config.function_name)

    def add_text(self, text: str) -> None:
        """Add literal output."""
        if text:
            self.pieces.append(repr(text))

    def add_call(self, ref: str | Plugin, args: Iterable[ArgumentLike] = ()) -> str:
        """Add a plugin call and return its generated expression."""
        plugin = ref if isinstance(ref, Plugin) else get_plugin(ref)
        code = compile_plugin_call(self.context, plugin, args)
        self.imports.update(plugin.imports)
        self.pieces.append(code)
        return code

    def compile(self) -> str:
        """Compile to module source."""
        parts = [f"import {name}" for name in sorted(self.imports)]
        if parts:
            parts.append("")
            parts.append("")

        parts.append(f"def {self.function_name}(self):")
        parts.append(f"    {OUTPUT_VAR} = []")
        for piece in self.pieces:
            parts.append(f"    {OUTPUT_VAR}.append(str({piece}))")
        parts.append(f"    return ''.join({OUTPUT_VAR})")
        parts.append("")

        log.debug(
            "compiled %s with %d piece(s), imports: %s",
            self.function_name,
            len(self.pieces),
            ", ".join(sorted(self.imports)) or "(none)",
        )
        return "\n".join(parts)
