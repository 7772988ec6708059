"""List command - list built-in plugins"""

from __future__ import annotations

from rich.table import Table

from tplgen.lib.plugin import get_plugin, list_builtin_plugins

from .utils import console


def _describe_param(param) -> str:
    if param.variadic:
        return f"*{param.name}"
    if param.required:
        return param.name
    return f"{param.name}={param.default}"


def list_command() -> None:
    """List all built-in plugins."""
    table = Table()
    table.add_column("Plugin", style="cyan")
    table.add_column("Name")
    table.add_column("Parameters")
    table.add_column("Imports", style="dim")

    for ref in list_builtin_plugins():
        plugin = get_plugin(ref)
        table.add_row(
            plugin.full_name,
            plugin.name,
            ", ".join(_describe_param(p) for p in plugin.params),
            ", ".join(plugin.imports) or "-",
        )

    console.print(table)
