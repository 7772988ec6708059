"""Library layer for tplgen: context, arguments, generators and plugins."""

from .arguments import SCOPE_TOKEN, KeyKind, NamedArgument
from .compiler import RenderCompiler
from .context import CompileContext, CompilerContext
from .errors import CodeGenerationError, ConfigError, PluginNotFoundError, TplgenError
from .generators import compile_array, compile_default, compile_whitespace
from .plugin import (
    ParamSpec,
    Plugin,
    bind_arguments,
    compile_plugin_call,
    get_plugin,
    list_builtin_plugins,
)

__all__ = [
    "SCOPE_TOKEN",
    "CodeGenerationError",
    "CompileContext",
    "CompilerContext",
    "ConfigError",
    "KeyKind",
    "NamedArgument",
    "ParamSpec",
    "Plugin",
    "PluginNotFoundError",
    "RenderCompiler",
    "TplgenError",
    "bind_arguments",
    "compile_array",
    "compile_default",
    "compile_plugin_call",
    "compile_whitespace",
    "get_plugin",
    "list_builtin_plugins",
]
