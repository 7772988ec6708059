"""Plugin system for tplgen.

Plugins are referenced by name ("default") or as "namespace/name"
("functions/default"). Each plugin compiles one template call into a
Python expression that the compiler splices into the rendering function.

Built-in plugins:
- functions/default: Value, or a fallback when it is None or ''
- functions/whitespace: Collapse whitespace runs into one replacement
- helpers/array: Build a list or dict literal from the call arguments
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .arguments import ArgumentLike, KeyKind, NamedArgument, coerce_arguments
from .context import CompilerContext
from .errors import CodeGenerationError, PluginNotFoundError
from .generators import (
    EMPTY_STRING,
    SINGLE_SPACE,
    compile_array,
    compile_default,
    compile_whitespace,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParamSpec:
    """One parameter of a plugin call."""

    name: str
    default: Optional[str] = None  # source expression used when omitted
    variadic: bool = False

    @property
    def required(self) -> bool:
        return self.default is None and not self.variadic


class Plugin(ABC):
    """Base class for plugins."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Plugin name (e.g., 'default')."""
        ...

    @property
    @abstractmethod
    def namespace(self) -> str:
        """Plugin namespace (e.g., 'functions')."""
        ...

    @property
    @abstractmethod
    def params(self) -> tuple[ParamSpec, ...]:
        """Ordered parameters of the plugin call."""
        ...

    @property
    def full_name(self) -> str:
        """Full plugin reference (e.g., 'functions/default')."""
        return f"{self.namespace}/{self.name}"

    @property
    def imports(self) -> tuple[str, ...]:
        """Modules the generated code expects to be imported."""
        return ()

    @abstractmethod
    def compile_call(self, context: CompilerContext, params: dict[str, Any]) -> str:
        """Compile a call to this plugin with bound parameters."""
        ...


class DefaultPlugin(Plugin):
    """functions/default - Value, or a fallback if it is None or ''."""

    @property
    def name(self) -> str:
        return "default"

    @property
    def namespace(self) -> str:
        return "functions"

    @property
    def params(self) -> tuple[ParamSpec, ...]:
        return (ParamSpec("value"), ParamSpec("default", default=EMPTY_STRING))

    def compile_call(self, context: CompilerContext, params: dict[str, Any]) -> str:
        return compile_default(
            context, params["value"], params.get("default", EMPTY_STRING)
        )


class WhitespacePlugin(Plugin):
    """functions/whitespace - Replace whitespace runs with one string."""

    @property
    def name(self) -> str:
        return "whitespace"

    @property
    def namespace(self) -> str:
        return "functions"

    @property
    def params(self) -> tuple[ParamSpec, ...]:
        return (ParamSpec("value"), ParamSpec("with", default=SINGLE_SPACE))

    @property
    def imports(self) -> tuple[str, ...]:
        return ("re",)

    def compile_call(self, context: CompilerContext, params: dict[str, Any]) -> str:
        return compile_whitespace(
            context, params["value"], params.get("with", SINGLE_SPACE)
        )


class ArrayPlugin(Plugin):
    """helpers/array - Build a list, or a dict when arguments are named."""

    @property
    def name(self) -> str:
        return "array"

    @property
    def namespace(self) -> str:
        return "helpers"

    @property
    def params(self) -> tuple[ParamSpec, ...]:
        return (ParamSpec("rest", variadic=True),)

    def compile_call(self, context: CompilerContext, params: dict[str, Any]) -> str:
        return compile_array(context, params.get("rest", []))


def bind_arguments(plugin: Plugin, args: Iterable[ArgumentLike]) -> dict[str, Any]:
    """Map call arguments onto the plugin's parameters.

    Named arguments bind to the parameter of the same name. The remaining
    arguments fill the unbound parameters in order, and a variadic parameter
    collects whatever is left (named or not) as a list of NamedArgument.
    Omitted parameters take their default source expression.
    """
    arguments = coerce_arguments(args)
    named_params = {p.name: p for p in plugin.params if not p.variadic}
    variadic = next((p for p in plugin.params if p.variadic), None)

    bound: dict[str, Any] = {}
    leftovers: list[NamedArgument] = []
    for arg in arguments:
        if arg.kind is KeyKind.LITERAL and arg.key in named_params:
            if arg.key in bound:
                raise CodeGenerationError(
                    f"{plugin.name}: parameter '{arg.key}' given more than once"
                )
            bound[arg.key] = arg.value
        else:
            leftovers.append(arg)

    free = [p for p in plugin.params if not p.variadic and p.name not in bound]
    rest: list[NamedArgument] = []
    for arg in leftovers:
        if arg.kind in (KeyKind.LITERAL, KeyKind.COMPUTED):
            if variadic is None:
                raise CodeGenerationError(
                    f"{plugin.name}: unknown parameter '{arg.key}'"
                )
            rest.append(arg)
        elif free:
            bound[free.pop(0).name] = arg.value
        elif variadic is not None:
            rest.append(arg)
        else:
            raise CodeGenerationError(
                f"{plugin.name}: too many arguments "
                f"(expected at most {len(named_params)})"
            )

    for param in plugin.params:
        if param.variadic:
            bound[param.name] = rest
        elif param.name not in bound:
            if param.required:
                raise CodeGenerationError(
                    f"{plugin.name}: missing required parameter '{param.name}'"
                )
            bound[param.name] = param.default

    return bound


# Plugin registry
_BUILTIN_PLUGINS: dict[str, Plugin] = {
    plugin.full_name: plugin
    for plugin in (DefaultPlugin(), WhitespacePlugin(), ArrayPlugin())
}


def get_plugin(ref: str) -> Plugin:
    """Get a plugin by full reference ('helpers/array') or short name ('array')."""
    if ref in _BUILTIN_PLUGINS:
        return _BUILTIN_PLUGINS[ref]
    for plugin in _BUILTIN_PLUGINS.values():
        if plugin.name == ref:
            return plugin
    raise PluginNotFoundError(ref)


def list_builtin_plugins() -> list[str]:
    """List all built-in plugin references."""
    return list(_BUILTIN_PLUGINS.keys())


def compile_plugin_call(
    context: CompilerContext, ref: str | Plugin, args: Iterable[ArgumentLike] = ()
) -> str:
    """Resolve a plugin, bind its arguments and compile the call."""
    plugin = ref if isinstance(ref, Plugin) else get_plugin(ref)
    params = bind_arguments(plugin, args)
    code = plugin.compile_call(context, params)
    log.debug("compiled %s call: %s", plugin.full_name, code)
    return code
