"""Code generators for the built-in expression plugins.

Every generator takes already-compiled Python source expressions and returns
a new Python expression as a string. Nothing is evaluated at compile time;
the only compile-time input besides the arguments is ``context.charset``.
"""

from __future__ import annotations

from typing import Iterable

from .arguments import ArgumentLike, KeyKind, coerce_arguments
from .context import CompilerContext, is_utf8

EMPTY_STRING = "''"
SINGLE_SPACE = "' '"

# Temporary binding used by the default generator
TEMP_VAR = "_tmp"

WHITESPACE_PATTERN = r"\s+"
_BACKSLASH = "\\"


def compile_default(
    context: CompilerContext, value: str, default: str = EMPTY_STRING
) -> str:
    """Generate ``value`` or ``default`` when value is None or ''.

    The value expression is evaluated once and kept in a temporary, so
    function calls and nested lookups are not repeated.

    Example:
        >>> compile_default(CompileContext(), "self.scope['name']", "'anon'")
        "(_tmp if (_tmp := (self.scope['name'])) is not None and _tmp != '' else ('anon'))"
    """
    return (
        f"({TEMP_VAR} if ({TEMP_VAR} := ({value})) is not None"
        f" and {TEMP_VAR} != '' else ({default}))"
    )


def compile_whitespace(
    context: CompilerContext, value: str, with_: str = SINGLE_SPACE
) -> str:
    """Generate a substitution collapsing each whitespace run into ``with_``.

    The regex mode is fixed at compile time: Unicode when the charset is
    UTF-8, ASCII otherwise. The generated code needs the ``re`` module.

    The replacement is inserted literally (backslashes are escaped, so no
    group references). A None value renders as '' and bytes are decoded with
    the template charset. Both expressions are evaluated once.
    """
    flag = "re.UNICODE" if is_utf8(context.charset) else "re.ASCII"
    replacement = f"str({with_}).replace({_BACKSLASH!r}, {_BACKSLASH * 2!r})"
    text = (
        f"('' if ({TEMP_VAR} := ({value})) is None"
        f" else {TEMP_VAR}.decode({context.charset!r}, 'replace')"
        f" if isinstance({TEMP_VAR}, bytes) else str({TEMP_VAR}))"
    )
    return f"re.sub({WHITESPACE_PATTERN!r}, {replacement}, {text}, flags={flag})"


def compile_array(context: CompilerContext, entries: Iterable[ArgumentLike]) -> str:
    """Generate a list or dict literal from the entries, in input order.

    All-positional entries give a list. As soon as one entry carries a name,
    a computed key or an out-of-sequence index, a dict is generated instead
    and positional entries take the next free integer index.
    """
    args = coerce_arguments(entries)
    if not args:
        return "[]"

    items: list[tuple[str, str]] = []
    sequential = True
    next_index = 0
    for arg in args:
        if arg.kind is KeyKind.POSITIONAL:
            key = str(next_index)
            next_index += 1
        elif arg.kind is KeyKind.INDEX:
            index = arg.index_value()
            if index != next_index:
                sequential = False
            key = str(index)
            next_index = max(next_index, index + 1)
        else:
            sequential = False
            key = arg.key_source()
        items.append((key, arg.value))

    if sequential:
        return "[" + ", ".join(value for _key, value in items) + "]"
    return "{" + ", ".join(f"{key}: {value}" for key, value in items) + "}"
