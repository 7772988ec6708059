"""Plugin call arguments.

A template call such as ``{array(a, b=5, $key=x)}`` reaches the plugins as an
ordered list of arguments, each holding an already-compiled source
expression and an optional key. The key is tagged with how it must be
emitted, so plugins never have to guess whether a key is a name, an index
or a runtime expression.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple, Union

from .errors import CodeGenerationError

# Marker for keys that are themselves runtime expressions into the active scope
SCOPE_TOKEN = "self.scope"

_INDEX_RE = re.compile(r"[0-9]+")


class KeyKind(Enum):
    """How an argument key is emitted."""

    POSITIONAL = "positional"  # no key
    INDEX = "index"  # explicit integer index, e.g. 3=foo
    LITERAL = "literal"  # plain name, emitted as a quoted string
    COMPUTED = "computed"  # source expression producing the key at render time


@dataclass(frozen=True)
class NamedArgument:
    """One argument of a plugin call."""

    value: str
    key: Optional[str] = None
    kind: KeyKind = KeyKind.POSITIONAL

    @classmethod
    def positional(cls, value: str) -> NamedArgument:
        return cls(value=value)

    @classmethod
    def literal(cls, key: str, value: str) -> NamedArgument:
        return cls(value=value, key=key, kind=KeyKind.LITERAL)

    @classmethod
    def index(cls, key: Union[int, str], value: str) -> NamedArgument:
        return cls(value=value, key=str(key), kind=KeyKind.INDEX)

    @classmethod
    def computed(cls, key_expr: str, value: str) -> NamedArgument:
        return cls(value=value, key=key_expr, kind=KeyKind.COMPUTED)

    @classmethod
    def from_pair(cls, key: Optional[str], value: str) -> NamedArgument:
        """Classify a raw ``(key, value)`` pair.

        Only the ``self.scope`` marker is recognized as a computed key; any
        other runtime expression used as a key is quoted as a literal name.
        """
        if key is None or key == "":
            return cls.positional(value)
        if is_index_key(key):
            return cls.index(key, value)
        if SCOPE_TOKEN in key:
            return cls.computed(key, value)
        return cls.literal(key, value)

    @property
    def is_keyed(self) -> bool:
        return self.kind is not KeyKind.POSITIONAL

    def key_source(self) -> str:
        """Return the key as Python source."""
        if self.kind is KeyKind.POSITIONAL:
            raise CodeGenerationError("positional argument has no key")
        if self.key is None or self.key == "":
            raise CodeGenerationError(f"{self.kind.value} key is empty")
        if self.kind is KeyKind.INDEX:
            return str(self.index_value())
        if self.kind is KeyKind.LITERAL:
            return repr(self.key)
        return self.key

    def index_value(self) -> int:
        if self.key is None or not is_index_key(self.key):
            raise CodeGenerationError(
                f"invalid array index {self.key!r}: expected a non-negative integer"
            )
        return int(self.key)


ArgumentLike = Union[NamedArgument, Tuple[Optional[str], str]]


def is_index_key(key: str) -> bool:
    """Check whether a key is a non-negative integer written in ASCII digits."""
    return _INDEX_RE.fullmatch(key) is not None


def coerce_arguments(args: Iterable[ArgumentLike]) -> list[NamedArgument]:
    """Normalize raw pairs into tagged arguments, keeping order."""
    result: list[NamedArgument] = []
    for arg in args:
        if isinstance(arg, NamedArgument):
            result.append(arg)
        elif isinstance(arg, tuple) and len(arg) == 2:
            result.append(NamedArgument.from_pair(arg[0], arg[1]))
        else:
            raise CodeGenerationError(f"invalid argument {arg!r}")
    return result


def parse_cli_argument(raw: str) -> NamedArgument:
    """Parse ``expr`` or ``key=expr`` as typed on the command line.

    ``==`` is never read as a key separator, so ``a == b`` stays positional.
    """
    match = re.fullmatch(r"([A-Za-z_][A-Za-z0-9_]*|[0-9]+)=(?!=)(.*)", raw, re.DOTALL)
    if match is None:
        return NamedArgument.positional(raw)
    return NamedArgument.from_pair(match.group(1), match.group(2))


def parse_cli_arguments(raw_args: Sequence[str]) -> list[NamedArgument]:
    return [parse_cli_argument(raw) for raw in raw_args]
