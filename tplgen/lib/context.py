"""Compiler context handed to plugins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .config import TplgenConfig

DEFAULT_CHARSET = "UTF-8"


class CompilerContext(Protocol):
    """Read-only view of the compiler settings plugins may consult."""

    @property
    def charset(self) -> str: ...


@dataclass(frozen=True)
class CompileContext:
    """Compile-time settings for one compiler run."""

    charset: str = DEFAULT_CHARSET

    @classmethod
    def from_config(cls, config: TplgenConfig) -> CompileContext:
        return cls(charset=config.charset)

    @property
    def is_utf8(self) -> bool:
        return is_utf8(self.charset)


def is_utf8(charset: str) -> bool:
    """Check whether a charset name means UTF-8 (case-insensitive)."""
    return charset.lower() == "utf-8"
