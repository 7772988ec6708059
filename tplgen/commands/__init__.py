"""CLI commands"""

from .compile import compile_command
from .list import list_command

__all__ = ["compile_command", "list_command"]
