"""tplgen - expression plugins for a template compiler.

Each plugin turns already-compiled argument expressions into a Python
expression that is spliced into a generated rendering function.
"""

from ._version import __version__

__all__ = ["__version__"]
