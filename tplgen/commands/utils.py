"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from tplgen.lib.config import TplgenConfig, apply_overrides, find_config_file, load_config
from tplgen.lib.errors import ConfigError

console = Console()
err_console = Console(stderr=True)

DEBUG_ENV_VAR = "TPLGEN_DEBUG"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the tplgen CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (TPLGEN_DEBUG=1): DEBUG level - shows every compiled call
    """
    debug = bool(os.environ.get(DEBUG_ENV_VAR))
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING

    # stderr keeps generated code on stdout clean
    handler = RichHandler(console=err_console, show_path=debug, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("tplgen")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def resolve_config(
    config_path: Optional[Path] = None, charset: Optional[str] = None
) -> TplgenConfig:
    """Load the config file (explicit or discovered) and apply CLI overrides."""
    if config_path is not None and not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")
    path = config_path or find_config_file()
    config = load_config(path)
    logging.getLogger(__name__).info(
        "using config %s (charset %s)", path or "(defaults)", charset or config.charset
    )
    return apply_overrides(config, charset=charset)
