"""Configuration management for tplgen.

tplgen.yaml schema:
- charset: character encoding of the templates (default UTF-8)
- function_name: name of the generated rendering function

The TPLGEN_CHARSET environment variable overrides the charset.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .context import DEFAULT_CHARSET
from .errors import ConfigError

CONFIG_FILENAME = "tplgen.yaml"
CHARSET_ENV_VAR = "TPLGEN_CHARSET"


class TplgenConfig(BaseModel):
    """Main tplgen.yaml configuration."""

    charset: str = Field(
        default=DEFAULT_CHARSET, description="Character encoding of templates"
    )
    function_name: str = Field(
        default="render", description="Name of the generated rendering function"
    )

    @field_validator("charset")
    @classmethod
    def charset_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("charset cannot be empty")
        return value

    @field_validator("function_name")
    @classmethod
    def function_name_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid Python identifier")
        return value


def load_config(path: Path | None = None) -> TplgenConfig:
    """Load tplgen.yaml, falling back to defaults when it does not exist."""
    data: dict[str, Any] = {}
    if path is not None and path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

    env_charset = os.environ.get(CHARSET_ENV_VAR)
    if env_charset:
        data["charset"] = env_charset

    try:
        return TplgenConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def find_config_file(start: Path | None = None) -> Path | None:
    """Find tplgen.yaml in the given directory or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def apply_overrides(config: TplgenConfig, **overrides: Any) -> TplgenConfig:
    """Return a validated copy of the config with non-None overrides applied."""
    data = config.model_dump()
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return TplgenConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
