from __future__ import annotations

from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract.artifacts import SUPPORTED_LANGUAGES
from rules.fields import (
    EmitOptions,
    InvalidFieldsError,
    parse_extra_symbols,
    parse_fields,
)

CONFIG_FILENAME = "tagmap.toml"


class TagmapConfig(BaseModel):
    """Configuration for tags generation, read from tagmap.toml."""

    model_config = ConfigDict(extra="forbid")

    sort: bool = Field(default=True, description="Sort tag lines")
    fields: str = Field(
        default="",
        description="Extension fields to include (only +l)",
    )
    extra: str = Field(
        default="",
        description="Extra tags with package and receiver prefixes (+q)",
    )
    language: str = Field(
        default=SUPPORTED_LANGUAGES[0],
        description="Value of the language field added by +l",
    )
    tag_relative: bool = Field(
        default=False,
        description="Write file paths relative to the tags file directory",
    )
    silent: bool = Field(
        default=False,
        description="Do not report input errors",
    )
    output: str | None = Field(
        default=None,
        description="Output file (default: stdout)",
    )

    @field_validator("fields")
    @classmethod
    def validate_fields(cls, v: str) -> str:
        parse_fields(v)
        return v

    @field_validator("extra")
    @classmethod
    def validate_extra(cls, v: str) -> str:
        parse_extra_symbols(v)
        return v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: Any) -> Any:
        if v not in SUPPORTED_LANGUAGES:
            msg = (
                f"Unsupported language '{v}'. "
                f"Valid languages: {', '.join(SUPPORTED_LANGUAGES)}"
            )
            raise ValueError(msg)
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def build_emit_options(
    config: TagmapConfig,
    *,
    fields: str | None = None,
    extra: str | None = None,
) -> EmitOptions:
    """Combine config values and command-line overrides into emit options.

    Raises:
        InvalidFieldsError: If either flag string is not recognized.
    """
    return EmitOptions(
        fields=parse_fields(config.fields if fields is None else fields),
        extra=parse_extra_symbols(config.extra if extra is None else extra),
        language=config.language,
    )


def load_config(root: Path) -> TagmapConfig:
    """Load configuration from tagmap.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return TagmapConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return TagmapConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "InvalidFieldsError",
    "TagmapConfig",
    "build_emit_options",
    "load_config",
]
