"""Option and configuration rules for tagmap-core."""

from rules.config import (
    ConfigError,
    TagmapConfig,
    build_emit_options,
    load_config,
)
from rules.fields import (
    EmitOptions,
    FieldFlag,
    FieldFlagSet,
    InvalidFieldsError,
    parse_extra_symbols,
    parse_fields,
)

__all__ = [
    "ConfigError",
    "EmitOptions",
    "FieldFlag",
    "FieldFlagSet",
    "InvalidFieldsError",
    "TagmapConfig",
    "build_emit_options",
    "load_config",
    "parse_extra_symbols",
    "parse_fields",
]
