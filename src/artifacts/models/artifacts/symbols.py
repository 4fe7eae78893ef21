"""Symbol record model.

A symbol record is one declaration handed over by the external scanner. It is
immutable: emitters read it, and option handling derives new records with
``model_copy`` instead of mutating fields in place.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from taxonomy.kinds import Kind

# Tag field keys read or written by the pipeline.
RECEIVER_TYPE = "ctype"
LINE = "line"
LANGUAGE = "language"

# Tab and line breaks delimit tag lines and tokens.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _check_token(value: str, what: str) -> str:
    if _CONTROL_CHARS.search(value):
        msg = f"{what} must not contain control characters: {value!r}"
        raise ValueError(msg)
    return value


class SymbolRecord(BaseModel):
    """A declaration extracted from a source file."""

    model_config = ConfigDict(frozen=True)

    name: str
    file: str
    line: int = Field(ge=1)
    kind: Kind
    fields: dict[str, str] = Field(default_factory=dict)

    @field_validator("name", "file")
    @classmethod
    def reject_control_chars(cls, v: str, info: ValidationInfo) -> str:
        return _check_token(v, str(info.field_name))

    @field_validator("fields")
    @classmethod
    def reject_control_chars_in_fields(cls, v: dict[str, str]) -> dict[str, str]:
        for key, value in v.items():
            _check_token(key, "field name")
            _check_token(value, f"field {key!r}")
        return v

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, v: Any) -> Any:
        """Accept a kind code (``"f"``) or label (``"function"``)."""
        if isinstance(v, str):
            v = Kind.parse(v)
        if v is Kind.FILE:
            msg = "the file pseudo-kind cannot be used for a symbol"
            raise ValueError(msg)
        return v

    @model_validator(mode="before")
    @classmethod
    def add_line_field(cls, data: Any) -> Any:
        if isinstance(data, dict) and "line" in data:
            fields = dict(data.get("fields") or {})
            fields.setdefault(LINE, str(data["line"]))
            data = {**data, "fields": fields}
        return data

    @field_serializer("kind")
    def serialize_kind(self, kind: Kind) -> str:
        return kind.code

    @property
    def address(self) -> str:
        return str(self.line)

    def with_fields(self, **extra: str) -> SymbolRecord:
        """Return a copy with ``extra`` merged into the tag fields."""
        return self.model_copy(update={"fields": {**self.fields, **extra}})

    def non_empty_fields(self) -> list[tuple[str, str]]:
        """Tag fields with a value, sorted by key."""
        return sorted((k, v) for k, v in self.fields.items() if v)


def new_symbol(
    name: str, file: str, line: int, kind: Kind, **fields: str
) -> SymbolRecord:
    """Build a record with the ``line`` field set from ``line``."""
    return SymbolRecord(name=name, file=file, line=line, kind=kind, fields=fields)


__all__ = [
    "LANGUAGE",
    "LINE",
    "RECEIVER_TYPE",
    "SymbolRecord",
    "new_symbol",
]
