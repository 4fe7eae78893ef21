"""Parsing of the ``--fields`` and ``--extra`` feature flag strings."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class FieldFlag(str, Enum):
    """Optional output features switched on from the command line."""

    LANGUAGE = "language"
    EXTRA_TAGS = "extraTag"


class InvalidFieldsError(ValueError):
    """Raised when a flag string is not the single recognized token."""

    def __init__(self, fields: str) -> None:
        super().__init__(f"invalid fields: {fields}")
        self.fields = fields


@dataclass(frozen=True)
class FieldFlagSet:
    flags: frozenset[FieldFlag] = field(default_factory=frozenset)

    def includes(self, flag: FieldFlag) -> bool:
        return flag in self.flags

    def __bool__(self) -> bool:
        return bool(self.flags)


@dataclass(frozen=True)
class EmitOptions:
    """Immutable output options threaded through every emitter call."""

    fields: FieldFlagSet = field(default_factory=FieldFlagSet)
    extra: FieldFlagSet = field(default_factory=FieldFlagSet)
    language: str = "Go"


# Only "+l" (the letter, not the digit one) is supported.
_FIELDS_PATTERN = re.compile(r"^\+l$")
_EXTRA_SYMBOLS_PATTERN = re.compile(r"^\+q$")


def _parse_single(
    text: str, pattern: re.Pattern[str], flag: FieldFlag
) -> FieldFlagSet:
    if text == "":
        return FieldFlagSet()
    if pattern.fullmatch(text):
        return FieldFlagSet(frozenset({flag}))
    raise InvalidFieldsError(text)


def parse_fields(text: str) -> FieldFlagSet:
    """Parse the ``--fields`` option; ``+l`` attaches a language field."""
    return _parse_single(text, _FIELDS_PATTERN, FieldFlag.LANGUAGE)


def parse_extra_symbols(text: str) -> FieldFlagSet:
    """Parse the ``--extra`` option; ``+q`` adds qualified extra tags."""
    return _parse_single(text, _EXTRA_SYMBOLS_PATTERN, FieldFlag.EXTRA_TAGS)


__all__ = [
    "EmitOptions",
    "FieldFlag",
    "FieldFlagSet",
    "InvalidFieldsError",
    "parse_extra_symbols",
    "parse_fields",
]
