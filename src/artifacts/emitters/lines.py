"""Tags-file line emitter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.artifacts import EXTENSION_MARKER

if TYPE_CHECKING:
    from artifacts.models.artifacts.symbols import SymbolRecord


def render_line(record: SymbolRecord) -> str:
    """Render a record as one tab-delimited tags-file line.

    Format: ``NAME\\tFILE\\tADDRESS;"\\tCODE\\tkey:value...``. Fields with an
    empty value are dropped and the remaining ``key:value`` tokens are sorted
    by their rendered text, so output does not depend on dict ordering.
    """
    tokens = sorted(f"{key}:{value}" for key, value in record.fields.items() if value)
    address = record.address + EXTENSION_MARKER
    return "\t".join((record.name, record.file, address, record.kind.code, *tokens))


__all__ = ["render_line"]
