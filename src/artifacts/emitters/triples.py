"""Triple emitter for semantic-store ingestion."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from artifacts.models.artifacts.triples import (
    EDGE_TAG,
    LOCATION_LABEL,
    NODE_TAG,
    Triple,
)
from taxonomy.kinds import Kind

if TYPE_CHECKING:
    from artifacts.models.artifacts.symbols import SymbolRecord


def render_triples(record: SymbolRecord) -> tuple[Triple, Triple, Triple]:
    """Render the file node, symbol node and connecting edge for a record.

    A package contains its file, so for package records the edge runs from
    the symbol to the file; every other kind runs from the file to the symbol.
    """
    file_node: Triple = (NODE_TAG, Kind.FILE.label, record.file, record.file)
    symbol_node: Triple = (NODE_TAG, record.kind.label, record.name, record.name)

    if record.kind.contains_file:
        source, target = record.name, record.file
    else:
        source, target = record.file, record.name

    relation = cast("str", record.kind.relation)

    edge: list[str] = [
        EDGE_TAG,
        relation,
        source,
        target,
        LOCATION_LABEL,
        record.address,
    ]
    for key, value in record.non_empty_fields():
        edge.extend((key, value))

    return file_node, symbol_node, tuple(edge)


__all__ = ["render_triples"]
