"""Graph fragment emitter for visualization output."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from artifacts.models.artifacts.graph import GraphFragment, Link, Node
from taxonomy.kinds import Kind, node_size

if TYPE_CHECKING:
    from artifacts.models.artifacts.symbols import SymbolRecord

LINK_WEIGHT = 1


def node_id(record: SymbolRecord) -> str:
    """Return the graph id of a record's symbol node.

    Namespace kinds are keyed by bare name so that every reference to the
    same package or import collapses into one node. All other kinds are
    prefixed with their kind code, keeping same-named symbols of different
    kinds apart.
    """
    if record.kind.is_namespace:
        return record.name
    return f"{record.kind.code}:{record.name}"


def _file_node(record: SymbolRecord) -> Node:
    kind = Kind.FILE
    return Node(
        size=node_size(kind),
        group=kind.order,
        id=record.file,
        node_class=kind.label,
        attributes={"kind": kind.code, "label": kind.label},
    )


def _symbol_node(record: SymbolRecord) -> Node:
    kind = record.kind
    attributes = {"kind": kind.code, "label": kind.label}
    if not kind.is_namespace:
        attributes["file"] = record.file
        attributes["address"] = record.address
    return Node(
        size=node_size(kind),
        group=kind.order,
        id=node_id(record),
        node_class=kind.label,
        attributes=attributes,
    )


def link_for(record: SymbolRecord) -> Link:
    relation = cast("str", record.kind.relation)

    source, target = record.file, node_id(record)
    if record.kind.contains_file:
        source, target = target, source

    return Link(
        source=source,
        target=target,
        value=LINK_WEIGHT,
        relation=relation,
        attributes=dict(record.non_empty_fields()),
    )


def render_graph_fragment(record: SymbolRecord) -> GraphFragment:
    """Render the file node, symbol node and link for one record."""
    return GraphFragment(_file_node(record), _symbol_node(record), link_for(record))


__all__ = ["LINK_WEIGHT", "link_for", "node_id", "render_graph_fragment"]
