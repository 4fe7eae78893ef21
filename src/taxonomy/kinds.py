"""Closed taxonomy of symbol kinds.

Each kind carries its tags-file code, display label, relation label and
grouping order as associated data, so the three output encodings read from a
single table.
"""

from __future__ import annotations

from enum import Enum


class Kind(Enum):
    """A declaration category with its per-format metadata."""

    PACKAGE = ("p", "package", "contains", 0)
    FILE = ("F", "file", None, 1)
    IMPORT = ("i", "import", "imports", 2)
    TYPE = ("t", "type", "defines type", 3)
    INTERFACE = ("n", "interface", "defines interface", 4)
    CONSTANT = ("c", "constant", "defines constant", 5)
    VARIABLE = ("v", "variable", "defines variable", 6)
    FUNCTION = ("f", "function", "defines function", 7)
    CONSTRUCTOR = ("r", "constructor", "defines constructor", 8)
    METHOD = ("m", "method", "defines method", 9)
    FIELD = ("w", "field", "has field", 10)
    EMBEDDED = ("e", "embedded", "embeds", 11)

    def __init__(
        self, code: str, label: str, relation: str | None, order: int
    ) -> None:
        self.code = code
        self.label = label
        self.relation = relation
        self.order = order

    @property
    def is_namespace(self) -> bool:
        """True for kinds referenced by bare name across files."""
        return self in NAMESPACE_KINDS

    @property
    def contains_file(self) -> bool:
        """True when edges point from the symbol to its file."""
        return self is Kind.PACKAGE

    @classmethod
    def parse(cls, value: str) -> Kind:
        """Look up a kind by its one-letter code or by its label."""
        for kind in cls:
            if value in (kind.code, kind.label):
                return kind
        msg = f"unknown symbol kind: {value!r}"
        raise ValueError(msg)


NAMESPACE_KINDS = frozenset({Kind.PACKAGE, Kind.IMPORT})

# Kinds a symbol record may carry; FILE only ever appears as a container node.
SYMBOL_KINDS = tuple(kind for kind in Kind if kind is not Kind.FILE)

MAX_ORDER = max(kind.order for kind in Kind)


def label(kind: Kind) -> str:
    return kind.label


def relation_label(kind: Kind) -> str | None:
    return kind.relation


def order(kind: Kind) -> int:
    return kind.order


def node_size(kind: Kind) -> int:
    """Visual node size: containers draw larger than their members."""
    return (MAX_ORDER - kind.order + 1) * 2


__all__ = [
    "MAX_ORDER",
    "NAMESPACE_KINDS",
    "SYMBOL_KINDS",
    "Kind",
    "label",
    "node_size",
    "order",
    "relation_label",
]
