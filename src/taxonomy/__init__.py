"""Symbol kind taxonomy for tagmap-core."""

from taxonomy.kinds import (
    MAX_ORDER,
    NAMESPACE_KINDS,
    SYMBOL_KINDS,
    Kind,
    label,
    node_size,
    order,
    relation_label,
)

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
