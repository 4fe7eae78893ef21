"""Model namespace for tagmap-core records and output shapes."""

from artifacts.models.artifacts.graph import Graph, GraphFragment, Link, Node
from artifacts.models.artifacts.symbols import SymbolRecord, new_symbol
from artifacts.models.artifacts.triples import Triple

__all__ = [
    "Graph",
    "GraphFragment",
    "Link",
    "Node",
    "SymbolRecord",
    "Triple",
    "new_symbol",
]
