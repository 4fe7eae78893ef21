"""Per-record emitters for the three output representations."""

from artifacts.emitters.graph import link_for, node_id, render_graph_fragment
from artifacts.emitters.lines import render_line
from artifacts.emitters.triples import render_triples

__all__ = [
    "link_for",
    "node_id",
    "render_graph_fragment",
    "render_line",
    "render_triples",
]
