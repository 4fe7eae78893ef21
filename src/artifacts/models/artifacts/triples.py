"""Triple shapes for semantic-store ingestion.

Node triples are ``("node", category, key, display)``; edge triples are
``("edge", relation, source, target, "location", address, k1, v1, ...)``.
"""

from __future__ import annotations

NODE_TAG = "node"
EDGE_TAG = "edge"
LOCATION_LABEL = "location"

Triple = tuple[str, ...]

__all__ = ["EDGE_TAG", "LOCATION_LABEL", "NODE_TAG", "Triple"]
