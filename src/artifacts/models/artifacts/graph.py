"""Node/link graph models for visualization output."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    """A graph vertex: either a file or a symbol."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    size: int
    group: int
    id: str
    node_class: str = Field(alias="class")
    attributes: dict[str, str] = Field(default_factory=dict)


class Link(BaseModel):
    """A typed, attributed edge between two node ids."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    value: int
    relation: str
    attributes: dict[str, str] = Field(default_factory=dict)


class GraphFragment(NamedTuple):
    """The two nodes and one link produced for a single symbol record."""

    file_node: Node
    symbol_node: Node
    link: Link

    @property
    def nodes(self) -> tuple[Node, Node]:
        return (self.file_node, self.symbol_node)


class Graph(BaseModel):
    nodes: list[Node] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)


__all__ = ["Graph", "GraphFragment", "Link", "Node"]
