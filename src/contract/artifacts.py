"""Output contract definitions.

This module fixes the tags-file header, the program identity written into it,
and the names of the alternate output formats.
"""

from __future__ import annotations

from dataclasses import dataclass

PROGRAM_NAME = "tagmap"
PROGRAM_VERSION = "1.4.1"
PROGRAM_URL = "https://pypi.org/project/tagmap-core/"
AUTHOR_NAME = "tagmap-core maintainers"
AUTHOR_EMAIL = "maintainers@tagmap.invalid"

# ctags extended format.
TAG_FILE_FORMAT = 2

# Field separating the mandatory tag columns from the extension fields.
EXTENSION_MARKER = ';"'

TAGS_FORMAT = "tags"
TRIPLES_FORMAT = "triples"
GRAPH_FORMAT = "graph"

SUPPORTED_LANGUAGES = ("Go",)


@dataclass(frozen=True)
class OutputFormatSpec:
    """Specification for one output representation."""

    name: str
    format: str
    description: str


OUTPUT_FORMAT_SPECS: dict[str, OutputFormatSpec] = {
    TAGS_FORMAT: OutputFormatSpec(
        name=TAGS_FORMAT,
        format="text",
        description="Tab-delimited tags file, one symbol per line.",
    ),
    TRIPLES_FORMAT: OutputFormatSpec(
        name=TRIPLES_FORMAT,
        format="jsonl",
        description="One JSON array per node or edge triple.",
    ),
    GRAPH_FORMAT: OutputFormatSpec(
        name=GRAPH_FORMAT,
        format="json",
        description="Node/link graph object for visualization.",
    ),
}

__all__ = [
    "AUTHOR_EMAIL",
    "AUTHOR_NAME",
    "EXTENSION_MARKER",
    "GRAPH_FORMAT",
    "OUTPUT_FORMAT_SPECS",
    "PROGRAM_NAME",
    "PROGRAM_URL",
    "PROGRAM_VERSION",
    "SUPPORTED_LANGUAGES",
    "TAGS_FORMAT",
    "TAG_FILE_FORMAT",
    "TRIPLES_FORMAT",
    "OutputFormatSpec",
]
