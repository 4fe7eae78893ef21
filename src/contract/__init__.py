"""Stable output contract surface for tagmap-core."""

from contract.artifacts import (
    EXTENSION_MARKER,
    GRAPH_FORMAT,
    OUTPUT_FORMAT_SPECS,
    PROGRAM_NAME,
    PROGRAM_VERSION,
    SUPPORTED_LANGUAGES,
    TAG_FILE_FORMAT,
    TAGS_FORMAT,
    TRIPLES_FORMAT,
    OutputFormatSpec,
)

__all__ = [
    "EXTENSION_MARKER",
    "GRAPH_FORMAT",
    "OUTPUT_FORMAT_SPECS",
    "PROGRAM_NAME",
    "PROGRAM_VERSION",
    "SUPPORTED_LANGUAGES",
    "TAG_FILE_FORMAT",
    "TAGS_FORMAT",
    "TRIPLES_FORMAT",
    "OutputFormatSpec",
]
