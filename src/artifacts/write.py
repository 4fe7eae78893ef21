from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.emitters import render_graph_fragment, render_line, render_triples
from artifacts.extra import expand_extra_tags
from artifacts.models.artifacts.graph import Graph
from artifacts.models.artifacts.symbols import LANGUAGE
from artifacts.utils import (
    RecordLoadError,
    _write_json,
    _write_jsonl,
    _write_lines,
    load_symbol_records,
)
from contract.artifacts import (
    AUTHOR_EMAIL,
    AUTHOR_NAME,
    GRAPH_FORMAT,
    PROGRAM_NAME,
    PROGRAM_URL,
    PROGRAM_VERSION,
    TAG_FILE_FORMAT,
    TAGS_FORMAT,
    TRIPLES_FORMAT,
)
from rules.fields import EmitOptions, FieldFlag
from utils import relative_to_dir

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.artifacts.symbols import SymbolRecord
    from artifacts.models.artifacts.triples import Triple

logger = logging.getLogger(__name__)


def create_meta_tags(*, sort_output: bool) -> list[str]:
    """Return the pseudo-tag header lines of a tags file."""
    sorted_flag = 1 if sort_output else 0
    return [
        f"!_TAG_FILE_FORMAT\t{TAG_FILE_FORMAT}",
        f"!_TAG_FILE_SORTED\t{sorted_flag}\t/0=unsorted, 1=sorted/",
        f"!_TAG_PROGRAM_AUTHOR\t{AUTHOR_NAME}\t/{AUTHOR_EMAIL}/",
        f"!_TAG_PROGRAM_NAME\t{PROGRAM_NAME}",
        f"!_TAG_PROGRAM_URL\t{PROGRAM_URL}",
        f"!_TAG_PROGRAM_VERSION\t{PROGRAM_VERSION}\t/{platform.python_version()}/",
    ]


def apply_field_options(
    records: Iterable[SymbolRecord], options: EmitOptions
) -> list[SymbolRecord]:
    """Attach option-controlled fields without touching the input records."""
    if not options.fields.includes(FieldFlag.LANGUAGE):
        return list(records)
    return [record.with_fields(**{LANGUAGE: options.language}) for record in records]


def relativize_records(
    records: Iterable[SymbolRecord], basedir: Path
) -> list[SymbolRecord]:
    return [
        record.model_copy(update={"file": relative_to_dir(record.file, basedir)})
        for record in records
    ]


def build_tag_lines(
    records: Sequence[SymbolRecord],
    *,
    sort_output: bool = True,
    options: EmitOptions | None = None,
) -> list[str]:
    """Render records as tags-file lines, header first.

    Unsorted output keeps record order exactly; sorted output is the full
    lexicographic order of the rendered symbol lines.
    """
    if options is None:
        options = EmitOptions()

    prepared = apply_field_options(records, options)
    if options.extra.includes(FieldFlag.EXTRA_TAGS):
        prepared = expand_extra_tags(prepared)

    lines = [render_line(record) for record in prepared]
    if sort_output:
        lines.sort()

    logger.debug("rendered %d tag lines from %d records", len(lines), len(records))
    return create_meta_tags(sort_output=sort_output) + lines


def build_triples(
    records: Sequence[SymbolRecord], options: EmitOptions | None = None
) -> list[Triple]:
    """Render three triples per record, in record order."""
    prepared = apply_field_options(records, options or EmitOptions())
    triples: list[Triple] = []
    for record in prepared:
        triples.extend(render_triples(record))
    logger.debug("rendered %d triples from %d records", len(triples), len(records))
    return triples


def build_graph(
    records: Sequence[SymbolRecord], options: EmitOptions | None = None
) -> Graph:
    """Fold per-record fragments into one graph.

    Nodes are de-duplicated by id (first occurrence wins) so repeated files
    and namespace references share a node; every record keeps its own link.
    """
    prepared = apply_field_options(records, options or EmitOptions())
    graph = Graph()
    seen: set[str] = set()
    for record in prepared:
        fragment = render_graph_fragment(record)
        for node in fragment.nodes:
            if node.id not in seen:
                seen.add(node.id)
                graph.nodes.append(node)
        graph.links.append(fragment.link)
    logger.debug(
        "built graph with %d nodes and %d links", len(graph.nodes), len(graph.links)
    )
    return graph


def load_records(inputs: Sequence[Path]) -> tuple[list[SymbolRecord], list[str]]:
    """Load records from every input, collecting per-file errors.

    A file that fails to load contributes no records; loading continues with
    the remaining inputs.
    """
    records: list[SymbolRecord] = []
    errors: list[str] = []
    for path in inputs:
        try:
            records.extend(load_symbol_records(path))
        except RecordLoadError as exc:
            logger.debug("skipping %s: %s", path, exc)
            errors.append(str(exc))
    return records, errors


def generate_output(
    *,
    inputs: Sequence[Path],
    output_format: str = TAGS_FORMAT,
    output: Path | None = None,
    options: EmitOptions | None = None,
    sort_output: bool = True,
    tag_relative: bool = False,
    basedir: Path | None = None,
) -> dict[str, object]:
    """Load symbol records and write one output representation.

    Args:
        inputs: JSONL files of symbol records, read in order
        output_format: One of "tags", "triples" or "graph"
        output: Destination file; None writes to stdout
        options: Field and extra-tag options
        sort_output: Sort tag lines (tags format only)
        tag_relative: Rewrite file paths relative to the output directory
        basedir: Directory used by tag_relative instead of the output directory

    Returns:
        Dictionary with record count, load errors and the output path.
    """
    if options is None:
        options = EmitOptions()

    records, errors = load_records(inputs)

    if tag_relative:
        if basedir is None:
            basedir = output.absolute().parent if output is not None else Path.cwd()
        records = relativize_records(records, basedir)

    if output_format == TAGS_FORMAT:
        lines = build_tag_lines(records, sort_output=sort_output, options=options)
        _write_lines(output, lines)
    elif output_format == TRIPLES_FORMAT:
        _write_jsonl(output, build_triples(records, options))
    elif output_format == GRAPH_FORMAT:
        _write_json(output, build_graph(records, options))
    else:
        msg = f"unknown output format: {output_format!r}"
        raise ValueError(msg)

    return {
        "record_count": len(records),
        "errors": errors,
        "output": str(output) if output is not None else "-",
    }
