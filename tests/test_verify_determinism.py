from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from artifacts.models.artifacts.symbols import new_symbol
from artifacts.write import generate_output
from rules.fields import EmitOptions, parse_fields
from taxonomy.kinds import Kind
from verify.verify import DeterminismResult, verify_determinism

if TYPE_CHECKING:
    from pathlib import Path


def _write_symbols(path: Path) -> None:
    records = [
        new_symbol("mathutil", "math.src", 1, Kind.PACKAGE),
        new_symbol("Add", "math.src", 10, Kind.FUNCTION),
    ]
    path.write_text(
        "".join(record.model_dump_json() + "\n" for record in records),
        encoding="utf-8",
    )


def test_verify_determinism_requires_tags_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    with pytest.raises(FileNotFoundError, match="Tags file does not exist"):
        verify_determinism(inputs=[], tags_file=missing)


def test_verify_determinism_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        verify_determinism(inputs=[], tags_file=tmp_path)


def test_verify_determinism_ok(tmp_path: Path) -> None:
    symbols = tmp_path / "symbols.jsonl"
    _write_symbols(symbols)
    tags = tmp_path / "tags"
    options = EmitOptions(fields=parse_fields("+l"))
    generate_output(inputs=[symbols], output=tags, options=options)

    result = verify_determinism(inputs=[symbols], tags_file=tags, options=options)

    assert result == DeterminismResult(ok=True)


def test_verify_determinism_reports_changed_lines(tmp_path: Path) -> None:
    symbols = tmp_path / "symbols.jsonl"
    _write_symbols(symbols)
    tags = tmp_path / "tags"
    generate_output(inputs=[symbols], output=tags, sort_output=False)

    result = verify_determinism(inputs=[symbols], tags_file=tags)

    assert result == DeterminismResult(ok=False, mismatched_lines=(2, 7, 8))


def test_verify_determinism_handles_undecodable_tags_file(tmp_path: Path) -> None:
    symbols = tmp_path / "symbols.jsonl"
    _write_symbols(symbols)
    tags = tmp_path / "tags"
    generate_output(inputs=[symbols], output=tags)
    tags.write_bytes(tags.read_bytes() + b"\xff\xfe\n")

    result = verify_determinism(inputs=[symbols], tags_file=tags)

    assert result == DeterminismResult(ok=False, mismatched_lines=(9,))


def test_verify_determinism_with_relative_paths(tmp_path: Path) -> None:
    symbols = tmp_path / "symbols.jsonl"
    (tmp_path / "out").mkdir()
    record = new_symbol("Add", str(tmp_path / "math.src"), 10, Kind.FUNCTION)
    symbols.write_text(record.model_dump_json() + "\n", encoding="utf-8")
    tags = tmp_path / "out" / "tags"
    generate_output(inputs=[symbols], output=tags, tag_relative=True)

    result = verify_determinism(inputs=[symbols], tags_file=tags, tag_relative=True)

    assert result.ok


def test_verify_determinism_reports_load_errors(tmp_path: Path) -> None:
    symbols = tmp_path / "symbols.jsonl"
    _write_symbols(symbols)
    tags = tmp_path / "tags"
    generate_output(inputs=[symbols], output=tags)
    missing = tmp_path / "gone.jsonl"

    result = verify_determinism(inputs=[symbols, missing], tags_file=tags)

    assert not result.ok
    assert result.mismatched_lines == ()
    assert len(result.errors) == 1
    assert str(missing) in result.errors[0]
