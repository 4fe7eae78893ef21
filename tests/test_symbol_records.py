from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from artifacts.models.artifacts.symbols import SymbolRecord, new_symbol
from artifacts.utils import RecordLoadError, load_symbol_records
from taxonomy.kinds import Kind


def test_line_field_is_added_from_location() -> None:
    record = SymbolRecord(name="Add", file="a.src", line=10, kind="f")

    assert record.fields == {"line": "10"}
    assert record.address == "10"
    assert record.kind is Kind.FUNCTION


def test_explicit_line_field_is_kept() -> None:
    record = new_symbol("Add", "a.src", 10, Kind.FUNCTION)

    assert record.fields["line"] == "10"


def test_records_are_immutable() -> None:
    record = new_symbol("Add", "a.src", 10, Kind.FUNCTION)

    with pytest.raises(ValidationError):
        record.name = "Sub"  # type: ignore[misc]


def test_with_fields_returns_copy() -> None:
    record = new_symbol("Add", "a.src", 10, Kind.FUNCTION)

    updated = record.with_fields(language="Go")

    assert updated.fields == {"line": "10", "language": "Go"}
    assert record.fields == {"line": "10"}


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "a.src", "file": "a.src", "line": 1, "kind": "F"},
        {"name": "x", "file": "a.src", "line": 0, "kind": "f"},
        {"name": "x", "file": "a.src", "line": 1, "kind": "z"},
        {"name": "x", "line": 1, "kind": "f"},
        {"name": "x\ty", "file": "a.src", "line": 1, "kind": "f"},
        {"name": "x", "file": "a\n.src", "line": 1, "kind": "f"},
        {
            "name": "x",
            "file": "a.src",
            "line": 1,
            "kind": "f",
            "fields": {"type": "a\tb"},
        },
    ],
)
def test_invalid_records_are_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        SymbolRecord.model_validate(payload)


def test_dump_uses_kind_code() -> None:
    record = new_symbol("Add", "a.src", 10, Kind.FUNCTION)

    assert record.model_dump()["kind"] == "f"


def test_load_fixture_records() -> None:
    fixture = Path(__file__).parent / "fixtures" / "symbols" / "math.jsonl"

    records = load_symbol_records(fixture)

    assert [r.name for r in records] == ["mathutil", "fmt", "Add", "Point", "X", "Len"]
    assert records[2].fields == {
        "access": "public",
        "line": "10",
        "signature": "(a,b int) int",
    }


def test_load_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "s.jsonl"
    path.write_text(
        '\n{"name": "a", "file": "f", "line": 1, "kind": "v"}\n\n',
        encoding="utf-8",
    )

    assert [r.name for r in load_symbol_records(path)] == ["a"]


def test_load_reports_invalid_json_with_line_number(tmp_path: Path) -> None:
    path = tmp_path / "s.jsonl"
    path.write_text(
        '{"name": "a", "file": "f", "line": 1, "kind": "v"}\n{not json\n',
        encoding="utf-8",
    )

    with pytest.raises(RecordLoadError) as exc_info:
        load_symbol_records(path)

    assert exc_info.value.line == 2
    assert str(exc_info.value).startswith(f"{path}:2: invalid JSON")


def test_load_reports_validation_errors(tmp_path: Path) -> None:
    path = tmp_path / "s.jsonl"
    path.write_text('{"name": "a", "file": "f", "line": 1, "kind": "q"}\n')

    with pytest.raises(RecordLoadError, match="kind"):
        load_symbol_records(path)


def test_load_rejects_non_object_lines(tmp_path: Path) -> None:
    path = tmp_path / "s.jsonl"
    path.write_text('["a", "f", 1]\n', encoding="utf-8")

    with pytest.raises(RecordLoadError, match="expected a JSON object"):
        load_symbol_records(path)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RecordLoadError) as exc_info:
        load_symbol_records(tmp_path / "missing.jsonl")

    assert exc_info.value.line is None


def test_load_rejects_tab_in_name(tmp_path: Path) -> None:
    path = tmp_path / "symbols.jsonl"
    path.write_bytes(b'{"name": "a\\tb", "file": "a.src", "line": 1, "kind": "f"}\n')

    with pytest.raises(RecordLoadError) as exc_info:
        load_symbol_records(path)

    assert exc_info.value.line == 1
    assert "control characters" in str(exc_info.value)
