from __future__ import annotations

from artifacts.emitters import render_line
from artifacts.models.artifacts.symbols import SymbolRecord, new_symbol
from taxonomy.kinds import Kind


def test_function_line_matches_tags_format() -> None:
    record = new_symbol(
        "Add", "math.src", 10, Kind.FUNCTION, signature="(a,b int) int"
    )

    assert render_line(record) == (
        'Add\tmath.src\t10;"\tf\tline:10\tsignature:(a,b int) int'
    )


def test_empty_values_are_omitted() -> None:
    record = new_symbol("X", "a.src", 3, Kind.FIELD, access="", type="int")

    line = render_line(record)

    assert "access:" not in line
    assert line.endswith("\tline:3\ttype:int")


def test_fields_are_sorted_by_rendered_token() -> None:
    record = SymbolRecord(
        name="Len",
        file="p.src",
        line=20,
        kind=Kind.METHOD,
        fields={
            "type": "float64",
            "signature": "()",
            "ctype": "Point",
            "access": "public",
        },
    )

    tokens = render_line(record).split("\t")[4:]

    assert tokens == sorted(tokens)
    assert tokens == [
        "access:public",
        "ctype:Point",
        "line:20",
        "signature:()",
        "type:float64",
    ]


def test_output_does_not_depend_on_field_insertion_order() -> None:
    fields = {"b": "2", "a": "1", "c": "3"}
    forward = SymbolRecord(name="n", file="f", line=1, kind="v", fields=fields)
    backward = SymbolRecord(
        name="n", file="f", line=1, kind="v", fields=dict(reversed(fields.items()))
    )

    assert render_line(forward) == render_line(backward)


def test_file_path_is_kept_as_supplied() -> None:
    record = new_symbol("T", "./pkg/../pkg/t.src", 2, Kind.TYPE)

    assert render_line(record).split("\t")[1] == "./pkg/../pkg/t.src"
