"""Utility functions for reading symbol records and writing outputs."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from artifacts.models.artifacts.symbols import SymbolRecord

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class RecordLoadError(Exception):
    """Raised when a symbol records file cannot be read or validated."""

    def __init__(self, path: Path, message: str, line: int | None = None) -> None:
        self.path = path
        self.line = line
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"{location}: {message}")


def _to_dict(obj: object) -> object:
    """Convert object to dict for JSON serialization."""
    from dataclasses import asdict, is_dataclass

    if hasattr(obj, "model_dump"):
        return obj.model_dump(by_alias=True)
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return obj


def _jsonl_bytes(records: Sequence[object]) -> bytes:
    return b"".join(
        orjson.dumps(_to_dict(rec), option=orjson.OPT_SORT_KEYS) + b"\n"
        for rec in records
    )


def _json_bytes(obj: object) -> bytes:
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2
    return orjson.dumps(_to_dict(obj), option=opts)


def _lines_bytes(lines: Sequence[str]) -> bytes:
    return "".join(f"{line}\n" for line in lines).encode("utf-8")


def _write_output(path: Path | None, data: bytes) -> None:
    """Write ``data`` to ``path``, or to stdout when ``path`` is None.

    File output goes through a temporary file in the target directory that
    replaces the destination only once fully written.
    """
    if path is None:
        sys.stdout.write(data.decode("utf-8"))
        sys.stdout.flush()
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _write_lines(path: Path | None, lines: Sequence[str]) -> None:
    _write_output(path, _lines_bytes(lines))


def _write_jsonl(path: Path | None, records: Sequence[object]) -> None:
    _write_output(path, _jsonl_bytes(records))


def _write_json(path: Path | None, obj: object) -> None:
    _write_output(path, _json_bytes(obj))


def _iter_jsonl(path: Path) -> Iterator[tuple[int, Any]]:
    """Yield (line number, decoded value) for each non-blank line."""
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise RecordLoadError(path, exc.strerror or str(exc)) from exc
    with handle:
        for lineno, raw in enumerate(handle, start=1):
            raw = raw.strip()
            if not raw:
                continue
            try:
                yield lineno, orjson.loads(raw)
            except orjson.JSONDecodeError as exc:
                raise RecordLoadError(path, f"invalid JSON: {exc}", lineno) from exc


def load_symbol_records(path: Path) -> list[SymbolRecord]:
    """Load and validate every symbol record in a JSONL file."""
    records: list[SymbolRecord] = []
    for lineno, payload in _iter_jsonl(path):
        if not isinstance(payload, dict):
            raise RecordLoadError(path, "expected a JSON object", lineno)
        try:
            records.append(SymbolRecord.model_validate(payload))
        except ValidationError as exc:
            message = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in exc.errors()
            )
            raise RecordLoadError(path, message, lineno) from exc
    return records


__all__ = [
    "RecordLoadError",
    "_write_json",
    "_write_jsonl",
    "_write_lines",
    "load_symbol_records",
]
