"""Extra tags with package and receiver name prefixes (``--extra=+q``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.symbols import RECEIVER_TYPE
from taxonomy.kinds import Kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from artifacts.models.artifacts.symbols import SymbolRecord


def package_names(records: Iterable[SymbolRecord]) -> dict[str, str]:
    """Map each file to the name of the first package declared in it."""
    packages: dict[str, str] = {}
    for record in records:
        if record.kind is Kind.PACKAGE:
            packages.setdefault(record.file, record.name)
    return packages


def qualified_names(record: SymbolRecord, package: str | None) -> list[str]:
    """Alternate lookup names for a record, most specific last.

    Members with a receiver or container type get ``Recv.Name`` and
    ``pkg.Recv.Name``; everything else gets ``pkg.Name``.
    """
    if record.kind.is_namespace:
        return []

    receiver = record.fields.get(RECEIVER_TYPE, "")
    names: list[str] = []
    if receiver:
        names.append(f"{receiver}.{record.name}")
        if package:
            names.append(f"{package}.{receiver}.{record.name}")
    elif package:
        names.append(f"{package}.{record.name}")
    return names


def expand_extra_tags(records: Sequence[SymbolRecord]) -> list[SymbolRecord]:
    """Follow every record with copies named by its qualified names."""
    packages = package_names(records)
    expanded: list[SymbolRecord] = []
    for record in records:
        expanded.append(record)
        for name in qualified_names(record, packages.get(record.file)):
            expanded.append(record.model_copy(update={"name": name}))
    return expanded


__all__ = ["expand_extra_tags", "package_names", "qualified_names"]
