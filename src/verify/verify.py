"""Determinism verification for tags files."""

from __future__ import annotations

import filecmp
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, cast

from artifacts.write import generate_output

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rules.fields import EmitOptions


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    mismatched_lines: tuple[int, ...] = field(default_factory=tuple)
    errors: tuple[str, ...] = field(default_factory=tuple)


def _differing_lines(original: Path, regenerated: Path) -> list[int]:
    old = original.read_bytes().splitlines()
    new = regenerated.read_bytes().splitlines()
    diffs = [i for i, (a, b) in enumerate(zip(old, new), start=1) if a != b]
    diffs.extend(range(min(len(old), len(new)) + 1, max(len(old), len(new)) + 1))
    return diffs


def verify_determinism(
    *,
    inputs: Sequence[Path],
    tags_file: Path,
    options: EmitOptions | None = None,
    sort_output: bool = True,
    tag_relative: bool = False,
) -> DeterminismResult:
    """Verify that an existing tags file matches a fresh regeneration.

    Regenerates tags from ``inputs`` into a temporary directory and compares
    the result byte-for-byte against ``tags_file``.

    Args:
        inputs: Symbol record files the tags file was built from.
        tags_file: Existing tags file to verify.
        options: Field options used for the original run.
        sort_output: Whether the original run sorted its output.
        tag_relative: Whether paths were written relative to the tags file.

    Returns:
        DeterminismResult with ok status, the 1-based numbers of lines that
        differ, and any input load errors.

    Raises:
        FileNotFoundError: If tags_file does not exist.
        IsADirectoryError: If tags_file is a directory.
    """
    if not tags_file.exists():
        msg = f"Tags file does not exist: {tags_file}"
        raise FileNotFoundError(msg)
    if tags_file.is_dir():
        msg = f"Tags path is a directory: {tags_file}"
        raise IsADirectoryError(msg)

    with tempfile.TemporaryDirectory() as temp_dir:
        regenerated = Path(temp_dir) / tags_file.name
        summary = generate_output(
            inputs=inputs,
            output=regenerated,
            options=options,
            sort_output=sort_output,
            tag_relative=tag_relative,
            basedir=tags_file.absolute().parent,
        )
        errors = tuple(cast("list[str]", summary["errors"]))

        if filecmp.cmp(tags_file, regenerated, shallow=False):
            mismatched: list[int] = []
        else:
            mismatched = _differing_lines(tags_file, regenerated)

    return DeterminismResult(
        ok=not mismatched and not errors,
        mismatched_lines=tuple(mismatched),
        errors=errors,
    )
