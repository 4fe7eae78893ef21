"""Output generation entry points."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rules.fields import EmitOptions


def generate_output(
    *,
    inputs: Sequence[Path],
    output_format: str = "tags",
    output: Path | None = None,
    options: EmitOptions | None = None,
    sort_output: bool = True,
    tag_relative: bool = False,
    basedir: Path | None = None,
) -> dict[str, object]:
    """Generate output via lazy import to avoid package import cycles."""
    from artifacts.write import generate_output as _generate_output

    return _generate_output(
        inputs=inputs,
        output_format=output_format,
        output=output,
        options=options,
        sort_output=sort_output,
        tag_relative=tag_relative,
        basedir=basedir,
    )


__all__ = ["generate_output"]
