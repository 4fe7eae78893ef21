"""Input discovery for symbol record files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

SYMBOLS_SUFFIX = ".jsonl"


def _build_gitignore_matcher(root: Path) -> Callable[[str], bool] | None:
    gitignore_path = root / ".gitignore"
    if gitignore_path.is_file():
        return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
    return None


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        root_resolved = root.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    try:
        path_resolved.relative_to(root_resolved)
    except ValueError:
        return False

    return True


def _should_include_file(
    path: Path,
    directory: Path,
    gitignore_matches: Callable[[str], bool] | None,
) -> bool:
    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_root(path, directory):
        return False

    return gitignore_matches is None or not gitignore_matches(str(path))


def find_symbol_files(directory: Path) -> Iterator[Path]:
    """Find all symbol record files in a directory, respecting .gitignore.

    Yields:
        Path objects for each ``*.jsonl`` file found, sorted lexicographically
        by relative path for deterministic ordering.
    """
    gitignore_matches = _build_gitignore_matcher(directory)

    matched_files = [
        path
        for path in directory.rglob(f"*{SYMBOLS_SUFFIX}")
        if _should_include_file(path, directory, gitignore_matches)
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


def read_names(list_file: str) -> list[str]:
    """Read input names, one per line, from a file or ``-`` for stdin."""
    if list_file == "-":
        lines = sys.stdin.read().splitlines()
    else:
        lines = Path(list_file).read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def resolve_inputs(names: list[str], *, recurse: bool = False) -> list[Path]:
    """Turn command-line names into input files.

    Directories are expanded only when ``recurse`` is set; anything else is
    passed through so that missing files are reported by the loader.
    """
    paths: list[Path] = []
    for name in names:
        path = Path(name)
        if recurse and path.is_dir():
            paths.extend(find_symbol_files(path))
        else:
            paths.append(path)
    return paths


__all__ = ["find_symbol_files", "read_names", "resolve_inputs"]
