"""Shared utilities for tagmap-core."""

from __future__ import annotations

import os
from pathlib import Path


def relative_to_dir(file_path: str | Path, basedir: str | Path) -> str:
    """Rewrite a file path relative to ``basedir``.

    Args:
        file_path: Path as supplied by the symbol producer (absolute, or
            relative to the working directory)
        basedir: Directory the result should be relative to, typically the
            directory holding the tags file

    Returns:
        POSIX-style relative path.

    Examples:
        >>> relative_to_dir("/repo/pkg/a.go", "/repo")
        'pkg/a.go'
        >>> relative_to_dir("/repo/pkg/a.go", "/repo/out")
        '../pkg/a.go'
    """
    absolute = os.path.abspath(os.fspath(file_path))
    relative = os.path.relpath(absolute, os.path.abspath(os.fspath(basedir)))
    return Path(relative).as_posix()
