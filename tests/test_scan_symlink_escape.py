from __future__ import annotations

import io
import os
from typing import TYPE_CHECKING

import pytest

from scan.files import find_symbol_files, read_names, resolve_inputs

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.skipif(
    os.name == "nt",
    reason="Symlink semantics vary on Windows test runners.",
)
def test_find_symbol_files_skips_symlinked_dirs(tmp_path: Path) -> None:
    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    (repo_root / "pkg").mkdir()
    (repo_root / "pkg" / "a.jsonl").write_text("", encoding="utf-8")

    external_root = tmp_path / "external"
    external_root.mkdir()
    (external_root / "leak.jsonl").write_text("", encoding="utf-8")

    symlink_dir = repo_root / "linked"
    symlink_dir.symlink_to(external_root, target_is_directory=True)

    results = [
        path.relative_to(repo_root).as_posix() for path in find_symbol_files(repo_root)
    ]

    assert "pkg/a.jsonl" in results
    assert "linked/leak.jsonl" not in results


def test_find_symbol_files_sorted_and_gitignored(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.jsonl").write_text("", encoding="utf-8")
    (tmp_path / "a.jsonl").write_text("", encoding="utf-8")
    (tmp_path / "ignored.jsonl").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    (tmp_path / ".gitignore").write_text("ignored.jsonl\n", encoding="utf-8")

    results = [p.relative_to(tmp_path).as_posix() for p in find_symbol_files(tmp_path)]

    assert results == ["a.jsonl", "b/z.jsonl"]


def test_resolve_inputs_only_walks_with_recurse(tmp_path: Path) -> None:
    (tmp_path / "a.jsonl").write_text("", encoding="utf-8")

    assert resolve_inputs([str(tmp_path)]) == [tmp_path]
    assert resolve_inputs([str(tmp_path)], recurse=True) == [tmp_path / "a.jsonl"]
    assert resolve_inputs(["missing.jsonl"], recurse=True)[0].name == "missing.jsonl"


def test_read_names_from_file_and_stdin(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    names = tmp_path / "names.txt"
    names.write_text("a.jsonl\n\nb.jsonl\n", encoding="utf-8")

    assert read_names(str(names)) == ["a.jsonl", "b.jsonl"]

    monkeypatch.setattr("sys.stdin", io.StringIO("c.jsonl\n"))
    assert read_names("-") == ["c.jsonl"]
