"""Tests for mdtree.walker."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from types import SimpleNamespace

import pytest

from mdtree import walker
from mdtree.models import EntryKind
from mdtree.walker import DirectoryWalker, HiddenPolicy, load_ignore_rules, walk


class _SortedScandir:
    """Stand-in for os.scandir that lists entries in name order."""

    _real = staticmethod(os.scandir)

    def __init__(self, path: str | Path) -> None:
        with self._real(path) as iterator:
            self._entries = sorted(iterator, key=lambda entry: entry.name)

    def __enter__(self):
        return iter(self._entries)

    def __exit__(self, *exc_info: object) -> bool:
        return False


def _relative(entries, root: Path) -> list[str]:
    return [entry.path.relative_to(root.absolute()).as_posix() for entry in entries]


def test_load_ignore_rules_missing_file_is_empty(tmp_path: Path) -> None:
    rules = load_ignore_rules(tmp_path)

    assert len(rules) == 0
    assert not rules.matches(PurePath("/anything/at/all"))


def test_load_ignore_rules_blank_lines_never_match(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("\n   \n# comment\nbuild\n", encoding="utf-8")

    rules = load_ignore_rules(tmp_path)

    assert [rule.pattern for rule in rules.rules] == ["", "", "build"]
    assert rules.matches(PurePath("/site/build"))
    assert not rules.matches(PurePath("/site/src"))


def test_ignore_rule_matches_whole_segments_only(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("drafts/old\n", encoding="utf-8")

    rules = load_ignore_rules(tmp_path)

    assert rules.matches(PurePath("/site/blog/drafts/old"))
    assert not rules.matches(PurePath("/site/blog/drafts/bold"))
    assert not rules.matches(PurePath("/site/blog/mydrafts/old"))
    assert not rules.matches(PurePath("/site/blog/drafts/old/file.txt"))


def test_ignore_rule_does_not_expand_globs(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("*.log\n", encoding="utf-8")

    rules = load_ignore_rules(tmp_path)

    assert not rules.matches(PurePath("/site/notes.log"))
    assert rules.matches(PurePath("/site/*.log"))


def test_walk_returns_empty_for_non_directory(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")

    assert walk(target) == []
    assert walk(tmp_path / "missing") == []


def test_walk_returns_empty_for_hidden_root(tmp_path: Path) -> None:
    hidden = tmp_path / ".hidden"
    (hidden / "sub").mkdir(parents=True)

    assert walk(hidden) == []


def test_walk_lists_every_entry_once_in_preorder(content_tree) -> None:
    content_tree.write(
        {
            "README.md": "# Home\n",
            "blog/README.md": "# Blog\n",
            "blog/post1/README.md": "# Post\n",
            "blog/post1/img/photo.png": "png",
            "about/README.md": "# About\n",
        }
    )

    entries = walk(content_tree.path())
    paths = _relative(entries, content_tree.path())

    assert sorted(paths) == sorted(
        [
            "README.md",
            "blog",
            "blog/README.md",
            "blog/post1",
            "blog/post1/README.md",
            "blog/post1/img",
            "blog/post1/img/photo.png",
            "about",
            "about/README.md",
        ]
    )
    assert len(paths) == len(set(paths))
    for index, path in enumerate(paths):
        parent = PurePath(path).parent.as_posix()
        if parent != ".":
            assert paths.index(parent) < index

    kinds = {path: entry.kind for path, entry in zip(paths, entries)}
    assert kinds["blog/post1/img"] is EntryKind.DIRECTORY
    assert kinds["blog/post1/img/photo.png"] is EntryKind.FILE


def test_walk_yields_descendants_before_next_sibling(content_tree, monkeypatch) -> None:
    content_tree.write({"alpha/one.txt": "1", "alpha/deep/two.txt": "2", "beta/three.txt": "3"})
    monkeypatch.setattr(walker, "os", SimpleNamespace(scandir=_SortedScandir))

    paths = _relative(walk(content_tree.path()), content_tree.path())

    assert paths == [
        "alpha",
        "alpha/deep",
        "alpha/deep/two.txt",
        "alpha/one.txt",
        "beta",
        "beta/three.txt",
    ]


def test_walk_directories_only_still_descends(content_tree) -> None:
    content_tree.write({"a/b/c/file.txt": "x", "a/top.txt": "y"})

    paths = _relative(walk(content_tree.path(), directories_only=True), content_tree.path())

    assert sorted(paths) == ["a", "a/b", "a/b/c"]


def test_walk_honours_ignore_rules_and_skips_descendants(content_tree) -> None:
    content_tree.write(
        {
            ".gitignore": "drafts\nsecret.txt\n",
            "drafts/README.md": "# Draft\n",
            "drafts/nested/file.txt": "x",
            "secret.txt": "hidden",
            "public/README.md": "# Public\n",
        }
    )

    paths = _relative(walk(content_tree.path()), content_tree.path())

    assert sorted(paths) == ["public", "public/README.md"]


def test_walk_loads_ignore_rules_per_directory(content_tree) -> None:
    content_tree.write(
        {
            "blog/.gitignore": "scratch\n",
            "blog/scratch/notes.txt": "x",
            "blog/README.md": "# Blog\n",
            "scratch/keep.txt": "kept",
        }
    )

    paths = _relative(walk(content_tree.path()), content_tree.path())

    assert "scratch/keep.txt" in paths
    assert "blog/scratch" not in paths
    assert "blog/scratch/notes.txt" not in paths


def test_walk_skips_hidden_entries_by_default(content_tree, monkeypatch) -> None:
    content_tree.write({"alpha/.cache/data": "x", "alpha/one.txt": "1", "beta/two.txt": "2"})
    monkeypatch.setattr(walker, "os", SimpleNamespace(scandir=_SortedScandir))

    paths = _relative(walk(content_tree.path()), content_tree.path())

    assert paths == ["alpha", "alpha/one.txt", "beta", "beta/two.txt"]


def test_walk_abort_policy_stops_listing_at_hidden_entry(content_tree, monkeypatch) -> None:
    content_tree.write({"alpha/.cache/data": "x", "alpha/one.txt": "1", "beta/two.txt": "2"})
    monkeypatch.setattr(walker, "os", SimpleNamespace(scandir=_SortedScandir))

    entries = DirectoryWalker(hidden=HiddenPolicy.ABORT).walk(content_tree.path())

    assert _relative(entries, content_tree.path()) == ["alpha", "beta", "beta/two.txt"]


def test_walk_propagates_permission_errors(content_tree, monkeypatch) -> None:
    content_tree.write({"locked/file.txt": "x"})

    def _denied(path):
        raise PermissionError(f"denied: {path}")

    monkeypatch.setattr(walker, "os", SimpleNamespace(scandir=_denied))

    with pytest.raises(PermissionError):
        walk(content_tree.path())


def test_walk_skips_excluded_paths_and_their_contents(content_tree) -> None:
    content_tree.write({"README.md": "# Home\n", "public/index.html": "old", "public/a/b.txt": "x"})

    walker_ = DirectoryWalker(excluded=[content_tree.path("public")])
    paths = _relative(walker_.walk(content_tree.path()), content_tree.path())

    assert paths == ["README.md"]
