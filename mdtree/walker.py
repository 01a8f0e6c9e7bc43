"""Content tree walking with per-directory ignore rules."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Iterable, List, Sequence, Tuple

from .logging import get_logger
from .models import EntryKind, FsEntry
from .paths import exclusion_set, is_excluded, is_hidden

IGNORE_FILENAME = ".gitignore"

logger = get_logger("walker")


class HiddenPolicy(Enum):
    """What to do when a directory listing meets a hidden entry."""

    SKIP = "skip"
    ABORT = "abort"


@dataclass(frozen=True)
class IgnoreRule:
    """A literal path-suffix pattern read from an ignore file."""

    pattern: str
    parts: Tuple[str, ...]

    def matches(self, path: PurePath) -> bool:
        if not self.parts:
            return False
        if len(self.parts) > len(path.parts):
            return False
        return path.parts[-len(self.parts):] == self.parts


@dataclass(frozen=True)
class IgnoreRuleSet:
    """Ignore rules scoped to the listing of a single directory."""

    directory: Path
    rules: Tuple[IgnoreRule, ...] = ()

    def matches(self, path: PurePath) -> bool:
        return any(rule.matches(path) for rule in self.rules)

    def __len__(self) -> int:
        return len(self.rules)


def _build_ignore_rule(line: str) -> IgnoreRule:
    pattern = line.strip()
    parts = PurePath(pattern).parts if pattern else ()
    return IgnoreRule(pattern=pattern, parts=tuple(parts))


def load_ignore_rules(directory: Path) -> IgnoreRuleSet:
    """Return the ignore rules declared in ``directory/.gitignore``.

    A missing ignore file yields an empty rule set. Blank lines are kept as
    empty rules that never match; ``#`` lines are comments.
    """
    ignore_path = Path(directory) / IGNORE_FILENAME
    if not ignore_path.is_file():
        return IgnoreRuleSet(directory=Path(directory))

    rules: List[IgnoreRule] = []
    for raw_line in ignore_path.read_text(encoding="utf-8").splitlines():
        if raw_line.lstrip().startswith("#"):
            continue
        rules.append(_build_ignore_rule(raw_line))
    return IgnoreRuleSet(directory=Path(directory), rules=tuple(rules))


class DirectoryWalker:
    """Recursively enumerates a content tree in pre-order."""

    def __init__(
        self,
        hidden: HiddenPolicy = HiddenPolicy.SKIP,
        excluded: Iterable[Path] = (),
    ) -> None:
        self.hidden = hidden
        self.excluded = exclusion_set(excluded)

    def walk(self, root: Path | str, directories_only: bool = False) -> List[FsEntry]:
        """Return every entry below ``root``, parents before their children.

        Siblings keep the order in which the filesystem lists them.
        """
        root_path = Path(root).absolute()
        if not root_path.is_dir():
            return []
        if is_hidden(root_path.name):
            return []
        return self._walk_directory(root_path, directories_only)

    def _walk_directory(self, directory: Path, directories_only: bool) -> List[FsEntry]:
        rules = load_ignore_rules(directory)
        entries: List[FsEntry] = []

        with os.scandir(directory) as iterator:
            children = list(iterator)

        for child in children:
            if is_hidden(child.name):
                if self.hidden is HiddenPolicy.ABORT:
                    logger.debug("Hidden entry %s stops listing of %s", child.name, directory)
                    break
                continue

            path = Path(child.path)
            if rules.matches(path):
                logger.debug("Ignoring %s", path)
                continue
            if is_excluded(path, self.excluded):
                logger.debug("Skipping excluded path %s", path)
                continue

            is_dir = child.is_dir()
            if is_dir or not directories_only:
                kind = EntryKind.DIRECTORY if is_dir else EntryKind.FILE
                entries.append(FsEntry(path=path, kind=kind))

            if is_dir:
                entries.extend(self._walk_directory(path, directories_only))

        return entries


def walk(
    root: Path | str,
    directories_only: bool = False,
    *,
    hidden: HiddenPolicy = HiddenPolicy.SKIP,
) -> List[FsEntry]:
    """Walk ``root`` with a one-off :class:`DirectoryWalker`."""
    return DirectoryWalker(hidden=hidden).walk(root, directories_only)


def sorted_entries(entries: Sequence[FsEntry]) -> List[FsEntry]:
    return sorted(entries, key=lambda entry: entry.path)


__all__ = [
    "DirectoryWalker",
    "HiddenPolicy",
    "IGNORE_FILENAME",
    "IgnoreRule",
    "IgnoreRuleSet",
    "load_ignore_rules",
    "sorted_entries",
    "walk",
]
