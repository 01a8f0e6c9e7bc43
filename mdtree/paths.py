"""Path helpers shared by the walker, navigation and build steps."""

from __future__ import annotations

from pathlib import Path, PurePath, PurePosixPath
from typing import FrozenSet, Iterable

HIDDEN_PREFIX = "."


class PathStructureError(RuntimeError):
    """Raised when a path does not live under the root it was derived from."""


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def has_hidden_segment(path: PurePath) -> bool:
    """Return True when any component of ``path`` is a hidden name."""
    return any(is_hidden(part) for part in path.parts)


def relative_position(path: Path, root: Path) -> PurePosixPath:
    """Return ``path`` relative to ``root`` as a posix path.

    Both paths must be expressed the same way (both canonical or both as
    given); a path outside ``root`` is a broken invariant, not bad input.
    """
    try:
        relative = path.relative_to(root)
    except ValueError as exc:
        raise PathStructureError(f"{path} is not located under {root}") from exc
    return PurePosixPath(*relative.parts)


def exclusion_set(paths: Iterable[Path]) -> FrozenSet[Path]:
    """Return the absolute and canonical forms of ``paths`` for quick lookups."""
    result = set()
    for path in paths:
        result.add(Path(path).absolute())
        result.add(Path(path).resolve())
    return frozenset(result)


def is_excluded(path: Path, excluded: FrozenSet[Path]) -> bool:
    if not excluded:
        return False
    return path.absolute() in excluded or path.resolve() in excluded


def site_link(*parts: str) -> str:
    """Join path segments into an absolute site link (``/a/b``)."""
    segments = [segment for part in parts for segment in PurePosixPath(part).parts]
    return "/" + "/".join(segments)


__all__ = [
    "HIDDEN_PREFIX",
    "PathStructureError",
    "exclusion_set",
    "has_hidden_segment",
    "is_excluded",
    "is_hidden",
    "relative_position",
    "site_link",
]
