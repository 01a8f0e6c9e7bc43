"""Breadcrumb and same-level listings for a page."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable, List

from .config import DEFAULT_CONTENT_FILE
from .models import Breadcrumb, NavLink, Orientation, SiblingListing
from .paths import exclusion_set, is_excluded, is_hidden, relative_position, site_link

VERTICAL_SENTINEL = "vertical"
SHOW_FILES_SENTINEL = "show_files"


def _canonical_link(path: Path, canonical_root: Path) -> str:
    return site_link(str(relative_position(path.resolve(), canonical_root)))


class NavigationBuilder:
    """Builds the breadcrumb trail of a page."""

    def __init__(self, excluded: Iterable[Path] = ()) -> None:
        self.excluded = exclusion_set(excluded)

    def build(self, content_root: Path, position: PurePosixPath | str) -> List[Breadcrumb]:
        content_root = Path(content_root)
        canonical_root = content_root.resolve()
        components = PurePosixPath(position).parts

        breadcrumbs: List[Breadcrumb] = []
        for index, label in enumerate(components, start=1):
            parent = content_root.joinpath(*components[: index - 1])
            crumb = Breadcrumb(label=label, link=site_link(*components[:index]))

            siblings = sorted(
                (child for child in parent.iterdir() if child.is_dir()),
                key=lambda child: child.name,
            )
            for sibling in siblings:
                canonical = sibling.resolve()
                name = canonical.name
                if name == label or is_hidden(name) or is_excluded(canonical, self.excluded):
                    continue
                crumb.dropdown.append(
                    NavLink(name=name, link=_canonical_link(canonical, canonical_root))
                )
            breadcrumbs.append(crumb)
        return breadcrumbs


class SameLevelBuilder:
    """Lists the directories and files sitting next to a page's content file."""

    def __init__(
        self, content_file: str = DEFAULT_CONTENT_FILE, excluded: Iterable[Path] = ()
    ) -> None:
        self.content_file = content_file
        self.excluded = exclusion_set(excluded)

    def build(self, content_root: Path, position: PurePosixPath | str) -> SiblingListing:
        content_root = Path(content_root)
        canonical_root = content_root.resolve()
        search_path = content_root / PurePosixPath(position)

        directories: List[Path] = []
        files: List[Path] = []
        listing = SiblingListing()

        for child in search_path.iterdir():
            if child.is_dir():
                directories.append(child.resolve())
            elif child.is_file():
                files.append(child.resolve())
                if child.name == VERTICAL_SENTINEL:
                    listing.orientation = Orientation.VERTICAL
                elif child.name == SHOW_FILES_SENTINEL:
                    listing.show_files = True

        for directory in sorted(directories):
            if is_hidden(directory.name) or is_excluded(directory, self.excluded):
                continue
            listing.directories.append(
                NavLink(name=directory.name, link=_canonical_link(directory, canonical_root))
            )

        if not files or not listing.show_files:
            return listing

        special = {self.content_file, VERTICAL_SENTINEL, SHOW_FILES_SENTINEL}
        for path in sorted(files):
            if path.name in special or is_hidden(path.name):
                continue
            listing.files.append(
                NavLink(name=path.name, link=_canonical_link(path, canonical_root))
            )
        return listing


__all__ = [
    "NavigationBuilder",
    "SHOW_FILES_SENTINEL",
    "SameLevelBuilder",
    "VERTICAL_SENTINEL",
]
