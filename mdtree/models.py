"""Core data models shared across mdtree components."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import List, Tuple


class EntryKind(Enum):
    """Kind of a filesystem entry yielded by the walker."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class FsEntry:
    """A file or directory discovered while walking a content tree."""

    path: Path
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class NavLink:
    """A labelled link rooted at the site root."""

    name: str
    link: str


@dataclass
class Breadcrumb:
    """One ancestor segment of a page plus the sibling directories at that depth."""

    label: str
    link: str
    dropdown: List[NavLink] = field(default_factory=list)


class Orientation(Enum):
    """Layout of the same-level listing."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class SiblingListing:
    """Directories and files sitting next to a page's content file."""

    directories: List[NavLink] = field(default_factory=list)
    files: List[NavLink] = field(default_factory=list)
    orientation: Orientation = Orientation.HORIZONTAL
    show_files: bool = False


@dataclass(frozen=True)
class HeadingEvent:
    """A heading found in a document together with its numbering and anchor."""

    line_number: int
    level: int
    text: str
    title: str
    anchor: str
    numbering: Tuple[int, ...]

    @property
    def number(self) -> str:
        return ".".join(str(value) for value in self.numbering)


@dataclass(frozen=True)
class Page:
    """A content file and its position relative to the content root."""

    position: PurePosixPath
    source: Path


@dataclass
class BuildReport:
    """Summary of a completed site build."""

    output_root: Path
    pages: List[Page] = field(default_factory=list)
    assets: int = 0
