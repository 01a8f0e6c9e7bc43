"""Heading detection, numbering and anchor generation."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from ..models import HeadingEvent

MAX_LEVEL = 5
HEADING_MARKER = "#"

_ANCHOR_STRIP_RE = re.compile(r"[^A-Za-z0-9-]")


def sanitize(text: str) -> str:
    """Turn heading text into an anchor id.

    Spaces become hyphens, anything outside ``[A-Za-z0-9-]`` is dropped and
    the result is lowercased.
    """
    return _ANCHOR_STRIP_RE.sub("", text.replace(" ", "-")).lower()


def parse_heading(line: str) -> Optional[Tuple[int, str]]:
    """Return ``(level, text)`` when ``line`` starts with a heading marker.

    Markers are checked from five down to one, so ``######`` is a level five
    heading whose text starts with ``#``. The marker and one following space
    are stripped.
    """
    for level in range(MAX_LEVEL, 0, -1):
        marker = HEADING_MARKER * level
        if line.startswith(marker):
            text = line[level:]
            if text.startswith(" "):
                text = text[1:]
            return level, text
    return None


class HeadingNumberer:
    """Five nested heading counters for one pass over one document."""

    def __init__(self) -> None:
        self._counters = [0] * MAX_LEVEL

    @property
    def counters(self) -> Tuple[int, ...]:
        return tuple(self._counters)

    def advance(self, level: int) -> Tuple[int, ...]:
        """Count a heading at ``level`` and return the numbering up to it."""
        if not 1 <= level <= MAX_LEVEL:
            raise ValueError(f"Heading level must be between 1 and {MAX_LEVEL}, got {level}")
        self._counters[level - 1] += 1
        for index in range(level, MAX_LEVEL):
            self._counters[index] = 0
        return tuple(self._counters[:level])


class AnchorRegistry:
    """Hands out unique anchors within one document."""

    def __init__(self) -> None:
        self._seen: Dict[str, int] = {}

    def claim(self, base: str) -> str:
        count = self._seen.get(base, 0)
        self._seen[base] = count + 1
        if count == 0:
            return base
        return f"{base}-{count}"


def scan_headings(lines: Sequence[str]) -> List[HeadingEvent]:
    """Return the heading events of a document in order.

    Both the body pass and the table of contents consume this list, so the
    numbering and anchors they show always agree.
    """
    numberer = HeadingNumberer()
    anchors = AnchorRegistry()
    events: List[HeadingEvent] = []
    for line_number, line in enumerate(lines):
        parsed = parse_heading(line)
        if parsed is None:
            continue
        level, text = parsed
        title = text.strip()
        events.append(
            HeadingEvent(
                line_number=line_number,
                level=level,
                text=text,
                title=title,
                anchor=anchors.claim(sanitize(title)),
                numbering=numberer.advance(level),
            )
        )
    return events


__all__ = [
    "AnchorRegistry",
    "HeadingNumberer",
    "MAX_LEVEL",
    "parse_heading",
    "sanitize",
    "scan_headings",
]
