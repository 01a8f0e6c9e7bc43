"""Line-by-line markdown to HTML conversion for content files."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Dict, List, Sequence

from ..logging import get_logger
from ..models import HeadingEvent
from ..paths import has_hidden_segment, relative_position, site_link
from ..walker import DirectoryWalker, HiddenPolicy, sorted_entries
from .headings import scan_headings

RULE_MARKER = "---"
QUOTE_MARKER = "> "
TREE_DIRECTIVE = ":::tree"
TOC_DIRECTIVE = ":::toc"
INDENT = "    "

logger = get_logger("render.markdown")


class MarkdownRenderer:
    """Converts content-file text into the body fragment of a page.

    Only headings, horizontal rules, quotes and the ``:::tree`` and
    ``:::toc`` directives are interpreted. Everything else lands verbatim
    inside a ``<pre>`` region opened at the top of the fragment; the page
    footer closes it.
    """

    def __init__(self, walker: DirectoryWalker | None = None) -> None:
        self.walker = walker or DirectoryWalker(hidden=HiddenPolicy.SKIP)

    def render(self, page_root: Path, position: PurePosixPath | str, text: str) -> str:
        position = PurePosixPath(position)
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        headings = scan_headings(lines)
        by_line: Dict[int, HeadingEvent] = {event.line_number: event for event in headings}

        output: List[str] = ["<pre>"]
        rule_count = 0

        for line_number, line in enumerate(lines):
            if line.startswith(RULE_MARKER):
                rule_count += 1
                # The first rule opens the metadata block and is not shown.
                if rule_count > 1:
                    output.append("\n<hr>")
            elif line_number in by_line:
                output.append(self._render_heading(by_line[line_number]))
            elif line.startswith(QUOTE_MARKER):
                output.append(self._render_quote(line))
            elif line.startswith(TREE_DIRECTIVE):
                output.extend(self._render_tree(Path(page_root), position))
            elif line.startswith(TOC_DIRECTIVE):
                logger.debug("Table of contents with %d headings at %s", len(headings), position)
                output.extend(self._render_toc(headings))
            else:
                output.append(f"{line}\n")

        return "".join(output)

    @staticmethod
    def _render_heading(event: HeadingEvent) -> str:
        return (
            "</pre>\n"
            f'<span id="{event.anchor}"></span>\n'
            f'<h{event.level}><a href="#{event.anchor}">{event.number}. {event.text}</a></h{event.level}>\n'
            "<pre>"
        )

    @staticmethod
    def _render_quote(line: str) -> str:
        body = line[len(QUOTE_MARKER):].replace("<", "&lt;")
        return f'</pre><pre class="code">{body}</pre><pre>\n'

    def _render_tree(self, page_root: Path, position: PurePosixPath) -> List[str]:
        page_dir = (page_root / position).absolute()
        entries = sorted_entries(self.walker.walk(page_dir, directories_only=False))

        lines: List[str] = []
        for entry in entries:
            relative = relative_position(entry.path, page_dir)
            if has_hidden_segment(relative):
                continue
            logger.debug("Tree entry %s", relative)
            depth = len(relative.parts)
            link = site_link(str(position), str(relative))
            lines.append(f'{INDENT * (depth - 1)}<a href="{link}">{relative.name}</a>\n')
        return lines

    @staticmethod
    def _render_toc(headings: Sequence[HeadingEvent]) -> List[str]:
        return [
            f'{INDENT * (event.level - 1)}<a href="#{event.anchor}">{event.number}. {event.title}</a>\n'
            for event in headings
        ]


__all__ = ["MarkdownRenderer", "QUOTE_MARKER", "RULE_MARKER", "TOC_DIRECTIVE", "TREE_DIRECTIVE"]
