"""Site build pipeline: copy assets and write one index.html per page."""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath

from . import __version__
from .config import SiteConfig
from .logging import get_logger
from .models import BuildReport, FsEntry, Page
from .navigation import NavigationBuilder, SameLevelBuilder
from .paths import relative_position
from .render.markdown import MarkdownRenderer
from .render.page import (
    render_body_start,
    render_footer,
    render_header,
    render_nav,
    render_same_level,
)
from .walker import DirectoryWalker

INDEX_FILENAME = "index.html"


class SiteBuilder:
    """Coordinates walking, copying and page rendering for one build."""

    def __init__(
        self,
        walker: DirectoryWalker | None = None,
        navigation: NavigationBuilder | None = None,
        same_level: SameLevelBuilder | None = None,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        self._walker = walker
        self._navigation = navigation
        self._same_level = same_level
        self._renderer = renderer
        self.logger = get_logger("builder")

    def build(self, config: SiteConfig) -> BuildReport:
        """Convert ``config.content_root`` into a static site under ``config.output_root``."""
        if config.output_root is None:
            raise ValueError("An output directory is required to build the site")

        content_root = Path(config.content_root).absolute()
        output_root = Path(config.output_root).absolute()
        if not content_root.is_dir():
            raise NotADirectoryError(f"Content path is not a directory: {config.content_root}")

        # The output tree may sit inside the content tree; it is never content.
        excluded = (output_root,)
        walker = self._walker or DirectoryWalker(hidden=config.hidden_entries, excluded=excluded)
        navigation = self._navigation or NavigationBuilder(excluded=excluded)
        same_level = self._same_level or SameLevelBuilder(
            content_file=config.content_file, excluded=excluded
        )
        renderer = self._renderer or MarkdownRenderer(walker=walker)

        style = self._load_style(config.stylesheet)
        modified = int(content_root.stat().st_mtime)

        entries = walker.walk(content_root, directories_only=False)
        self.logger.info("Discovered %d entries under %s", len(entries), content_root)

        report = BuildReport(output_root=output_root)
        for entry in entries:
            if entry.is_dir:
                continue
            relative = relative_position(entry.path, content_root)
            self._copy_asset(entry, output_root / relative)
            report.assets += 1

            if relative.name == config.content_file:
                page = Page(position=relative.parent, source=entry.path)
                html = self.render_page(
                    page,
                    config,
                    style=style,
                    modified=modified,
                    navigation=navigation,
                    same_level=same_level,
                    renderer=renderer,
                )
                self._write_page(output_root, page, html)
                report.pages.append(page)

        self.logger.info(
            "Wrote %d pages and copied %d assets into %s",
            len(report.pages),
            report.assets,
            output_root,
        )
        return report

    def render_page(
        self,
        page: Page,
        config: SiteConfig,
        *,
        style: str,
        modified: int,
        navigation: NavigationBuilder,
        same_level: SameLevelBuilder,
        renderer: MarkdownRenderer,
    ) -> str:
        """Return the complete HTML document for ``page``."""
        content_root = Path(config.content_root)
        text = page.source.read_text(encoding="utf-8")
        breadcrumbs = navigation.build(content_root, page.position)
        listing = same_level.build(content_root, page.position)
        body = renderer.render(content_root, page.position, text)

        return "".join(
            (
                render_header(config.site_name, style),
                render_body_start(config.site_name),
                render_nav(breadcrumbs, modified, source_link=config.content_file),
                render_same_level(listing),
                body,
                render_footer(__version__),
            )
        )

    def _load_style(self, stylesheet: Path | None) -> str:
        if stylesheet is None:
            return ""
        try:
            return Path(stylesheet).read_text(encoding="utf-8")
        except FileNotFoundError:
            self.logger.warning("Stylesheet %s not found; pages will be unstyled", stylesheet)
            return ""

    def _copy_asset(self, entry: FsEntry, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(entry.path, destination)
        self.logger.debug("Copied %s", destination)

    def _write_page(self, output_root: Path, page: Page, html: str) -> Path:
        index_dir = output_root / PurePosixPath(page.position)
        index_dir.mkdir(parents=True, exist_ok=True)
        index_path = index_dir / INDEX_FILENAME
        index_path.write_text(html, encoding="utf-8")
        self.logger.debug("Wrote %s", index_path)
        return index_path


__all__ = ["INDEX_FILENAME", "SiteBuilder"]
