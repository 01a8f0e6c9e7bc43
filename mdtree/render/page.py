"""HTML boilerplate and navigation markup surrounding the rendered body."""

from __future__ import annotations

from typing import List, Sequence

from ..models import Breadcrumb, Orientation, SiblingListing

SOURCE_LINK = "README.md"


def render_header(site_name: str, style: str) -> str:
    """Return the document head with the stylesheet inlined."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta http-equiv="X-UA-Compatible" content="IE=edge">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{site_name}</title>

  <style>
  {style}
  </style>
</head>
"""


def render_body_start(site_name: str) -> str:
    return f"""
<body>
  <header>
    <a href="/">{site_name}</a>
  </header>"""


def render_nav(
    breadcrumbs: Sequence[Breadcrumb], modified: int, source_link: str = SOURCE_LINK
) -> str:
    """Return the breadcrumb bar.

    Each breadcrumb links to its ancestor page and carries a dropdown of the
    directories next to it. The right-hand block shows when the content tree
    was last modified and links to the page source.
    """
    parts: List[str] = ["\n  <nav>\n    <ul>"]
    for crumb in breadcrumbs:
        parts.append(
            f"""
        <li>
            <a href="{crumb.link}">{crumb.label}</a>
            <ul>"""
        )
        for item in crumb.dropdown:
            parts.append(
                f"""
                <li><a href="{item.link}">{item.name}/</a></li>"""
            )
        parts.append(
            """
            </ul>
        </li>"""
        )
    parts.append(
        f"""
    </ul>
    <ul style="float: right">
        <li>{modified}</li>
        <li>
            <a href="{source_link}">.md</a>
        </li>
    </ul>
  </nav>"""
    )
    return "".join(parts)


def render_same_level(listing: SiblingListing) -> str:
    """Return the listing of directories (and optionally files) next to a page."""
    if listing.orientation is Orientation.VERTICAL:
        parts: List[str] = ['\n  <ul class="vert">']
    else:
        parts = ["\n  <ul>"]
    for item in listing.directories:
        parts.append(f'\n    <li><a href="{item.link}">{item.name}/</a></li>')
    parts.append("\n  </ul>")

    if listing.show_files:
        parts.append("<br>\n    <ul>")
        for item in listing.files:
            parts.append(f'\n        <li><a href="{item.link}">{item.name}</a></li>')
        parts.append("\n    </ul>")
    return "".join(parts)


def render_footer(version: str) -> str:
    # No wall-clock values here: rebuilding unchanged input must give identical bytes.
    return f"""<br>
    <br>
    <br>
    </pre>
    <pre>generated using mdtree {version}</pre>
</body>
</html>
"""


__all__ = [
    "SOURCE_LINK",
    "render_body_start",
    "render_footer",
    "render_header",
    "render_nav",
    "render_same_level",
]
