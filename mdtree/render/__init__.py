"""Rendering of page bodies and the surrounding page markup."""

from __future__ import annotations

from .headings import HeadingNumberer, sanitize, scan_headings
from .markdown import MarkdownRenderer

__all__ = [
    "HeadingNumberer",
    "MarkdownRenderer",
    "sanitize",
    "scan_headings",
]
