from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.content_tree import ContentTreeBuilder


@pytest.fixture
def content_tree(tmp_path: Path) -> ContentTreeBuilder:
    """Provide a reusable content tree builder rooted at the pytest tmp_path."""
    return ContentTreeBuilder(tmp_path)
