"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://minecraft.wiki"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def wiki_html() -> str:
    return _read_fixture("wiki_page.html")


@pytest.fixture
def zh_html() -> str:
    return _read_fixture("zh_page.html")


@pytest.fixture
def make_page() -> Callable[[str], str]:
    """Wrap a content fragment in the minimal MediaWiki page skeleton."""

    def _make(body: str, title: str = "Test page") -> str:
        return (
            "<html><body>"
            f'<h1 id="firstHeading">{title}</h1>'
            '<div id="mw-content-text"><div class="mw-parser-output">'
            f"{body}"
            "</div></div>"
            "</body></html>"
        )

    return _make
