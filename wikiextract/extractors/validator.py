"""Decide whether a parsed document is a MediaWiki page at all."""

from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup

from wikiextract import settings

from .tree import safe_select


def is_valid_page(
    soup: BeautifulSoup,
    markers: Sequence[str] = settings.PAGE_MARKER_SELECTORS,
) -> bool:
    """Return True if any of the structural *markers* is present in *soup*."""
    return any(safe_select(soup, sel) for sel in markers)
