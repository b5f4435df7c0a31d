"""Locate the primary content subtree of a wiki page."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from wikiextract import settings

from .tree import safe_select

logger = logging.getLogger(__name__)


def locate_content(
    soup: BeautifulSoup,
    primary: str = settings.CONTENT_SELECTOR,
    fallbacks: Sequence[str] = settings.FALLBACK_CONTENT_SELECTORS,
) -> Tag | None:
    """Return the content element, or None when no selector matches.

    *primary* is tried first, then each of *fallbacks* in order; the first
    element matched by the first selector that matches anything wins.
    """
    for selector in (primary, *fallbacks):
        found = safe_select(soup, selector)
        if found:
            if selector != primary:
                logger.debug("content located via fallback selector %r", selector)
            return found[0]
    return None
