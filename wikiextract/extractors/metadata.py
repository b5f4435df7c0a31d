"""Page-level information taken from the whole document, outside the content.

Title, subtitle, categories, interlanguage links, namespace and the
"last modified" footer line.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import dateparser
from bs4 import BeautifulSoup

from wikiextract.items import CategoryRef, LanguageRef, PageHint
from wikiextract.language import declared_language

from .tree import attr_str, safe_select, text_of
from .urlnorm import normalize_url

logger = logging.getLogger(__name__)

_ISO_CLEANUP_RE = re.compile(r"\s+")
_NAMESPACE_CLASS_RE = re.compile(r"^ns-(-?\d+)$")

# Footer date formats, tried in order.  The first match is kept verbatim.
_LAST_MODIFIED_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d{4}年\d{1,2}月\d{1,2}日)"),                       # 2024年3月5日
    re.compile(r"(\d{1,2} [A-Z][a-z]+ \d{4})"),                        # 5 March 2024
    re.compile(r"([A-Z][a-z]+ \d{1,2}, \d{4})"),                       # March 5, 2024
)


def _parse_date(raw: str | None) -> str | None:
    """Parse a footer date string to an ISO 8601 date, or None."""
    if not raw:
        return None
    raw = _ISO_CLEANUP_RE.sub(" ", raw.strip())
    try:
        parsed = dateparser.parse(raw, settings={"PREFER_DAY_OF_MONTH": "first"})
    except Exception as exc:
        logger.debug("Date parse failed for %r: %s", raw, exc)
        return None
    return parsed.date().isoformat() if parsed else None


def extract_last_modified(soup: BeautifulSoup) -> str | None:
    footer = text_of(soup.select_one("#footer-info-lastmod"))
    if not footer:
        return None
    for pattern in _LAST_MODIFIED_PATTERNS:
        m = pattern.search(footer)
        if m:
            return m.group(1)
    return None


def extract_categories(soup: BeautifulSoup, base_url: str) -> list[CategoryRef]:
    categories: list[CategoryRef] = []
    for a in safe_select(soup, "#mw-normal-catlinks a[title]"):
        name = text_of(a)
        if name:
            categories.append(
                CategoryRef(name=name, url=normalize_url(attr_str(a, "href"), base_url)),
            )
    return categories


def extract_languages(soup: BeautifulSoup) -> list[LanguageRef]:
    languages: list[LanguageRef] = []
    for a in safe_select(soup, "#p-lang a"):
        name = text_of(a)
        url = attr_str(a, "href")
        if name and url:
            languages.append(
                LanguageRef(name=name, code=attr_str(a, "hreflang") or None, url=url),
            )
    return languages


def extract_namespace(soup: BeautifulSoup, hint: PageHint) -> str:
    """Namespace from the hint, else from MediaWiki's ``ns-N`` body class."""
    if hint.namespace:
        return hint.namespace
    body = soup.find("body")
    if body is not None:
        for cls in body.get("class") or []:
            m = _NAMESPACE_CLASS_RE.match(cls)
            if m:
                return m.group(1)
    return ""


def extract_page_info(
    soup: BeautifulSoup,
    hint: PageHint,
    base_url: str,
) -> dict[str, Any]:
    """Collect the document-level fields of a :class:`ContentDocument`.

    Runs before cleaning, while the whole document is still intact.
    """
    last_modified = extract_last_modified(soup)
    return {
        "title": text_of(soup.select_one("#firstHeading")) or hint.title or "",
        "subtitle": text_of(soup.select_one("#contentSub")),
        "categories": extract_categories(soup, base_url),
        "languages": extract_languages(soup),
        "namespace": extract_namespace(soup, hint),
        "last_modified": last_modified,
        "last_modified_iso": _parse_date(last_modified),
        "declared_language": declared_language(soup),
    }
