"""Convert cleaned wiki HTML to Markdown."""

from __future__ import annotations

import logging
import re

from markdownify import markdownify

logger = logging.getLogger(__name__)

_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")
_TRAILING_WHITESPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)


def html_to_markdown(html: str) -> str:
    """Convert *html* to Markdown with ATX headings and ``-`` bullets.

    Trailing whitespace is stripped and runs of blank lines are collapsed.
    """
    if not html or not html.strip():
        return ""

    md = markdownify(
        html,
        heading_style="ATX",
        bullets="-",
        code_language_callback=_detect_lang,
        strip=["script", "style"],
    )
    md = _TRAILING_WHITESPACE_RE.sub("", md)
    md = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", md)
    return md.strip()


def _detect_lang(el: object) -> str:
    """Language hint for a ``<pre>`` from MediaWiki's ``mw-highlight-lang-*`` wrapper."""
    for node in (el, getattr(el, "parent", None)):
        getter = getattr(node, "get", None)
        classes = (getter("class") if getter else None) or []
        for cls in classes:
            if isinstance(cls, str) and cls.startswith("mw-highlight-lang-"):
                return cls[len("mw-highlight-lang-"):]
    return ""
