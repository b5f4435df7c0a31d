"""Plain-text rendition and word counting."""

from __future__ import annotations

import copy
import re
from collections.abc import Sequence

from bs4 import Tag

from wikiextract import settings

from .cleaner import collapse_blank_lines
from .tree import is_detached, safe_select

_WHITESPACE_RE = re.compile(r"\s+")
_CJK_RE = re.compile(r"[\u4e00-\u9fff]")
_LATIN_WORD_RE = re.compile(r"[a-zA-Z]+")

# Elements whose boundaries separate words even without whitespace in the markup.
_BLOCK_TAGS: tuple[str, ...] = (
    "p", "div", "li", "dd", "dt", "tr", "td", "th", "caption", "table",
    "ul", "ol", "dl", "h1", "h2", "h3", "h4", "h5", "h6", "figcaption",
    "blockquote", "pre",
)


def derive_text(
    content: Tag,
    exclude_selectors: Sequence[str] = settings.TEXT_EXCLUDE_SELECTORS,
) -> str:
    """Return the prose of *content* as a single whitespace-normalised string.

    *content* is not modified; furniture such as infoboxes, the TOC and
    navboxes is removed from a copy first.
    """
    work = copy.copy(content)
    for selector in exclude_selectors:
        for el in safe_select(work, selector):
            if not is_detached(el):
                el.decompose()

    for br in work.find_all("br"):
        br.replace_with(" ")
    for el in work.find_all(list(_BLOCK_TAGS)):
        el.append(" ")

    text = _WHITESPACE_RE.sub(" ", work.get_text()).strip()
    return collapse_blank_lines(text)


def count_words(text: str) -> int:
    """Mixed-script word count heuristic.

    Each CJK ideograph counts as one word, as does each maximal run of Latin
    letters.  Digits and punctuation are not counted.  This is deliberately
    not a linguistic tokenizer.
    """
    if not text:
        return 0
    return len(_CJK_RE.findall(text)) + len(_LATIN_WORD_RE.findall(text))
