"""Thin helpers around BeautifulSoup used by every pipeline stage.

The whole pipeline runs on a single ``BeautifulSoup`` tree per call.  Stages
mutate it in place; only text derivation works on a copy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


def load(markup: str) -> BeautifulSoup:
    """Parse *markup* into a mutable tree using the lxml HTML parser."""
    return BeautifulSoup(markup, "lxml")


def safe_select(root: Tag, selector: str) -> list[Tag]:
    """Return descendants of *root* matching *selector*.

    A malformed selector coming from configuration is logged and treated as
    matching nothing.
    """
    try:
        return [el for el in root.select(selector) if isinstance(el, Tag)]
    except Exception as exc:
        logger.debug("CSS selector %r failed: %s", selector, exc)
        return []


def matches(tag: Tag, selector: str) -> bool:
    try:
        return bool(tag.css.match(selector))
    except Exception as exc:
        logger.debug("CSS selector %r failed: %s", selector, exc)
        return False


def matches_any(tag: Tag, selectors: Iterable[str]) -> bool:
    return any(matches(tag, sel) for sel in selectors)


def closest_within(tag: Tag, selector: str, root: Tag) -> Tag | None:
    """Return the nearest ancestor of *tag* matching *selector*, stopping at *root*.

    *root* itself is never returned, so a match can't escape the content
    subtree being processed.
    """
    node = tag.parent
    while isinstance(node, Tag) and node is not root:
        if matches(node, selector):
            return node
        node = node.parent
    return None


def is_detached(tag: Tag) -> bool:
    """True once *tag* (or one of its ancestors) has been decomposed."""
    return bool(getattr(tag, "decomposed", False))


def has_class(tag: Tag, name: str) -> bool:
    return name in (tag.get("class") or [])


def text_of(tag: Tag | None) -> str:
    return tag.get_text().strip() if tag is not None else ""


def attr_str(tag: Tag, name: str) -> str:
    """Return attribute *name* as a plain string ("" when absent)."""
    val = tag.get(name)
    if val is None:
        return ""
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def inner_html(tag: Tag) -> str:
    """Serialise the children of *tag* (the element itself is left out)."""
    return tag.decode_contents()
