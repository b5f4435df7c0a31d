"""Noise removal for the located content subtree.

Three passes, all in place:

1. Drop everything matched by the removal selectors (edit links, navboxes,
   message boxes, scripts, citation back-links, ...).
2. Drop ``p``/``div``/``span`` elements whose only child nodes, if any, are
   comments.
3. Collapse runs of three or more newlines in text to exactly two.

Running :func:`clean` on its own output is a no-op.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from bs4 import Comment, NavigableString, Tag

from wikiextract import settings

from .tree import is_detached, matches_any, safe_select

logger = logging.getLogger(__name__)

_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n\s*\n\s*\n")


def collapse_blank_lines(text: str) -> str:
    """Reduce any run of 3+ newlines (whitespace in between) to two."""
    return _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", text)


def remove_noise(
    content: Tag,
    remove_selectors: Sequence[str],
    preserve_selectors: Sequence[str] = (),
) -> int:
    """Decompose every descendant matched by *remove_selectors*.

    An element that itself matches one of *preserve_selectors* is kept.
    Returns the number of elements removed.
    """
    removed = 0
    for selector in remove_selectors:
        for el in safe_select(content, selector):
            if is_detached(el):
                continue
            if preserve_selectors and matches_any(el, preserve_selectors):
                logger.debug("keeping preserved element matched by %r", selector)
                continue
            el.decompose()
            removed += 1
    return removed


def _is_empty(el: Tag) -> bool:
    """No child nodes other than comments."""
    return all(isinstance(child, Comment) for child in el.contents)


def remove_empty_leaves(
    content: Tag,
    tags: Sequence[str] = settings.EMPTY_LEAF_TAGS,
    preserve_selectors: Sequence[str] = (),
) -> int:
    """Remove *tags* elements without any child node (comments aside).

    Elements are visited deepest first, so a wrapper emptied by this pass is
    removed in the same pass.
    """
    removed = 0
    for el in reversed(content.find_all(list(tags))):
        if is_detached(el) or not _is_empty(el):
            continue
        if preserve_selectors and matches_any(el, preserve_selectors):
            continue
        el.decompose()
        removed += 1
    return removed


def collapse_whitespace_runs(content: Tag) -> None:
    content.smooth()
    for node in list(content.find_all(string=True)):
        if type(node) is not NavigableString:
            continue
        collapsed = collapse_blank_lines(str(node))
        if collapsed != node:
            node.replace_with(collapsed)


def clean(
    content: Tag,
    remove_selectors: Sequence[str] = settings.REMOVE_SELECTORS,
    preserve_selectors: Sequence[str] = (),
) -> None:
    """Strip noise from *content* in place.

    The removal passes repeat until nothing changes: dropping an element can
    make a sibling selector such as ``#toc + .mw-empty-elt`` match a new node.
    """
    total_removed = total_emptied = 0
    while True:
        removed = remove_noise(content, remove_selectors, preserve_selectors)
        emptied = remove_empty_leaves(content, preserve_selectors=preserve_selectors)
        total_removed += removed
        total_emptied += emptied
        if not removed and not emptied:
            break
    collapse_whitespace_runs(content)
    logger.debug(
        "cleaned content: %d noise elements, %d empty leaves",
        total_removed,
        total_emptied,
    )
