"""Structural inventory of cleaned wiki content.

One pass per component kind over the cleaned subtree: sections (headings),
images, tables, infoboxes and the table of contents.
"""

from __future__ import annotations

import logging

from bs4 import Tag

from wikiextract.items import (
    ContentComponents,
    ImageRef,
    InfoboxSummary,
    Section,
    TableSummary,
    Toc,
    TocItem,
)

from .normalize import find_caption, parse_dimension
from .tree import attr_str, safe_select, text_of

logger = logging.getLogger(__name__)

_HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")
_INFOBOX_MARKER = "infobox"
_INFOBOX_TITLE_SELECTOR = ".infobox-title, .fn"
_TOC_SELECTOR = "#toc, .toc"


def _heading_id(heading: Tag) -> str:
    hid = attr_str(heading, "id")
    if hid:
        return hid
    # Older MediaWiki puts the anchor on an inner span.
    headline = heading.select_one(".mw-headline[id]")
    return attr_str(headline, "id") if headline is not None else ""


def extract_sections(content: Tag) -> list[Section]:
    sections: list[Section] = []
    for heading in content.find_all(list(_HEADING_TAGS)):
        text = text_of(heading)
        if not text:
            continue
        hid = _heading_id(heading)
        sections.append(
            Section(
                level=int(heading.name[1]),
                text=text,
                id=hid,
                anchor=f"#{hid}" if hid else "",
            ),
        )
    return sections


def extract_images(content: Tag) -> list[ImageRef]:
    images: list[ImageRef] = []
    for img in content.find_all("img"):
        src = attr_str(img, "src").strip()
        if not src:
            continue
        images.append(
            ImageRef(
                src=src,
                alt=attr_str(img, "alt"),
                caption=find_caption(img, content),
                width=parse_dimension(attr_str(img, "width")),
                height=parse_dimension(attr_str(img, "height")),
            ),
        )
    return images


def summarize_table(table: Tag) -> TableSummary:
    """Summarise *table*; the column count is read from the first row only."""
    rows = table.find_all("tr")
    col_count = len(rows[0].find_all(["th", "td"])) if rows else 0
    return TableSummary(
        caption=text_of(table.find("caption")),
        row_count=len(rows),
        col_count=col_count,
        has_header=table.find("th") is not None,
    )


def extract_tables(content: Tag) -> list[TableSummary]:
    return [summarize_table(t) for t in content.find_all("table")]


def infobox_type(classes: list[str]) -> str:
    """Return the most specific ``*infobox*`` class token, else ``"infobox"``."""
    for cls in classes:
        if _INFOBOX_MARKER in cls and cls != _INFOBOX_MARKER:
            return cls
    return _INFOBOX_MARKER


def extract_infoboxes(content: Tag) -> list[InfoboxSummary]:
    infoboxes: list[InfoboxSummary] = []
    for box in safe_select(content, f".{_INFOBOX_MARKER}"):
        infoboxes.append(
            InfoboxSummary(
                title=text_of(box.select_one(_INFOBOX_TITLE_SELECTOR)),
                type=infobox_type(list(box.get("class") or [])),
                has_image=box.find("img") is not None,
            ),
        )
    return infoboxes


def extract_toc(content: Tag) -> Toc | None:
    """Return the TOC entries, or None when the page has no TOC container."""
    containers = safe_select(content, _TOC_SELECTOR)
    if not containers:
        return None

    items: list[TocItem] = []
    seen: set[int] = set()
    for container in containers:
        for a in container.find_all("a"):
            # Nested containers (.toc inside #toc) list the same anchors twice.
            if id(a) in seen:
                continue
            seen.add(id(a))
            text = text_of(a)
            href = attr_str(a, "href")
            if text and href:
                items.append(TocItem(text=text, href=href))
    return Toc(items=items)


def extract_components(content: Tag) -> ContentComponents:
    """Build the full :class:`ContentComponents` inventory for *content*."""
    components = ContentComponents(
        sections=extract_sections(content),
        images=extract_images(content),
        tables=extract_tables(content),
        infoboxes=extract_infoboxes(content),
        toc=extract_toc(content),
    )
    logger.debug(
        "components: %d sections, %d images, %d tables, %d infoboxes, toc=%s",
        len(components.sections),
        len(components.images),
        len(components.tables),
        len(components.infoboxes),
        components.toc is not None,
    )
    return components
