"""Image, link and table normalisation passes over the cleaned content."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from bs4 import Tag

from wikiextract import settings
from wikiextract.options import ImageOptions, LinkOptions

from .tree import (
    attr_str,
    closest_within,
    has_class,
    is_detached,
    matches,
    safe_select,
    text_of,
)
from .urlnorm import absolutize, is_external, is_root_relative

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")

# href fragments marking links that are useless outside the live wiki
_DEAD_LINK_MARKERS: tuple[str, ...] = ("action=edit", "redlink=1")
_SELF_LINK_CLASS = "mw-selflink"


def parse_dimension(value: str | None) -> int | None:
    """Parse a width/height attribute leniently (``"120px"`` -> 120)."""
    if not value:
        return None
    m = _LEADING_INT_RE.match(value)
    return int(m.group(1)) if m else None


def find_caption(img: Tag, root: Tag) -> str:
    """Return the caption text belonging to *img*'s thumbnail container."""
    inner = closest_within(img, ".thumbinner", root)
    if inner is not None:
        caption = text_of(inner.select_one(".thumbcaption"))
        if caption:
            return caption
    figure = closest_within(img, "figure", root)
    if figure is not None:
        return text_of(figure.find("figcaption"))
    return ""


# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------

def thumbnail_container(img: Tag, selector: str, root: Tag) -> Tag | None:
    """Return the outermost thumbnail container wrapping *img*.

    ``.thumb > .thumbinner`` nest directly; removing only the inner one would
    leave an empty frame behind.
    """
    container = closest_within(img, selector, root)
    while container is not None:
        parent = container.parent
        if not isinstance(parent, Tag) or parent is root or not matches(parent, selector):
            break
        container = parent
    return container


def _is_undersized(img: Tag, options: ImageOptions) -> bool:
    width = parse_dimension(attr_str(img, "width")) or 0
    height = parse_dimension(attr_str(img, "height")) or 0
    return (0 < width < options.min_width) or (0 < height < options.min_height)


def normalize_images(
    content: Tag,
    options: ImageOptions,
    base_url: str,
    container_selector: str = settings.THUMBNAIL_CONTAINER_SELECTOR,
) -> None:
    """Absolutise image sources, drop undersized images and fill in ``alt``.

    An undersized image is removed together with its thumbnail container
    so no orphaned frame or caption is left behind.
    """
    dropped = 0
    for img in content.find_all("img"):
        if is_detached(img):
            continue
        src = attr_str(img, "src").strip()
        if not src:
            continue

        if options.convert_to_absolute and is_root_relative(src):
            img["src"] = absolutize(src, base_url)

        if options.remove_small_images and _is_undersized(img, options):
            container = thumbnail_container(img, container_selector, content)
            (container or img).decompose()
            dropped += 1
            continue

        if not img.has_attr("alt"):
            caption = find_caption(img, content)
            if caption:
                img["alt"] = caption

    if dropped:
        logger.debug("dropped %d undersized images", dropped)


# ---------------------------------------------------------------------------
# Links
# ---------------------------------------------------------------------------

def _is_dead_link(a: Tag, href: str) -> bool:
    return any(marker in href for marker in _DEAD_LINK_MARKERS) or has_class(
        a, _SELF_LINK_CLASS,
    )


def normalize_links(content: Tag, options: LinkOptions) -> None:
    """Absolutise internal links and unwrap links with no offline meaning.

    Edit links, red links (missing pages) and self-links are replaced by
    their text.  With ``preserve_external_links`` off, links leaving the wiki
    are unwrapped too.
    """
    for a in content.find_all("a", href=True):
        if is_detached(a):
            continue
        href = attr_str(a, "href").strip()
        if not href:
            continue

        if options.convert_internal_links and is_root_relative(href):
            href = absolutize(href, options.base_url)
            a["href"] = href

        unwrap = _is_dead_link(a, href) or (
            not options.preserve_external_links and is_external(href, options.base_url)
        )
        if unwrap:
            a.replace_with(a.get_text())

    # Self-links usually have no href at all.
    for a in safe_select(content, f"a.{_SELF_LINK_CLASS}"):
        if not is_detached(a):
            a.replace_with(a.get_text())


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def normalize_tables(
    content: Tag,
    table_class: str = settings.TABLE_CLASS,
    layout_attrs: Sequence[str] = settings.TABLE_LAYOUT_ATTRS,
) -> None:
    """Give every table *table_class* and strip inline layout attributes."""
    for table in content.find_all("table"):
        classes = list(table.get("class") or [])
        if table_class not in classes:
            classes.append(table_class)
            table["class"] = classes
        for el in (table, *table.find_all(True)):
            for attr in layout_attrs:
                el.attrs.pop(attr, None)
