"""Project-wide defaults for wikiextract.

Only the values that legitimately differ per deployment are read from the
environment; everything else is a constant.
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Wiki
# ---------------------------------------------------------------------------
# Prefix used to absolutise root-relative links, images and category URLs.
BASE_URL = os.environ.get("WIKI_BASE_URL", "https://zh.minecraft.wiki")

# ---------------------------------------------------------------------------
# Page recognition
# ---------------------------------------------------------------------------
# Any one of these marks a document as a MediaWiki page.
PAGE_MARKER_SELECTORS: tuple[str, ...] = (
    "#mw-content-text",
    ".mw-parser-output",
    "#firstHeading",
    "#mw-head",
)

CONTENT_SELECTOR = "#mw-content-text .mw-parser-output"

# Tried in order when CONTENT_SELECTOR matches nothing.
FALLBACK_CONTENT_SELECTORS: tuple[str, ...] = (
    "#mw-content-text",
    ".mw-body-content",
    "#content .mw-content-ltr",
    ".mw-parser-output",
)

# ---------------------------------------------------------------------------
# Cleaning
# ---------------------------------------------------------------------------
REMOVE_SELECTORS: tuple[str, ...] = (
    ".mw-editsection",             # [edit] links
    ".navbox",                     # navigation boxes
    ".metadata",
    ".stub",
    ".ambox",                      # article message boxes
    ".hatnote",                    # disambiguation notes
    ".mw-jump-link",
    ".printfooter",
    ".catlinks",
    "#toc + .mw-empty-elt",
    "script",
    "style",
    ".reference .mw-reflink-text",
    ".mw-cite-backlink",
)

PRESERVE_SELECTORS: tuple[str, ...] = (
    ".infobox",
    ".thumbinner",
    ".gallery",
    "#toc",
    ".wikitable",
    ".mw-highlight",
)

# Elements removed when they have no child nodes at all.
EMPTY_LEAF_TAGS: tuple[str, ...] = ("p", "div", "span")

# Nearest of these around an undersized image is dropped together with it.
THUMBNAIL_CONTAINER_SELECTOR = ".thumb, .thumbinner, figure"

TABLE_CLASS = "wikitable"
TABLE_LAYOUT_ATTRS: tuple[str, ...] = ("style", "border", "cellpadding", "cellspacing")

# Structural furniture left out of the plain-text rendition.
TEXT_EXCLUDE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    ".infobox",
    "#toc",
    ".toc",
    ".navbox",
)

# ---------------------------------------------------------------------------
# Images
# ---------------------------------------------------------------------------
MIN_IMAGE_WIDTH = 50
MIN_IMAGE_HEIGHT = 50

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
