"""Extraction sub-package: the individual stages of the wiki content pipeline."""

from .cleaner import clean
from .components import extract_components
from .locator import locate_content
from .markdown import html_to_markdown
from .metadata import extract_page_info
from .normalize import normalize_images, normalize_links, normalize_tables
from .text import count_words, derive_text
from .validator import is_valid_page

__all__ = [
    "clean",
    "count_words",
    "derive_text",
    "extract_components",
    "extract_page_info",
    "html_to_markdown",
    "is_valid_page",
    "locate_content",
    "normalize_images",
    "normalize_links",
    "normalize_tables",
]
