"""wikiextract - turn raw MediaWiki page HTML into a clean, structured document.

Quick usage::

    from wikiextract import extract

    result = extract(html, {"title": "Diamond"})
    if result.ok:
        print(result.document.content.text)
        print(result.document.content.components.sections)

Configured parser::

    from wikiextract import WikiPageParser

    parser = WikiPageParser(link_options={"base_url": "https://minecraft.wiki"})
    result = parser.extract(html)

The pipeline performs no I/O: fetching pages is the caller's job.
"""

from wikiextract.items import (
    ContentDocument,
    ErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    PageHint,
)
from wikiextract.options import ImageOptions, LinkOptions, ParserOptions, get_default_options
from wikiextract.parser import ExtractionError, WikiPageParser, extract
from wikiextract.profiles import ProfileError, load_profile

__version__ = "0.1.0"
__all__ = [
    "ContentDocument",
    "ErrorKind",
    "ExtractionError",
    "ExtractionFailure",
    "ExtractionResult",
    "ExtractionSuccess",
    "ImageOptions",
    "LinkOptions",
    "PageHint",
    "ParserOptions",
    "ProfileError",
    "WikiPageParser",
    "extract",
    "get_default_options",
    "load_profile",
]
