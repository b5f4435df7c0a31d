"""wikiextract.parser — the extraction pipeline and its reusable entry point.

Usage::

    from wikiextract import WikiPageParser

    parser = WikiPageParser()
    result = parser.extract(html, {"title": "Diamond", "namespace": "0"})
    if result.ok:
        doc = result.document
        print(doc.title, doc.meta.word_count)
        for section in doc.content.components.sections:
            print(section.level, section.text)
    else:
        print(result.kind, result.message)

    # Per-call configuration without touching the shared defaults
    result = parser.extract(html, remove_selectors=[".navbox"])

    # Derived parser for another wiki
    en = parser.with_options(link_options={"base_url": "https://minecraft.wiki"})

Stages run in a fixed order on one tree per call::

    validate -> locate -> clean -> normalise (images, links, tables)
             -> extract components -> derive text/markdown/meta

:meth:`WikiPageParser.extract` never raises: every failure comes back as an
:class:`~wikiextract.items.ExtractionFailure`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from wikiextract.extractors import (
    clean,
    count_words,
    derive_text,
    extract_components,
    extract_page_info,
    html_to_markdown,
    is_valid_page,
    locate_content,
    normalize_images,
    normalize_links,
    normalize_tables,
)
from wikiextract.extractors.tree import inner_html, load
from wikiextract.items import (
    ContentBody,
    ContentDocument,
    DocumentMeta,
    ErrorKind,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    PageHint,
)
from wikiextract.language import resolve_language
from wikiextract.options import ParserOptions, get_default_options

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public exception
# ---------------------------------------------------------------------------

class ExtractionError(RuntimeError):
    """Raised inside the pipeline for an expected, classified failure.

    Attributes:
        kind -- the :class:`~wikiextract.items.ErrorKind` reported to callers
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def _coerce_hint(hint: PageHint | Mapping[str, Any] | None) -> PageHint:
    if hint is None:
        return PageHint()
    if isinstance(hint, PageHint):
        return hint
    if isinstance(hint, Mapping):
        hint = dict(hint)
    return PageHint.model_validate(hint)


# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------

def _load_page(markup: object) -> BeautifulSoup:
    if not isinstance(markup, str) or not markup.strip():
        raise ExtractionError(ErrorKind.INVALID_INPUT, "markup must be a non-empty string")
    soup = load(markup)
    if not is_valid_page(soup):
        raise ExtractionError(ErrorKind.NOT_A_WIKI_PAGE, "markup is not a MediaWiki page")
    return soup


def _locate(soup: BeautifulSoup, options: ParserOptions) -> Tag:
    content = locate_content(soup, options.content_selector, options.fallback_selectors)
    if content is None:
        raise ExtractionError(ErrorKind.CONTENT_NOT_FOUND, "no main content area found")
    return content


def _normalize(content: Tag, options: ParserOptions) -> None:
    normalize_images(content, options.image_options, options.base_url)
    normalize_links(content, options.link_options)
    normalize_tables(content)


def run_pipeline(markup: object, hint: PageHint, options: ParserOptions) -> ContentDocument:
    """Run every stage and assemble the document.

    Raises:
        ExtractionError: invalid input, not a wiki page, or no content found.
    """
    soup = _load_page(markup)
    content = _locate(soup, options)
    info = extract_page_info(soup, hint, options.base_url)

    clean(content, options.remove_selectors, options.preserve_selectors)
    _normalize(content, options)

    components = extract_components(content)
    html = inner_html(content)
    text = derive_text(content)

    meta = DocumentMeta.build(
        components,
        word_count=count_words(text),
        language=resolve_language(info["declared_language"], text),
        last_modified_iso=info["last_modified_iso"],
    )
    return ContentDocument(
        title=info["title"],
        subtitle=info["subtitle"],
        categories=info["categories"],
        languages=info["languages"],
        namespace=info["namespace"],
        last_modified=info["last_modified"],
        content=ContentBody(
            html=html,
            text=text,
            markdown=html_to_markdown(html),
            components=components,
        ),
        meta=meta,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class WikiPageParser:
    """Reusable pipeline entry point holding a default configuration.

    A parser is safe to share between threads as long as
    :meth:`update_options` is not called while extractions are running; use
    per-call overrides or :meth:`with_options` for differing configuration.

    Args:
        options:    Base configuration (defaults to :func:`get_default_options`).
        **overrides: Top-level option keys replacing values in *options*.
    """

    def __init__(self, options: ParserOptions | None = None, **overrides: Any) -> None:
        self._options = (options or get_default_options()).merged(overrides)

    def extract(
        self,
        markup: object,
        hint: PageHint | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ExtractionResult:
        """Extract a structured document from raw wiki *markup*.

        Args:
            markup:     Raw page HTML.
            hint:       Page facts from the fetch layer (``title``, ``namespace``).
            **overrides: Option overrides for this call only.

        Returns:
            :class:`ExtractionSuccess` or :class:`ExtractionFailure`; never raises.
        """
        try:
            try:
                page_hint = _coerce_hint(hint)
                options = self._options.merged(overrides)
            except ValidationError as exc:
                raise ExtractionError(
                    ErrorKind.INVALID_INPUT, f"invalid hint or options: {exc}",
                ) from exc
            document = run_pipeline(markup, page_hint, options)
        except ExtractionError as exc:
            logger.warning("page extraction rejected (%s): %s", exc.kind, exc)
            return ExtractionFailure(kind=exc.kind, message=str(exc))
        except Exception as exc:
            logger.exception("page extraction failed")
            return ExtractionFailure(
                kind=ErrorKind.INTERNAL_EXTRACTION_ERROR,
                message=f"{type(exc).__name__}: {exc}",
            )

        logger.debug(
            "extracted %r: %d words, %d sections",
            document.title,
            document.meta.word_count,
            document.meta.section_count,
        )
        return ExtractionSuccess(document=document)

    def with_options(self, **overrides: Any) -> WikiPageParser:
        """Return a new parser with *overrides* applied; this one is unchanged."""
        return WikiPageParser(self._options, **overrides)

    def update_options(self, **overrides: Any) -> None:
        """Apply *overrides* to this parser's defaults in place."""
        self._options = self._options.merged(overrides)

    def get_options(self) -> ParserOptions:
        """Return a copy of the current configuration."""
        return self._options.model_copy(deep=True)


_default_parser = WikiPageParser()


def extract(
    markup: object,
    hint: PageHint | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ExtractionResult:
    """Extract *markup* with the shared default parser.

    See :meth:`WikiPageParser.extract`.
    """
    return _default_parser.extract(markup, hint, **overrides)
