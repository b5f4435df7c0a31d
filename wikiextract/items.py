"""Pydantic schema for extracted wiki documents and extraction results."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class PageHint(_Model):
    """Caller-supplied facts about the page (usually from the fetch layer)."""

    title: str | None = None
    namespace: str | None = None

    @field_validator("title", "namespace", mode="before")
    @classmethod
    def strip_value(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip() or None
        if isinstance(v, int):
            return str(v)
        return v


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

class Section(_Model):
    level: int = Field(ge=1, le=6)
    text: str
    id: str = ""
    anchor: str = ""


class ImageRef(_Model):
    src: str
    alt: str = ""
    caption: str = ""
    width: int | None = None
    height: int | None = None


class TableSummary(_Model):
    caption: str = ""
    row_count: int = 0
    col_count: int = 0
    has_header: bool = False


class InfoboxSummary(_Model):
    title: str = ""
    type: str = "infobox"
    has_image: bool = False


class TocItem(_Model):
    text: str
    href: str


class Toc(_Model):
    items: tuple[TocItem, ...] = ()


class ContentComponents(_Model):
    sections: tuple[Section, ...] = ()
    images: tuple[ImageRef, ...] = ()
    tables: tuple[TableSummary, ...] = ()
    infoboxes: tuple[InfoboxSummary, ...] = ()
    # None means the page has no TOC container; Toc(items=[]) means an empty one.
    toc: Toc | None = None


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class CategoryRef(_Model):
    name: str
    url: str = ""


class LanguageRef(_Model):
    name: str
    code: str | None = None
    url: str = ""


class ContentBody(_Model):
    html: str = ""
    text: str = ""
    markdown: str = ""
    components: ContentComponents = Field(default_factory=ContentComponents)


class DocumentMeta(_Model):
    word_count: int = 0
    image_count: int = 0
    table_count: int = 0
    section_count: int = 0
    captured_at: str = ""
    language: str | None = None
    last_modified_iso: str | None = None

    @classmethod
    def build(
        cls,
        components: ContentComponents,
        *,
        word_count: int,
        language: str | None = None,
        last_modified_iso: str | None = None,
    ) -> DocumentMeta:
        """Derive the counts from *components* so they can't disagree with it."""
        return cls(
            word_count=word_count,
            image_count=len(components.images),
            table_count=len(components.tables),
            section_count=len(components.sections),
            captured_at=datetime.now(UTC).isoformat(),
            language=language,
            last_modified_iso=last_modified_iso,
        )


class ContentDocument(_Model):
    """Canonical output for one extracted wiki page."""

    title: str = ""
    subtitle: str = ""
    categories: tuple[CategoryRef, ...] = ()
    languages: tuple[LanguageRef, ...] = ()
    namespace: str = ""
    last_modified: str | None = None
    content: ContentBody = Field(default_factory=ContentBody)
    meta: DocumentMeta = Field(default_factory=DocumentMeta)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

class ErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    NOT_A_WIKI_PAGE = "not_a_wiki_page"
    CONTENT_NOT_FOUND = "content_not_found"
    INTERNAL_EXTRACTION_ERROR = "internal_extraction_error"


class ExtractionSuccess(_Model):
    status: Literal["success"] = "success"
    document: ContentDocument

    @property
    def ok(self) -> bool:
        return True


class ExtractionFailure(_Model):
    status: Literal["failure"] = "failure"
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


ExtractionResult = ExtractionSuccess | ExtractionFailure
