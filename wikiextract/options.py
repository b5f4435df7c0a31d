"""Parser configuration.

Options are plain data: CSS selector lists and a handful of switches.  The
defaults mirror :mod:`wikiextract.settings`.  Overrides are a shallow merge;
a nested option group or a selector list given as an override replaces the
current value wholesale rather than being merged into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wikiextract import settings


class _OptionsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class ImageOptions(_OptionsModel):
    convert_to_absolute: bool = True
    remove_small_images: bool = True
    min_width: int = Field(default=settings.MIN_IMAGE_WIDTH, ge=0)
    min_height: int = Field(default=settings.MIN_IMAGE_HEIGHT, ge=0)


class LinkOptions(_OptionsModel):
    convert_internal_links: bool = True
    preserve_external_links: bool = True
    base_url: str = settings.BASE_URL


class ParserOptions(_OptionsModel):
    content_selector: str = settings.CONTENT_SELECTOR
    fallback_selectors: list[str] = Field(
        default_factory=lambda: list(settings.FALLBACK_CONTENT_SELECTORS),
    )
    remove_selectors: list[str] = Field(
        default_factory=lambda: list(settings.REMOVE_SELECTORS),
    )
    preserve_selectors: list[str] = Field(
        default_factory=lambda: list(settings.PRESERVE_SELECTORS),
    )
    image_options: ImageOptions = Field(default_factory=ImageOptions)
    link_options: LinkOptions = Field(default_factory=LinkOptions)

    @property
    def base_url(self) -> str:
        return self.link_options.base_url

    def merged(self, overrides: Mapping[str, Any] | None) -> ParserOptions:
        """Return a copy with the top-level keys in *overrides* replaced.

        Keys may be given by field name (``remove_selectors``) or by alias
        (``removeSelectors``).

        Raises:
            pydantic.ValidationError: unknown keys or ill-typed values.
        """
        if not overrides:
            return self
        names = {
            (info.alias or name): name for name, info in type(self).model_fields.items()
        }
        data = self.model_dump()
        for key, value in overrides.items():
            if isinstance(value, BaseModel):
                value = value.model_dump()
            data[names.get(key, key)] = value
        return type(self).model_validate(data)


DEFAULT_OPTIONS = ParserOptions()


def get_default_options() -> ParserOptions:
    """Return the documented default configuration."""
    return DEFAULT_OPTIONS.model_copy(deep=True)
