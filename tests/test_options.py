"""Tests for wikiextract.options."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wikiextract import settings
from wikiextract.options import (
    DEFAULT_OPTIONS,
    ImageOptions,
    LinkOptions,
    ParserOptions,
    get_default_options,
)


class TestDefaults:
    def test_defaults_follow_settings(self):
        options = get_default_options()
        assert options.content_selector == settings.CONTENT_SELECTOR
        assert options.remove_selectors == list(settings.REMOVE_SELECTORS)
        assert options.preserve_selectors == list(settings.PRESERVE_SELECTORS)
        assert options.image_options.min_width == settings.MIN_IMAGE_WIDTH
        assert options.base_url == settings.BASE_URL

    def test_default_copy_is_independent(self):
        options = get_default_options()
        options.remove_selectors.append(".mutated")
        assert ".mutated" not in DEFAULT_OPTIONS.remove_selectors
        assert ".mutated" not in get_default_options().remove_selectors

    def test_frozen(self):
        with pytest.raises(ValidationError):
            get_default_options().content_selector = "main"

    def test_camel_case_dump(self):
        data = ImageOptions().model_dump(by_alias=True)
        assert set(data) == {"convertToAbsolute", "removeSmallImages", "minWidth", "minHeight"}


class TestMerged:
    def test_no_overrides_returns_self(self):
        assert DEFAULT_OPTIONS.merged(None) is DEFAULT_OPTIONS
        assert DEFAULT_OPTIONS.merged({}) is DEFAULT_OPTIONS

    def test_field_name_and_alias(self):
        merged = DEFAULT_OPTIONS.merged({"content_selector": "main", "removeSelectors": [".x"]})
        assert merged.content_selector == "main"
        assert merged.remove_selectors == [".x"]
        assert DEFAULT_OPTIONS.content_selector == settings.CONTENT_SELECTOR

    def test_nested_group_replaced_wholesale(self):
        base = DEFAULT_OPTIONS.merged({"image_options": {"min_width": 10, "min_height": 10}})
        merged = base.merged({"image_options": {"remove_small_images": False}})
        assert merged.image_options.remove_small_images is False
        assert merged.image_options.min_width == settings.MIN_IMAGE_WIDTH

    def test_model_instances_accepted(self):
        merged = DEFAULT_OPTIONS.merged({"link_options": LinkOptions(base_url="https://x.wiki")})
        assert merged.base_url == "https://x.wiki"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            DEFAULT_OPTIONS.merged({"bogus": 1})

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            ParserOptions(image_options={"min_width": -1})
