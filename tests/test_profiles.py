"""Tests for YAML option profiles."""

from __future__ import annotations

import textwrap

import pytest

from wikiextract import ProfileError, WikiPageParser, load_profile

PROFILE = textwrap.dedent(
    """
    default:
      imageOptions:
        minWidth: 32
        minHeight: 32
    domains:
      minecraft.wiki:
        linkOptions:
          baseUrl: https://minecraft.wiki
      zh.minecraft.wiki:
        removeSelectors: [".navbox"]
    """,
)


@pytest.fixture
def profile_path(tmp_path):
    path = tmp_path / "profiles.yaml"
    path.write_text(PROFILE, encoding="utf-8")
    return path


class TestLoadProfile:
    def test_exact_domain(self, profile_path):
        overrides = load_profile(profile_path, "https://minecraft.wiki")
        assert overrides["imageOptions"] == {"minWidth": 32, "minHeight": 32}
        assert overrides["linkOptions"] == {"baseUrl": "https://minecraft.wiki"}
        assert "removeSelectors" not in overrides

    def test_longest_suffix_wins(self, profile_path):
        overrides = load_profile(profile_path, "https://zh.minecraft.wiki")
        assert overrides["removeSelectors"] == [".navbox"]
        assert "linkOptions" not in overrides

    def test_subdomain_matches_parent(self, profile_path):
        overrides = load_profile(profile_path, "https://de.minecraft.wiki")
        assert overrides["linkOptions"] == {"baseUrl": "https://minecraft.wiki"}

    def test_unrelated_domain_gets_default_only(self, profile_path):
        overrides = load_profile(profile_path, "https://wiki.example.org")
        assert overrides == {"imageOptions": {"minWidth": 32, "minHeight": 32}}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_profile(path, "https://minecraft.wiki") == {}

    def test_overrides_feed_parser(self, profile_path):
        parser = WikiPageParser(**load_profile(profile_path, "https://minecraft.wiki"))
        options = parser.get_options()
        assert options.image_options.min_width == 32
        assert options.base_url == "https://minecraft.wiki"

    @pytest.mark.parametrize(
        "document",
        ["- just\n- a list\n", "default: [1, 2]\n", "domains:\n  minecraft.wiki: nope\n"],
    )
    def test_malformed_profile(self, tmp_path, document):
        path = tmp_path / "bad.yaml"
        path.write_text(document, encoding="utf-8")
        with pytest.raises(ProfileError):
            load_profile(path, "https://minecraft.wiki")
