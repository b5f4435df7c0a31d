"""Tests for wikiextract.language."""

from __future__ import annotations

from wikiextract.extractors.tree import load
from wikiextract.language import declared_language, detect_language, resolve_language


class TestDeclaredLanguage:
    def test_content_lang_wins_over_interface_lang(self):
        soup = load('<html lang="en"><body><div id="mw-content-text" lang="de"></div></body></html>')
        assert declared_language(soup) == "de"

    def test_html_lang(self):
        assert declared_language(load('<html lang="fr"><body></body></html>')) == "fr"

    def test_blank_lang_ignored(self):
        soup = load('<html lang=" "><body><div id="mw-content-text" lang=""></div></body></html>')
        assert declared_language(soup) is None

    def test_absent(self):
        assert declared_language(load("<p>x</p>")) is None


class TestDetectLanguage:
    def test_short_text_is_none(self):
        assert detect_language("Too short") is None
        assert detect_language("") is None

    def test_english_prose(self):
        text = (
            "Diamonds are rare minerals that players mine deep underground "
            "and use to craft the strongest tools and armor in the game."
        )
        assert detect_language(text) == "en"

    def test_no_letters(self):
        assert detect_language("1234567890 " * 5) is None


class TestResolveLanguage:
    def test_declared_wins(self):
        assert resolve_language("zh", "English words " * 10) == "zh"

    def test_falls_back_to_detection(self):
        assert resolve_language(None, "short") is None
