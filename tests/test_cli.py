"""Tests for the ``python -m wikiextract`` entry point."""

from __future__ import annotations

import io
import json

import pytest

from wikiextract.__main__ import main


@pytest.fixture
def page_file(tmp_path, wiki_html):
    path = tmp_path / "Diamond.html"
    path.write_text(wiki_html, encoding="utf-8")
    return path


class TestCli:
    def test_json_output(self, page_file, capsys):
        assert main([str(page_file), "--base-url", "https://minecraft.wiki"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "success"
        document = data["document"]
        assert document["title"] == "Diamond"
        assert document["lastModified"] == "5 March 2024"
        assert document["meta"]["imageCount"] == 2
        assert document["meta"]["lastModifiedIso"] == "2024-03-05"
        assert document["content"]["components"]["toc"]["items"][0]["href"] == "#Obtaining"
        assert "https://minecraft.wiki/w/Diamond_Ore" in document["content"]["html"]

    def test_text_output(self, page_file, capsys):
        assert main([str(page_file), "--format", "text"]) == 0
        assert capsys.readouterr().out.startswith("A diamond is a rare mineral")

    def test_markdown_output(self, page_file, capsys):
        assert main([str(page_file), "--format", "markdown"]) == 0
        assert "## Uses" in capsys.readouterr().out

    def test_summary_output(self, page_file, capsys):
        assert main([str(page_file), "--format", "summary"]) == 0
        out = capsys.readouterr().out
        assert "Diamond" in out
        assert "Crafting" in out

    def test_stdin(self, wiki_html, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(wiki_html))
        assert main(["-", "--format", "text"]) == 0
        assert "diamond" in capsys.readouterr().out

    def test_title_hint(self, tmp_path, capsys):
        path = tmp_path / "bare.html"
        path.write_text(
            '<div id="mw-content-text"><div class="mw-parser-output"><p>x</p></div></div>',
            encoding="utf-8",
        )
        assert main([str(path), "--title", "Bare"]) == 0
        assert json.loads(capsys.readouterr().out)["document"]["title"] == "Bare"

    def test_profile(self, page_file, tmp_path, capsys):
        profile = tmp_path / "profile.yaml"
        profile.write_text(
            "domains:\n  minecraft.wiki:\n    removeSelectors: ['.thumb']\n",
            encoding="utf-8",
        )
        args = [str(page_file), "--base-url", "https://minecraft.wiki", "--profile", str(profile)]
        assert main(args) == 0
        meta = json.loads(capsys.readouterr().out)["document"]["meta"]
        assert meta["imageCount"] == 1

    def test_extraction_failure(self, tmp_path, capsys):
        path = tmp_path / "plain.html"
        path.write_text("<p>not a wiki</p>", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "not_a_wiki_page" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.html")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_bad_profile(self, page_file, tmp_path, capsys):
        profile = tmp_path / "bad.yaml"
        profile.write_text("default:\n  noSuchOption: 1\n", encoding="utf-8")
        assert main([str(page_file), "--profile", str(profile)]) == 1
        assert "invalid configuration" in capsys.readouterr().err
