"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from articleparser.__main__ import main, render
from articleparser.errors import RetrievalError
from articleparser.items import Article, Metadata
from articleparser.parser import ArticleParser

URL = "https://example.com/blog/post"

ARTICLE = Article(
    url=URL,
    meta=Metadata(
        title="A Test Article",
        author="Jane Smith",
        excerpt="Short summary.",
        min_read_time=1,
        max_read_time=2,
        language="en",
    ),
    content="First paragraph.\n\nSecond paragraph.",
    raw_content="<p>First paragraph.</p><p>Second paragraph.</p>",
)


class TestRender:
    def test_text(self):
        assert render(ARTICLE, "text") == ARTICLE.content

    def test_html(self):
        assert render(ARTICLE, "html") == ARTICLE.raw_content

    def test_json(self):
        data = json.loads(render(ARTICLE, "json"))
        assert data["url"] == URL
        assert data["meta"]["author"] == "Jane Smith"
        assert data["meta"]["max_read_time"] == 2

    def test_markdown(self):
        md = render(ARTICLE, "markdown")
        assert md.startswith("# A Test Article")
        assert "**Author:** Jane Smith | **Reading time:** 1-2 min" in md
        assert "> Short summary." in md
        assert "First paragraph." in md


class TestMain:
    def test_json_output(self, capsys):
        with patch.object(ArticleParser, "extract", return_value=ARTICLE) as mock_extract:
            code = main([URL, "--format", "json"])
        assert code == 0
        mock_extract.assert_called_once_with(URL)
        assert json.loads(capsys.readouterr().out)["meta"]["title"] == "A Test Article"

    def test_text_output(self, capsys):
        with patch.object(ArticleParser, "extract", return_value=ARTICLE):
            code = main([URL])
        out = capsys.readouterr().out
        assert code == 0
        assert "A Test Article" in out
        assert "Second paragraph." in out

    def test_timeout_forwarded(self):
        with patch("articleparser.__main__.ArticleParser") as mock_cls:
            mock_cls.return_value.extract.return_value = ARTICLE
            main([URL, "--timeout", "12", "--format", "html"])
        mock_cls.assert_called_once_with(timeout=12.0)

    def test_patterns_profile_used(self, tmp_path):
        profile = tmp_path / "p.yaml"
        profile.write_text("default:\n  positive: story\n", encoding="utf-8")
        with patch.object(ArticleParser, "extract", return_value=ARTICLE):
            code = main([URL, "--patterns", str(profile), "--format", "html"])
        assert code == 0

    def test_extraction_error_exit_code(self, capsys):
        with patch.object(ArticleParser, "extract", side_effect=RetrievalError("HTTP 500")):
            code = main([URL])
        assert code == 1
        assert "HTTP 500" in capsys.readouterr().err

    def test_bad_profile_exit_code(self, tmp_path):
        profile = tmp_path / "p.yaml"
        profile.write_text("default:\n  nonsense: x\n", encoding="utf-8")
        assert main([URL, "--patterns", str(profile)]) == 1

    def test_missing_profile_exit_code(self, tmp_path):
        assert main([URL, "--patterns", str(tmp_path / "missing.yaml")]) == 1

    def test_bad_format_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main([URL, "--format", "pdf"])
        assert exc_info.value.code == 2
