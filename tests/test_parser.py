"""Tests for the ArticleParser class."""

from __future__ import annotations

from unittest.mock import patch

from articleparser import ArticleParser, settings
from articleparser.extractors.patterns import DEFAULT_PATTERNS
from articleparser.items import Article

ARTICLE_URL = "https://example.com/blog/extract-readable-content"


class TestArticleParserInit:
    def test_defaults(self):
        parser = ArticleParser()
        assert parser._timeout == settings.DEFAULT_TIMEOUT
        assert parser._user_agent is None
        assert parser._patterns is None

    def test_custom_values_stored(self):
        patterns = DEFAULT_PATTERNS.with_overrides(positive=r"story")
        parser = ArticleParser(timeout=5, user_agent="TestBot/1.0", patterns=patterns)
        assert parser._timeout == 5
        assert parser._user_agent == "TestBot/1.0"
        assert parser._patterns is patterns


class TestArticleParserParse:
    def test_parse_returns_article(self, article_html):
        article = ArticleParser().parse(article_html, url=ARTICLE_URL)
        assert isinstance(article, Article)
        assert article.meta.author == "Jane Smith"

    def test_parse_forwards_patterns(self, article_html):
        patterns = DEFAULT_PATTERNS.with_overrides(negative=r"post|sidebar")
        with patch("articleparser.parser._parse") as mock_parse:
            ArticleParser(patterns=patterns).parse(article_html, url=ARTICLE_URL)
        mock_parse.assert_called_once_with(article_html, url=ARTICLE_URL, patterns=patterns)


class TestArticleParserExtract:
    def test_extract_forwards_settings(self):
        patterns = DEFAULT_PATTERNS.with_overrides(positive=r"story")
        parser = ArticleParser(timeout=7, user_agent="TestBot/1.0", patterns=patterns)
        with patch("articleparser.parser._extract") as mock_extract:
            parser.extract(ARTICLE_URL)
        mock_extract.assert_called_once_with(
            ARTICLE_URL, 7, user_agent="TestBot/1.0", patterns=patterns,
        )

    def test_extract_with_mocked_fetch(self, article_html):
        with patch("articleparser.query.fetch_html", return_value=article_html):
            article = ArticleParser(timeout=3).extract(ARTICLE_URL)
        assert article.url == ARTICLE_URL
        assert article.has_content


class TestArticleParserFromProfile:
    def test_profile_patterns_applied(self, tmp_path):
        profile = tmp_path / "patterns.yaml"
        profile.write_text(
            "default:\n"
            "  positive: story\n"
            "domains:\n"
            "  example.com:\n"
            "    negative: promo\n",
            encoding="utf-8",
        )
        parser = ArticleParser.from_profile(profile, "https://blog.example.com/x", timeout=4)
        assert parser._timeout == 4
        assert parser._patterns.positive.pattern == "story"
        assert parser._patterns.negative.pattern == "promo"
        assert parser._patterns.byline is DEFAULT_PATTERNS.byline
