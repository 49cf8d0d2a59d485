"""articleparser.parser - high-level ArticleParser class.

Bundles a fetch timeout, user agent and pattern tables into a single
reusable object.

Usage::

    from articleparser import ArticleParser

    parser = ArticleParser(timeout=10)
    article = parser.extract("https://example.com/blog/post")

    # Parse pre-fetched HTML (no network)
    article = parser.parse("<html><body>Content...</body></html>",
                           url="https://example.com")

    # Site-specific vocabulary from a YAML profile
    parser = ArticleParser.from_profile("patterns.yaml", "https://example.com/")
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from articleparser import settings
from articleparser.profiles import load_patterns
from articleparser.query import extract as _extract
from articleparser.query import parse as _parse

if TYPE_CHECKING:
    from articleparser.extractors.patterns import Patterns
    from articleparser.items import Article


class ArticleParser:
    """Reusable extraction configuration.

    All parameters are optional: ``ArticleParser()`` behaves exactly like
    calling :func:`articleparser.extract` directly.

    Args:
        timeout:    Fetch timeout in seconds or as a ``timedelta``
                    (default from ``ARTICLEPARSER_TIMEOUT``).
        user_agent: User-Agent header for fetches.
        patterns:   Keyword pattern tables used by scoring and cleaning.
    """

    def __init__(
        self,
        timeout: float | timedelta = settings.DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        patterns: Patterns | None = None,
    ) -> None:
        self._timeout = timeout
        self._user_agent = user_agent
        self._patterns = patterns

    @classmethod
    def from_profile(cls, path: str | Path, url: str = "", **kwargs: object) -> ArticleParser:
        """Build a parser whose patterns come from the YAML profile at *path*."""
        return cls(patterns=load_patterns(path, url), **kwargs)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    def extract(self, url: str) -> Article:
        """Fetch *url* and extract its article.

        Raises:
            :class:`~articleparser.errors.ExtractionError` subclasses, see
            :func:`articleparser.query.extract`.
        """
        return _extract(
            url,
            self._timeout,
            user_agent=self._user_agent,
            patterns=self._patterns,
        )

    def parse(self, html: str, url: str = "") -> Article:
        """Parse pre-fetched HTML without network calls."""
        return _parse(html, url=url, patterns=self._patterns)
