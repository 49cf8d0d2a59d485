"""articleparser - extract the readable article and its metadata from any web page.

Quick single-URL usage::

    from articleparser import extract

    article = extract("https://example.com/blog/some-post", timeout=10)
    print(article.meta.title)
    print(article.content)

Pre-fetched HTML::

    from articleparser import parse

    article = parse(html, url="https://example.com/blog/some-post")
    print(article.raw_content)
    print(article.to_markdown())
"""

from articleparser.errors import (
    EmptyDocumentError,
    ExtractionError,
    InputError,
    InvalidURLError,
    NoContentFound,
    ParseError,
    RetrievalError,
)
from articleparser.extractors.patterns import DEFAULT_PATTERNS, Patterns
from articleparser.items import Article, Metadata
from articleparser.parser import ArticleParser
from articleparser.query import extract, fetch_html, parse

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_PATTERNS",
    "Article",
    "ArticleParser",
    "EmptyDocumentError",
    "ExtractionError",
    "InputError",
    "InvalidURLError",
    "Metadata",
    "NoContentFound",
    "ParseError",
    "Patterns",
    "RetrievalError",
    "extract",
    "fetch_html",
    "parse",
]
