"""Extraction sub-package: deterministic, template-agnostic content extraction."""

from .cleaning import prep_article
from .document import parse_html, prepare_document, preprocess_html
from .heuristics import Heuristics
from .main_content import Candidate, extract_main_content, grab_article
from .markdown import html_to_markdown
from .metadata import extract_metadata
from .patterns import DEFAULT_PATTERNS, Patterns
from .readtime import estimate_read_time, read_time
from .serialize import html_content, text_content
from .text import normalize_text
from .title import resolve_title
from .urlnorm import fix_relative_uris, resolve_url, validate_url

__all__ = [
    "Candidate",
    "DEFAULT_PATTERNS",
    "Heuristics",
    "Patterns",
    "estimate_read_time",
    "extract_main_content",
    "extract_metadata",
    "fix_relative_uris",
    "grab_article",
    "html_content",
    "html_to_markdown",
    "normalize_text",
    "parse_html",
    "prep_article",
    "prepare_document",
    "preprocess_html",
    "read_time",
    "resolve_title",
    "resolve_url",
    "text_content",
    "validate_url",
]
