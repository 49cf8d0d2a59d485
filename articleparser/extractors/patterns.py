"""Keyword pattern tables driving the content heuristics.

Every regex the scorer and sanitizer consult lives in a single immutable
:class:`Patterns` value so the vocabulary can be tuned (in code or from a
YAML profile, see :mod:`articleparser.profiles`) without touching the
extraction code.

Usage::

    from articleparser.extractors.patterns import DEFAULT_PATTERNS

    patterns = DEFAULT_PATTERNS.with_overrides(negative=r"promo|sidebar|outbrain")
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, replace
from typing import Any

_FLAGS = re.IGNORECASE | re.DOTALL


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, _FLAGS)


# ---------------------------------------------------------------------------
# Stock vocabulary
# ---------------------------------------------------------------------------

UNLIKELY_CANDIDATES = (
    r"banner|breadcrumbs|combx|comment|community|cover-wrap|disqus|extra|foot|header|"
    r"legends|menu|related|remark|replies|rss|shoutbox|sidebar|skyscraper|social|"
    r"sponsor|supplemental|ad-break|agegate|pagination|pager|popup|yom-remote"
)
OK_MAYBE_CANDIDATE = r"and|article|body|column|main|shadow"
POSITIVE = r"article|body|content|entry|hentry|h-entry|main|page|pagination|post|text|blog|story"
NEGATIVE = (
    r"hidden|^hid$| hid$| hid |^hid |banner|combx|comment|com-|contact|foot|footer|"
    r"footnote|masthead|media|meta|outbrain|promo|related|scroll|share|shoutbox|"
    r"sidebar|skyscraper|sponsor|shopping|tags|tool|widget"
)
BYLINE = r"byline|author|dateline|writtenby|p-author"
DIV_TO_P_ELEMENTS = r"<(a|blockquote|dl|div|img|ol|p|pre|table|ul|select)"
VIDEOS = r"//(www\.)?(dailymotion|youtube|youtube-nocookie|player\.vimeo)\.com"
UNLIKELY_ELEMENTS = r"(input|time|button)"


@dataclass(frozen=True)
class Patterns:
    """Compiled, case-insensitive pattern tables."""

    unlikely_candidates: re.Pattern[str] = field(default=_compile(UNLIKELY_CANDIDATES))
    ok_maybe_candidate: re.Pattern[str] = field(default=_compile(OK_MAYBE_CANDIDATE))
    positive: re.Pattern[str] = field(default=_compile(POSITIVE))
    negative: re.Pattern[str] = field(default=_compile(NEGATIVE))
    byline: re.Pattern[str] = field(default=_compile(BYLINE))
    div_to_p_elements: re.Pattern[str] = field(default=_compile(DIV_TO_P_ELEMENTS))
    videos: re.Pattern[str] = field(default=_compile(VIDEOS))
    unlikely_elements: re.Pattern[str] = field(default=_compile(UNLIKELY_ELEMENTS))

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_overrides(self, **tables: Any) -> Patterns:
        """Return a copy with the named tables replaced.

        Values may be regex source strings or pre-compiled patterns.

        Raises:
            ValueError: on an unknown table name or an invalid regex.
        """
        known = set(self.names())
        unknown = sorted(set(tables) - known)
        if unknown:
            raise ValueError(f"Unknown pattern table(s): {', '.join(unknown)}")
        compiled: dict[str, re.Pattern[str]] = {}
        for name, value in tables.items():
            try:
                compiled[name] = _compile(value)
            except re.error as exc:
                raise ValueError(f"Invalid regex for {name!r}: {exc}") from exc
        return replace(self, **compiled)


DEFAULT_PATTERNS = Patterns()
