"""YAML-based pattern profiles.

A profile overrides the keyword tables of
:class:`~articleparser.extractors.patterns.Patterns`, globally and per
domain::

    default:
      negative: "hidden|banner|comment|footer|promo|sidebar|widget"
    domains:
      example.com:
        positive: "article|body|content|story-text"

The most specific matching domain (``example.com`` also matches
``blog.example.com``) is merged over ``default``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from articleparser.extractors.patterns import DEFAULT_PATTERNS, Patterns


def load_profile(path: str | Path, url: str = "") -> dict[str, Any]:
    """Load YAML profile and return merged table overrides for the given URL."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in pattern profile {path}: {exc}") from exc
    default = data.get("default", {}) if isinstance(data, dict) else {}
    domains = data.get("domains", {}) if isinstance(data, dict) else {}

    netloc = urlparse(url).netloc.lower()
    best_key = ""
    best_cfg: dict[str, Any] = {}
    if netloc and isinstance(domains, dict):
        for key, cfg in domains.items():
            if not isinstance(key, str) or not isinstance(cfg, dict):
                continue
            key_lower = key.lower()
            if (netloc == key_lower or netloc.endswith("." + key_lower)) and (
                len(key_lower) > len(best_key)
            ):
                best_key = key_lower
                best_cfg = cfg

    merged: dict[str, Any] = {}
    if isinstance(default, dict):
        merged.update(default)
    merged.update(best_cfg)
    return merged


def load_patterns(
    path: str | Path,
    url: str = "",
    base: Patterns = DEFAULT_PATTERNS,
) -> Patterns:
    """Return *base* with the tables from the profile at *path* applied.

    Raises:
        ValueError: on unknown table names, non-string values or bad regexes.
    """
    overrides = load_profile(path, url)
    for name, value in overrides.items():
        if not isinstance(value, str):
            raise ValueError(f"Pattern {name!r} in {path} must be a string")
    return base.with_overrides(**overrides)
