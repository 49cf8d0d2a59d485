"""Tests for YAML pattern profiles."""

from __future__ import annotations

import pytest

from articleparser.extractors.patterns import DEFAULT_PATTERNS
from articleparser.profiles import load_patterns, load_profile

PROFILE = """\
default:
  negative: "promo|sidebar"
  positive: "article|story"
domains:
  example.com:
    positive: "entry"
  news.example.com:
    positive: "headline"
"""


@pytest.fixture
def profile_path(tmp_path):
    path = tmp_path / "patterns.yaml"
    path.write_text(PROFILE, encoding="utf-8")
    return path


class TestLoadProfile:
    def test_default_only_without_url(self, profile_path):
        assert load_profile(profile_path) == {
            "negative": "promo|sidebar",
            "positive": "article|story",
        }

    def test_domain_overrides_default(self, profile_path):
        merged = load_profile(profile_path, "https://example.com/post")
        assert merged["positive"] == "entry"
        assert merged["negative"] == "promo|sidebar"

    def test_subdomain_matches_parent(self, profile_path):
        assert load_profile(profile_path, "https://blog.example.com/")["positive"] == "entry"

    def test_most_specific_domain_wins(self, profile_path):
        assert load_profile(profile_path, "https://news.example.com/a")["positive"] == "headline"

    def test_unrelated_domain_uses_default(self, profile_path):
        assert load_profile(profile_path, "https://notexample.com/")["positive"] == "article|story"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_profile(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("default: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_profile(path)


class TestLoadPatterns:
    def test_overrides_compiled(self, profile_path):
        patterns = load_patterns(profile_path, "https://example.com/post")
        assert patterns.positive.search("ENTRY-content")
        assert not patterns.positive.search("article")
        assert patterns.unlikely_candidates is DEFAULT_PATTERNS.unlikely_candidates

    def test_unknown_table_rejected(self, tmp_path):
        path = tmp_path / "unknown.yaml"
        path.write_text("default:\n  extraneous: foo\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown pattern"):
            load_patterns(path)

    def test_non_string_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("default:\n  negative: [promo, sidebar]\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must be a string"):
            load_patterns(path)

    def test_bad_regex_rejected(self, tmp_path):
        path = tmp_path / "regex.yaml"
        path.write_text('default:\n  negative: "(promo"\n', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid regex"):
            load_patterns(path)
