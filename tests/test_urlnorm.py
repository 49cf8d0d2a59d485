"""Unit tests for URL validation and relative-URL resolution."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from articleparser.errors import InputError, InvalidURLError
from articleparser.extractors.urlnorm import fix_relative_uris, resolve_url, validate_url

BASE = "https://example.com/posts/1"


class TestValidateUrl:
    def test_accepts_https(self):
        assert validate_url("https://example.com/post") == "https://example.com/post"

    def test_accepts_http(self):
        assert validate_url("http://example.com") == "http://example.com"

    def test_strips_whitespace(self):
        assert validate_url("  https://example.com/a  ") == "https://example.com/a"

    @pytest.mark.parametrize(
        "url",
        ["", "example.com/post", "ftp://example.com/file", "javascript:alert(1)", "https://"],
    )
    def test_rejects(self, url):
        with pytest.raises(InvalidURLError):
            validate_url(url)

    def test_invalid_url_is_input_error(self):
        with pytest.raises(InputError):
            validate_url("mailto:someone@example.com")


class TestResolveUrl:
    def test_root_relative(self):
        assert resolve_url(BASE, "/img/a.png") == "https://example.com/img/a.png"

    def test_path_relative(self):
        assert resolve_url(BASE, "b.png") == "https://example.com/posts/b.png"

    def test_parent_relative(self):
        assert resolve_url(BASE, "../c.png") == "https://example.com/c.png"

    def test_fragment_untouched(self):
        assert resolve_url(BASE, "#section") == "#section"

    def test_absolute_untouched(self):
        assert resolve_url(BASE, "https://other.org/x") == "https://other.org/x"

    def test_protocol_relative_takes_base_scheme(self):
        assert resolve_url(BASE, "//cdn.example.com/x.png") == "https://cdn.example.com/x.png"

    @pytest.mark.parametrize("href", ["mailto:jane@example.com", "data:image/png;base64,AAAA"])
    def test_other_schemes_untouched(self, href):
        assert resolve_url(BASE, href) == href

    def test_no_base_leaves_href(self):
        assert resolve_url("", "/img/a.png") == "/img/a.png"


class TestFixRelativeUris:
    def _node(self, inner: str):
        return BeautifulSoup(f"<div>{inner}</div>", "lxml").div

    def test_images_and_links_resolved(self):
        node = self._node("<a href='/about'>About</a><img src='/img/a.png'>")
        fix_relative_uris(node, BASE)
        assert node.a["href"] == "https://example.com/about"
        assert node.img["src"] == "https://example.com/img/a.png"

    def test_anchor_links_kept(self):
        node = self._node("<a href='#top'>Top</a>")
        fix_relative_uris(node, BASE)
        assert node.a["href"] == "#top"

    def test_file_attribute_promoted(self):
        node = self._node("<img file='/lazy/photo.jpg'>")
        fix_relative_uris(node, BASE)
        assert node.img["src"] == "https://example.com/lazy/photo.jpg"
        assert "file" not in node.img.attrs

    def test_image_without_source_removed(self):
        node = self._node("<p>text</p><img alt='nothing'><img src=''>")
        fix_relative_uris(node, BASE)
        assert node.find("img") is None

    def test_links_without_href_ignored(self):
        node = self._node("<a name='anchor'>Named</a>")
        fix_relative_uris(node, BASE)
        assert "href" not in node.a.attrs
