"""Tests for URL classification and normalization."""

import sys
sys.path.insert(0, ".")

from utils.url_utils import (
    is_url,
    is_file_resource,
    extract_domain,
    strip_fragment,
    strip_query,
    ensure_trailing_slash,
)


class TestIsUrl:
    def test_http(self):
        assert is_url("http://example.com") is True

    def test_https_with_path(self):
        assert is_url("https://blog.example.com/posts/1?x=2") is True

    def test_minimal(self):
        assert is_url("https://a.b") is True

    def test_no_scheme(self):
        assert is_url("example.com/page") is False

    def test_relative(self):
        assert is_url("/about") is False

    def test_other_scheme(self):
        assert is_url("ftp://example.com") is False

    def test_no_dot(self):
        assert is_url("http://localhost/") is False

    def test_whitespace(self):
        assert is_url("http://exa mple.com") is False

    def test_empty(self):
        assert is_url("") is False

    def test_none(self):
        assert is_url(None) is False


class TestIsFileResource:
    def test_html(self):
        assert is_file_resource("http://x.com/index.html") is True

    def test_uppercase(self):
        assert is_file_resource("http://x.com/LOGO.PNG") is True

    def test_php(self):
        assert is_file_resource("http://x.com/view.php") is True

    def test_directory(self):
        assert is_file_resource("http://x.com/blog/") is False

    def test_unknown_extension(self):
        assert is_file_resource("http://x.com/doc.pdf") is False

    def test_empty(self):
        assert is_file_resource("") is False


class TestExtractDomain:
    def test_full_url(self):
        assert extract_domain("https://example.com/page") == "example.com"

    def test_no_path(self):
        assert extract_domain("http://sub.example.com") == "sub.example.com"

    def test_bare_domain(self):
        assert extract_domain("example.com") == ""

    def test_empty(self):
        assert extract_domain("") == ""


class TestStripFragment:
    def test_removes_fragment(self):
        assert strip_fragment("http://a.com/x#section") == "http://a.com/x"

    def test_multiple_hashes_cut_at_last(self):
        assert strip_fragment("http://a.com/x#y#z") == "http://a.com/x#y"

    def test_no_fragment(self):
        assert strip_fragment("http://a.com/x") == "http://a.com/x"

    def test_only_fragment(self):
        assert strip_fragment("#top") == ""

    def test_empty(self):
        assert strip_fragment("") == ""


class TestStripQuery:
    def test_removes_query(self):
        assert strip_query("http://a.com/p?x=1") == "http://a.com/p"

    def test_multiple_marks_cut_at_last(self):
        assert strip_query("http://a.com/p?x=1?y=2") == "http://a.com/p?x=1"

    def test_no_query(self):
        assert strip_query("http://a.com/p") == "http://a.com/p"

    def test_empty(self):
        assert strip_query("") == ""


class TestEnsureTrailingSlash:
    def test_adds_slash(self):
        assert ensure_trailing_slash("http://a.com") == "http://a.com/"

    def test_directory_path(self):
        assert ensure_trailing_slash("http://a.com/blog") == "http://a.com/blog/"

    def test_keeps_existing(self):
        assert ensure_trailing_slash("http://a.com/blog/") == "http://a.com/blog/"

    def test_file_untouched(self):
        assert ensure_trailing_slash("http://a.com/page.html") == "http://a.com/page.html"

    def test_image_untouched(self):
        assert ensure_trailing_slash("http://a.com/IMG.JPG") == "http://a.com/IMG.JPG"

    def test_empty(self):
        assert ensure_trailing_slash("") == ""
