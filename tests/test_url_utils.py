"""Tests for slug derivation and URL list reading."""

import pytest

from responsive_audit.errors import UrlListError
from responsive_audit.url_utils import (
    INVALID_URL_SLUG,
    MAX_SLUG_LENGTH,
    parse_url_list,
    read_url_list,
    slug_from_url,
)


class TestSlugFromUrl:
    """Tests for slug_from_url."""

    def test_host_and_path(self):
        assert slug_from_url("https://example.com/products/shoes") == "example-com-products-shoes"

    def test_root_path_strips_trailing_separator(self):
        assert slug_from_url("https://example.com/") == "example-com"

    def test_collapses_runs_of_punctuation(self):
        assert slug_from_url("https://example.com//a--b__c/") == "example-com-a-b-c"

    def test_ignores_query_and_fragment(self):
        assert slug_from_url("https://example.com/a?x=1#top") == "example-com-a"

    def test_lowercases_host(self):
        assert slug_from_url("https://Example.COM/Page") == "example-com-Page"

    def test_truncated_to_max_length(self):
        slug = slug_from_url("https://example.com/" + "a" * 300)
        assert len(slug) == MAX_SLUG_LENGTH

    def test_deterministic(self):
        url = "https://example.com/blog/post-1"
        assert slug_from_url(url) == slug_from_url(url)

    @pytest.mark.parametrize("url", ["not a url", "", "example.com/path", "http://", "http://[::1"])
    def test_malformed_urls_yield_sentinel(self, url):
        assert slug_from_url(url) == INVALID_URL_SLUG

    def test_idn_host_uses_ascii_form(self):
        assert slug_from_url("https://bücher.de/") == "xn-bcher-kva-de"

    def test_non_ascii_path_is_percent_encoded(self):
        assert slug_from_url("https://example.jp/会") == "example-jp-E4-BC-9A"

    def test_distinct_non_ascii_paths_keep_distinct_slugs(self):
        slugs = {
            slug_from_url("https://example.jp/"),
            slug_from_url("https://example.jp/会社概要"),
            slug_from_url("https://example.jp/採用情報"),
        }
        assert len(slugs) == 3

    def test_whitespace_in_host_is_invalid(self):
        assert slug_from_url("https://exa mple.com/") == INVALID_URL_SLUG

    def test_distinct_urls_can_collide(self):
        # Query strings are not part of the slug; both share one directory.
        assert slug_from_url("https://example.com/?page=1") == slug_from_url("https://example.com/?page=2")


class TestParseUrlList:
    """Tests for URL list parsing."""

    def test_skips_blank_and_comment_lines(self):
        content = "# header\nhttps://a.com/\n\n   \n  https://b.com/  \n#https://c.com/\n"
        assert parse_url_list(content) == ["https://a.com/", "https://b.com/"]

    def test_preserves_order(self):
        content = "https://c.com/\nhttps://a.com/\nhttps://b.com/"
        assert parse_url_list(content) == ["https://c.com/", "https://a.com/", "https://b.com/"]

    def test_handles_crlf(self):
        assert parse_url_list("https://a.com/\r\nhttps://b.com/\r\n") == ["https://a.com/", "https://b.com/"]


class TestReadUrlList:
    """Tests for reading URL list files."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("https://example.com/\n# skip\n", encoding="utf-8")
        assert read_url_list(path) == ["https://example.com/"]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(UrlListError, match="Failed to read URLs file"):
            read_url_list(tmp_path / "missing.txt")

    def test_empty_file_returns_empty_list(self, tmp_path):
        path = tmp_path / "urls.txt"
        path.write_text("\n# nothing here\n", encoding="utf-8")
        assert read_url_list(path) == []
