"""Unit tests for reader deep links."""

from feed_lake.utils.readers import (
    get_feed_protocol_url,
    get_feedly_url,
    get_inoreader_url,
    reader_links,
)


class TestReaderLinks:
    """Tests for reader link builders."""

    def test_feedly_url(self):
        """Should embed the percent-encoded feed URL."""
        assert get_feedly_url("https://a.com/f?x=1&y=2") == (
            "https://feedly.com/i/subscription/feed/"
            "https%3A%2F%2Fa.com%2Ff%3Fx%3D1%26y%3D2"
        )

    def test_inoreader_url(self):
        """Should embed the percent-encoded feed URL."""
        assert get_inoreader_url("https://a.com/f") == (
            "https://www.inoreader.com/feed/https%3A%2F%2Fa.com%2Ff"
        )

    def test_component_encoding_keeps_unreserved_marks(self):
        """Should leave the characters URI components leave unescaped."""
        assert get_inoreader_url("a-b_c.d!e~f*g'h(i)") == (
            "https://www.inoreader.com/feed/a-b_c.d!e~f*g'h(i)"
        )
        assert get_inoreader_url("a b#c") == "https://www.inoreader.com/feed/a%20b%23c"

    def test_feed_protocol_https(self):
        """Should rewrite https: to feed:."""
        assert get_feed_protocol_url("https://a.com/f") == "feed://a.com/f"

    def test_feed_protocol_http(self):
        """Should rewrite http: to feed:."""
        assert get_feed_protocol_url("http://a.com/f") == "feed://a.com/f"

    def test_feed_protocol_other_scheme_unchanged(self):
        """Should leave other schemes alone."""
        assert get_feed_protocol_url("ftp://a.com/f") == "ftp://a.com/f"
        assert get_feed_protocol_url("a.com/https://b") == "a.com/https://b"

    def test_reader_links(self):
        """Should bundle all three links."""
        links = reader_links("https://a.com/f")
        assert set(links) == {"feedly", "inoreader", "feed"}
        assert links["feed"] == "feed://a.com/f"
