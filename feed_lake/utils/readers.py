"""Deep links into third-party feed readers."""

import re
from typing import Dict
from urllib.parse import quote

FEEDLY_SUBSCRIBE_URL = "https://feedly.com/i/subscription/feed/"
INOREADER_SUBSCRIBE_URL = "https://www.inoreader.com/feed/"

_HTTP_SCHEME = re.compile(r"^https?:")

# Same set left unescaped as a URI component encoder
_COMPONENT_SAFE = "-_.!~*'()"


def _encode_component(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE, errors="surrogatepass")


def get_feedly_url(feed_url: str) -> str:
    return FEEDLY_SUBSCRIBE_URL + _encode_component(feed_url)


def get_inoreader_url(feed_url: str) -> str:
    return INOREADER_SUBSCRIBE_URL + _encode_component(feed_url)


def get_feed_protocol_url(feed_url: str) -> str:
    """Rewrite a leading http: or https: scheme to feed:, else return as-is."""
    return _HTTP_SCHEME.sub("feed:", feed_url, count=1)


def reader_links(feed_url: str) -> Dict[str, str]:
    """All subscribe links for one feed URL, keyed by reader."""
    return {
        "feedly": get_feedly_url(feed_url),
        "inoreader": get_inoreader_url(feed_url),
        "feed": get_feed_protocol_url(feed_url),
    }
