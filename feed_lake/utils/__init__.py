"""String helpers - slugs and reader deep links."""

from .slugify import slugify, slugify_domain
from .readers import get_feedly_url, get_inoreader_url, get_feed_protocol_url, reader_links

__all__ = [
    "slugify", "slugify_domain",
    "get_feedly_url", "get_inoreader_url", "get_feed_protocol_url", "reader_links",
]
