"""Feed catalog - the curated feed records and lookups over them."""

from .interfaces import Feed, FeedType
from .loader import FeedLoadError, load_feeds
from .store import FeedStore, FeedNotFoundError, SlugCollisionError, distinct_tags

__all__ = [
    "Feed", "FeedType", "FeedLoadError", "load_feeds",
    "FeedStore", "FeedNotFoundError", "SlugCollisionError", "distinct_tags",
]
