"""Read-only feed collection with slug and tag lookups."""

from typing import Dict, Iterable, List, Optional, Sequence

import structlog

from .interfaces import Feed

logger = structlog.get_logger()


class FeedNotFoundError(KeyError):
    """No feed matches the requested slug."""


class SlugCollisionError(ValueError):
    """Two feeds derive the same slug from their website URLs."""


def distinct_tags(feeds: Iterable[Feed]) -> List[str]:
    """Union of all feed tags, sorted ascending."""
    tags = set()
    for feed in feeds:
        tags.update(feed.tags)
    return sorted(tags)


class FeedStore:
    """The loaded feed collection. Never mutated after construction.

    Slugs are checked for uniqueness up front so that lookups by slug are
    unambiguous.
    """

    def __init__(self, feeds: Sequence[Feed]):
        self._feeds = tuple(feeds)
        self._by_slug: Dict[str, Feed] = {}

        for feed in self._feeds:
            slug = feed.slug
            existing = self._by_slug.get(slug)
            if existing is not None:
                raise SlugCollisionError(
                    f"Slug '{slug}' shared by {existing.html_url} and {feed.html_url}"
                )
            self._by_slug[slug] = feed

        self._tags = distinct_tags(self._feeds)

    @property
    def feeds(self) -> Sequence[Feed]:
        return self._feeds

    def __len__(self) -> int:
        return len(self._feeds)

    def tags(self) -> List[str]:
        return list(self._tags)

    def get_by_slug(self, slug: str) -> Feed:
        """Get a feed by its derived slug."""
        feed = self._by_slug.get(slug)
        if feed is None:
            logger.info("feed_not_found", slug=slug)
            raise FeedNotFoundError(slug)
        return feed

    def select(
        self,
        slugs: Optional[Sequence[str]] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> List[Feed]:
        """Filter feeds by slug, then narrow to those with any of the tags.

        None means no filter on that dimension; an empty list matches nothing.
        Collection order is preserved.
        """
        selected = list(self._feeds)

        if slugs is not None:
            wanted = set(slugs)
            selected = [f for f in selected if f.slug in wanted]

        if tags is not None:
            wanted_tags = set(tags)
            selected = [f for f in selected if wanted_tags.intersection(f.tags)]

        return selected
