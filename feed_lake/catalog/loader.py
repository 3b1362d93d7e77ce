"""Feed loader - reads the feed directory from disk."""

import json
from pathlib import Path
from typing import List, Optional, Union

import structlog

from .interfaces import Feed
from ..config.settings import settings

logger = structlog.get_logger()


class FeedLoadError(Exception):
    """A feed file could not be read or parsed."""


def load_feeds(
    feeds_dir: Optional[Union[str, Path]] = None,
    suffix: Optional[str] = None,
) -> List[Feed]:
    """Load every feed file in a directory.

    One JSON object per file. Any unreadable or malformed file fails the
    whole load. Order follows the directory listing and carries no meaning.
    """
    feeds_dir = Path(feeds_dir) if feeds_dir else settings.feeds_dir
    suffix = suffix or settings.feed_file_suffix

    if not feeds_dir.is_dir():
        raise FeedLoadError(f"Feeds directory not found: {feeds_dir}")

    feeds = []
    for path in feeds_dir.iterdir():
        if not path.name.endswith(suffix) or not path.is_file():
            continue
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            feeds.append(Feed.from_dict(data))
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.error("feed_load_failed", path=str(path), error=str(e))
            raise FeedLoadError(f"Invalid feed file {path.name}: {e}") from e

    logger.info("feeds_loaded", dir=str(feeds_dir), count=len(feeds))
    return feeds
