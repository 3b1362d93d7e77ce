"""Pytest configuration and shared fixtures."""

import json
import pytest
from pathlib import Path

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))


SAMPLE_FEEDS = [
    {
        "title": "Example Blog",
        "text": "Example Blog",
        "xmlUrl": "https://www.example.com/feed.xml",
        "htmlUrl": "https://www.example.com/",
        "type": "rss",
        "tags": ["python", "web"],
    },
    {
        "title": "Julia Evans",
        "text": "Julia Evans",
        "xmlUrl": "https://jvns.ca/atom.xml",
        "htmlUrl": "https://jvns.ca/",
        "type": "atom",
        "tags": ["linux", "networking"],
    },
    {
        "title": "Ops & Things",
        "text": "Ops & Things",
        "xmlUrl": "https://blog.ops.dev/rss?format=xml&full=1",
        "htmlUrl": "https://blog.ops.dev/",
        "type": "rss",
        "tags": ["linux"],
    },
]


def write_feed_files(directory: Path, feeds) -> Path:
    """Write one JSON file per feed record into a directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for i, feed in enumerate(feeds):
        (directory / f"feed-{i}.json").write_text(json.dumps(feed), encoding="utf-8")
    return directory


@pytest.fixture
def sample_feed_dicts():
    """Provide the raw on-disk feed records."""
    return [dict(feed) for feed in SAMPLE_FEEDS]


@pytest.fixture
def feeds_dir(tmp_path, sample_feed_dicts):
    """Provide a temporary feeds directory populated with sample feeds."""
    return write_feed_files(tmp_path / "feeds", sample_feed_dicts)


@pytest.fixture
def sample_feeds(sample_feed_dicts):
    """Provide parsed Feed records."""
    from feed_lake.catalog.interfaces import Feed
    return [Feed.from_dict(data) for data in sample_feed_dicts]


@pytest.fixture
def sample_feed(sample_feeds):
    """Provide a single Feed."""
    return sample_feeds[0]


@pytest.fixture
def store(sample_feeds):
    """Provide a FeedStore over the sample feeds."""
    from feed_lake.catalog.store import FeedStore
    return FeedStore(sample_feeds)
