"""Feed Lake - a curated feed directory with OPML export."""

__version__ = "0.1.0"
