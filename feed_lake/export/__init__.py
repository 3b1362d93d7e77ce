"""Export formats for the feed directory."""

from .opml import generate_opml, escape_xml

__all__ = ["generate_opml", "escape_xml"]
