"""OPML 2.0 export of feed lists."""

from typing import Iterable
from xml.sax.saxutils import escape

from ..catalog.interfaces import Feed

DEFAULT_TITLE = "RSS Feeds"

# escape() always handles &, < and > first
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

OPML_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<opml version="2.0">
  <head>
    <title>{title}</title>
  </head>
  <body>
    <outline text="Feeds" title="Feeds">
{outlines}
    </outline>
  </body>
</opml>"""

OUTLINE_TEMPLATE = (
    '      <outline type="{type}" xmlUrl="{xml_url}" title="{title}" '
    'text="{text}" htmlUrl="{html_url}"/>'
)


def escape_xml(text: str) -> str:
    """Escape text for use inside an XML attribute or element."""
    return escape(text, _ATTRIBUTE_ENTITIES)


def _outline(feed: Feed) -> str:
    return OUTLINE_TEMPLATE.format(
        type=escape_xml(feed.type.value),
        xml_url=escape_xml(feed.xml_url),
        title=escape_xml(feed.title),
        text=escape_xml(feed.text),
        html_url=escape_xml(feed.html_url),
    )


def generate_opml(feeds: Iterable[Feed], title: str = DEFAULT_TITLE) -> str:
    """Render feeds as an OPML 2.0 document.

    All feeds go under a single wrapping outline, in input order. An empty
    list still produces a well-formed document.
    """
    outlines = "\n".join(_outline(feed) for feed in feeds)
    return OPML_TEMPLATE.format(title=escape_xml(title), outlines=outlines)
