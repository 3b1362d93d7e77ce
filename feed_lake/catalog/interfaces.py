"""Interface definitions for feed records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from ..utils.slugify import slugify_domain


class FeedType(Enum):
    """Syndication format of a feed."""
    RSS = "rss"
    ATOM = "atom"


@dataclass(frozen=True)
class Feed:
    """A curated feed descriptor, as stored on disk."""
    title: str
    text: str
    xml_url: str
    html_url: str
    type: FeedType
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def slug(self) -> str:
        """Routing key derived from the website URL."""
        return slugify_domain(self.html_url)

    @classmethod
    def from_dict(cls, data: dict) -> "Feed":
        """Build a Feed from its on-disk JSON object.

        Raises ValueError on a missing field, a non-string value, or an
        unknown feed type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Feed must be a JSON object, got {type(data).__name__}")

        values = {}
        for key in ("title", "text", "xmlUrl", "htmlUrl", "type"):
            if key not in data:
                raise ValueError(f"Missing field: {key}")
            if not isinstance(data[key], str):
                raise ValueError(f"Field {key} must be a string")
            values[key] = data[key]

        if not values["title"]:
            raise ValueError("Field title must not be empty")

        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError("Field tags must be a list of strings")

        return cls(
            title=values["title"],
            text=values["text"],
            xml_url=values["xmlUrl"],
            html_url=values["htmlUrl"],
            type=FeedType(values["type"]),
            # Duplicates carry no meaning within one feed
            tags=tuple(dict.fromkeys(tags)),
        )

    def to_dict(self, with_slug: bool = False) -> dict:
        """Convert to the JSON shape used on disk and over HTTP."""
        data = {
            "title": self.title,
            "text": self.text,
            "xmlUrl": self.xml_url,
            "htmlUrl": self.html_url,
            "type": self.type.value,
            "tags": list(self.tags),
        }
        if with_slug:
            data["slug"] = self.slug
        return data
