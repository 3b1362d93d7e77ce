"""Slug derivation for feed routing."""

import re
from typing import Optional
from urllib.parse import urlsplit

import structlog

logger = structlog.get_logger()

# ASCII word characters only; whitespace stays Unicode-aware
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")
_HOST_CHARS = re.compile(r"[a-z0-9._-]+")


def slugify(text: str) -> str:
    """Turn arbitrary text into a lowercase, hyphen-separated slug.

    Characters other than word characters, whitespace and hyphens are
    removed, separator runs collapse to a single hyphen, and leading or
    trailing hyphens are stripped. May return an empty string.
    """
    slug = text.lower().strip()
    slug = _UNSAFE_CHARS.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def _hostname(url: str) -> Optional[str]:
    """Return the hostname of an absolute URL, or None if it has none.

    Hosts with characters outside letters, digits, dots, hyphens and
    underscores count as unparseable.
    """
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not hostname:
        return None
    if not _HOST_CHARS.fullmatch(hostname):
        return None
    return hostname


def slugify_domain(url: str) -> str:
    """Derive a slug from a website URL's domain.

    ``https://www.example.com/feed`` becomes ``example-com``. Input that
    does not parse as an absolute URL falls back to :func:`slugify`.
    """
    hostname = _hostname(url)
    if hostname is None:
        logger.debug("slug_fallback", value=url)
        return slugify(url)

    if hostname.startswith("www."):
        hostname = hostname[len("www."):]
    return hostname.replace(".", "-")
