"""HTTP layer - page data and OPML export endpoints."""

from .app import create_app

__all__ = ["create_app"]
