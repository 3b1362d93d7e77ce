"""FastAPI application serving the feed directory."""

from datetime import datetime
from typing import List, Optional

import structlog
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import Response

from ..catalog.store import FeedNotFoundError, FeedStore
from ..config.settings import settings
from ..export.opml import generate_opml
from ..utils.readers import reader_links

logger = structlog.get_logger()


def get_store(request: Request) -> FeedStore:
    return request.app.state.store


def split_param(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma-separated query value, dropping blank items.

    Absent or empty values give None (no filter). Anything else gives a
    list, which still filters even when every item was blank.
    """
    if not value:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


def create_app(store: FeedStore, opml_title: Optional[str] = None) -> FastAPI:
    """Build the app around an already loaded feed store."""
    app = FastAPI(title="Feed Lake")
    app.state.store = store
    title = opml_title or settings.opml_title

    @app.get("/")
    async def list_feeds(store: FeedStore = Depends(get_store)):
        """All feeds with their slugs, plus the tag list for filtering."""
        return {
            "feeds": [feed.to_dict(with_slug=True) for feed in store.feeds],
            "tags": store.tags(),
        }

    # ===== API ENDPOINTS =====

    @app.get("/api/health")
    async def health_check(store: FeedStore = Depends(get_store)):
        """Health check endpoint for load balancers."""
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "feeds": len(store),
        }

    @app.get("/api/opml")
    async def export_opml(
        slugs: Optional[str] = Query(None),
        tags: Optional[str] = Query(None),
        store: FeedStore = Depends(get_store),
    ):
        """Download the selected feeds as an OPML attachment."""
        slug_list = split_param(slugs)
        tag_list = split_param(tags)
        selected = store.select(slugs=slug_list, tags=tag_list)

        logger.info("opml_exported", count=len(selected), slugs=slug_list, tags=tag_list)
        return Response(
            content=generate_opml(selected, title),
            media_type="application/xml",
            headers={
                "Content-Disposition": f'attachment; filename="{settings.opml_filename}"'
            },
        )

    @app.get("/{slug}")
    async def feed_detail(slug: str, store: FeedStore = Depends(get_store)):
        """One feed by slug, with subscribe links for the common readers."""
        try:
            feed = store.get_by_slug(slug)
        except FeedNotFoundError:
            raise HTTPException(status_code=404, detail="Feed not found")

        return {
            "feed": feed.to_dict(with_slug=True),
            "readers": reader_links(feed.xml_url),
        }

    return app
