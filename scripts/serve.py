#!/usr/bin/env python3
"""Serve the feed directory over HTTP."""

import os
import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn
from dotenv import load_dotenv

from feed_lake.catalog import FeedStore, load_feeds
from feed_lake.config.settings import settings
from feed_lake.web import create_app


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(description="Serve the Feed Lake directory")
    parser.add_argument("--feeds-dir", type=Path, default=None, help="Directory of feed JSON files")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument(
        "--port", type=int,
        default=int(os.environ.get("PORT", settings.port)),
        help="Port to listen on",
    )
    args = parser.parse_args()

    # Load errors are fatal: nothing is served from a partial directory
    store = FeedStore(load_feeds(args.feeds_dir))
    app = create_app(store)

    print("\n" + "=" * 60)
    print("FEED LAKE")
    print("=" * 60)
    print(f"{len(store)} feeds, {len(store.tags())} tags")
    print(f"Open http://localhost:{args.port} in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 60 + "\n")

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
