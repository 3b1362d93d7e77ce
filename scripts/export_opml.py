#!/usr/bin/env python3
"""Write the feed directory, or a filtered part of it, as an OPML file."""

import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from feed_lake.catalog import FeedStore, load_feeds
from feed_lake.config.settings import settings
from feed_lake.export import generate_opml
from feed_lake.web.app import split_param


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Export Feed Lake feeds as OPML"
    )
    parser.add_argument("--feeds-dir", type=Path, default=None, help="Directory of feed JSON files")
    parser.add_argument("--slugs", default=None, help="Comma-separated feed slugs")
    parser.add_argument("--tags", default=None, help="Comma-separated tags (any match)")
    parser.add_argument("--title", default=settings.opml_title, help="OPML document title")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    store = FeedStore(load_feeds(args.feeds_dir))
    selected = store.select(slugs=split_param(args.slugs), tags=split_param(args.tags))
    opml = generate_opml(selected, args.title)

    if args.output:
        args.output.write_text(opml + "\n", encoding="utf-8")
        print(f"Wrote {len(selected)} of {len(store)} feeds to {args.output}", file=sys.stderr)
    else:
        print(opml)
        print(f"Exported {len(selected)} of {len(store)} feeds", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
