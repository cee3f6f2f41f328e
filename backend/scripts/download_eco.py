#!/usr/bin/env python3
"""
Download the eco.json opening data and report catalogue statistics.

Usage:
  python download_eco.py --data-dir ../data/eco
  python download_eco.py --force --verbose
"""

import argparse
import logging
import os
import sys

from opening_explorer import CatalogueLoadError, load_catalogue
from opening_explorer.eco_client import ECO_FILES, EcoDataClient

DEFAULT_DATA_DIR = os.getenv(
    "ECO_DATA_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data", "eco"),
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Download and index eco.json opening data")
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="Directory to cache the JSON files in")
    parser.add_argument("--base-url", default=None, help="Override the download location")
    parser.add_argument("--force", action="store_true", help="Re-download files that are already cached")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    client = EcoDataClient(cache_dir=args.data_dir, base_url=args.base_url)
    print(f"Downloading {len(ECO_FILES)} files to {args.data_dir}...")
    paths = client.download_all(force=args.force)
    print(f"  Cached: {len(paths)}/{len(ECO_FILES)}")

    try:
        catalogue = load_catalogue(paths)
    except CatalogueLoadError as e:
        print(f"Failed to build catalogue: {e}")
        return 1

    first_moves = sorted(catalogue.continuation_index.get("", ()))
    print(f"  Openings: {len(catalogue)}")
    print(f"  Indexed prefixes: {len(catalogue.continuation_index)}")
    print(f"  First moves: {' '.join(first_moves)}")
    print(f"  ECO roots: {sum(1 for o in catalogue.openings if o.is_eco_root)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
