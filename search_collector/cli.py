# -*- coding: utf-8 -*-
"""
Collect product search results into a CSV dataset.

Each query is paged through the search endpoint (up to
TARGET_PRODUCTS_PER_QUERY products per query) and every row is appended
to the output file. Existing rows are kept.

Run (from project root):
  source venv/bin/activate
  python -m scripts.collect samsung iphone oneplus
  search-collect samsung iphone oneplus      (after pip install)

Env:
  SEARCH_API_URL             default: http://localhost:8787/api/in/search
  TARGET_PRODUCTS_PER_QUERY  default: 500
  REQUEST_DELAY_SECONDS      default: 0.1
  REQUEST_TIMEOUT            default: 30 (0 = no timeout)
  MAX_PAGES_PER_QUERY        default: unbounded
  OUTPUT_CSV                 default: data.csv
  LOG_FILE                   default: console only
"""

import argparse
import logging
from typing import List, Optional

from .collector import collect
from .config import LOG_FILE, MAX_PAGES_PER_QUERY, OUTPUT_CSV
from .search_client import SearchClient

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
EXAMPLE = "Example: python -m scripts.collect samsung iphone oneplus"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="search-collect",
        description="Fetch product search results for each query and append them to a CSV file.",
        epilog=EXAMPLE,
    )
    ap.add_argument("queries", nargs="*", metavar="query", help="search term; quote it if it has spaces")
    ap.add_argument("--output", default=OUTPUT_CSV, help=f"dataset file to append to (default: {OUTPUT_CSV})")
    ap.add_argument(
        "--max-pages",
        type=int,
        default=MAX_PAGES_PER_QUERY,
        help="stop each query after this many pages (default: follow nextPage until the cap)",
    )
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=LOG_FILE, help="also write the log to this file")
    return ap


def setup_logging(level: str, log_file: Optional[str]) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, handlers=handlers)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.queries:
        ap.print_help()
        return 1

    setup_logging(args.log_level, args.log_file)

    with SearchClient() as client:
        collect(args.queries, client, output_path=args.output, max_pages=args.max_pages)
    return 0

