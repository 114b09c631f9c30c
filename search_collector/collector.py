import logging
import time
from typing import Callable, Iterable, List, Optional

from .config import (
    MAX_PAGES_PER_QUERY,
    OUTPUT_CSV,
    REQUEST_DELAY_SECONDS,
    SOURCE_LABEL,
    TARGET_PRODUCTS_PER_QUERY,
)
from .models import SearchItem
from .paginator import fetch_products
from .search_client import SearchClientProtocol
from .storage import append_records, to_record

logger = logging.getLogger(__name__)


def collect(
    queries: Iterable[str],
    client: SearchClientProtocol,
    output_path: str = OUTPUT_CSV,
    cap: int = TARGET_PRODUCTS_PER_QUERY,
    delay: float = REQUEST_DELAY_SECONDS,
    max_pages: Optional[int] = MAX_PAGES_PER_QUERY,
    source: str = SOURCE_LABEL,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Fetch every query in order, one after another, then append all rows
    to the dataset in a single write. Returns the number of rows written.
    """
    all_products: List[SearchItem] = []
    for query in queries:
        products = fetch_products(client, query, cap=cap, delay=delay, max_pages=max_pages, sleep=sleep)
        all_products.extend(products)

    logger.info(f"Writing {len(all_products)} products to {output_path}...")
    records = [to_record(p, source=source) for p in all_products]
    written = append_records(output_path, records)
    logger.info(f"Successfully appended {written} products to {output_path}")
    return written
