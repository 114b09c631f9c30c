import logging
import time
from typing import Callable, List, Optional

import requests

from .config import MAX_PAGES_PER_QUERY, REQUEST_DELAY_SECONDS, TARGET_PRODUCTS_PER_QUERY
from .models import SearchItem
from .search_client import MalformedResponseError, SearchClientProtocol

logger = logging.getLogger(__name__)


def fetch_products(
    client: SearchClientProtocol,
    query: str,
    cap: int = TARGET_PRODUCTS_PER_QUERY,
    delay: float = REQUEST_DELAY_SECONDS,
    max_pages: Optional[int] = MAX_PAGES_PER_QUERY,
    sleep: Callable[[float], None] = time.sleep,
) -> List[SearchItem]:
    """
    Walk the search pages for one query and return at most ``cap`` items.

    Stops when:
      - the page has no nextPage token
      - the page has no results (whatever its token says)
      - ``cap`` items have been gathered
      - a request or parse fails (items gathered so far are kept)
      - ``max_pages`` pages have been fetched, if a bound is set

    Never raises for per-page failures.
    """
    products: List[SearchItem] = []
    page = 1
    has_more = True

    logger.info(f'Fetching products for query: "{query}"...')

    while has_more and len(products) < cap:
        if max_pages is not None and page > max_pages:
            logger.warning(f'Reached max page limit ({max_pages}) for query "{query}". Stopping.')
            break

        try:
            logger.info(f"  Fetching page {page}... ({len(products)} products so far)")
            data = client.search(query, page)

            if data.results:
                # whole page is kept; the cap is applied once, on return
                products.extend(data.results)
                logger.info(f"  Got {len(data.results)} products (total: {len(products)})")
                has_more = data.has_next_page
                page += 1
            else:
                has_more = False

            sleep(delay)
        except (requests.RequestException, MalformedResponseError) as e:
            logger.error(f'Error fetching page {page} for query "{query}": {e}')
            has_more = False
        except Exception as e:
            logger.exception(f'Unexpected error on page {page} for query "{query}": {e}')
            has_more = False

    logger.info(f'Finished fetching {len(products)} products for query: "{query}"')
    return products[:cap]
