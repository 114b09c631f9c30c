import os
from typing import Optional


def _env_optional_int(name: str) -> Optional[int]:
    raw = (os.getenv(name) or "").strip()
    return int(raw) if raw else None


def _env_timeout(name: str, default: float) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw or float(raw) <= 0:
        return None
    return float(raw)


SEARCH_API_URL = os.getenv("SEARCH_API_URL", "http://localhost:8787/api/in/search").strip()
TARGET_PRODUCTS_PER_QUERY = int(os.getenv("TARGET_PRODUCTS_PER_QUERY", 500))
REQUEST_DELAY_SECONDS = float(os.getenv("REQUEST_DELAY_SECONDS", 0.1))
REQUEST_TIMEOUT = _env_timeout("REQUEST_TIMEOUT", 30)

# Unset means unbounded: pagination trusts the server's nextPage token.
MAX_PAGES_PER_QUERY = _env_optional_int("MAX_PAGES_PER_QUERY")

OUTPUT_CSV = os.getenv("OUTPUT_CSV", "data.csv")
SOURCE_LABEL = os.getenv("SOURCE_LABEL", "Amazon")
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")
LOG_FILE = (os.getenv("LOG_FILE") or "").strip() or None
