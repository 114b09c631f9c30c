import csv
import io
import logging
from typing import Iterable, List

from .config import SOURCE_LABEL
from .formatting import format_number, format_price, format_ratings
from .models import CsvRecord, SearchItem

logger = logging.getLogger(__name__)

# Byte-preserving round trip for existing files that are not valid UTF-8
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def to_record(item: SearchItem, source: str = SOURCE_LABEL) -> CsvRecord:
    return CsvRecord(
        title=item.title,
        price=format_price(item.price),
        rating=format_number(item.star_rating),
        ratings=format_ratings(item.total_ratings),
        link=item.product_url,
        image=item.image.small,
        source=source,
    )


def render_rows(records: Iterable[CsvRecord]) -> str:
    """
    One line per record, no header.

    Fields holding a comma, a double quote or a newline are quoted,
    with inner quotes doubled.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    for record in records:
        writer.writerow(record.as_row())
    return buf.getvalue()


def read_existing(csv_path: str) -> str:
    """Current dataset text; a missing or unreadable file counts as empty."""
    try:
        with open(csv_path, "r", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
            return f.read()
    except FileNotFoundError:
        return ""
    except OSError as e:
        logger.warning(f"Could not read existing data from {csv_path}: {e}. Starting fresh.")
        return ""


def append_records(csv_path: str, records: List[CsvRecord]) -> int:
    """
    Append by rewrite: read the whole file, add the new rows, write it back.

    Write errors are not caught.
    """
    existing = read_existing(csv_path)
    if existing and not existing.endswith("\n"):
        existing += "\n"

    with open(csv_path, "w", encoding=_ENCODING, errors=_ERRORS, newline="") as f:
        f.write(existing + render_rows(records))
    return len(records)
