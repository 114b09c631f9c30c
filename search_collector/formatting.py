from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from .config import CURRENCY_SYMBOL

TOP_RATED_LABEL = "Number 1 Top-Rated"

Number = Union[int, float]


def _group_indian(digits: str) -> str:
    """'1234567' -> '12,34,567' (last three, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_number(value: Number) -> str:
    """Plain number text without a trailing '.0': 4.0 -> '4', 4.5 -> '4.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_price(price: Number, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Currency symbol + amount with Indian digit grouping.

    At most three fraction digits, trailing zeros dropped:
      1299      -> '₹1,299'
      149999.5  -> '₹1,49,999.5'
    """
    value = Decimal(str(price)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, frac = format(abs(value), "f").partition(".")
    frac = frac.rstrip("0")
    text = _group_indian(whole)
    if frac:
        text = f"{text}.{frac}"
    return f"{symbol}{sign}{text}"


def _one_decimal(count: int, unit: int) -> str:
    # half-up on the float quotient itself, so 1150 / 1000 (1.1499...) gives 1.1
    return str(Decimal(count / unit).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_ratings(total_ratings: int) -> str:
    if total_ratings == -1:
        return TOP_RATED_LABEL
    if total_ratings < 1000:
        return f"({total_ratings})"
    if total_ratings < 1000000:
        return f"({_one_decimal(total_ratings, 1000)}K)"
    return f"({_one_decimal(total_ratings, 1000000)}M)"
