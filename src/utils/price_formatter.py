"""Naira price formatting used in report summaries and tests."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from utils.validators import ZERO, coerce_decimal

NAIRA = "₦"
_CENTS = Decimal("0.01")


def format_price(value: Any) -> str:
    """Format an amount as ``₦1,234.50``; junk and None render as ``₦0.00``."""
    amount = coerce_decimal(value, "price").quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{NAIRA}{amount:,.2f}"


def parse_price(text: Any) -> Decimal:
    """Strip the currency symbol and thousands separators and parse."""
    if not text:
        return ZERO
    cleaned = str(text).replace(NAIRA, "").replace(",", "")
    return coerce_decimal(cleaned, "price")
