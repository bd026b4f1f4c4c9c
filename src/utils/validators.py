"""Lenient numeric coercion for records read from the inventory API.

Order-item prices arrive as DRF decimal strings ("1500.00") and quantities as
ints, but older rows carry blanks or junk. Anything unparseable counts as
zero rather than failing the whole report.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from utils.logging_config import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0")


def ensure_present(value: Any, field: str) -> None:
    """Raise ValueError if value is falsy."""
    if value in (None, "", []):
        raise ValueError(f"{field} is required")


def coerce_decimal(value: Any, field: str = "value") -> Decimal:
    """Return value as a finite Decimal, or zero when it is missing or junk."""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        logger.debug("Coerced non-numeric field to zero", extra={"field": field})
        return ZERO
    if not number.is_finite():
        logger.debug("Coerced non-finite field to zero", extra={"field": field})
        return ZERO
    return number


def coerce_int(value: Any, field: str = "value") -> int:
    """Return value as an int, truncating fractions; zero when unparseable."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(coerce_decimal(value, field))
