"""
Customer Profile Service.

Order history statistics for a single customer's profile page. Unlike the
report, profile spend counts only Completed orders and uses the order
``total`` rather than summing items.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from config.settings import Settings
from models.order import CustomerProfile, OrderStats, OrderStatus, ProductQuantity
from services.api_client import ApiClient
from services.join_engine import index_items_by_order, item_total
from services.tier_service import classify
from utils.logging_config import get_logger
from utils.validators import ZERO, coerce_decimal, coerce_int, ensure_present

logger = get_logger(__name__)

TOP_PRODUCTS_LIMIT = 5
UNKNOWN_PRODUCT = "Unknown Product"
_OPEN_STATUSES = {OrderStatus.PENDING.value, OrderStatus.PROCESSING.value}
_DATETIME = TypeAdapter(datetime)


def _parse_order_date(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return _DATETIME.validate_python(value)
    except ValidationError:
        return None


def product_name(item: Mapping[str, Any]) -> str:
    """Display name for an item's product: nested name, else ``Product #<id>``."""
    if item.get("product_name"):
        return str(item["product_name"])
    product = item.get("product")
    if isinstance(product, Mapping):
        if product.get("name"):
            return str(product["name"])
        product = product.get("id")
    if product is None or product == "":
        return UNKNOWN_PRODUCT
    return f"Product #{product}"


def top_products(
    order_items: Sequence[Mapping[str, Any]], limit: int = TOP_PRODUCTS_LIMIT
) -> List[ProductQuantity]:
    """Most-bought products by summed quantity; unnamed and zero rows dropped."""
    counts: Counter = Counter()
    for item in order_items:
        name = product_name(item)
        counts[name] += coerce_int(item.get("quantity"), "quantity")
    ranked = [
        (name, quantity)
        for name, quantity in counts.most_common()
        if name != UNKNOWN_PRODUCT and quantity > 0
    ]
    return [ProductQuantity(name=name, quantity=qty) for name, qty in ranked[:limit]]


def build_order_stats(
    orders: Sequence[Mapping[str, Any]], order_items: Sequence[Mapping[str, Any]]
) -> OrderStats:
    """Summarize one customer's orders and the items belonging to them."""
    completed = [o for o in orders if o.get("status") == OrderStatus.COMPLETED.value]
    pending = [o for o in orders if o.get("status") in _OPEN_STATUSES]
    total_spent = sum((coerce_decimal(o.get("total"), "total") for o in completed), ZERO)
    average = total_spent / len(completed) if completed else ZERO

    order_dates = [d for d in (_parse_order_date(o.get("order_date")) for o in orders) if d]
    last_order_date = None
    if order_dates:
        # Mixed naive/aware timestamps cannot be compared; keep the aware ones.
        aware = [d for d in order_dates if d.tzinfo is not None]
        last_order_date = max(aware or order_dates)

    return OrderStats(
        total_orders=len(orders),
        completed_orders=len(completed),
        pending_orders=len(pending),
        total_spent=total_spent,
        average_order_value=average.quantize(Decimal("0.01")),
        top_products=top_products(order_items),
        last_order_date=last_order_date,
    )


class ProfileService:
    """Build a single customer's profile from their orders and items."""

    def __init__(
        self,
        client: Optional[ApiClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or (client.settings if client else Settings.from_environment())
        self.client = client or ApiClient(self.settings)

    def build_profile(self, customer_id: Any) -> CustomerProfile:
        """Fetch the customer's orders and all items, then derive stats and tier."""
        ensure_present(customer_id, "customer_id")
        collections = self.client.fetch_many(
            {
                "orders": (self.settings.orders_endpoint, {"customer": customer_id}),
                "order_items": (self.settings.order_items_endpoint, None),
            }
        )
        # The filter param may be ignored server side; re-check ownership.
        orders = [
            o
            for o in collections["orders"]
            if str(o.get("customer_id")) == str(customer_id)
        ]
        items_by_order = index_items_by_order(collections["order_items"])
        grouped: Dict[str, List[dict]] = {
            str(o.get("id")): list(items_by_order.get(o.get("id"), [])) for o in orders
        }
        own_items = [item for items in grouped.values() for item in items]
        lifetime_spend = sum((item_total(item) for item in own_items), ZERO)

        logger.info(
            "Customer profile built",
            extra={"customer_id": str(customer_id), "order_count": len(orders)},
        )
        return CustomerProfile(
            customer_id=customer_id,
            orders=orders,
            items_by_order=grouped,
            stats=build_order_stats(orders, own_items),
            lifetime_spend=lifetime_spend,
            tier=classify(lifetime_spend),
        )
