"""
Join customers to orders to order-items and total each customer's spend.

Orders link to customers through ``customer_id``; items link to orders
through ``order``. Records whose parent was not fetched simply never match.
Every order status counts toward spend.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping

from utils.validators import ZERO, coerce_decimal, coerce_int


@dataclass
class CustomerTotals:
    """A customer's orders in fetch order and the summed item spend."""

    orders: List[dict] = field(default_factory=list)
    spend: Decimal = ZERO


def item_total(item: Mapping[str, Any]) -> Decimal:
    """Line total for one order item, with junk price/quantity as zero."""
    price = coerce_decimal(item.get("price"), "price")
    quantity = coerce_int(item.get("quantity"), "quantity")
    return price * quantity


def index_items_by_order(order_items: Iterable[Mapping[str, Any]]) -> Dict[Any, List[Mapping]]:
    """Group order items under the order id they reference."""
    items_by_order: Dict[Any, List[Mapping]] = defaultdict(list)
    for item in order_items:
        items_by_order[item.get("order")].append(item)
    return items_by_order


def join(
    customers: Iterable[Mapping[str, Any]],
    orders: Iterable[Mapping[str, Any]],
    order_items: Iterable[Mapping[str, Any]],
) -> Dict[Any, CustomerTotals]:
    """Return per-customer orders and spend, keyed by customer id in fetch order."""
    orders_by_customer: Dict[Any, List[Mapping]] = defaultdict(list)
    for order in orders:
        orders_by_customer[order.get("customer_id")].append(order)
    items_by_order = index_items_by_order(order_items)

    totals: Dict[Any, CustomerTotals] = {}
    for customer in customers:
        customer_id = customer.get("id")
        customer_orders = orders_by_customer.get(customer_id, [])
        spend = ZERO
        for order in customer_orders:
            for item in items_by_order.get(order.get("id"), []):
                spend += item_total(item)
        totals[customer_id] = CustomerTotals(orders=list(customer_orders), spend=spend)
    return totals
