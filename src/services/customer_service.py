"""
Customer Report Service.

Pulls customers, orders and order-items from the inventory API in parallel,
joins them, and tiers every customer by lifetime spend. Nothing is cached:
each call reads fresh collections, and any failed fetch fails the call.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from config.settings import Settings
from models.customer import CustomerReport, EnrichedCustomer, TierLabel
from services.api_client import ApiClient
from services.join_engine import CustomerTotals, join
from services.tier_service import classify
from utils.logging_config import get_logger
from utils.validators import ZERO

logger = get_logger(__name__)


def enrich(customer: Mapping[str, Any], totals: CustomerTotals) -> EnrichedCustomer:
    """Attach spend, order count and tier to a raw customer record."""
    return EnrichedCustomer.model_validate(
        {
            **customer,
            "total_spent": totals.spend,
            "total_orders": len(totals.orders),
            "tier": classify(totals.spend),
        }
    )


def summarize(
    customers: List[EnrichedCustomer], generated_at: Optional[datetime] = None
) -> CustomerReport:
    """Headline figures for the customer table."""
    return CustomerReport(
        customers=customers,
        total_customers=len(customers),
        total_revenue=sum((c.total_spent for c in customers), ZERO),
        active_customers=sum(1 for c in customers if c.total_spent > 0),
        gold_customers=sum(1 for c in customers if c.tier.label == TierLabel.GOLD),
        generated_at=generated_at or datetime.now(timezone.utc),
    )


class CustomerReportService:
    """Builds the enriched customer list behind the customer table."""

    def __init__(
        self,
        client: Optional[ApiClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or (client.settings if client else Settings.from_environment())
        self.client = client or ApiClient(self.settings)

    def build_customer_report(self) -> List[EnrichedCustomer]:
        """Return every customer, in fetch order, with spend and tier."""
        start = time.perf_counter()
        collections = self.client.fetch_many(
            {
                "customers": (self.settings.customers_endpoint, None),
                "orders": (self.settings.orders_endpoint, None),
                "order_items": (self.settings.order_items_endpoint, None),
            }
        )
        customers = collections["customers"]
        totals = join(customers, collections["orders"], collections["order_items"])
        enriched = [enrich(customer, totals[customer.get("id")]) for customer in customers]

        logger.info(
            "Customer report built",
            extra={
                "customer_count": len(customers),
                "order_count": len(collections["orders"]),
                "order_item_count": len(collections["order_items"]),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return enriched

    def build_report(self) -> CustomerReport:
        """Enriched customers plus summary statistics."""
        return summarize(self.build_customer_report())
