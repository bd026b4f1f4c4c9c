"""Order status and per-customer order statistics."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from models.customer import Tier


class OrderStatus(str, Enum):
    """Statuses the profile view groups on; the server may send others."""

    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"


class ProductQuantity(BaseModel):
    """Units of one product bought across a customer's orders."""

    name: str
    quantity: int


class OrderStats(BaseModel):
    """Order history summary for a single customer."""

    total_orders: int = 0
    completed_orders: int = 0
    pending_orders: int = 0
    total_spent: Decimal = Decimal("0")
    average_order_value: Decimal = Decimal("0")
    top_products: List[ProductQuantity] = Field(default_factory=list)
    last_order_date: Optional[datetime] = None


class CustomerProfile(BaseModel):
    """Everything the profile page needs about one customer."""

    customer_id: Any
    orders: List[dict]
    items_by_order: Dict[str, List[dict]]
    stats: OrderStats
    lifetime_spend: Decimal
    tier: Tier
