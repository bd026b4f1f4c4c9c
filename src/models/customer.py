"""Customer report models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class TierLabel(str, Enum):
    """Loyalty tiers, lowest to highest."""

    NEW = "New"
    ACTIVE = "Active"
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"


class Tier(BaseModel):
    """Tier label plus the badge metadata the customer table renders."""

    model_config = ConfigDict(frozen=True)

    label: TierLabel
    css_class: str
    icon: str


class EnrichedCustomer(BaseModel):
    """Customer record as served by the API, plus derived spend fields.

    Server fields beyond the contact details are carried through untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    total_spent: Decimal
    total_orders: int
    tier: Tier

    @field_validator("name", mode="before")
    @classmethod
    def blank_missing_name(cls, value: Any) -> Any:
        """Customers saved without a name still appear in the report."""
        if value is None:
            return ""
        return str(value)

    @field_validator("email", "phone", "address", mode="before")
    @classmethod
    def stringify_contact(cls, value: Any) -> Any:
        """Phones in particular sometimes arrive as bare integers."""
        if value is None:
            return value
        return str(value)


class CustomerReport(BaseModel):
    """Enriched customers with the headline figures shown above the table."""

    customers: List[EnrichedCustomer]
    total_customers: int
    total_revenue: Decimal
    active_customers: int
    gold_customers: int
    generated_at: datetime
