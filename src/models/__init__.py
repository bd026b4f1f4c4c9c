"""Pydantic models for report and profile payloads."""

from models.customer import CustomerReport, EnrichedCustomer, Tier, TierLabel  # noqa: F401
from models.order import (  # noqa: F401
    CustomerProfile,
    OrderStats,
    OrderStatus,
    ProductQuantity,
)
from models.response import ApiResponse  # noqa: F401
