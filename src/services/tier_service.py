"""Loyalty tier classification from lifetime spend (Naira)."""

from decimal import Decimal
from typing import Any, Tuple

from models.customer import Tier, TierLabel
from utils.validators import coerce_decimal

GOLD = Tier(label=TierLabel.GOLD, css_class="gold", icon="👑")
SILVER = Tier(label=TierLabel.SILVER, css_class="silver", icon="🥈")
BRONZE = Tier(label=TierLabel.BRONZE, css_class="bronze", icon="🥉")
ACTIVE = Tier(label=TierLabel.ACTIVE, css_class="active", icon="🌟")
NEW = Tier(label=TierLabel.NEW, css_class="new", icon="👤")

# Inclusive lower bounds, highest first.
TIER_THRESHOLDS: Tuple[Tuple[Decimal, Tier], ...] = (
    (Decimal("10000000"), GOLD),
    (Decimal("5000000"), SILVER),
    (Decimal("1000000"), BRONZE),
)


def classify(total_spent: Any) -> Tier:
    """Map lifetime spend to a tier; any positive spend is at least Active."""
    amount = coerce_decimal(total_spent, "total_spent")
    for threshold, tier in TIER_THRESHOLDS:
        if amount >= threshold:
            return tier
    if amount > 0:
        return ACTIVE
    return NEW
