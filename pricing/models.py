"""
Purpose: Domain models for delivery pricing.
What it does:
- DeliveryTypeTier (id, base_price): static configuration, one per delivery speed class
- PricingQuote (distance_km, cost): derived fresh on every request, never stored

Defines the two stock tiers (standard, urgent) as data rather than code.

Rule: No pricing formulas here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional


class InvalidDistance(ValueError):
    """Raised when a negative (or NaN) distance is priced."""
    pass


class UnknownDeliveryTier(KeyError):
    """Raised when a delivery type id has no configured tier."""
    pass


@dataclass(frozen=True)
class DeliveryTypeTier:
    id: str
    base_price: float
    name: str = ""
    description: str = ""

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Delivery tier id must not be empty")
        if not self.base_price > 0:
            raise ValueError(f"Delivery tier {self.id} base_price must be > 0, got {self.base_price}")


@dataclass(frozen=True)
class PricingQuote:
    distance_km: float
    cost: float


STANDARD = DeliveryTypeTier("standard", 10.0, "Standard", "Regular delivery")
URGENT = DeliveryTypeTier("urgent", 15.0, "Urgent", "Prioritized delivery")

DEFAULT_TIERS: Dict[str, DeliveryTypeTier] = {
    STANDARD.id: STANDARD,
    URGENT.id: URGENT,
}


def tier_for(tier_id: str, tiers: Optional[Mapping[str, DeliveryTypeTier]] = None) -> DeliveryTypeTier:
    """
    Resolve a delivery type id to its tier.
    Unknown ids are an error; there is no silent fallback to the standard price.
    """
    tiers = DEFAULT_TIERS if tiers is None else tiers
    try:
        return tiers[tier_id]
    except KeyError:
        raise UnknownDeliveryTier(f"Unknown delivery type: {tier_id!r}") from None
