"""
Purpose: Delivery cost formulas.
What it does:
Turns a trip distance and a delivery tier into a PricingQuote.

Three formulas exist in the product today and are kept side by side, by name,
until product settles on one:

- TieredPricingPolicy: the first kilometre is covered by the tier's base
  price; every kilometre after that adds another base price (pro-rata).
  This is what the order-creation screen shows the customer.
- LinearPricingPolicy: flat fee plus a fixed rate per kilometre, independent
  of the tier.
- StartedKilometrePricingPolicy: like the tiered formula but every started
  kilometre after the first is charged in full.

Costs are rounded to 2 decimal places for display. Distances are passed
through unrounded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Type

from .models import STANDARD, DeliveryTypeTier, InvalidDistance, PricingQuote


class UnknownPricingPolicy(ValueError):
    """Raised when a pricing policy name is not registered."""
    pass


def _check_distance(distance_km: float) -> None:
    # `not >=` also catches NaN
    if not distance_km >= 0:
        raise InvalidDistance(f"distance_km must be >= 0, got {distance_km}")


@dataclass(frozen=True)
class TieredPricingPolicy:
    """
    cost = base                      if distance <= 1 km
    cost = base + base * (d - 1)     otherwise
    """
    name = "tiered"

    included_km: float = 1.0

    def quote(self, distance_km: float, tier: DeliveryTypeTier) -> PricingQuote:
        _check_distance(distance_km)

        if distance_km <= self.included_km:
            cost = tier.base_price
        else:
            cost = tier.base_price + tier.base_price * (distance_km - self.included_km)

        return PricingQuote(distance_km=distance_km, cost=round(cost, 2))


@dataclass(frozen=True)
class LinearPricingPolicy:
    """
    cost = base_fee + rate_per_km * d

    The tier is accepted so every policy shares one call shape, but it does
    not affect the price.
    """
    name = "linear"

    base_fee: float = 5.0
    rate_per_km: float = 2.0

    def validate(self) -> None:
        if self.base_fee < 0:
            raise ValueError("base_fee must be >= 0")
        if self.rate_per_km < 0:
            raise ValueError("rate_per_km must be >= 0")

    def quote(self, distance_km: float, tier: Optional[DeliveryTypeTier] = None) -> PricingQuote:
        _check_distance(distance_km)
        cost = self.base_fee + self.rate_per_km * distance_km
        return PricingQuote(distance_km=distance_km, cost=round(cost, 2))


@dataclass(frozen=True)
class StartedKilometrePricingPolicy:
    """
    cost = base + ceil(d - 1) * base     (base alone when d <= 1)
    """
    name = "started_km"

    def quote(self, distance_km: float, tier: DeliveryTypeTier) -> PricingQuote:
        _check_distance(distance_km)

        if distance_km <= 1:
            cost = tier.base_price
        else:
            cost = tier.base_price + math.ceil(distance_km - 1) * tier.base_price

        return PricingQuote(distance_km=distance_km, cost=round(cost, 2))


PRICING_POLICIES: Dict[str, Type] = {
    TieredPricingPolicy.name: TieredPricingPolicy,
    LinearPricingPolicy.name: LinearPricingPolicy,
    StartedKilometrePricingPolicy.name: StartedKilometrePricingPolicy,
}


def pricing_policy_for(name: str, **params):
    """
    Build a pricing policy by its registered name.
    Extra keyword arguments are passed to the policy (e.g. base_fee for linear).
    """
    try:
        policy_cls = PRICING_POLICIES[name]
    except KeyError:
        known = ", ".join(sorted(PRICING_POLICIES))
        raise UnknownPricingPolicy(f"Unknown pricing policy {name!r} (known: {known})") from None

    policy = policy_cls(**params)
    if hasattr(policy, "validate"):
        policy.validate()
    return policy


def default_pricing_policy() -> TieredPricingPolicy:
    """
    Convenience factory for the default policy.
    """
    return TieredPricingPolicy()


def quote(distance_km: float, tier: DeliveryTypeTier = STANDARD, policy=None) -> PricingQuote:
    """
    Price a trip. Uses the tiered formula unless a policy is passed in.
    """
    policy = policy or default_pricing_policy()
    return policy.quote(distance_km, tier)
