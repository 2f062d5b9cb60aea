"""
Pricing package.

Public API:
- Domain models: DeliveryTypeTier, PricingQuote, STANDARD, URGENT, DEFAULT_TIERS
- Policies: TieredPricingPolicy, LinearPricingPolicy, StartedKilometrePricingPolicy
- Entry points: quote, tier_for, pricing_policy_for, load_pricing_config
"""

from .models import (
    DEFAULT_TIERS,
    STANDARD,
    URGENT,
    DeliveryTypeTier,
    InvalidDistance,
    PricingQuote,
    UnknownDeliveryTier,
    tier_for,
)
from .policy import (
    LinearPricingPolicy,
    StartedKilometrePricingPolicy,
    TieredPricingPolicy,
    UnknownPricingPolicy,
    default_pricing_policy,
    pricing_policy_for,
    quote,
)
from .config import PricingConfig, PricingConfigError, load_pricing_config

__all__ = [
    "DEFAULT_TIERS",
    "STANDARD",
    "URGENT",
    "DeliveryTypeTier",
    "InvalidDistance",
    "PricingQuote",
    "UnknownDeliveryTier",
    "tier_for",
    "LinearPricingPolicy",
    "StartedKilometrePricingPolicy",
    "TieredPricingPolicy",
    "UnknownPricingPolicy",
    "default_pricing_policy",
    "pricing_policy_for",
    "quote",
    "PricingConfig",
    "PricingConfigError",
    "load_pricing_config",
]
