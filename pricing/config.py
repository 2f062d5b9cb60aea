"""
Purpose: Environment-driven pricing configuration.
What it does:
Reads pricing knobs from the process environment (and a local .env file, if
present) and turns them into a PricingConfig the dispatcher can use.

Example .env:
DELIVEREASE_PRICING_POLICY=tiered
DELIVEREASE_STANDARD_BASE_PRICE=10
DELIVEREASE_URGENT_BASE_PRICE=15
DELIVEREASE_LINEAR_BASE_FEE=5
DELIVEREASE_LINEAR_RATE_PER_KM=2
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from dotenv import load_dotenv

from .models import DEFAULT_TIERS, DeliveryTypeTier
from .policy import LinearPricingPolicy, UnknownPricingPolicy, pricing_policy_for

load_dotenv()

ENV_PREFIX = "DELIVEREASE_"


class PricingConfigError(ValueError):
    """Raised for malformed pricing configuration values."""
    pass


@dataclass(frozen=True)
class PricingConfig:
    policy_name: str = "tiered"
    tiers: Dict[str, DeliveryTypeTier] = field(default_factory=lambda: dict(DEFAULT_TIERS))
    linear_base_fee: float = LinearPricingPolicy.base_fee
    linear_rate_per_km: float = LinearPricingPolicy.rate_per_km

    def build_policy(self):
        if self.policy_name == LinearPricingPolicy.name:
            return pricing_policy_for(
                self.policy_name,
                base_fee=self.linear_base_fee,
                rate_per_km=self.linear_rate_per_km,
            )
        return pricing_policy_for(self.policy_name)

    def validate(self) -> None:
        if not self.tiers:
            raise PricingConfigError("At least one delivery tier must be configured")
        for tier in self.tiers.values():
            try:
                tier.validate()
            except ValueError as exc:
                raise PricingConfigError(str(exc)) from exc
        try:
            # linear knobs are checked even when another policy is active
            LinearPricingPolicy(
                base_fee=self.linear_base_fee,
                rate_per_km=self.linear_rate_per_km,
            ).validate()
            self.build_policy()
        except (UnknownPricingPolicy, ValueError) as exc:
            raise PricingConfigError(str(exc)) from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise PricingConfigError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from None


def load_pricing_config(env_file: Optional[str] = None) -> PricingConfig:
    """
    Build a PricingConfig from the environment.
    Values already set in the environment win over the .env file.
    """
    if env_file:
        load_dotenv(env_file)

    tiers = {}
    for tier_id, tier in DEFAULT_TIERS.items():
        base_price = _env_float(f"{tier_id.upper()}_BASE_PRICE", tier.base_price)
        tiers[tier_id] = replace(tier, base_price=base_price)

    config = PricingConfig(
        policy_name=os.getenv(ENV_PREFIX + "PRICING_POLICY", "tiered").strip().lower(),
        tiers=tiers,
        linear_base_fee=_env_float("LINEAR_BASE_FEE", LinearPricingPolicy.base_fee),
        linear_rate_per_km=_env_float("LINEAR_RATE_PER_KM", LinearPricingPolicy.rate_per_km),
    )
    config.validate()
    return config
