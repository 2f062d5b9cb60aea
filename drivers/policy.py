"""
Purpose: Central configuration for driver matching.
What it does:

Stores the tunable knobs of the nearest-driver search:

TIE_BREAK_BY_DRIVER_ID = False
MAX_PICKUP_DISTANCE_KM = None (no cap)
AVAILABLE_ORDERS_RADIUS_KM = 10

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchingPolicy:
    """
    Central configuration for driver matching thresholds.
    """

    # --- Tie-break ---
    # By default two drivers at exactly the same distance are resolved by
    # snapshot order (first one seen wins). Turn this on when the directory
    # is not returned in a stable order and reproducible matches are needed.
    tie_break_by_driver_id: bool = False

    # --- Search radius ---
    # Optional hard cap on how far away the nearest driver may be.
    # The preferred driver is exempt.
    max_pickup_distance_km: Optional[float] = None

    # --- Driver job board ---
    # Drivers see pending orders whose pickup is within this radius.
    available_orders_radius_km: float = 10.0

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.max_pickup_distance_km is not None and self.max_pickup_distance_km <= 0:
            raise ValueError("max_pickup_distance_km must be > 0 when set")

        if self.available_orders_radius_km <= 0:
            raise ValueError("available_orders_radius_km must be > 0")


def default_matching_policy() -> MatchingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = MatchingPolicy()
    p.validate()
    return p
