"""
Purpose: The driver-side job board.
What it does:
Given a driver's position, lists the pending orders that driver may pick up:
- any pending, unassigned order whose pickup is within the radius
- any pending order that names this driver as preferred, wherever it is

Preferred orders come first, then everything else by distance to pickup.

The default radius (10 km) can be overridden with
DELIVEREASE_AVAILABLE_ORDERS_RADIUS_KM in the environment or a .env file.

Rule: Read-only. Accepting an order is a state transition, not a board concern.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

from dotenv import load_dotenv

from drivers.policy import MatchingPolicy
from geo import Coordinate, distance_km
from .models import DeliveryOrder, OrderStatus

load_dotenv()

RADIUS_ENV_VAR = "DELIVEREASE_AVAILABLE_ORDERS_RADIUS_KM"


class BoardConfigError(ValueError):
    """Raised when the job board radius setting is malformed."""
    pass


@dataclass(frozen=True)
class AvailableOrder:
    order: DeliveryOrder
    distance_to_pickup_km: float
    is_preferred: bool


def available_orders_radius_km() -> float:
    raw = os.getenv(RADIUS_ENV_VAR)
    if raw is None or raw.strip() == "":
        return MatchingPolicy.available_orders_radius_km
    try:
        radius = float(raw)
    except ValueError:
        raise BoardConfigError(f"{RADIUS_ENV_VAR} must be a number, got {raw!r}") from None
    if not radius > 0:
        raise BoardConfigError(f"{RADIUS_ENV_VAR} must be > 0, got {raw!r}")
    return radius


def find_available_orders(
    driver_id: str,
    driver_location: Coordinate,
    orders: Iterable[DeliveryOrder],
    radius_km: Optional[float] = None,
) -> List[AvailableOrder]:
    """
    radius_km defaults to available_orders_radius_km().
    """
    if radius_km is None:
        radius_km = available_orders_radius_km()

    driver_location.validate()

    available: List[AvailableOrder] = []
    for order in orders:
        if order.status != OrderStatus.PENDING:
            continue

        is_preferred = order.preferred_driver_id == driver_id

        # matched to someone else and still waiting on them
        if order.assigned_driver_id and order.assigned_driver_id != driver_id and not is_preferred:
            continue

        distance_to_pickup = distance_km(driver_location, order.pickup.location)

        if is_preferred or distance_to_pickup <= radius_km:
            available.append(AvailableOrder(order, distance_to_pickup, is_preferred))

    available.sort(key=lambda item: (not item.is_preferred, item.distance_to_pickup_km))
    return available
