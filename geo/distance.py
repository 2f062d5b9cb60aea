"""
Purpose: Great-circle distance between two coordinates (single source of truth).
What it does:
Implements the Haversine formula on a sphere of mean Earth radius.
Every caller that needs a pickup/dropoff or driver/pickup distance goes
through `distance_km`, so pricing and matching can never drift apart.

Rule: Returns the unrounded value. Rounding is a display concern; use
`round_km` at the edge.
"""

from __future__ import annotations

import math

from .models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance in kilometres.

    Raises InvalidCoordinate if either point is out of range.
    """
    a.validate()
    b.validate()

    delta_latitude = math.radians(b.latitude - a.latitude)
    delta_longitude = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_latitude / 2) ** 2
        + math.cos(math.radians(a.latitude))
        * math.cos(math.radians(b.latitude))
        * math.sin(delta_longitude / 2) ** 2
    )
    # antipodal points can push h a hair above 1.0
    h = min(1.0, h)

    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def round_km(value: float, places: int = 2) -> float:
    return round(value, places)
