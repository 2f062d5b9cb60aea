#Marks geo as a package.
#Re-exports the coordinate type and distance helpers so callers never
#need to know the internal file names.
#No business logic.

from .models import Coordinate, InvalidCoordinate
from .distance import EARTH_RADIUS_KM, distance_km, round_km

__all__ = [
    "Coordinate",
    "InvalidCoordinate",
    "EARTH_RADIUS_KM",
    "distance_km",
    "round_km",
]
