"""
Purpose: Coordinate value type shared by pricing, matching and orders.
What it does:
Defines an immutable (latitude, longitude) pair and the range check every
distance computation relies on.

Rule: No distance math here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

LatLon = Tuple[float, float]


class InvalidCoordinate(ValueError):
    """Raised when a latitude/longitude pair falls outside its valid range."""
    pass


@dataclass(frozen=True)
class Coordinate:
    """
    A point on the globe in decimal degrees.

    The plain constructor does not validate so that records coming back from
    the backend can be held as-is; use `Coordinate.new` (or `validate`) before
    trusting a value.
    """
    latitude: float
    longitude: float

    @classmethod
    def new(cls, latitude: float, longitude: float) -> Coordinate:
        coordinate = cls(latitude=float(latitude), longitude=float(longitude))
        coordinate.validate()
        return coordinate

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Coordinate:
        """Builds from the backend shape `{"latitude": .., "longitude": ..}`."""
        return cls.new(data["latitude"], data["longitude"])

    def is_valid(self) -> bool:
        # NaN fails both comparisons, so it is rejected here too
        return (
            -90.0 <= self.latitude <= 90.0
            and -180.0 <= self.longitude <= 180.0
        )

    def validate(self) -> None:
        if not self.is_valid():
            raise InvalidCoordinate(
                f"Coordinate out of range: latitude={self.latitude}, longitude={self.longitude}"
            )

    def as_tuple(self) -> LatLon:
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}
