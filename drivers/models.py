"""
Purpose: Core data models for the drivers domain.
What it does:
Defines a driver's dispatchable state at a point in time, independent of
the backend document store it is read from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from geo import Coordinate


@dataclass(frozen=True)
class DriverRecord:
    """
    A read-only snapshot of one driver.
    `is_online` and `current_location` are owned by the driver's own app;
    the matching engine never writes them.
    """
    id: str
    is_online: bool
    current_location: Optional[Coordinate] = None
    vehicle_type: Optional[str] = None

    # Display-only fields carried along for the caller.
    name: str = ""
    rating: Optional[float] = None

    @property
    def is_dispatchable(self) -> bool:
        """Online with a known location. Anything else is never a candidate."""
        return self.is_online and self.current_location is not None

    @classmethod
    def new(
        cls,
        driver_id: str,
        lat: Optional[float] = None,
        lon: Optional[float] = None,
        is_online: bool = True,
        vehicle_type: Optional[str] = None,
        name: str = "",
        rating: Optional[float] = None,
    ) -> DriverRecord:
        location = None
        if lat is not None and lon is not None:
            location = Coordinate.new(lat, lon)

        return cls(
            id=driver_id,
            is_online=is_online,
            current_location=location,
            vehicle_type=vehicle_type,
            name=name,
            rating=rating,
        )

    @classmethod
    def from_document(cls, driver_id: str, data: Dict[str, Any]) -> DriverRecord:
        """
        Builds a record from the backend user document shape:
        {"isOnline": bool, "currentLocation": {"latitude", "longitude"}, "vehicleType", "name", "rating"}
        """
        location_data = data.get("currentLocation")
        location = Coordinate.from_dict(location_data) if location_data else None

        return cls(
            id=driver_id,
            is_online=bool(data.get("isOnline", False)),
            current_location=location,
            vehicle_type=data.get("vehicleType"),
            name=data.get("name", ""),
            rating=data.get("rating"),
        )
