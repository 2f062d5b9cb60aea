"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines core data structures:
- DeliveryOrder (id, customer, pickup/dropoff addresses, tier, price, distance, status, timestamps)
- Address (display text + coordinate)
- PackageDetails (size, weight, description)

Defines enums/constants:
- OrderStatus = pending | accepted | in_transit | picked_up | delivered | cancelled
- CancelledBy = customer | driver | admin

Rule: No matching, pricing or transition logic. Models only.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from geo import Coordinate


class OrderStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    PICKED_UP = "picked_up"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @property
    def is_active(self) -> bool:
        """The driver is working on the order."""
        return self in (OrderStatus.ACCEPTED, OrderStatus.IN_TRANSIT, OrderStatus.PICKED_UP)


class CancelledBy(str, Enum):
    CUSTOMER = "customer"
    DRIVER = "driver"
    ADMIN = "admin"


@dataclass(frozen=True)
class Address:
    address: str
    location: Coordinate

    @classmethod
    def new(cls, address: str, latitude: float, longitude: float) -> Address:
        return cls(address=address, location=Coordinate.new(latitude, longitude))

    def to_dict(self) -> Dict[str, Any]:
        return {"address": self.address, **self.location.to_dict()}


@dataclass(frozen=True)
class PackageDetails:
    size: str = ""
    weight: str = ""
    description: str = ""
    image_url: Optional[str] = None


@dataclass
class DeliveryOrder:
    """
    A delivery request. Status is only ever changed through
    dispatch.state_machines.order_state so illegal jumps are rejected.
    """

    id: str
    customer_id: str
    pickup: Address
    dropoff: Address
    delivery_type: str
    price: float
    distance_km: float

    status: OrderStatus = OrderStatus.PENDING
    status_message: Optional[str] = None

    preferred_driver_id: Optional[str] = None
    assigned_driver_id: Optional[str] = None
    vehicle_type: Optional[str] = None

    package: Optional[PackageDetails] = None
    notes: Optional[str] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    accepted_at: Optional[datetime] = None
    in_transit_at: Optional[datetime] = None
    picked_up_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    cancelled_by: Optional[CancelledBy] = None
    cancelled_by_id: Optional[str] = None

    @staticmethod # Factory method with a generated id
    def new(
        customer_id: str,
        pickup: Address,
        dropoff: Address,
        delivery_type: str,
        price: float,
        distance_km: float,
        **extra: Any,
    ) -> DeliveryOrder:
        return DeliveryOrder(
            id=str(uuid.uuid4()),
            customer_id=customer_id,
            pickup=pickup,
            dropoff=dropoff,
            delivery_type=delivery_type,
            price=price,
            distance_km=distance_km,
            **extra,
        )
