"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Prices a new delivery request, creates the pending order, then picks a driver
for it from a directory snapshot and tells that driver about it.

Persistence and notification delivery belong to the surrounding app; this
module only decides and hands results back.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from drivers.directory import DriverDirectory
from drivers.policy import MatchingPolicy, default_matching_policy
from drivers.selection import MatchResult, select_driver
from geo import distance_km, round_km
from orders.models import Address, DeliveryOrder, OrderStatus, PackageDetails
from pricing.config import PricingConfig, load_pricing_config
from pricing.models import PricingQuote, tier_for
from .state_machines.order_state import IllegalStatusTransition, accept_order, mark_unassigned

logger = logging.getLogger(__name__)

NO_DRIVERS_AVAILABLE = "No drivers available"
NO_NEARBY_DRIVERS = "No nearby drivers found"


@dataclass(frozen=True)
class AssignmentOutcome:
    order: DeliveryOrder
    match: Optional[MatchResult]

    @property
    def matched(self) -> bool:
        return self.match is not None


class Dispatcher:
    """
    Coordinates pricing and driver assignment for delivery orders.

    push_service is any object with `notify_new_order(driver, order)`; it is
    called once per successful assignment. Errors it raises are not caught here.
    """
    def __init__(self, push_service=None, pricing_config: PricingConfig = None, matching_policy: MatchingPolicy = None):
        self.push_service = push_service
        self.pricing_config = pricing_config or load_pricing_config()
        self.matching_policy = matching_policy or default_matching_policy()
        self.pricing_policy = self.pricing_config.build_policy()

    def quote_trip(self, pickup: Address, dropoff: Address, delivery_type: str) -> PricingQuote:
        """
        Price a pickup -> dropoff trip for a delivery type.
        Raises InvalidCoordinate / UnknownDeliveryTier on bad input.
        """
        tier = tier_for(delivery_type, self.pricing_config.tiers)
        trip_km = distance_km(pickup.location, dropoff.location)
        return self.pricing_policy.quote(trip_km, tier)

    def create_order(
        self,
        customer_id: str,
        pickup: Address,
        dropoff: Address,
        delivery_type: str = "standard",
        *,
        preferred_driver_id: Optional[str] = None,
        vehicle_type: Optional[str] = None,
        package: Optional[PackageDetails] = None,
        notes: Optional[str] = None,
    ) -> DeliveryOrder:
        trip_quote = self.quote_trip(pickup, dropoff, delivery_type)

        order = DeliveryOrder.new(
            customer_id=customer_id,
            pickup=pickup,
            dropoff=dropoff,
            delivery_type=delivery_type,
            price=trip_quote.cost,
            distance_km=round_km(trip_quote.distance_km),
            preferred_driver_id=preferred_driver_id,
            vehicle_type=vehicle_type,
            package=package,
            notes=notes,
        )
        logger.info(
            f"Created order {order.id} ({delivery_type}, {order.distance_km} km, {order.price:.2f})"
        )
        return order

    def assign_driver(self, order: DeliveryOrder, directory: DriverDirectory) -> AssignmentOutcome:
        """
        Pick a driver for a pending order and notify them.

        On a match the driver id is written to `assigned_driver_id`; the order
        stays pending until that driver accepts. Without a match the order stays
        pending with a status message explaining why.
        """
        if order.status != OrderStatus.PENDING:
            raise IllegalStatusTransition(order.id, order.status, OrderStatus.PENDING)

        match = select_driver(
            order.pickup.location,
            directory,
            order.preferred_driver_id,
            vehicle_type=order.vehicle_type,
            policy=self.matching_policy,
        )

        if match is None:
            online = [driver for driver in directory.online()
                      if order.vehicle_type is None or driver.vehicle_type == order.vehicle_type]
            message = NO_NEARBY_DRIVERS if online else NO_DRIVERS_AVAILABLE
            # drop any earlier suggestion so the order shows on every job board again
            order.assigned_driver_id = None
            mark_unassigned(order, message)
            logger.info(f"Order {order.id} left unassigned: {message}")
            return AssignmentOutcome(order=order, match=None)

        order.assigned_driver_id = match.driver_id
        order.status_message = None
        logger.info(f"Order {order.id} assigned to driver {match.driver_id} ({match.distance_km:.2f} km to pickup)")

        if self.push_service:
            self.push_service.notify_new_order(match.driver, order)

        return AssignmentOutcome(order=order, match=match)

    def resolve_driver_acceptance(self, order: DeliveryOrder, driver_id: str) -> DeliveryOrder:
        """
        Called when a driver hits "Accept" on a pending order.
        Raises IllegalStatusTransition if the order is no longer pending.
        """
        return accept_order(order, driver_id)
