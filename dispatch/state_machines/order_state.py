"""
Purpose: Order status lifecycle.
What it does:
Holds the table of legal status moves and the one guarded write that applies
them, stamping the matching timestamp on the order:

pending -> accepted -> in_transit -> picked_up -> delivered
pending -> cancelled
pending -> pending (status message only)

Rule: delivered and cancelled are terminal. An illegal move raises and leaves the order untouched.
"""

from datetime import datetime
from typing import Dict, FrozenSet, Optional

from orders.models import CancelledBy, DeliveryOrder, OrderStatus


class IllegalStatusTransition(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, order_id: str, current: OrderStatus, target: OrderStatus):
        self.order_id = order_id
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition order {order_id} from {current.value} to {target.value}")


# pending -> pending is allowed only to attach a status message
# (e.g. "No drivers available") without changing anything else.
TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PENDING, OrderStatus.ACCEPTED, OrderStatus.CANCELLED}),
    OrderStatus.ACCEPTED: frozenset({OrderStatus.IN_TRANSIT}),
    OrderStatus.IN_TRANSIT: frozenset({OrderStatus.PICKED_UP}),
    OrderStatus.PICKED_UP: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

_TIMESTAMP_FIELDS = {
    OrderStatus.ACCEPTED: "accepted_at",
    OrderStatus.IN_TRANSIT: "in_transit_at",
    OrderStatus.PICKED_UP: "picked_up_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.CANCELLED: "cancelled_at",
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return OrderStatus(target) in TRANSITIONS[OrderStatus(current)]


def transition_order(
    order: DeliveryOrder,
    target: OrderStatus,
    *,
    driver_id: Optional[str] = None,
    message: Optional[str] = None,
    now: Optional[datetime] = None,
) -> DeliveryOrder:
    """
    The one guarded write for order status.
    Checks the transition table first; the order is untouched if the move is illegal.
    """
    target = OrderStatus(target)
    if not can_transition(order.status, target):
        raise IllegalStatusTransition(order.id, order.status, target)

    now = now or datetime.utcnow()

    order.status = target
    order.status_message = message

    timestamp_field = _TIMESTAMP_FIELDS.get(target)
    if timestamp_field:
        setattr(order, timestamp_field, now)

    if target == OrderStatus.ACCEPTED and driver_id:
        order.assigned_driver_id = driver_id

    return order


def accept_order(order: DeliveryOrder, driver_id: str, now: Optional[datetime] = None) -> DeliveryOrder:
    """
    Called when a driver hits "Accept". The accepting driver becomes the
    assigned driver, even if the matcher had suggested someone else.
    """
    return transition_order(order, OrderStatus.ACCEPTED, driver_id=driver_id, now=now)


def start_transit(order: DeliveryOrder, now: Optional[datetime] = None) -> DeliveryOrder:
    return transition_order(order, OrderStatus.IN_TRANSIT, now=now)


def confirm_pickup(order: DeliveryOrder, now: Optional[datetime] = None) -> DeliveryOrder:
    return transition_order(order, OrderStatus.PICKED_UP, now=now)


def confirm_delivery(order: DeliveryOrder, now: Optional[datetime] = None) -> DeliveryOrder:
    return transition_order(order, OrderStatus.DELIVERED, now=now)


def cancel_order(
    order: DeliveryOrder,
    cancelled_by: CancelledBy,
    cancelled_by_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> DeliveryOrder:
    """
    Only a pending order can be cancelled (customer withdraws it, or a driver rejects it).
    """
    cancelled_by = CancelledBy(cancelled_by)
    transition_order(order, OrderStatus.CANCELLED, now=now)
    order.cancelled_by = cancelled_by
    order.cancelled_by_id = cancelled_by_id
    return order


def mark_unassigned(order: DeliveryOrder, message: str) -> DeliveryOrder:
    """
    pending -> pending with an explanation, used when no driver could be matched.
    """
    return transition_order(order, OrderStatus.PENDING, message=message)
