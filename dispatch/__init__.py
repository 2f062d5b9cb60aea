#Expose the high-level pipeline pieces:
#Order status guard (state machine)
#Dispatcher orchestrator (the "one call" entry point for create + assign)

from .state_machines.order_state import (
    IllegalStatusTransition,
    accept_order,
    can_transition,
    cancel_order,
    confirm_delivery,
    confirm_pickup,
    mark_unassigned,
    start_transit,
    transition_order,
)
from .dispatcher import AssignmentOutcome, Dispatcher

__all__ = [
    "IllegalStatusTransition",
    "accept_order",
    "can_transition",
    "cancel_order",
    "confirm_delivery",
    "confirm_pickup",
    "mark_unassigned",
    "start_transit",
    "transition_order",
    "AssignmentOutcome",
    "Dispatcher",
]
