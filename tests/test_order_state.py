from datetime import datetime

import pytest

from dispatch.state_machines.order_state import (
    TRANSITIONS,
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
from orders.models import Address, CancelledBy, DeliveryOrder, OrderStatus

NOW = datetime(2026, 10, 17, 12, 0, 0)


@pytest.fixture
def order():
    return DeliveryOrder.new(
        customer_id="c_1001",
        pickup=Address.new("Pickup", 40.7128, -74.0060),
        dropoff=Address.new("Dropoff", 40.7580, -73.9855),
        delivery_type="standard",
        price=52.0,
        distance_km=5.2,
    )


def test_full_happy_path(order):
    accept_order(order, "DRV-001", now=NOW)
    assert order.status == OrderStatus.ACCEPTED
    assert order.assigned_driver_id == "DRV-001"
    assert order.accepted_at == NOW

    start_transit(order, now=NOW)
    assert order.status == OrderStatus.IN_TRANSIT
    assert order.in_transit_at == NOW

    confirm_pickup(order, now=NOW)
    assert order.status == OrderStatus.PICKED_UP
    assert order.picked_up_at == NOW

    confirm_delivery(order, now=NOW)
    assert order.status == OrderStatus.DELIVERED
    assert order.delivered_at == NOW
    assert order.status.is_terminal


def test_accepting_driver_overrides_suggested_driver(order):
    order.assigned_driver_id = "DRV-SUGGESTED"
    accept_order(order, "DRV-OTHER")
    assert order.assigned_driver_id == "DRV-OTHER"


def test_delivered_cannot_go_back_to_pending(order):
    for step in (lambda o: accept_order(o, "d"), start_transit, confirm_pickup, confirm_delivery):
        step(order)

    with pytest.raises(IllegalStatusTransition) as excinfo:
        transition_order(order, OrderStatus.PENDING)

    assert excinfo.value.current == OrderStatus.DELIVERED
    assert excinfo.value.target == OrderStatus.PENDING
    assert order.status == OrderStatus.DELIVERED


def test_illegal_transition_leaves_order_untouched(order):
    with pytest.raises(IllegalStatusTransition):
        confirm_delivery(order, now=NOW)

    assert order.status == OrderStatus.PENDING
    assert order.delivered_at is None


def test_cancel_records_who_cancelled(order):
    cancel_order(order, CancelledBy.DRIVER, "DRV-007", now=NOW)

    assert order.status == OrderStatus.CANCELLED
    assert order.cancelled_at == NOW
    assert order.cancelled_by == CancelledBy.DRIVER
    assert order.cancelled_by_id == "DRV-007"

    with pytest.raises(IllegalStatusTransition):
        accept_order(order, "DRV-001")


def test_accepted_order_cannot_be_cancelled(order):
    accept_order(order, "DRV-001")
    with pytest.raises(IllegalStatusTransition):
        cancel_order(order, "customer")
    assert order.cancelled_by is None


def test_mark_unassigned_only_attaches_a_message(order):
    mark_unassigned(order, "No drivers available")

    assert order.status == OrderStatus.PENDING
    assert order.status_message == "No drivers available"
    assert order.accepted_at is None


def test_status_strings_are_accepted(order):
    transition_order(order, "accepted", driver_id="DRV-001")
    assert order.status == OrderStatus.ACCEPTED


@pytest.mark.parametrize("current", list(OrderStatus))
@pytest.mark.parametrize("target", list(OrderStatus))
def test_can_transition_matches_table(current, target):
    assert can_transition(current, target) == (target in TRANSITIONS[current])


def test_table_covers_every_status():
    assert set(TRANSITIONS) == set(OrderStatus)
    assert TRANSITIONS[OrderStatus.DELIVERED] == frozenset()
    assert TRANSITIONS[OrderStatus.CANCELLED] == frozenset()
