import pytest

from geo import Coordinate
from orders.board import BoardConfigError, find_available_orders
from orders.models import Address, DeliveryOrder, OrderStatus

KM_IN_DEGREES = 1 / 111.195


@pytest.fixture
def driver_location():
    return Coordinate.new(40.7128, -74.0060)


def order_at(order_id, location, km_north, **kwargs):
    pickup = Address.new(f"Pickup {order_id}", location.latitude + km_north * KM_IN_DEGREES, location.longitude)
    dropoff = Address.new("Dropoff", location.latitude, location.longitude + 0.01)
    return DeliveryOrder(
        id=order_id,
        customer_id="c_1",
        pickup=pickup,
        dropoff=dropoff,
        delivery_type="standard",
        price=10.0,
        distance_km=1.0,
        **kwargs,
    )


def test_only_pending_orders_within_radius(driver_location):
    orders = [
        order_at("near", driver_location, 2),
        order_at("far", driver_location, 25),
        order_at("taken", driver_location, 1, status=OrderStatus.ACCEPTED),
        order_at("edge", driver_location, 9.5),
    ]

    result = find_available_orders("DRV-1", driver_location, orders)

    assert [item.order.id for item in result] == ["near", "edge"]
    assert result[0].distance_to_pickup_km == pytest.approx(2, abs=0.01)


def test_preferred_orders_first_and_ignore_radius(driver_location):
    orders = [
        order_at("near", driver_location, 1),
        order_at("mine-far", driver_location, 50, preferred_driver_id="DRV-1"),
        order_at("mine-near", driver_location, 3, preferred_driver_id="DRV-1"),
        order_at("someone-elses", driver_location, 60, preferred_driver_id="DRV-2"),
    ]

    result = find_available_orders("DRV-1", driver_location, orders)

    assert [item.order.id for item in result] == ["mine-near", "mine-far", "near"]
    assert [item.is_preferred for item in result] == [True, True, False]


def test_orders_matched_to_another_driver_are_hidden(driver_location):
    orders = [
        order_at("for-other", driver_location, 1, assigned_driver_id="DRV-2"),
        order_at("for-me", driver_location, 1.5, assigned_driver_id="DRV-1"),
    ]

    result = find_available_orders("DRV-1", driver_location, orders)

    assert [item.order.id for item in result] == ["for-me"]


def test_custom_radius(driver_location):
    orders = [order_at("a", driver_location, 3), order_at("b", driver_location, 6)]

    assert [i.order.id for i in find_available_orders("DRV-1", driver_location, orders, radius_km=4)] == ["a"]


def test_radius_from_environment(driver_location, monkeypatch):
    monkeypatch.setenv("DELIVEREASE_AVAILABLE_ORDERS_RADIUS_KM", "30")
    orders = [order_at("far", driver_location, 25)]

    assert len(find_available_orders("DRV-1", driver_location, orders)) == 1


@pytest.mark.parametrize("value", ["ten", "0", "-5"])
def test_malformed_radius_setting_raises(driver_location, monkeypatch, value):
    monkeypatch.setenv("DELIVEREASE_AVAILABLE_ORDERS_RADIUS_KM", value)

    with pytest.raises(BoardConfigError):
        find_available_orders("DRV-1", driver_location, [order_at("a", driver_location, 1)])


def test_explicit_radius_ignores_environment(driver_location, monkeypatch):
    monkeypatch.setenv("DELIVEREASE_AVAILABLE_ORDERS_RADIUS_KM", "ten")
    orders = [order_at("a", driver_location, 3)]

    assert len(find_available_orders("DRV-1", driver_location, orders, radius_km=4)) == 1
