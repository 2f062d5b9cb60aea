"""
Orders domain package.

Public API:
- Domain models: DeliveryOrder, Address, PackageDetails, OrderStatus, CancelledBy
- Driver job board: find_available_orders, available_orders_radius_km, AvailableOrder, BoardConfigError
"""
from .models import Address, CancelledBy, DeliveryOrder, OrderStatus, PackageDetails
from .board import AvailableOrder, BoardConfigError, available_orders_radius_km, find_available_orders

__all__ = [
    "DeliveryOrder",
    "Address",
    "PackageDetails",
    "OrderStatus",
    "CancelledBy",
    "AvailableOrder",
    "find_available_orders",
    "available_orders_radius_km",
    "BoardConfigError",
]
