"""
Typed objects exchanged with the Square API.
"""

from __future__ import annotations

from square_ox.objects.base import SquareObject, encode
from square_ox.objects.enums import (
    BookingStatus,
    CatalogObjectType,
    Currency,
    CustomerSortField,
    DayOfWeek,
    InventoryChangeType,
    InventoryState,
    LocationStatus,
    LocationType,
    OrderState,
    SortOrder,
)
from square_ox.objects.models import (
    Address,
    AppointmentSegment,
    Booking,
    BusinessHours,
    BusinessHoursPeriod,
    Card,
    CatalogObject,
    CheckoutOptions,
    Coordinates,
    Customer,
    DeviceCheckoutOptions,
    InventoryAdjustment,
    InventoryChange,
    InventoryCount,
    InventoryPhysicalCount,
    Location,
    Money,
    Order,
    OrderLineItem,
    Payment,
    PaymentLink,
    QuickPay,
    Site,
    TaxIds,
    TerminalCheckout,
    TerminalRefund,
)

__all__ = [
    "Address",
    "AppointmentSegment",
    "Booking",
    "BookingStatus",
    "BusinessHours",
    "BusinessHoursPeriod",
    "Card",
    "CatalogObject",
    "CatalogObjectType",
    "CheckoutOptions",
    "Coordinates",
    "Currency",
    "Customer",
    "CustomerSortField",
    "DayOfWeek",
    "DeviceCheckoutOptions",
    "InventoryAdjustment",
    "InventoryChange",
    "InventoryChangeType",
    "InventoryCount",
    "InventoryPhysicalCount",
    "InventoryState",
    "Location",
    "LocationStatus",
    "LocationType",
    "Money",
    "Order",
    "OrderLineItem",
    "OrderState",
    "Payment",
    "PaymentLink",
    "QuickPay",
    "Site",
    "SortOrder",
    "SquareObject",
    "TaxIds",
    "TerminalCheckout",
    "TerminalRefund",
    "encode",
]
