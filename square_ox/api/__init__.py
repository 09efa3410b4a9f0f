"""
Resource classes of the Square API, reached through SquareClient properties
(client.locations, client.payments, ...).
"""

from __future__ import annotations

from square_ox.api.bookings import BookingBuilder, BookingRequest, Bookings
from square_ox.api.cards import CardBuilder, CardRequest, Cards
from square_ox.api.catalog import Catalog, CatalogObjectBuilder
from square_ox.api.checkout import Checkout, PaymentLinkBuilder, PaymentLinkRequest
from square_ox.api.customers import CustomerBuilder, CustomerRequest, Customers
from square_ox.api.inventory import Inventory, InventoryChangeBuilder
from square_ox.api.locations import LocationBuilder, LocationCreationWrapper, Locations
from square_ox.api.orders import OrderBuilder, OrderRequest, Orders
from square_ox.api.payments import PaymentBuilder, PaymentRequest, Payments
from square_ox.api.sites import Sites
from square_ox.api.terminal import (
    Terminal,
    TerminalCheckoutBuilder,
    TerminalCheckoutRequest,
    TerminalRefundBuilder,
    TerminalRefundRequest,
)

__all__ = [
    "BookingBuilder",
    "BookingRequest",
    "Bookings",
    "CardBuilder",
    "CardRequest",
    "Cards",
    "Catalog",
    "CatalogObjectBuilder",
    "Checkout",
    "CustomerBuilder",
    "CustomerRequest",
    "Customers",
    "Inventory",
    "InventoryChangeBuilder",
    "LocationBuilder",
    "LocationCreationWrapper",
    "Locations",
    "OrderBuilder",
    "OrderRequest",
    "Orders",
    "PaymentBuilder",
    "PaymentLinkBuilder",
    "PaymentLinkRequest",
    "PaymentRequest",
    "Payments",
    "Sites",
    "Terminal",
    "TerminalCheckoutBuilder",
    "TerminalCheckoutRequest",
    "TerminalRefundBuilder",
    "TerminalRefundRequest",
]
