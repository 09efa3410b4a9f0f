"""
Data models for the objects the Square API sends and receives.

All fields are optional unless Square always requires them; a field left as
None is not sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from square_ox.objects.base import SquareObject
from square_ox.objects.enums import (
    BookingStatus,
    CatalogObjectType,
    Currency,
    DayOfWeek,
    InventoryChangeType,
    InventoryState,
    LocationStatus,
    LocationType,
    OrderState,
)


# ---- shared value types ----
@dataclass
class Money(SquareObject):
    """An amount in the smallest denomination of the currency (cents for USD)."""

    amount: int | None = None
    currency: Currency = Currency.USD


@dataclass
class Address(SquareObject):
    address_line_1: str | None = None
    address_line_2: str | None = None
    address_line_3: str | None = None
    locality: str | None = None
    sublocality: str | None = None
    administrative_district_level_1: str | None = None
    postal_code: str | None = None
    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class Coordinates(SquareObject):
    latitude: float | None = None
    longitude: float | None = None


@dataclass
class BusinessHoursPeriod(SquareObject):
    day_of_week: DayOfWeek | None = None
    start_local_time: str | None = None
    end_local_time: str | None = None


@dataclass
class BusinessHours(SquareObject):
    periods: list[BusinessHoursPeriod] | None = None


@dataclass
class TaxIds(SquareObject):
    eu_vat: str | None = None
    fr_siret: str | None = None
    fr_naf: str | None = None
    es_nif: str | None = None


# ---- locations ----
@dataclass
class Location(SquareObject):
    id: str | None = None
    name: str | None = None
    address: Address | None = None
    timezone: str | None = None
    capabilities: list[str] | None = None
    status: LocationStatus | None = None
    created_at: str | None = None
    merchant_id: str | None = None
    country: str | None = None
    language_code: str | None = None
    currency: Currency | None = None
    phone_number: str | None = None
    business_name: str | None = None
    type: LocationType | None = None
    website_url: str | None = None
    business_hours: BusinessHours | None = None
    business_email: str | None = None
    description: str | None = None
    twitter_username: str | None = None
    instagram_username: str | None = None
    facebook_url: str | None = None
    coordinates: Coordinates | None = None
    logo_url: str | None = None
    pos_background_url: str | None = None
    mcc: str | None = None
    full_format_logo_url: str | None = None
    tax_ids: TaxIds | None = None


# ---- customers and cards ----
@dataclass
class Customer(SquareObject):
    id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    nickname: str | None = None
    company_name: str | None = None
    email_address: str | None = None
    address: Address | None = None
    phone_number: str | None = None
    birthday: str | None = None
    reference_id: str | None = None
    note: str | None = None
    version: int | None = None


@dataclass
class Card(SquareObject):
    id: str | None = None
    card_brand: str | None = None
    last_4: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    cardholder_name: str | None = None
    billing_address: Address | None = None
    fingerprint: str | None = None
    customer_id: str | None = None
    merchant_id: str | None = None
    reference_id: str | None = None
    enabled: bool | None = None
    card_type: str | None = None
    prepaid_type: str | None = None
    bin: str | None = None
    version: int | None = None


# ---- payments ----
@dataclass
class Payment(SquareObject):
    id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    amount_money: Money | None = None
    tip_money: Money | None = None
    total_money: Money | None = None
    app_fee_money: Money | None = None
    approved_money: Money | None = None
    status: str | None = None
    delay_action: str | None = None
    source_type: str | None = None
    location_id: str | None = None
    order_id: str | None = None
    customer_id: str | None = None
    reference_id: str | None = None
    note: str | None = None
    receipt_number: str | None = None
    receipt_url: str | None = None
    version_token: str | None = None


# ---- orders ----
@dataclass
class OrderLineItem(SquareObject):
    quantity: str = "1"
    uid: str | None = None
    name: str | None = None
    catalog_object_id: str | None = None
    variation_name: str | None = None
    note: str | None = None
    item_type: str | None = None
    base_price_money: Money | None = None
    total_money: Money | None = None


@dataclass
class Order(SquareObject):
    id: str | None = None
    location_id: str | None = None
    reference_id: str | None = None
    customer_id: str | None = None
    ticket_name: str | None = None
    line_items: list[OrderLineItem] | None = None
    state: OrderState | None = None
    version: int | None = None
    metadata: dict[str, str] | None = None
    total_money: Money | None = None
    total_tax_money: Money | None = None
    total_discount_money: Money | None = None
    created_at: str | None = None
    updated_at: str | None = None


# ---- catalog ----
@dataclass
class CatalogObject(SquareObject):
    """
    A catalog entry. The type-specific payload (``item_data``, ``tax_data``...)
    is kept as a plain dict; new objects use a temporary id starting with ``#``.
    """

    type: CatalogObjectType | None = None
    id: str | None = None
    version: int | None = None
    is_deleted: bool | None = None
    updated_at: str | None = None
    present_at_all_locations: bool | None = None
    present_at_location_ids: list[str] | None = None
    absent_at_location_ids: list[str] | None = None
    item_data: dict[str, Any] | None = None
    item_variation_data: dict[str, Any] | None = None
    category_data: dict[str, Any] | None = None
    tax_data: dict[str, Any] | None = None
    discount_data: dict[str, Any] | None = None
    modifier_list_data: dict[str, Any] | None = None
    image_data: dict[str, Any] | None = None


# ---- bookings ----
@dataclass
class AppointmentSegment(SquareObject):
    team_member_id: str | None = None
    service_variation_id: str | None = None
    service_variation_version: int | None = None
    duration_minutes: int | None = None


@dataclass
class Booking(SquareObject):
    id: str | None = None
    version: int | None = None
    status: BookingStatus | None = None
    created_at: str | None = None
    updated_at: str | None = None
    start_at: str | None = None
    location_id: str | None = None
    location_type: str | None = None
    customer_id: str | None = None
    customer_note: str | None = None
    seller_note: str | None = None
    appointment_segments: list[AppointmentSegment] | None = None


# ---- online checkout ----
@dataclass
class QuickPay(SquareObject):
    name: str | None = None
    price_money: Money | None = None
    location_id: str | None = None


@dataclass
class CheckoutOptions(SquareObject):
    allow_tipping: bool | None = None
    redirect_url: str | None = None
    merchant_support_email: str | None = None
    ask_for_shipping_address: bool | None = None
    accepted_payment_methods: dict[str, bool] | None = None


@dataclass
class PaymentLink(SquareObject):
    id: str | None = None
    version: int | None = None
    description: str | None = None
    order_id: str | None = None
    checkout_options: CheckoutOptions | None = None
    url: str | None = None
    long_url: str | None = None
    payment_note: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# ---- inventory ----
@dataclass
class InventoryAdjustment(SquareObject):
    id: str | None = None
    reference_id: str | None = None
    from_state: InventoryState | None = None
    to_state: InventoryState | None = None
    location_id: str | None = None
    catalog_object_id: str | None = None
    catalog_object_type: str | None = None
    quantity: str | None = None
    total_price_money: Money | None = None
    occurred_at: str | None = None
    created_at: str | None = None


@dataclass
class InventoryPhysicalCount(SquareObject):
    id: str | None = None
    reference_id: str | None = None
    catalog_object_id: str | None = None
    catalog_object_type: str | None = None
    state: InventoryState | None = None
    location_id: str | None = None
    quantity: str | None = None
    occurred_at: str | None = None
    created_at: str | None = None


@dataclass
class InventoryChange(SquareObject):
    type: InventoryChangeType | None = None
    physical_count: InventoryPhysicalCount | None = None
    adjustment: InventoryAdjustment | None = None


@dataclass
class InventoryCount(SquareObject):
    catalog_object_id: str | None = None
    catalog_object_type: str | None = None
    state: InventoryState | None = None
    location_id: str | None = None
    quantity: str | None = None
    calculated_at: str | None = None


# ---- sites ----
@dataclass
class Site(SquareObject):
    id: str | None = None
    site_title: str | None = None
    domain: str | None = None
    is_published: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None


# ---- terminal ----
@dataclass
class DeviceCheckoutOptions(SquareObject):
    device_id: str | None = None
    skip_receipt_screen: bool | None = None
    collect_signature: bool | None = None
    tip_settings: dict[str, Any] | None = None


@dataclass
class TerminalCheckout(SquareObject):
    id: str | None = None
    amount_money: Money | None = None
    reference_id: str | None = None
    note: str | None = None
    order_id: str | None = None
    device_options: DeviceCheckoutOptions | None = None
    deadline_duration: str | None = None
    status: str | None = None
    cancel_reason: str | None = None
    payment_ids: list[str] | None = None
    location_id: str | None = None
    customer_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class TerminalRefund(SquareObject):
    id: str | None = None
    refund_id: str | None = None
    payment_id: str | None = None
    order_id: str | None = None
    amount_money: Money | None = None
    reason: str | None = None
    device_id: str | None = None
    deadline_duration: str | None = None
    status: str | None = None
    cancel_reason: str | None = None
    location_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
