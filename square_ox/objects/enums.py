"""
Enumerations used by the Square API objects.
"""

from __future__ import annotations

from enum import Enum


class Currency(Enum):
    """ISO 4217 codes accepted for Money amounts (the commonly used subset)."""

    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CHF = "CHF"
    CNY = "CNY"
    CZK = "CZK"
    DKK = "DKK"
    EUR = "EUR"
    GBP = "GBP"
    HKD = "HKD"
    INR = "INR"
    JPY = "JPY"
    KRW = "KRW"
    MXN = "MXN"
    NOK = "NOK"
    NZD = "NZD"
    PLN = "PLN"
    SEK = "SEK"
    SGD = "SGD"
    USD = "USD"
    ZAR = "ZAR"


class LocationStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class LocationType(Enum):
    PHYSICAL = "PHYSICAL"
    MOBILE = "MOBILE"


class DayOfWeek(Enum):
    SUN = "SUN"
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"


class SortOrder(Enum):
    ASC = "ASC"
    DESC = "DESC"


class CustomerSortField(Enum):
    DEFAULT = "DEFAULT"
    CREATED_AT = "CREATED_AT"


class CatalogObjectType(Enum):
    ITEM = "ITEM"
    IMAGE = "IMAGE"
    CATEGORY = "CATEGORY"
    ITEM_VARIATION = "ITEM_VARIATION"
    TAX = "TAX"
    DISCOUNT = "DISCOUNT"
    MODIFIER_LIST = "MODIFIER_LIST"
    MODIFIER = "MODIFIER"
    PRICING_RULE = "PRICING_RULE"
    PRODUCT_SET = "PRODUCT_SET"
    TIME_PERIOD = "TIME_PERIOD"
    MEASUREMENT_UNIT = "MEASUREMENT_UNIT"
    SUBSCRIPTION_PLAN = "SUBSCRIPTION_PLAN"
    ITEM_OPTION = "ITEM_OPTION"
    ITEM_OPTION_VAL = "ITEM_OPTION_VAL"
    CUSTOM_ATTRIBUTE_DEFINITION = "CUSTOM_ATTRIBUTE_DEFINITION"
    QUICK_AMOUNTS_SETTINGS = "QUICK_AMOUNTS_SETTINGS"


class InventoryState(Enum):
    CUSTOM = "CUSTOM"
    IN_STOCK = "IN_STOCK"
    SOLD = "SOLD"
    RETURNED_BY_CUSTOMER = "RETURNED_BY_CUSTOMER"
    RESERVED_FOR_SALE = "RESERVED_FOR_SALE"
    SOLD_ONLINE = "SOLD_ONLINE"
    ORDERED_FROM_VENDOR = "ORDERED_FROM_VENDOR"
    RECEIVED_FROM_VENDOR = "RECEIVED_FROM_VENDOR"
    IN_TRANSIT_TO = "IN_TRANSIT_TO"
    NONE = "NONE"
    WASTE = "WASTE"
    UNLINKED_RETURN = "UNLINKED_RETURN"
    COMPOSED = "COMPOSED"
    DECOMPOSED = "DECOMPOSED"


class InventoryChangeType(Enum):
    PHYSICAL_COUNT = "PHYSICAL_COUNT"
    ADJUSTMENT = "ADJUSTMENT"
    TRANSFER = "TRANSFER"


class OrderState(Enum):
    OPEN = "OPEN"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"
    DRAFT = "DRAFT"


class BookingStatus(Enum):
    PENDING = "PENDING"
    CANCELLED_BY_CUSTOMER = "CANCELLED_BY_CUSTOMER"
    CANCELLED_BY_SELLER = "CANCELLED_BY_SELLER"
    DECLINED = "DECLINED"
    ACCEPTED = "ACCEPTED"
    NO_SHOW = "NO_SHOW"
