"""
Endpoints of the Square API and the HTTP verbs they accept.

The endpoint families render through ``__str__`` so the URL layout can change
in one place without touching the resource modules.
"""

from __future__ import annotations

from enum import Enum

SQUARE_PRODUCTION_BASE = "https://connect.squareup.com/v2/"
SQUARE_SANDBOX_BASE = "https://connect.squareupsandbox.com/v2/"


class Verb(Enum):
    """HTTP verbs used by the Square API endpoints."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ApiFamily(Enum):
    """Endpoint families covered by the client, mapped to their URL prefix."""

    PAYMENTS = "payments"
    BOOKINGS = "bookings"
    LOCATIONS = "locations"
    CATALOG = "catalog"
    CUSTOMERS = "customers"
    CARDS = "cards"
    CHECKOUT = "online-checkout"
    INVENTORY = "inventory"
    SITES = "sites"
    TERMINALS = "terminals"
    ORDERS = "orders"


class SquareAPI:
    """
    A concrete endpoint: a family plus a path suffix.

    The suffix is either empty or starts with ``/``:

        >>> str(SquareAPI.locations("/L123"))
        'locations/L123'
    """

    __slots__ = ("family", "path")

    def __init__(self, family: ApiFamily, path: str = "") -> None:
        if path and not path.startswith("/"):
            path = "/" + path
        self.family = family
        self.path = path

    def __str__(self) -> str:
        return f"{self.family.value}{self.path}"

    def __repr__(self) -> str:
        return f"SquareAPI({self.family.name}, {self.path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareAPI):
            return NotImplemented
        return self.family == other.family and self.path == other.path

    def __hash__(self) -> int:
        return hash((self.family, self.path))

    @classmethod
    def payments(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.PAYMENTS, path)

    @classmethod
    def bookings(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.BOOKINGS, path)

    @classmethod
    def locations(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.LOCATIONS, path)

    @classmethod
    def catalog(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.CATALOG, path)

    @classmethod
    def customers(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.CUSTOMERS, path)

    @classmethod
    def cards(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.CARDS, path)

    @classmethod
    def checkout(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.CHECKOUT, path)

    @classmethod
    def inventory(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.INVENTORY, path)

    @classmethod
    def sites(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.SITES, path)

    @classmethod
    def terminals(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.TERMINALS, path)

    @classmethod
    def orders(cls, path: str = "") -> SquareAPI:
        return cls(ApiFamily.ORDERS, path)


def base_url(production: bool) -> str:
    """Return the v2 base URL for production or the sandbox."""
    return SQUARE_PRODUCTION_BASE if production else SQUARE_SANDBOX_BASE


def endpoint_url(production: bool, endpoint: SquareAPI) -> str:
    """Return the full URL of an endpoint."""
    return f"{base_url(production)}{endpoint}"
