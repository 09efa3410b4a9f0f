"""
square_ox: a blocking Python client for the Square API.

Example:
    from square_ox import SquareClient
    from square_ox.api import PaymentBuilder
    from square_ox.objects import Currency

    client = SquareClient.from_env()
    body = PaymentBuilder().source_id("cnon:card-nonce-ok").amount(100, Currency.USD).build()
    payment = client.payments.create(body)["payment"]
"""

from __future__ import annotations

__version__ = "0.2.0"

from square_ox.client import ClientMode, SquareClient
from square_ox.endpoint import SquareAPI, Verb
from square_ox.errors import (
    CircuitOpenError,
    SquareAPIError,
    SquareDecodeError,
    SquareError,
    SquareTransportError,
    ValidationError,
)
from square_ox.response import ResponseError, SquareResponse

__all__ = [
    "CircuitOpenError",
    "ClientMode",
    "ResponseError",
    "SquareAPI",
    "SquareAPIError",
    "SquareClient",
    "SquareDecodeError",
    "SquareError",
    "SquareResponse",
    "SquareTransportError",
    "ValidationError",
    "Verb",
    "__version__",
]
