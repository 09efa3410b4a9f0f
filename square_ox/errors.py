"""
Exception types raised by the Square API client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from square_ox.response import ResponseError


class SquareError(Exception):
    """Base class for every error raised by square_ox."""


class SquareAPIError(SquareError):
    """The Square API answered with a 4xx/5xx status."""

    def __init__(
        self,
        status_code: int,
        errors: list[ResponseError] | None = None,
        message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.errors = list(errors or [])
        if message is None:
            if self.errors:
                first = self.errors[0]
                message = f"{first.code}: {first.detail or first.category}"
            else:
                message = "Square API request failed"
        super().__init__(f"HTTP {status_code}: {message}")

    @property
    def codes(self) -> list[str]:
        return [e.code for e in self.errors if e.code]

    @property
    def retryable(self) -> bool:
        return self.status_code == 429 or self.status_code in (500, 502, 503, 504)


class SquareTransportError(SquareError):
    """Connection, timeout or TLS failure before a response was received."""


class SquareDecodeError(SquareError):
    """Response body was not valid JSON."""


class ValidationError(SquareError, ValueError):
    """A builder was asked to build an incomplete request body."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class CircuitOpenError(SquareError, RuntimeError):
    """Raised instead of sending a request while the circuit breaker is open."""
