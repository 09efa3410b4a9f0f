"""
Online checkout (payment links) functionality of the Square API.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.errors import ValidationError
from square_ox.objects import (
    CheckoutOptions,
    Money,
    Order,
    PaymentLink,
    QuickPay,
    SquareObject,
)
from square_ox.response import SquareResponse


@dataclass
class PaymentLinkRequest(SquareObject):
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    description: str | None = None
    quick_pay: QuickPay | None = None
    order: Order | None = None
    checkout_options: CheckoutOptions | None = None
    payment_note: str | None = None


class PaymentLinkBuilder(Builder[PaymentLinkRequest]):
    """
    Build a PaymentLinkRequest. A link sells either a quick_pay (name + price)
    or a full order, never both.
    """

    def __init__(self, body: PaymentLinkRequest | None = None) -> None:
        super().__init__(body or PaymentLinkRequest())

    def validate(self) -> None:
        if (self.body.quick_pay is None) == (self.body.order is None):
            raise ValidationError(
                "PaymentLinkBuilder: exactly one of quick_pay or order is required",
                field="quick_pay",
            )
        if self.body.quick_pay is not None:
            self._require(self.body.quick_pay.name, "quick_pay.name")
            self._require(self.body.quick_pay.price_money, "quick_pay.price_money")
            self._require(self.body.quick_pay.location_id, "quick_pay.location_id")

    def quick_pay(self, name: str, price: Money, location_id: str) -> PaymentLinkBuilder:
        self.body.quick_pay = QuickPay(
            name=name, price_money=price, location_id=location_id
        )
        return self

    def order(self, order: Order) -> PaymentLinkBuilder:
        self.body.order = order
        return self

    def description(self, description: str) -> PaymentLinkBuilder:
        self.body.description = description
        return self

    def payment_note(self, note: str) -> PaymentLinkBuilder:
        self.body.payment_note = note
        return self

    def _options(self) -> CheckoutOptions:
        if self.body.checkout_options is None:
            self.body.checkout_options = CheckoutOptions()
        return self.body.checkout_options

    def redirect_url(self, url: str) -> PaymentLinkBuilder:
        self._options().redirect_url = url
        return self

    def allow_tipping(self, allow: bool = True) -> PaymentLinkBuilder:
        self._options().allow_tipping = allow
        return self

    def ask_for_shipping_address(self, ask: bool = True) -> PaymentLinkBuilder:
        self._options().ask_for_shipping_address = ask
        return self

    def merchant_support_email(self, email: str) -> PaymentLinkBuilder:
        self._options().merchant_support_email = email
        return self


class Checkout(ApiResource):
    """Payment links hosted by Square."""

    def list_payment_links(
        self, cursor: str | None = None, limit: int | None = None
    ) -> SquareResponse:
        return self._client.request(
            Verb.GET,
            SquareAPI.checkout("/payment-links"),
            params={"cursor": cursor, "limit": limit},
        )

    def create_payment_link(self, link: PaymentLinkRequest) -> SquareResponse:
        """Create a link (body keys "payment_link" and "related_resources")."""
        return self._client.request(
            Verb.POST, SquareAPI.checkout("/payment-links"), json=link
        )

    def retrieve_payment_link(self, link_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.checkout(f"/payment-links/{path_id(link_id)}")
        )

    def update_payment_link(
        self, link_id: str, payment_link: PaymentLink
    ) -> SquareResponse:
        """Update description/checkout options; payment_link.version is required by Square."""
        if payment_link.version is None:
            raise ValidationError(
                "update_payment_link: payment_link.version is required", field="version"
            )
        return self._client.request(
            Verb.PUT,
            SquareAPI.checkout(f"/payment-links/{path_id(link_id)}"),
            json={"payment_link": payment_link},
        )

    def delete_payment_link(self, link_id: str) -> SquareResponse:
        return self._client.request(
            Verb.DELETE, SquareAPI.checkout(f"/payment-links/{path_id(link_id)}")
        )
