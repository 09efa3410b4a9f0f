"""
Payments functionality of the Square API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.objects import Address, Currency, Money, Payment, SortOrder, SquareObject
from square_ox.pagination import iter_items
from square_ox.response import SquareResponse

logger = logging.getLogger(__name__)


@dataclass
class PaymentRequest(SquareObject):
    """Body of CreatePayment."""

    source_id: str | None = None
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    amount_money: Money | None = None
    tip_money: Money | None = None
    app_fee_money: Money | None = None
    delay_duration: str | None = None
    delay_action: str | None = None
    autocomplete: bool | None = None
    order_id: str | None = None
    customer_id: str | None = None
    location_id: str | None = None
    team_member_id: str | None = None
    reference_id: str | None = None
    verification_token: str | None = None
    accept_partial_authorization: bool | None = None
    buyer_email_address: str | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    note: str | None = None
    statement_description_identifier: str | None = None


class PaymentBuilder(Builder[PaymentRequest]):
    """
    Build a PaymentRequest. source_id (a card nonce, card on file id or "CASH")
    and amount_money are required.

        body = PaymentBuilder().source_id("cnon:card-nonce-ok").amount(100, Currency.USD).build()
    """

    def __init__(self, body: PaymentRequest | None = None) -> None:
        super().__init__(body or PaymentRequest())

    def validate(self) -> None:
        self._require(self.body.source_id, "source_id")
        self._require(self.body.amount_money, "amount_money")
        self._require(self.body.amount_money.amount, "amount_money.amount")

    def source_id(self, source_id: str) -> PaymentBuilder:
        self.body.source_id = source_id
        return self

    def idempotency_key(self, key: str) -> PaymentBuilder:
        self.body.idempotency_key = key
        return self

    def amount_money(self, money: Money) -> PaymentBuilder:
        self.body.amount_money = money
        return self

    def amount(self, amount: int, currency: Currency = Currency.USD) -> PaymentBuilder:
        """Shortcut for amount_money(Money(amount, currency))."""
        self.body.amount_money = Money(amount=amount, currency=currency)
        return self

    def tip_money(self, money: Money) -> PaymentBuilder:
        self.body.tip_money = money
        return self

    def app_fee_money(self, money: Money) -> PaymentBuilder:
        self.body.app_fee_money = money
        return self

    def delay(self, duration: str, action: str = "CANCEL") -> PaymentBuilder:
        """Authorize only; Square applies action (CANCEL or COMPLETE) after duration (RFC 3339)."""
        self.body.autocomplete = False
        self.body.delay_duration = duration
        self.body.delay_action = action
        return self

    def autocomplete(self, autocomplete: bool) -> PaymentBuilder:
        self.body.autocomplete = autocomplete
        return self

    def order_id(self, order_id: str) -> PaymentBuilder:
        self.body.order_id = order_id
        return self

    def customer_id(self, customer_id: str) -> PaymentBuilder:
        self.body.customer_id = customer_id
        return self

    def location_id(self, location_id: str) -> PaymentBuilder:
        self.body.location_id = location_id
        return self

    def team_member_id(self, team_member_id: str) -> PaymentBuilder:
        self.body.team_member_id = team_member_id
        return self

    def reference_id(self, reference_id: str) -> PaymentBuilder:
        self.body.reference_id = reference_id
        return self

    def verification_token(self, token: str) -> PaymentBuilder:
        self.body.verification_token = token
        return self

    def accept_partial_authorization(self, accept: bool = True) -> PaymentBuilder:
        self.body.accept_partial_authorization = accept
        return self

    def buyer_email_address(self, email: str) -> PaymentBuilder:
        self.body.buyer_email_address = email
        return self

    def billing_address(self, address: Address) -> PaymentBuilder:
        self.body.billing_address = address
        return self

    def shipping_address(self, address: Address) -> PaymentBuilder:
        self.body.shipping_address = address
        return self

    def note(self, note: str) -> PaymentBuilder:
        self.body.note = note
        return self

    def statement_description_identifier(self, value: str) -> PaymentBuilder:
        self.body.statement_description_identifier = value
        return self


class Payments(ApiResource):
    """Take, inspect, complete and cancel payments."""

    def list(
        self,
        begin_time: str | None = None,
        end_time: str | None = None,
        sort_order: SortOrder | None = None,
        cursor: str | None = None,
        location_id: str | None = None,
        total: int | None = None,
        last_4: str | None = None,
        card_brand: str | None = None,
        limit: int | None = None,
    ) -> SquareResponse:
        """List payments, one page at a time (body key "payments")."""
        return self._client.request(
            Verb.GET,
            SquareAPI.payments(),
            params={
                "begin_time": begin_time,
                "end_time": end_time,
                "sort_order": sort_order,
                "cursor": cursor,
                "location_id": location_id,
                "total": total,
                "last_4": last_4,
                "card_brand": card_brand,
                "limit": limit,
            },
        )

    def iter_all(self, **kwargs: Any) -> Iterator[dict[str, Any]]:
        """Iterate over every payment across all pages."""
        return iter_items(lambda c: self.list(cursor=c, **kwargs), "payments")

    def create(self, payment: PaymentRequest) -> SquareResponse:
        """Charge a payment source (body key "payment")."""
        response = self._client.request(Verb.POST, SquareAPI.payments(), json=payment)
        created = response.get("payment") or {}
        logger.info(
            "Created payment %s status=%s", created.get("id"), created.get("status")
        )
        return response

    def retrieve(self, payment_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.payments(f"/{path_id(payment_id)}")
        )

    def update(
        self,
        payment_id: str,
        payment: Payment,
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        """Update amount/tip of an approved payment that is not completed yet."""
        body = {
            "payment": payment.to_dict(),
            "idempotency_key": idempotency_key or new_idempotency_key(),
        }
        return self._client.request(
            Verb.PUT, SquareAPI.payments(f"/{path_id(payment_id)}"), json=body
        )

    def cancel(self, payment_id: str) -> SquareResponse:
        """Void an approved payment."""
        return self._client.request(
            Verb.POST, SquareAPI.payments(f"/{path_id(payment_id)}/cancel")
        )

    def cancel_by_idempotency_key(self, idempotency_key: str) -> SquareResponse:
        """
        Cancel a payment identified only by the idempotency key used to create it,
        for when CreatePayment timed out and the payment id is unknown.
        """
        return self._client.request(
            Verb.POST,
            SquareAPI.payments("/cancel"),
            json={"idempotency_key": idempotency_key},
        )

    def complete(self, payment_id: str, version_token: str | None = None) -> SquareResponse:
        """Capture a delayed (autocomplete=False) payment."""
        body = {"version_token": version_token} if version_token else None
        return self._client.request(
            Verb.POST,
            SquareAPI.payments(f"/{path_id(payment_id)}/complete"),
            json=body,
        )
