"""
Terminal functionality of the Square API: checkouts and refunds pushed to a
paired Square Terminal device.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.objects import (
    DeviceCheckoutOptions,
    Money,
    SquareObject,
    TerminalCheckout,
    TerminalRefund,
)
from square_ox.response import SquareResponse

logger = logging.getLogger(__name__)


@dataclass
class TerminalCheckoutRequest(SquareObject):
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    checkout: TerminalCheckout = field(default_factory=TerminalCheckout)


@dataclass
class TerminalRefundRequest(SquareObject):
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    refund: TerminalRefund = field(default_factory=TerminalRefund)


class TerminalCheckoutBuilder(Builder[TerminalCheckoutRequest]):
    """Build a TerminalCheckoutRequest; amount_money and the device id are required."""

    def __init__(self, body: TerminalCheckoutRequest | None = None) -> None:
        super().__init__(body or TerminalCheckoutRequest())

    @property
    def _checkout(self) -> TerminalCheckout:
        return self.body.checkout

    def validate(self) -> None:
        self._require(self._checkout.amount_money, "amount_money")
        options = self._checkout.device_options
        self._require(options.device_id if options else None, "device_options.device_id")

    def amount_money(self, money: Money) -> TerminalCheckoutBuilder:
        self._checkout.amount_money = money
        return self

    def device_id(self, device_id: str) -> TerminalCheckoutBuilder:
        if self._checkout.device_options is None:
            self._checkout.device_options = DeviceCheckoutOptions()
        self._checkout.device_options.device_id = device_id
        return self

    def skip_receipt_screen(self, skip: bool = True) -> TerminalCheckoutBuilder:
        if self._checkout.device_options is None:
            self._checkout.device_options = DeviceCheckoutOptions()
        self._checkout.device_options.skip_receipt_screen = skip
        return self

    def reference_id(self, reference_id: str) -> TerminalCheckoutBuilder:
        self._checkout.reference_id = reference_id
        return self

    def note(self, note: str) -> TerminalCheckoutBuilder:
        self._checkout.note = note
        return self

    def order_id(self, order_id: str) -> TerminalCheckoutBuilder:
        self._checkout.order_id = order_id
        return self

    def deadline_duration(self, duration: str) -> TerminalCheckoutBuilder:
        """RFC 3339 duration such as "PT5M"; the checkout is canceled after it."""
        self._checkout.deadline_duration = duration
        return self


class TerminalRefundBuilder(Builder[TerminalRefundRequest]):
    """Build a TerminalRefundRequest for an Interac payment."""

    def __init__(self, body: TerminalRefundRequest | None = None) -> None:
        super().__init__(body or TerminalRefundRequest())

    @property
    def _refund(self) -> TerminalRefund:
        return self.body.refund

    def validate(self) -> None:
        self._require(self._refund.payment_id, "payment_id")
        self._require(self._refund.amount_money, "amount_money")
        self._require(self._refund.device_id, "device_id")
        self._require(self._refund.reason, "reason")

    def payment_id(self, payment_id: str) -> TerminalRefundBuilder:
        self._refund.payment_id = payment_id
        return self

    def amount_money(self, money: Money) -> TerminalRefundBuilder:
        self._refund.amount_money = money
        return self

    def device_id(self, device_id: str) -> TerminalRefundBuilder:
        self._refund.device_id = device_id
        return self

    def reason(self, reason: str) -> TerminalRefundBuilder:
        self._refund.reason = reason
        return self

    def deadline_duration(self, duration: str) -> TerminalRefundBuilder:
        self._refund.deadline_duration = duration
        return self


class Terminal(ApiResource):
    """Push checkouts and refunds to Square Terminal devices."""

    def create_checkout(self, checkout: TerminalCheckoutRequest) -> SquareResponse:
        response = self._client.request(
            Verb.POST, SquareAPI.terminals("/checkouts"), json=checkout
        )
        logger.info(
            "Terminal checkout %s sent to device",
            (response.get("checkout") or {}).get("id"),
        )
        return response

    def search_checkouts(
        self,
        query: dict[str, Any] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.terminals("/checkouts/search"),
            json={"query": query, "cursor": cursor, "limit": limit},
        )

    def retrieve_checkout(self, checkout_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.terminals(f"/checkouts/{path_id(checkout_id)}")
        )

    def cancel_checkout(self, checkout_id: str) -> SquareResponse:
        return self._client.request(
            Verb.POST, SquareAPI.terminals(f"/checkouts/{path_id(checkout_id)}/cancel")
        )

    def create_refund(self, refund: TerminalRefundRequest) -> SquareResponse:
        return self._client.request(
            Verb.POST, SquareAPI.terminals("/refunds"), json=refund
        )

    def search_refunds(
        self,
        query: dict[str, Any] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.terminals("/refunds/search"),
            json={"query": query, "cursor": cursor, "limit": limit},
        )

    def retrieve_refund(self, refund_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.terminals(f"/refunds/{path_id(refund_id)}")
        )

    def cancel_refund(self, refund_id: str) -> SquareResponse:
        return self._client.request(
            Verb.POST, SquareAPI.terminals(f"/refunds/{path_id(refund_id)}/cancel")
        )
