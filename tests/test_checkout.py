"""Tests for square_ox.api.checkout: PaymentLinkBuilder and payment link endpoints."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from square_ox import SquareClient, ValidationError
from square_ox.api import PaymentLinkBuilder
from square_ox.objects import CheckoutOptions, Money, Order, PaymentLink

SANDBOX = "https://connect.squareupsandbox.com/v2/"


def test_builder_needs_exactly_one_of_quick_pay_or_order() -> None:
    with pytest.raises(ValidationError, match="exactly one"):
        PaymentLinkBuilder().build()
    with pytest.raises(ValidationError, match="exactly one"):
        (
            PaymentLinkBuilder()
            .quick_pay("Tea", Money(amount=300), "L1")
            .order(Order(location_id="L1"))
            .build()
        )


def test_builder_quick_pay_needs_location() -> None:
    with pytest.raises(ValidationError) as info:
        PaymentLinkBuilder().quick_pay("Tea", Money(amount=300), "").build()
    assert info.value.field == "quick_pay.location_id"


def test_create_payment_link(client: SquareClient, session: MagicMock, make_response) -> None:
    session.return_value = make_response(
        200, {"payment_link": {"id": "PL1", "version": 1, "url": "https://square.link/u/x"}}
    )
    body = (
        PaymentLinkBuilder()
        .quick_pay("Tea", Money(amount=300), "L1")
        .redirect_url("https://example.com/thanks")
        .allow_tipping()
        .build()
    )
    resp = client.checkout.create_payment_link(body)
    kwargs = session.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == SANDBOX + "online-checkout/payment-links"
    assert kwargs["json"] == {
        "idempotency_key": body.idempotency_key,
        "quick_pay": {
            "name": "Tea",
            "price_money": {"amount": 300, "currency": "USD"},
            "location_id": "L1",
        },
        "checkout_options": {"allow_tipping": True, "redirect_url": "https://example.com/thanks"},
    }
    link = resp.parse("payment_link", PaymentLink)
    assert link.url == "https://square.link/u/x"


def test_list_retrieve_delete(client: SquareClient, session: MagicMock) -> None:
    client.checkout.list_payment_links(limit=20)
    assert session.call_args.kwargs["method"] == "GET"
    assert session.call_args.kwargs["params"] == [("limit", "20")]

    client.checkout.retrieve_payment_link("PL1")
    assert session.call_args.kwargs["url"] == SANDBOX + "online-checkout/payment-links/PL1"

    client.checkout.delete_payment_link("PL1")
    assert session.call_args.kwargs["method"] == "DELETE"


def test_update_payment_link_requires_version(client: SquareClient, session: MagicMock) -> None:
    with pytest.raises(ValidationError):
        client.checkout.update_payment_link("PL1", PaymentLink(description="x"))
    session.assert_not_called()

    client.checkout.update_payment_link(
        "PL1",
        PaymentLink(version=1, checkout_options=CheckoutOptions(allow_tipping=False)),
    )
    assert session.call_args.kwargs["method"] == "PUT"
    assert session.call_args.kwargs["json"] == {
        "payment_link": {"version": 1, "checkout_options": {"allow_tipping": False}}
    }
