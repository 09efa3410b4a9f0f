"""Tests for square_ox.api.orders: OrderBuilder and the Orders resource."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from square_ox import SquareClient, ValidationError
from square_ox.api import OrderBuilder
from square_ox.objects import Money, Order

SANDBOX = "https://connect.squareupsandbox.com/v2/"


def test_builder_requires_location() -> None:
    with pytest.raises(ValidationError) as info:
        OrderBuilder().add_catalog_item("VAR1").build()
    assert info.value.field == "location_id"


def test_builder_line_items_and_metadata() -> None:
    body = (
        OrderBuilder()
        .location_id("L1")
        .add_ad_hoc_item("Gift wrap", Money(amount=200), quantity=2)
        .add_catalog_item("VAR1")
        .metadata("channel", "kiosk")
        .build()
    )
    d = body.to_dict()["order"]
    assert d["location_id"] == "L1"
    assert d["line_items"] == [
        {"quantity": "2", "name": "Gift wrap", "base_price_money": {"amount": 200, "currency": "USD"}},
        {"quantity": "1", "catalog_object_id": "VAR1"},
    ]
    assert d["metadata"] == {"channel": "kiosk"}


def test_create(client: SquareClient, session: MagicMock) -> None:
    body = OrderBuilder().location_id("L1").add_catalog_item("VAR1").build()
    client.orders.create(body)
    kwargs = session.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == SANDBOX + "orders"
    assert kwargs["json"]["idempotency_key"] == body.idempotency_key
    assert kwargs["json"]["order"]["location_id"] == "L1"


def test_batch_retrieve_and_calculate(client: SquareClient, session: MagicMock) -> None:
    client.orders.batch_retrieve(["O1", "O2"])
    assert session.call_args.kwargs["url"] == SANDBOX + "orders/batch-retrieve"
    assert session.call_args.kwargs["json"] == {"order_ids": ["O1", "O2"]}

    client.orders.calculate(Order(location_id="L1"))
    assert session.call_args.kwargs["url"] == SANDBOX + "orders/calculate"
    assert session.call_args.kwargs["json"] == {"order": {"location_id": "L1"}}


def test_clone(client: SquareClient, session: MagicMock) -> None:
    client.orders.clone("O1", version=3, idempotency_key="k")
    assert session.call_args.kwargs["url"] == SANDBOX + "orders/clone"
    assert session.call_args.kwargs["json"] == {"order_id": "O1", "version": 3, "idempotency_key": "k"}


def test_search(client: SquareClient, session: MagicMock) -> None:
    client.orders.search(["L1"], query={"filter": {"state_filter": {"states": ["OPEN"]}}}, limit=5)
    assert session.call_args.kwargs["url"] == SANDBOX + "orders/search"
    assert session.call_args.kwargs["json"] == {
        "location_ids": ["L1"],
        "query": {"filter": {"state_filter": {"states": ["OPEN"]}}},
        "limit": 5,
    }


def test_search_requires_location(client: SquareClient, session: MagicMock) -> None:
    with pytest.raises(ValidationError):
        client.orders.search([])
    session.assert_not_called()


def test_retrieve(client: SquareClient, session: MagicMock) -> None:
    client.orders.retrieve("O1")
    assert session.call_args.kwargs["method"] == "GET"
    assert session.call_args.kwargs["url"] == SANDBOX + "orders/O1"


def test_update_requires_version(client: SquareClient, session: MagicMock) -> None:
    with pytest.raises(ValidationError):
        client.orders.update("O1", Order(reference_id="r"))
    session.assert_not_called()
    client.orders.update("O1", Order(version=2, reference_id="r"), fields_to_clear=["note"], idempotency_key="k")
    assert session.call_args.kwargs["method"] == "PUT"
    assert session.call_args.kwargs["json"] == {
        "order": {"reference_id": "r", "version": 2},
        "fields_to_clear": ["note"],
        "idempotency_key": "k",
    }


def test_pay(client: SquareClient, session: MagicMock) -> None:
    client.orders.pay("O1", payment_ids=[], order_version=4, idempotency_key="k")
    assert session.call_args.kwargs["url"] == SANDBOX + "orders/O1/pay"
    assert session.call_args.kwargs["json"] == {
        "idempotency_key": "k",
        "order_version": 4,
        "payment_ids": [],
    }
