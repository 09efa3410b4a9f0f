"""Tests for square_ox.api.catalog: CatalogObjectBuilder and the Catalog resource."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from square_ox import SquareClient, ValidationError
from square_ox.api import CatalogObjectBuilder
from square_ox.objects import CatalogObjectType, Money

SANDBOX = "https://connect.squareupsandbox.com/v2/"


def _coffee():
    return (
        CatalogObjectBuilder()
        .type(CatalogObjectType.ITEM)
        .id("#coffee")
        .item_data({"name": "Coffee"})
        .add_variation("#coffee-small", "Small", Money(amount=300))
    )


def test_builder_requires_type_and_id() -> None:
    with pytest.raises(ValidationError) as info:
        CatalogObjectBuilder().id("#x").build()
    assert info.value.field == "type"
    with pytest.raises(ValidationError) as info:
        CatalogObjectBuilder().type(CatalogObjectType.TAX).build()
    assert info.value.field == "id"


def test_builder_add_variation() -> None:
    obj = _coffee().add_variation("#coffee-any", "Any size").build()
    variations = obj.item_data["variations"]
    assert variations[0] == {
        "type": "ITEM_VARIATION",
        "id": "#coffee-small",
        "item_variation_data": {
            "name": "Small",
            "pricing_type": "FIXED_PRICING",
            "price_money": {"amount": 300, "currency": "USD"},
        },
    }
    assert variations[1]["item_variation_data"]["pricing_type"] == "VARIABLE_PRICING"


def test_builder_variation_rejected_for_non_items() -> None:
    with pytest.raises(ValidationError):
        CatalogObjectBuilder().type(CatalogObjectType.TAX).add_variation("#v", "V")


def test_list_with_types(client: SquareClient, session: MagicMock) -> None:
    client.catalog.list(types=[CatalogObjectType.ITEM, CatalogObjectType.CATEGORY])
    kwargs = session.call_args.kwargs
    assert kwargs["url"] == SANDBOX + "catalog/list"
    assert kwargs["params"] == [("types", "ITEM,CATEGORY")]


def test_iter_all(client: SquareClient, session: MagicMock, make_response) -> None:
    session.side_effect = [
        make_response(200, {"objects": [{"id": "A"}], "cursor": "c"}),
        make_response(200, {"objects": [{"id": "B"}]}),
    ]
    assert [o["id"] for o in client.catalog.iter_all()] == ["A", "B"]


def test_upsert_object(client: SquareClient, session: MagicMock) -> None:
    client.catalog.upsert_object(_coffee().build(), idempotency_key="k")
    kwargs = session.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == SANDBOX + "catalog/object"
    assert kwargs["json"]["idempotency_key"] == "k"
    assert kwargs["json"]["object"]["type"] == "ITEM"
    assert kwargs["json"]["object"]["id"] == "#coffee"


def test_batch_upsert(client: SquareClient, session: MagicMock) -> None:
    tax = CatalogObjectBuilder().type(CatalogObjectType.TAX).id("#tax").build()
    client.catalog.batch_upsert([[_coffee().build()], [], [tax]])
    body = session.call_args.kwargs["json"]
    assert session.call_args.kwargs["url"] == SANDBOX + "catalog/batch-upsert"
    assert len(body["batches"]) == 2
    assert body["batches"][1] == {"objects": [{"type": "TAX", "id": "#tax"}]}
    assert body["idempotency_key"]


def test_batch_upsert_empty_rejected(client: SquareClient, session: MagicMock) -> None:
    with pytest.raises(ValidationError):
        client.catalog.batch_upsert([[]])
    session.assert_not_called()


def test_object_endpoints(client: SquareClient, session: MagicMock) -> None:
    client.catalog.retrieve_object("OBJ", include_related_objects=True)
    assert session.call_args.kwargs["url"] == SANDBOX + "catalog/object/OBJ"
    assert session.call_args.kwargs["params"] == [("include_related_objects", "true")]

    client.catalog.delete_object("OBJ")
    assert session.call_args.kwargs["method"] == "DELETE"
    assert session.call_args.kwargs["url"] == SANDBOX + "catalog/object/OBJ"

    client.catalog.batch_delete(["A", "B"])
    assert session.call_args.kwargs["url"] == SANDBOX + "catalog/batch-delete"
    assert session.call_args.kwargs["json"] == {"object_ids": ["A", "B"]}

    client.catalog.batch_retrieve(["A"])
    assert session.call_args.kwargs["url"] == SANDBOX + "catalog/batch-retrieve"
    assert session.call_args.kwargs["json"] == {"object_ids": ["A"]}


def test_search_objects(client: SquareClient, session: MagicMock) -> None:
    client.catalog.search_objects(
        object_types=[CatalogObjectType.ITEM],
        query={"text_query": {"keywords": ["coffee"]}},
        limit=10,
    )
    assert session.call_args.kwargs["url"] == SANDBOX + "catalog/search"
    assert session.call_args.kwargs["json"] == {
        "object_types": ["ITEM"],
        "query": {"text_query": {"keywords": ["coffee"]}},
        "limit": 10,
    }
