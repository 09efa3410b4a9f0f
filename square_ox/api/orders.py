"""
Orders functionality of the Square API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.errors import ValidationError
from square_ox.objects import Money, Order, OrderLineItem, SquareObject
from square_ox.response import SquareResponse


@dataclass
class OrderRequest(SquareObject):
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    order: Order = field(default_factory=Order)


class OrderBuilder(Builder[OrderRequest]):
    """Build an OrderRequest; location_id is required."""

    def __init__(self, body: OrderRequest | None = None) -> None:
        super().__init__(body or OrderRequest())

    @property
    def _order(self) -> Order:
        return self.body.order

    def validate(self) -> None:
        self._require(self._order.location_id, "location_id")

    def location_id(self, location_id: str) -> OrderBuilder:
        self._order.location_id = location_id
        return self

    def customer_id(self, customer_id: str) -> OrderBuilder:
        self._order.customer_id = customer_id
        return self

    def reference_id(self, reference_id: str) -> OrderBuilder:
        self._order.reference_id = reference_id
        return self

    def ticket_name(self, ticket_name: str) -> OrderBuilder:
        self._order.ticket_name = ticket_name
        return self

    def add_line_item(self, item: OrderLineItem) -> OrderBuilder:
        if self._order.line_items is None:
            self._order.line_items = [item]
        else:
            self._order.line_items.append(item)
        return self

    def add_ad_hoc_item(
        self, name: str, price: Money, quantity: int | str = 1, note: str | None = None
    ) -> OrderBuilder:
        """Append a line item that is not in the catalog."""
        return self.add_line_item(
            OrderLineItem(
                name=name, quantity=str(quantity), base_price_money=price, note=note
            )
        )

    def add_catalog_item(
        self, catalog_object_id: str, quantity: int | str = 1
    ) -> OrderBuilder:
        return self.add_line_item(
            OrderLineItem(catalog_object_id=catalog_object_id, quantity=str(quantity))
        )

    def metadata(self, key: str, value: str) -> OrderBuilder:
        if self._order.metadata is None:
            self._order.metadata = {}
        self._order.metadata[key] = value
        return self


class Orders(ApiResource):
    """Itemized orders: create, price, search, update and pay."""

    def create(self, order: OrderRequest) -> SquareResponse:
        return self._client.request(Verb.POST, SquareAPI.orders(), json=order)

    def batch_retrieve(
        self, order_ids: Iterable[str], location_id: str | None = None
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.orders("/batch-retrieve"),
            json={"location_id": location_id, "order_ids": list(order_ids)},
        )

    def calculate(
        self, order: Order, proposed_rewards: list[dict[str, Any]] | None = None
    ) -> SquareResponse:
        """Price an order (taxes, discounts) without creating it."""
        return self._client.request(
            Verb.POST,
            SquareAPI.orders("/calculate"),
            json={"order": order, "proposed_rewards": proposed_rewards},
        )

    def clone(
        self,
        order_id: str,
        version: int | None = None,
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.orders("/clone"),
            json={
                "order_id": order_id,
                "version": version,
                "idempotency_key": idempotency_key or new_idempotency_key(),
            },
        )

    def search(
        self,
        location_ids: Iterable[str],
        query: dict[str, Any] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
        return_entries: bool | None = None,
    ) -> SquareResponse:
        location_ids = list(location_ids)
        if not location_ids:
            raise ValidationError("search needs at least one location id", field="location_ids")
        return self._client.request(
            Verb.POST,
            SquareAPI.orders("/search"),
            json={
                "location_ids": location_ids,
                "query": query,
                "cursor": cursor,
                "limit": limit,
                "return_entries": return_entries,
            },
        )

    def retrieve(self, order_id: str) -> SquareResponse:
        return self._client.request(Verb.GET, SquareAPI.orders(f"/{path_id(order_id)}"))

    def update(
        self,
        order_id: str,
        order: Order,
        fields_to_clear: list[str] | None = None,
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        """Sparse update: order carries the version plus the fields to change."""
        if order.version is None:
            raise ValidationError("update: order.version is required", field="version")
        return self._client.request(
            Verb.PUT,
            SquareAPI.orders(f"/{path_id(order_id)}"),
            json={
                "order": order,
                "fields_to_clear": fields_to_clear,
                "idempotency_key": idempotency_key or new_idempotency_key(),
            },
        )

    def pay(
        self,
        order_id: str,
        payment_ids: list[str] | None = None,
        order_version: int | None = None,
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        """Settle an order with approved payments (or an empty list for zero totals)."""
        return self._client.request(
            Verb.POST,
            SquareAPI.orders(f"/{path_id(order_id)}/pay"),
            json={
                "idempotency_key": idempotency_key or new_idempotency_key(),
                "order_version": order_version,
                "payment_ids": list(payment_ids) if payment_ids is not None else None,
            },
        )
