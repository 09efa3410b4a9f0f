"""
Inventory functionality of the Square API.
"""

from __future__ import annotations

from typing import Iterable

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.errors import ValidationError
from square_ox.objects import (
    InventoryAdjustment,
    InventoryChange,
    InventoryChangeType,
    InventoryPhysicalCount,
    InventoryState,
)
from square_ox.response import SquareResponse


class InventoryChangeBuilder(Builder[InventoryChange]):
    """
    Build one InventoryChange: either a physical count (absolute quantity) or
    an adjustment (quantity moved between two states).
    """

    def __init__(self, body: InventoryChange | None = None) -> None:
        super().__init__(body or InventoryChange())

    def validate(self) -> None:
        self._require(self.body.type, "type")
        if self.body.type == InventoryChangeType.PHYSICAL_COUNT:
            count = self.body.physical_count
            self._require(count, "physical_count")
            self._require(count.catalog_object_id, "physical_count.catalog_object_id")
            self._require(count.location_id, "physical_count.location_id")
            self._require(count.quantity, "physical_count.quantity")
            self._require(count.occurred_at, "physical_count.occurred_at")
        elif self.body.type == InventoryChangeType.ADJUSTMENT:
            adj = self.body.adjustment
            self._require(adj, "adjustment")
            self._require(adj.catalog_object_id, "adjustment.catalog_object_id")
            self._require(adj.location_id, "adjustment.location_id")
            self._require(adj.quantity, "adjustment.quantity")
            self._require(adj.from_state, "adjustment.from_state")
            self._require(adj.to_state, "adjustment.to_state")
            self._require(adj.occurred_at, "adjustment.occurred_at")
        else:
            raise ValidationError(
                f"InventoryChangeBuilder: unsupported change type {self.body.type}",
                field="type",
            )

    def physical_count(
        self,
        catalog_object_id: str,
        location_id: str,
        quantity: int | str,
        occurred_at: str,
        state: InventoryState = InventoryState.IN_STOCK,
    ) -> InventoryChangeBuilder:
        self.body.type = InventoryChangeType.PHYSICAL_COUNT
        self.body.adjustment = None
        self.body.physical_count = InventoryPhysicalCount(
            catalog_object_id=catalog_object_id,
            location_id=location_id,
            quantity=str(quantity),
            occurred_at=occurred_at,
            state=state,
        )
        return self

    def adjustment(
        self,
        catalog_object_id: str,
        location_id: str,
        quantity: int | str,
        occurred_at: str,
        from_state: InventoryState = InventoryState.NONE,
        to_state: InventoryState = InventoryState.IN_STOCK,
    ) -> InventoryChangeBuilder:
        self.body.type = InventoryChangeType.ADJUSTMENT
        self.body.physical_count = None
        self.body.adjustment = InventoryAdjustment(
            catalog_object_id=catalog_object_id,
            location_id=location_id,
            quantity=str(quantity),
            occurred_at=occurred_at,
            from_state=from_state,
            to_state=to_state,
        )
        return self

    def reference_id(self, reference_id: str) -> InventoryChangeBuilder:
        target = self.body.physical_count or self.body.adjustment
        if target is None:
            raise ValidationError(
                "set a physical count or adjustment before reference_id", field="type"
            )
        target.reference_id = reference_id
        return self


class Inventory(ApiResource):
    """Stock counts and adjustments per catalog item variation and location."""

    def batch_change(
        self,
        changes: list[InventoryChange],
        ignore_unchanged_counts: bool | None = None,
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        """Apply up to 100 changes atomically (body key "counts")."""
        if not changes:
            raise ValidationError("batch_change needs at least one change", field="changes")
        return self._client.request(
            Verb.POST,
            SquareAPI.inventory("/changes/batch-create"),
            json={
                "idempotency_key": idempotency_key or new_idempotency_key(),
                "changes": list(changes),
                "ignore_unchanged_counts": ignore_unchanged_counts,
            },
        )

    def batch_retrieve_counts(
        self,
        catalog_object_ids: Iterable[str] | None = None,
        location_ids: Iterable[str] | None = None,
        updated_after: str | None = None,
        cursor: str | None = None,
        states: Iterable[InventoryState] | None = None,
        limit: int | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.inventory("/counts/batch-retrieve"),
            json={
                "catalog_object_ids": list(catalog_object_ids) if catalog_object_ids else None,
                "location_ids": list(location_ids) if location_ids else None,
                "updated_after": updated_after,
                "cursor": cursor,
                "states": list(states) if states else None,
                "limit": limit,
            },
        )

    def retrieve_count(
        self,
        catalog_object_id: str,
        location_ids: Iterable[str] | None = None,
        cursor: str | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.GET,
            SquareAPI.inventory(f"/{path_id(catalog_object_id)}"),
            params={
                "location_ids": list(location_ids) if location_ids else None,
                "cursor": cursor,
            },
        )

    def retrieve_adjustment(self, adjustment_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.inventory(f"/adjustments/{path_id(adjustment_id)}")
        )

    def retrieve_physical_count(self, physical_count_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET,
            SquareAPI.inventory(f"/physical-counts/{path_id(physical_count_id)}"),
        )
