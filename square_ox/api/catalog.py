"""
Catalog functionality of the Square API.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.errors import ValidationError
from square_ox.objects import CatalogObject, CatalogObjectType, Money
from square_ox.pagination import iter_items
from square_ox.response import SquareResponse

logger = logging.getLogger(__name__)


class CatalogObjectBuilder(Builder[CatalogObject]):
    """
    Build a CatalogObject for upsert. type and id are required; ids of objects
    that do not exist yet must start with "#".

        item = (
            CatalogObjectBuilder()
            .type(CatalogObjectType.ITEM)
            .id("#coffee")
            .item_data({"name": "Coffee"})
            .build()
        )
    """

    def __init__(self, body: CatalogObject | None = None) -> None:
        super().__init__(body or CatalogObject())

    def validate(self) -> None:
        self._require(self.body.type, "type")
        self._require(self.body.id, "id")

    def type(self, object_type: CatalogObjectType) -> CatalogObjectBuilder:
        self.body.type = object_type
        return self

    def id(self, object_id: str) -> CatalogObjectBuilder:
        self.body.id = object_id
        return self

    def version(self, version: int) -> CatalogObjectBuilder:
        self.body.version = version
        return self

    def present_at_all_locations(self, present: bool = True) -> CatalogObjectBuilder:
        self.body.present_at_all_locations = present
        return self

    def present_at_location_ids(self, ids: list[str]) -> CatalogObjectBuilder:
        self.body.present_at_location_ids = list(ids)
        return self

    def item_data(self, data: dict[str, Any]) -> CatalogObjectBuilder:
        self.body.item_data = data
        return self

    def add_variation(
        self, variation_id: str, name: str, price: Money | None = None
    ) -> CatalogObjectBuilder:
        """Append a fixed-price ITEM_VARIATION to item_data.variations."""
        if self.body.type not in (None, CatalogObjectType.ITEM):
            raise ValidationError("variations only apply to ITEM objects", field="type")
        variation_data: dict[str, Any] = {
            "name": name,
            "pricing_type": "FIXED_PRICING" if price else "VARIABLE_PRICING",
        }
        if price is not None:
            variation_data["price_money"] = price.to_dict()
        data = self.body.item_data if self.body.item_data is not None else {}
        data.setdefault("variations", []).append(
            {
                "type": CatalogObjectType.ITEM_VARIATION.value,
                "id": variation_id,
                "item_variation_data": variation_data,
            }
        )
        self.body.item_data = data
        return self

    def category_data(self, data: dict[str, Any]) -> CatalogObjectBuilder:
        self.body.category_data = data
        return self

    def tax_data(self, data: dict[str, Any]) -> CatalogObjectBuilder:
        self.body.tax_data = data
        return self

    def discount_data(self, data: dict[str, Any]) -> CatalogObjectBuilder:
        self.body.discount_data = data
        return self

    def modifier_list_data(self, data: dict[str, Any]) -> CatalogObjectBuilder:
        self.body.modifier_list_data = data
        return self


class Catalog(ApiResource):
    """Items, variations, categories, taxes and discounts."""

    def list(
        self,
        cursor: str | None = None,
        types: Iterable[CatalogObjectType] | None = None,
        catalog_version: int | None = None,
    ) -> SquareResponse:
        """List catalog objects, one page at a time (body key "objects")."""
        return self._client.request(
            Verb.GET,
            SquareAPI.catalog("/list"),
            params={
                "cursor": cursor,
                "types": list(types) if types else None,
                "catalog_version": catalog_version,
            },
        )

    def iter_all(self, **kwargs: Any) -> Iterator[dict[str, Any]]:
        """Iterate over every catalog object across all pages."""
        return iter_items(lambda c: self.list(cursor=c, **kwargs), "objects")

    def upsert_object(
        self, catalog_object: CatalogObject, idempotency_key: str | None = None
    ) -> SquareResponse:
        """
        Create or update one object. For new objects the response's
        "id_mappings" maps the "#temporary" ids to the permanent ones.
        """
        body = {
            "idempotency_key": idempotency_key or new_idempotency_key(),
            "object": catalog_object,
        }
        return self._client.request(Verb.POST, SquareAPI.catalog("/object"), json=body)

    def batch_upsert(
        self,
        batches: list[list[CatalogObject]],
        idempotency_key: str | None = None,
    ) -> SquareResponse:
        """Upsert several batches; each batch succeeds or fails as a whole."""
        if not batches or not any(batches):
            raise ValidationError("batch_upsert needs at least one object", field="batches")
        body = {
            "idempotency_key": idempotency_key or new_idempotency_key(),
            "batches": [{"objects": list(batch)} for batch in batches if batch],
        }
        return self._client.request(
            Verb.POST, SquareAPI.catalog("/batch-upsert"), json=body
        )

    def retrieve_object(
        self, object_id: str, include_related_objects: bool | None = None
    ) -> SquareResponse:
        return self._client.request(
            Verb.GET,
            SquareAPI.catalog(f"/object/{path_id(object_id)}"),
            params={"include_related_objects": include_related_objects},
        )

    def delete_object(self, object_id: str) -> SquareResponse:
        """Delete an object and its children (e.g. an item's variations)."""
        response = self._client.request(
            Verb.DELETE, SquareAPI.catalog(f"/object/{path_id(object_id)}")
        )
        logger.info("Deleted catalog objects %s", response.get("deleted_object_ids"))
        return response

    def batch_delete(self, object_ids: list[str]) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.catalog("/batch-delete"),
            json={"object_ids": list(object_ids)},
        )

    def batch_retrieve(
        self, object_ids: list[str], include_related_objects: bool | None = None
    ) -> SquareResponse:
        return self._client.request(
            Verb.POST,
            SquareAPI.catalog("/batch-retrieve"),
            json={
                "object_ids": list(object_ids),
                "include_related_objects": include_related_objects,
            },
        )

    def search_objects(
        self,
        object_types: Iterable[CatalogObjectType] | None = None,
        query: dict[str, Any] | None = None,
        cursor: str | None = None,
        limit: int | None = None,
        include_deleted_objects: bool | None = None,
        include_related_objects: bool | None = None,
        begin_time: str | None = None,
    ) -> SquareResponse:
        """Search catalog objects with Square's CatalogQuery (body key "objects")."""
        body = {
            "object_types": list(object_types) if object_types else None,
            "query": query,
            "cursor": cursor,
            "limit": limit,
            "include_deleted_objects": include_deleted_objects,
            "include_related_objects": include_related_objects,
            "begin_time": begin_time,
        }
        return self._client.request(Verb.POST, SquareAPI.catalog("/search"), json=body)
