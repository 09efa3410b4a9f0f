"""
Customers functionality of the Square API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.errors import ValidationError
from square_ox.objects import (
    Address,
    CustomerSortField,
    SortOrder,
    SquareObject,
)
from square_ox.pagination import iter_items
from square_ox.response import SquareResponse

logger = logging.getLogger(__name__)


@dataclass
class CustomerRequest(SquareObject):
    """Create/update body; Square takes the customer fields at the top level."""

    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    given_name: str | None = None
    family_name: str | None = None
    company_name: str | None = None
    nickname: str | None = None
    email_address: str | None = None
    address: Address | None = None
    phone_number: str | None = None
    reference_id: str | None = None
    note: str | None = None
    birthday: str | None = None
    version: int | None = None


class CustomerBuilder(Builder[CustomerRequest]):
    """
    Build a CustomerRequest. Square needs at least one of given_name,
    family_name, company_name, email_address or phone_number.
    """

    IDENTIFYING_FIELDS = (
        "given_name",
        "family_name",
        "company_name",
        "email_address",
        "phone_number",
    )

    def __init__(self, body: CustomerRequest | None = None) -> None:
        super().__init__(body or CustomerRequest())

    def validate(self) -> None:
        if not any(getattr(self.body, f) for f in self.IDENTIFYING_FIELDS):
            raise ValidationError(
                "CustomerBuilder: one of "
                + ", ".join(self.IDENTIFYING_FIELDS)
                + " is required"
            )

    def given_name(self, value: str) -> CustomerBuilder:
        self.body.given_name = value
        return self

    def family_name(self, value: str) -> CustomerBuilder:
        self.body.family_name = value
        return self

    def company_name(self, value: str) -> CustomerBuilder:
        self.body.company_name = value
        return self

    def nickname(self, value: str) -> CustomerBuilder:
        self.body.nickname = value
        return self

    def email_address(self, value: str) -> CustomerBuilder:
        self.body.email_address = value
        return self

    def address(self, value: Address) -> CustomerBuilder:
        self.body.address = value
        return self

    def phone_number(self, value: str) -> CustomerBuilder:
        self.body.phone_number = value
        return self

    def reference_id(self, value: str) -> CustomerBuilder:
        self.body.reference_id = value
        return self

    def note(self, value: str) -> CustomerBuilder:
        self.body.note = value
        return self

    def birthday(self, value: str) -> CustomerBuilder:
        self.body.birthday = value
        return self

    def version(self, value: int) -> CustomerBuilder:
        """Optimistic concurrency: the update fails if the customer changed since."""
        self.body.version = value
        return self


class Customers(ApiResource):
    """Manage the customer directory."""

    def list(
        self,
        cursor: str | None = None,
        limit: int | None = None,
        sort_field: CustomerSortField | None = None,
        sort_order: SortOrder | None = None,
    ) -> SquareResponse:
        """List customers, one page at a time (body key "customers")."""
        return self._client.request(
            Verb.GET,
            SquareAPI.customers(),
            params={
                "cursor": cursor,
                "limit": limit,
                "sort_field": sort_field,
                "sort_order": sort_order,
            },
        )

    def iter_all(self, **kwargs: Any) -> Iterator[dict[str, Any]]:
        """Iterate over every customer across all pages."""
        return iter_items(lambda c: self.list(cursor=c, **kwargs), "customers")

    def create(self, customer: CustomerRequest) -> SquareResponse:
        response = self._client.request(Verb.POST, SquareAPI.customers(), json=customer)
        logger.info("Created customer %s", (response.get("customer") or {}).get("id"))
        return response

    def search(
        self,
        query: dict[str, Any] | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> SquareResponse:
        """
        Search customers. ``query`` is Square's CustomerQuery, e.g.
        {"filter": {"email_address": {"exact": "a@b.c"}}}.
        """
        body: dict[str, Any] = {"query": query, "limit": limit, "cursor": cursor}
        return self._client.request(
            Verb.POST, SquareAPI.customers("/search"), json=body
        )

    def search_by_email(self, email: str) -> SquareResponse:
        return self.search({"filter": {"email_address": {"exact": email}}})

    def retrieve(self, customer_id: str) -> SquareResponse:
        return self._client.request(
            Verb.GET, SquareAPI.customers(f"/{path_id(customer_id)}")
        )

    def update(self, customer_id: str, customer: CustomerRequest) -> SquareResponse:
        """Update a customer; only fields set on the body change."""
        body = customer.to_dict()
        # The update endpoint does not take an idempotency key
        body.pop("idempotency_key", None)
        return self._client.request(
            Verb.PUT, SquareAPI.customers(f"/{path_id(customer_id)}"), json=body
        )

    def delete(self, customer_id: str, version: int | None = None) -> SquareResponse:
        return self._client.request(
            Verb.DELETE,
            SquareAPI.customers(f"/{path_id(customer_id)}"),
            params={"version": version},
        )
