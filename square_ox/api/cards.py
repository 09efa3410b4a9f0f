"""
Cards (cards on file) functionality of the Square API.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from square_ox.api.base import ApiResource, path_id
from square_ox.builder import Builder, new_idempotency_key
from square_ox.endpoint import SquareAPI, Verb
from square_ox.objects import Address, Card, SortOrder, SquareObject
from square_ox.response import SquareResponse


@dataclass
class CardRequest(SquareObject):
    idempotency_key: str | None = field(default_factory=new_idempotency_key)
    source_id: str | None = None
    verification_token: str | None = None
    card: Card = field(default_factory=Card)


class CardBuilder(Builder[CardRequest]):
    """Build a CardRequest; source_id and the owning customer are required."""

    def __init__(self, body: CardRequest | None = None) -> None:
        super().__init__(body or CardRequest())

    def validate(self) -> None:
        self._require(self.body.source_id, "source_id")
        self._require(self.body.card.customer_id, "card.customer_id")

    def source_id(self, source_id: str) -> CardBuilder:
        self.body.source_id = source_id
        return self

    def verification_token(self, token: str) -> CardBuilder:
        self.body.verification_token = token
        return self

    def customer_id(self, customer_id: str) -> CardBuilder:
        self.body.card.customer_id = customer_id
        return self

    def cardholder_name(self, name: str) -> CardBuilder:
        self.body.card.cardholder_name = name
        return self

    def billing_address(self, address: Address) -> CardBuilder:
        self.body.card.billing_address = address
        return self

    def reference_id(self, reference_id: str) -> CardBuilder:
        self.body.card.reference_id = reference_id
        return self


class Cards(ApiResource):
    """Store, list and disable cards on file."""

    def list(
        self,
        cursor: str | None = None,
        customer_id: str | None = None,
        include_disabled: bool | None = None,
        reference_id: str | None = None,
        sort_order: SortOrder | None = None,
    ) -> SquareResponse:
        return self._client.request(
            Verb.GET,
            SquareAPI.cards(),
            params={
                "cursor": cursor,
                "customer_id": customer_id,
                "include_disabled": include_disabled,
                "reference_id": reference_id,
                "sort_order": sort_order,
            },
        )

    def create(self, card: CardRequest) -> SquareResponse:
        return self._client.request(Verb.POST, SquareAPI.cards(), json=card)

    def retrieve(self, card_id: str) -> SquareResponse:
        return self._client.request(Verb.GET, SquareAPI.cards(f"/{path_id(card_id)}"))

    def disable(self, card_id: str) -> SquareResponse:
        """Disable a card; it can no longer be charged. This cannot be undone."""
        return self._client.request(
            Verb.POST, SquareAPI.cards(f"/{path_id(card_id)}/disable")
        )
