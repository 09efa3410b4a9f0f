"""
Fluent builders for request bodies.

A builder wraps the body it fills in; ``build()`` validates it and hands it
back, raising ``ValidationError`` when something Square requires is missing.
Each resource module defines the builders for its own request bodies.
"""

from __future__ import annotations

import uuid
from typing import Generic, TypeVar

from square_ox.errors import ValidationError

B = TypeVar("B")


def new_idempotency_key() -> str:
    """Random UUID4 used to deduplicate retried mutations on Square's side."""
    return str(uuid.uuid4())


class Builder(Generic[B]):
    """Base for all request body builders."""

    def __init__(self, body: B) -> None:
        self.body = body

    def validate(self) -> None:
        """Raise ValidationError if the body is incomplete. Override in subclasses."""

    def build(self) -> B:
        self.validate()
        return self.body

    def _require(self, value: object, field: str) -> None:
        if value is None or value == "" or value == []:
            raise ValidationError(
                f"{type(self).__name__}: {field} is required", field=field
            )
