"""
Common base for the resource classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from square_ox.client import SquareClient


def path_id(value: str) -> str:
    """URL-quote an id used as a path segment; empty ids are rejected."""
    if value is None or not str(value).strip():
        raise ValueError("id must be a non-empty string")
    return quote(str(value).strip(), safe="")


class ApiResource:
    """A group of related Square endpoints bound to a client."""

    def __init__(self, client: SquareClient) -> None:
        self._client = client

    @property
    def client(self) -> SquareClient:
        return self._client
