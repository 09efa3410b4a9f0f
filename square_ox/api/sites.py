"""
Sites (Square Online) functionality of the Square API.
"""

from __future__ import annotations

from square_ox.api.base import ApiResource
from square_ox.endpoint import SquareAPI, Verb
from square_ox.response import SquareResponse


class Sites(ApiResource):
    def list(self) -> SquareResponse:
        """List the Square Online sites of the seller (body key "sites")."""
        return self._client.request(Verb.GET, SquareAPI.sites())
