"""
Decoded responses from the Square API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TypeVar

from square_ox.objects.base import SquareObject

T = TypeVar("T", bound=SquareObject)


@dataclass
class ResponseError:
    """One entry of the ``errors`` array Square returns on failure."""

    category: str | None = None
    code: str | None = None
    detail: str | None = None
    field: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseError:
        return cls(
            category=data.get("category"),
            code=data.get("code"),
            detail=data.get("detail"),
            field=data.get("field"),
        )


def parse_errors(body: Any) -> list[ResponseError]:
    """Return the ``errors`` entries of a decoded body (empty if there are none)."""
    if not isinstance(body, dict):
        return []
    raw = body.get("errors") or []
    return [ResponseError.from_dict(e) for e in raw if isinstance(e, dict)]


class SquareResponse:
    """
    A decoded JSON body together with its HTTP status.

    Behaves like a read-only mapping over the body, so ``resp["location"]``
    and ``resp.get("cursor")`` work; ``parse`` turns a key into typed objects.
    """

    def __init__(self, status_code: int, body: dict[str, Any] | None = None) -> None:
        self.status_code = status_code
        self.body: dict[str, Any] = body if body is not None else {}
        self.errors = parse_errors(self.body)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300 and not self.errors

    @property
    def cursor(self) -> str | None:
        cursor = self.body.get("cursor")
        return cursor or None

    def get(self, key: str, default: Any = None) -> Any:
        return self.body.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.body[key]

    def __contains__(self, key: object) -> bool:
        return key in self.body

    def __iter__(self) -> Iterator[str]:
        return iter(self.body)

    def parse(self, key: str, cls: type[T]) -> T | list[T] | None:
        """
        Decode ``body[key]`` into ``cls``: a single object for a dict, a list for
        a list, None when the key is absent.
        """
        value = self.body.get(key)
        if value is None:
            return None
        if isinstance(value, list):
            return [cls.from_dict(v) for v in value]
        return cls.from_dict(value)

    def __repr__(self) -> str:
        return (
            f"SquareResponse(status_code={self.status_code}, "
            f"keys={sorted(self.body)!r}, errors={len(self.errors)})"
        )
