"""
Base class for the dataclasses that travel over the wire.

``to_dict`` produces the JSON body Square expects: unset (None) fields are
left out, enums become their string value and nested objects are expanded.
``from_dict`` is lenient: keys the model does not know are ignored and enum
values it does not recognise are kept as plain strings, so new API fields
never break decoding.
"""

from __future__ import annotations

import types
import typing
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, TypeVar, Union, get_args, get_origin

T = TypeVar("T", bound="SquareObject")

_HINTS_CACHE: dict[type, dict[str, Any]] = {}


def encode(value: Any) -> Any:
    """Convert a value into JSON-ready primitives."""
    if isinstance(value, SquareObject):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode(v) for v in value]
    if isinstance(value, dict):
        return {k: encode(v) for k, v in value.items() if v is not None}
    return value


def _decode(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        candidates = [a for a in get_args(tp) if a is not type(None)]
        if len(candidates) == 1:
            return _decode(candidates[0], value)
        return value
    if origin is list:
        (item_tp,) = get_args(tp) or (Any,)
        if not isinstance(value, list):
            return value
        return [_decode(item_tp, v) for v in value]
    if origin is dict:
        return dict(value) if isinstance(value, dict) else value
    if isinstance(tp, type):
        if issubclass(tp, SquareObject) and isinstance(value, dict):
            return tp.from_dict(value)
        if issubclass(tp, Enum):
            try:
                return tp(value)
            except ValueError:
                return value
    return value


def _type_hints(cls: type) -> dict[str, Any]:
    hints = _HINTS_CACHE.get(cls)
    if hints is None:
        hints = typing.get_type_hints(cls)
        _HINTS_CACHE[cls] = hints
    return hints


class SquareObject:
    """Mixin for @dataclass models exchanged with the Square API."""

    def to_dict(self) -> dict[str, Any]:
        if not is_dataclass(self):
            raise TypeError(f"{type(self).__name__} is not a dataclass")
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = encode(value)
        return out

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        hints = _type_hints(cls)
        known = {f.name for f in fields(cls)}
        kwargs = {
            key: _decode(hints.get(key, Any), value)
            for key, value in data.items()
            if key in known
        }
        return cls(**kwargs)
