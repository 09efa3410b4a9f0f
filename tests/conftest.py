"""Shared fixtures: a sandbox SquareClient whose HTTP session is mocked."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import MagicMock, patch

import pytest
import requests

from square_ox import SquareClient


def _make_response(
    status_code: int = 200, body: Any = None, text: str | None = None
) -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    resp.text = text
    resp.json.side_effect = lambda: json.loads(text)
    return resp


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    return _make_response


@pytest.fixture
def client() -> SquareClient:
    c = SquareClient("test-token", retry_max=0)
    yield c
    c.close()


@pytest.fixture
def session(client: SquareClient) -> MagicMock:
    """The client's Session.request, answering 200 {} unless a test says otherwise."""
    with patch.object(client._session, "request") as m:
        m.return_value = _make_response(200, {})
        yield m
