"""
The SquareClient sends requests to the Square API on behalf of the resource
classes in square_ox.api.

Create one with the access token of your application (see the Developer
Dashboard at https://developer.squareup.com/apps):

    from square_ox import SquareClient

    client = SquareClient("your_square_access_token")
    locations = client.locations.list()

Clients start in sandbox mode; call ``production()`` for a production client.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Any, Mapping, Sequence

import requests

from square_ox import __version__
from square_ox.circuit_breaker import CircuitBreaker
from square_ox.config import DEFAULT_SQUARE_VERSION, get_client_config, load_env
from square_ox.endpoint import SquareAPI, Verb, base_url, endpoint_url
from square_ox.errors import (
    SquareAPIError,
    SquareDecodeError,
    SquareTransportError,
)
from square_ox.objects.base import SquareObject, encode
from square_ox.response import SquareResponse, parse_errors
from square_ox.retry import RetryPolicy, is_transient

logger = logging.getLogger(__name__)

Params = Mapping[str, Any] | Sequence[tuple[str, Any]]


class ClientMode(Enum):
    """Which Square environment the client talks to."""

    PRODUCTION = "production"
    SANDBOXED = "sandbox"


def encode_params(params: Params | None) -> list[tuple[str, str]]:
    """
    Flatten query parameters into (name, value) pairs: None values are dropped,
    booleans become "true"/"false", enums their value and lists are comma-joined.
    """
    if not params:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    out: list[tuple[str, str]] = []
    for name, value in items:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, Enum):
            value = value.value
        elif isinstance(value, (list, tuple, set)):
            value = ",".join(str(encode(v)) for v in value)
        out.append((name, str(value)))
    return out


def _counts_against_circuit(exc: Exception) -> bool:
    # A 4xx means Square answered; only outages and throttling trip the breaker
    if isinstance(exc, SquareAPIError):
        return exc.retryable
    return True


class SquareClient:
    """
    Blocking client for the Square API v2.
    Provides authentication, retry with backoff, a circuit breaker and JSON (de)serialization.
    """

    def __init__(
        self,
        access_token: str,
        mode: ClientMode = ClientMode.SANDBOXED,
        square_version: str = DEFAULT_SQUARE_VERSION,
        timeout_sec: float = 30.0,
        retry_max: int = 2,
        retry_delay_sec: float = 0.5,
        circuit_breaker_failure_threshold: int = 5,
        circuit_breaker_recovery_timeout_sec: float = 60.0,
        ca_bundle: str | None = None,
    ) -> None:
        """
        Args:
            access_token: Access token of the Square application
            mode: ClientMode.SANDBOXED (default) or ClientMode.PRODUCTION
            square_version: Value of the Square-Version header
            timeout_sec: Request timeout in seconds
            retry_max: Maximum retry attempts for transient failures
            retry_delay_sec: Initial retry delay (exponential backoff)
            circuit_breaker_failure_threshold: Failures before opening circuit
            circuit_breaker_recovery_timeout_sec: Seconds before retry after circuit open
            ca_bundle: Optional CA bundle path used to verify TLS (for minimal runtimes)
        """
        if not access_token or not str(access_token).strip():
            raise ValueError("access_token is required")
        self._access_token = str(access_token).strip()
        self._mode = mode
        self._square_version = square_version
        self._timeout = timeout_sec
        self._retry_max = retry_max
        self._retry_delay = retry_delay_sec
        self._cb_threshold = circuit_breaker_failure_threshold
        self._cb_recovery = circuit_breaker_recovery_timeout_sec
        self._ca_bundle = ca_bundle

        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {self._access_token}",
                "Square-Version": square_version,
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": f"square-ox-python/{__version__}",
            }
        )
        if ca_bundle:
            self._session.verify = ca_bundle

        self._retry_policy = RetryPolicy(
            max_retries=retry_max,
            initial_delay_sec=retry_delay_sec,
        )
        self._circuit_breaker = CircuitBreaker(
            failure_threshold=circuit_breaker_failure_threshold,
            recovery_timeout_sec=circuit_breaker_recovery_timeout_sec,
            name=f"square_{mode.value}",
            is_failure=_counts_against_circuit,
        )

    # ---- construction ----
    @classmethod
    def from_config(
        cls,
        raw_config: Mapping[str, Any] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> SquareClient:
        """Create a client from a config dict's "square" section plus SQUARE_* env vars."""
        cfg = get_client_config(raw_config, environ)
        if not cfg["access_token"]:
            raise ValueError(
                "Square access token missing: set square.access_token or SQUARE_ACCESS_TOKEN"
            )
        mode = (
            ClientMode.PRODUCTION
            if cfg["environment"] == "production"
            else ClientMode.SANDBOXED
        )
        return cls(
            cfg["access_token"],
            mode=mode,
            square_version=cfg["square_version"],
            timeout_sec=cfg["timeout_sec"],
            retry_max=cfg["retry_max"],
            retry_delay_sec=cfg["retry_delay_sec"],
            circuit_breaker_failure_threshold=cfg["circuit_breaker_failure_threshold"],
            circuit_breaker_recovery_timeout_sec=cfg[
                "circuit_breaker_recovery_timeout_sec"
            ],
            ca_bundle=cfg["ca_bundle"],
        )

    @classmethod
    def from_env(cls, dotenv_path: str | os.PathLike | None = None) -> SquareClient:
        """Load .env (if present) and create a client from SQUARE_* env vars."""
        load_env(dotenv_path)
        return cls.from_config()

    def _with_mode(self, mode: ClientMode) -> SquareClient:
        return type(self)(
            self._access_token,
            mode=mode,
            square_version=self._square_version,
            timeout_sec=self._timeout,
            retry_max=self._retry_max,
            retry_delay_sec=self._retry_delay,
            circuit_breaker_failure_threshold=self._cb_threshold,
            circuit_breaker_recovery_timeout_sec=self._cb_recovery,
            ca_bundle=self._ca_bundle,
        )

    def production(self) -> SquareClient:
        """Return a copy of this client that talks to the production API."""
        return self._with_mode(ClientMode.PRODUCTION)

    def sandbox(self) -> SquareClient:
        """Return a copy of this client that talks to the sandbox."""
        return self._with_mode(ClientMode.SANDBOXED)

    @property
    def mode(self) -> ClientMode:
        return self._mode

    @property
    def is_production(self) -> bool:
        return self._mode is ClientMode.PRODUCTION

    @property
    def base_url(self) -> str:
        return base_url(self.is_production)

    def endpoint(self, api: SquareAPI) -> str:
        """Full URL of an endpoint for this client's mode."""
        return endpoint_url(self.is_production, api)

    # ---- transport ----
    def request(
        self,
        verb: Verb,
        api: SquareAPI,
        json: SquareObject | Mapping[str, Any] | None = None,
        params: Params | None = None,
        timeout: float | None = None,
    ) -> SquareResponse:
        """
        Send a request to a Square endpoint and decode the response.

        Args:
            verb: HTTP verb
            api: Endpoint (family plus path suffix)
            json: Optional body; dataclass models are serialized via to_dict()
            params: Optional query parameters
            timeout: Optional timeout (defaults to the client's)

        Returns:
            SquareResponse for a 2xx answer

        Raises:
            SquareAPIError: Square answered with 4xx/5xx
            SquareTransportError: The request could not be sent or timed out
            SquareDecodeError: The response body was not JSON
            CircuitOpenError: Too many recent failures; nothing was sent
        """
        url = self.endpoint(api)
        body = self._encode_body(json)
        query = encode_params(params)
        timeout = timeout if timeout is not None else self._timeout

        def _do_request() -> SquareResponse:
            try:
                response = self._session.request(
                    method=verb.value,
                    url=url,
                    json=body,
                    params=query or None,
                    timeout=timeout,
                )
            except requests.RequestException as e:
                raise SquareTransportError(
                    f"{verb.value} {url} failed: {e}"
                ) from e
            logger.debug("%s %s -> %d", verb.value, url, response.status_code)
            return self._decode_response(response)

        return self._circuit_breaker.call(
            lambda: self._retry_policy.execute(_do_request, should_retry=is_transient)
        )

    @staticmethod
    def _encode_body(json: Any) -> Any:
        if json is None:
            return None
        if isinstance(json, SquareObject):
            return json.to_dict()
        return encode(dict(json))

    @staticmethod
    def _decode_response(response: requests.Response) -> SquareResponse:
        data: Any = {}
        text = response.text
        if text and text.strip():
            try:
                data = response.json()
            except ValueError as e:
                if response.status_code >= 400:
                    raise SquareAPIError(
                        response.status_code, message=text.strip()[:200]
                    ) from e
                raise SquareDecodeError(
                    f"Invalid JSON in response ({response.status_code}): {e}"
                ) from e
        if not isinstance(data, dict):
            data = {"data": data}
        if response.status_code >= 400:
            errors = parse_errors(data)
            logger.debug(
                "Square API error %d: %s",
                response.status_code,
                [e.code for e in errors],
            )
            raise SquareAPIError(response.status_code, errors)
        return SquareResponse(response.status_code, data)

    # ---- resources ----
    @property
    def locations(self):
        from square_ox.api.locations import Locations

        return Locations(self)

    @property
    def customers(self):
        from square_ox.api.customers import Customers

        return Customers(self)

    @property
    def payments(self):
        from square_ox.api.payments import Payments

        return Payments(self)

    @property
    def cards(self):
        from square_ox.api.cards import Cards

        return Cards(self)

    @property
    def catalog(self):
        from square_ox.api.catalog import Catalog

        return Catalog(self)

    @property
    def bookings(self):
        from square_ox.api.bookings import Bookings

        return Bookings(self)

    @property
    def checkout(self):
        from square_ox.api.checkout import Checkout

        return Checkout(self)

    @property
    def inventory(self):
        from square_ox.api.inventory import Inventory

        return Inventory(self)

    @property
    def sites(self):
        from square_ox.api.sites import Sites

        return Sites(self)

    @property
    def terminal(self):
        from square_ox.api.terminal import Terminal

        return Terminal(self)

    @property
    def orders(self):
        from square_ox.api.orders import Orders

        return Orders(self)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"SquareClient(mode={self._mode.value}, version={self._square_version})"
