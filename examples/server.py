#!/usr/bin/env python3
"""
Example integration server: a card payment page backed by square_ox.

Serves a Web Payments SDK form from examples/static, hands the browser the
public application/location ids, and charges the tokenized card with the
blocking SquareClient. For manual testing against the sandbox only.

Usage:
    SQUARE_ACCESS_TOKEN=... SQUARE_APPLICATION_ID=... python -m examples.server --port 8080
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from square_ox import (
    CircuitOpenError,
    SquareAPIError,
    SquareClient,
    SquareError,
    SquareTransportError,
    ValidationError,
    __version__,
)
from square_ox.api import PaymentBuilder
from square_ox.config import configure_logging, load_env
from square_ox.objects import Currency, Money

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


class PaymentIn(BaseModel):
    """Body posted by the payment page."""

    source_id: str = Field(min_length=1)
    amount: int = Field(gt=0, description="Amount in the smallest currency unit")
    currency: str = "USD"
    idempotency_key: str | None = None
    verification_token: str | None = None
    note: str | None = None


class PaymentDemoServer:
    """
    FastAPI app around a SquareClient.
    Provides health/version endpoints, CORS, request ids and JSON error responses.
    """

    def __init__(
        self,
        client: SquareClient,
        application_id: str | None = None,
        location_id: str | None = None,
        host: str = "localhost",
        port: int = 8080,
        cors_origins: list[str] | None = None,
        static_dir: Path | None = STATIC_DIR,
    ) -> None:
        """
        Args:
            client: SquareClient used for all API calls
            application_id: Public Square application id handed to the Web Payments SDK
            location_id: Location to charge; the first active location when None
            host: Host to bind to
            port: Port to bind to
            cors_origins: CORS allowed origins (None = allow all)
            static_dir: Directory with index.html; None disables static files
        """
        self._client = client
        self._application_id = application_id
        self._location_id = location_id
        self._host = host
        self._port = port
        self._start_time = time.time()

        @asynccontextmanager
        async def lifespan(app: FastAPI):
            logger.info("Payment demo server starting on %s:%d", host, port)
            yield
            logger.info("Payment demo server shutting down")
            self._client.close()

        self._app = FastAPI(
            title="square-ox payment demo",
            version=__version__,
            lifespan=lifespan,
        )

        if cors_origins is None:
            cors_origins = ["*"]
        self._app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        @self._app.middleware("http")
        async def add_request_id(request: Request, call_next):
            request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
            start = time.time()
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.debug(
                "%s %s -> %d (%.3fs) [%s]",
                request.method,
                request.url.path,
                response.status_code,
                time.time() - start,
                request_id,
            )
            return response

        self._setup_endpoints()

        # Mounted last so the API routes take precedence over "/"
        if static_dir is not None and Path(static_dir).is_dir():
            self._app.mount(
                "/", StaticFiles(directory=str(static_dir), html=True), name="static"
            )

    def _error_response(
        self, status_code: int, error_code: str, message: str, **extra: Any
    ) -> JSONResponse:
        """Return JSONResponse with error code and message."""
        content: dict[str, Any] = {"error": error_code, "message": message}
        content.update(extra)
        return JSONResponse(status_code=status_code, content=content)

    def _square_error_response(self, e: SquareError) -> JSONResponse:
        """Map a square_ox exception to an HTTP error for the browser."""
        if isinstance(e, ValidationError):
            return self._error_response(
                status.HTTP_400_BAD_REQUEST, "invalid_request", str(e)
            )
        if isinstance(e, SquareAPIError):
            code = (
                e.status_code
                if 400 <= e.status_code < 500
                else status.HTTP_502_BAD_GATEWAY
            )
            return self._error_response(
                code,
                "square_error",
                str(e),
                errors=[
                    {"category": x.category, "code": x.code, "detail": x.detail}
                    for x in e.errors
                ],
            )
        if isinstance(e, (SquareTransportError, CircuitOpenError)):
            return self._error_response(
                status.HTTP_503_SERVICE_UNAVAILABLE, "square_unavailable", str(e)
            )
        return self._error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", str(e)
        )

    def _resolve_location_id(self) -> str | None:
        """Configured location, else the first ACTIVE location of the seller."""
        if self._location_id:
            return self._location_id
        locations = self._client.locations.list().get("locations") or []
        for location in locations:
            if location.get("status") == "ACTIVE":
                self._location_id = location.get("id")
                break
        else:
            if locations:
                self._location_id = locations[0].get("id")
        if self._location_id:
            logger.info("Using location %s", self._location_id)
        return self._location_id

    def _setup_endpoints(self) -> None:
        @self._app.get("/health")
        def health() -> dict[str, Any]:
            return {
                "status": "ok",
                "environment": self._client.mode.value,
                "uptime_sec": time.time() - self._start_time,
            }

        @self._app.get("/version")
        def version() -> dict[str, Any]:
            return {"square_ox_version": __version__}

        @self._app.get("/config")
        def config():
            """Public ids the Web Payments SDK needs in the browser."""
            try:
                location_id = self._resolve_location_id()
            except SquareError as e:
                logger.warning("Could not resolve location: %s", e)
                return self._square_error_response(e)
            return {
                "application_id": self._application_id,
                "location_id": location_id,
                "environment": self._client.mode.value,
            }

        @self._app.get("/locations")
        def locations():
            try:
                response = self._client.locations.list()
            except SquareError as e:
                logger.warning("List locations failed: %s", e)
                return self._square_error_response(e)
            return {"locations": response.get("locations") or []}

        @self._app.post("/payment")
        def payment(body: PaymentIn):
            try:
                currency = Currency(body.currency.upper())
            except ValueError:
                return self._error_response(
                    status.HTTP_400_BAD_REQUEST,
                    "invalid_request",
                    f"Unsupported currency: {body.currency}",
                )
            try:
                builder = (
                    PaymentBuilder()
                    .source_id(body.source_id)
                    .amount_money(Money(amount=body.amount, currency=currency))
                )
                if body.idempotency_key:
                    builder.idempotency_key(body.idempotency_key)
                if body.verification_token:
                    builder.verification_token(body.verification_token)
                if body.note:
                    builder.note(body.note)
                location_id = self._resolve_location_id()
                if location_id:
                    builder.location_id(location_id)
                response = self._client.payments.create(builder.build())
            except SquareError as e:
                logger.warning("Payment failed: %s", e)
                return self._square_error_response(e)
            created = response.get("payment") or {}
            return {
                "success": True,
                "payment": {
                    "id": created.get("id"),
                    "status": created.get("status"),
                    "receipt_url": created.get("receipt_url"),
                },
            }

    def get_app(self) -> FastAPI:
        """Get the FastAPI app instance."""
        return self._app

    def run(self) -> None:
        """Run the server (blocking)."""
        import uvicorn

        try:
            uvicorn.run(self._app, host=self._host, port=self._port, log_level="info")
        except KeyboardInterrupt:
            logger.info("Server stopped by user")


def create_app(client: SquareClient | None = None, **kwargs: Any) -> FastAPI:
    """App factory (e.g. for `uvicorn --factory examples.server:create_app`)."""
    if client is None:
        client = SquareClient.from_env()
    kwargs.setdefault("application_id", os.environ.get("SQUARE_APPLICATION_ID"))
    kwargs.setdefault("location_id", os.environ.get("SQUARE_LOCATION_ID"))
    return PaymentDemoServer(client, **kwargs).get_app()


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the square-ox payment demo server")
    parser.add_argument("--host", default="localhost", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8080, help="Port to bind to")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--log-level", default=None, help="Logging level (default: SQUARE_LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument(
        "--cors-origin",
        action="append",
        default=None,
        help="Allowed CORS origin (repeatable; default: any)",
    )
    args = parser.parse_args()

    load_env(args.env_file)
    configure_logging(args.log_level, args.log_file)
    try:
        client = SquareClient.from_config()
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(1)

    server = PaymentDemoServer(
        client,
        application_id=os.environ.get("SQUARE_APPLICATION_ID"),
        location_id=os.environ.get("SQUARE_LOCATION_ID"),
        host=args.host,
        port=args.port,
        cors_origins=args.cors_origin,
    )
    server.run()


if __name__ == "__main__":
    main()
