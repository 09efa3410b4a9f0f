"""
Retry logic with exponential backoff for Square API requests.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

import requests

from square_ox.errors import SquareAPIError, SquareTransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_transient(exc: Exception) -> bool:
    """
    True for failures worth retrying: lost connections, timeouts, rate limiting
    and gateway/server errors. Validation and 4xx errors are final.
    """
    if isinstance(exc, SquareAPIError):
        return exc.status_code in RETRYABLE_STATUS_CODES
    if isinstance(exc, SquareTransportError):
        cause = exc.__cause__
        # A bad certificate will not fix itself on the next attempt
        return not isinstance(cause, requests.exceptions.SSLError)
    return isinstance(
        exc, (requests.exceptions.ConnectionError, requests.exceptions.Timeout)
    )


class RetryPolicy:
    """
    Retry policy with exponential backoff.
    """

    def __init__(
        self,
        max_retries: int = 2,
        initial_delay_sec: float = 0.5,
        max_delay_sec: float = 30.0,
        backoff_multiplier: float = 2.0,
    ) -> None:
        """
        Args:
            max_retries: Maximum number of retry attempts (0 = no retries)
            initial_delay_sec: Delay before the first retry
            max_delay_sec: Maximum delay between retries
            backoff_multiplier: Multiplier for exponential backoff
        """
        self._max_retries = max(0, max_retries)
        self._initial_delay = max(0.0, initial_delay_sec)
        self._max_delay = max(self._initial_delay, max_delay_sec)
        self._backoff_multiplier = max(1.0, backoff_multiplier)

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def delays(self) -> list[float]:
        """The sleep before each retry, in order."""
        out = []
        delay = self._initial_delay
        for _ in range(self._max_retries):
            out.append(min(delay, self._max_delay))
            delay *= self._backoff_multiplier
        return out

    def execute(
        self,
        func: Callable[[], T],
        should_retry: Callable[[Exception], bool] | None = None,
    ) -> T:
        """
        Execute a function with retry logic.

        Args:
            func: Function to execute (no arguments)
            should_retry: Optional callable that takes the exception and returns True
                if the call should be retried. If None, retries on all exceptions.

        Returns:
            Function result

        Raises:
            The first non-retryable exception, or the last one once retries are exhausted
        """
        delays = self.delays()
        attempt = 0
        while True:
            try:
                return func()
            except Exception as e:
                if should_retry is not None and not should_retry(e):
                    raise
                if attempt >= self._max_retries:
                    logger.debug(
                        "Retry exhausted after %d attempts: %s", attempt + 1, e
                    )
                    raise
                delay = delays[attempt]
                attempt += 1
                logger.warning(
                    "Retry attempt %d/%d after %.2fs: %s",
                    attempt,
                    self._max_retries,
                    delay,
                    e,
                )
                time.sleep(delay)
