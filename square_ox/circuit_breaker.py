"""
Circuit breaker guarding the Square API transport.
Stops sending requests after N consecutive failures and probes again after a timeout.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from threading import Lock
from typing import Callable

from square_ox.errors import CircuitOpenError

logger = logging.getLogger(__name__)


class CircuitState(Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation
    OPEN = "open"  # Failing, reject requests
    HALF_OPEN = "half_open"  # Testing if the API recovered


class CircuitBreaker:
    """
    Circuit breaker that opens after N consecutive failures and auto-recovers after timeout.
    Thread-safe.
    """

    def __init__(
        self,
        failure_threshold: int = 5,
        recovery_timeout_sec: float = 60.0,
        name: str = "square",
        is_failure: Callable[[Exception], bool] | None = None,
    ) -> None:
        """
        Args:
            failure_threshold: Number of consecutive failures before opening circuit
            recovery_timeout_sec: Seconds to wait before attempting recovery (half-open)
            name: Name for logging
            is_failure: Optional predicate; exceptions for which it returns False
                propagate without counting against the circuit
        """
        self._failure_threshold = max(1, failure_threshold)
        self._recovery_timeout_sec = max(1.0, recovery_timeout_sec)
        self._name = name
        self._is_failure = is_failure

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._last_failure_time: float | None = None
        self._probe_in_flight = False
        self._lock = Lock()

    def call(self, func, *args, **kwargs):
        """
        Execute a function with circuit breaker protection.

        In HALF_OPEN only one trial call runs at a time; other callers are
        rejected until it settles the state.

        Raises:
            CircuitOpenError: If the circuit is open or a recovery probe is in flight
            Exception: Whatever func raises
        """
        probing = False
        with self._lock:
            if self._state == CircuitState.OPEN:
                elapsed = (
                    time.time() - self._last_failure_time
                    if self._last_failure_time is not None
                    else 0.0
                )
                if elapsed >= self._recovery_timeout_sec:
                    self._state = CircuitState.HALF_OPEN
                    self._probe_in_flight = False
                    logger.info(
                        "%s: Circuit entering HALF_OPEN state (testing recovery)",
                        self._name,
                    )
                else:
                    raise CircuitOpenError(
                        f"Circuit breaker is OPEN (failed {self._failure_count} times, "
                        f"retry in {self._recovery_timeout_sec - elapsed:.1f}s)"
                    )
            if self._state == CircuitState.HALF_OPEN:
                if self._probe_in_flight:
                    raise CircuitOpenError(
                        "Circuit breaker is OPEN (recovery probe in progress)"
                    )
                self._probe_in_flight = True
                probing = True

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            if self._is_failure is not None and not self._is_failure(e):
                self._record_success(probing)
                raise
            self._record_failure()
            raise
        else:
            self._record_success(probing)
        finally:
            if probing:
                with self._lock:
                    self._probe_in_flight = False
        return result

    def _record_success(self, probing: bool = False) -> None:
        with self._lock:
            if self._state == CircuitState.HALF_OPEN and probing:
                self._state = CircuitState.CLOSED
                self._failure_count = 0
                self._last_failure_time = None
                logger.info("%s: Circuit CLOSED (recovered)", self._name)
            elif self._state == CircuitState.CLOSED:
                self._failure_count = 0

    def _record_failure(self) -> None:
        with self._lock:
            self._failure_count += 1
            self._last_failure_time = time.time()
            if self._state == CircuitState.HALF_OPEN:
                self._state = CircuitState.OPEN
                logger.warning(
                    "%s: Circuit OPEN (failed during recovery)", self._name
                )
            elif (
                self._state == CircuitState.CLOSED
                and self._failure_count >= self._failure_threshold
            ):
                self._state = CircuitState.OPEN
                logger.warning(
                    "%s: Circuit OPEN (failed %d times)",
                    self._name,
                    self._failure_count,
                )

    def get_state(self) -> CircuitState:
        """Get current circuit state."""
        with self._lock:
            return self._state

    def reset(self) -> None:
        """Manually reset circuit to CLOSED state."""
        with self._lock:
            self._state = CircuitState.CLOSED
            self._failure_count = 0
            self._last_failure_time = None
            self._probe_in_flight = False
            logger.info("%s: Circuit manually reset", self._name)
