"""Tests for square_ox.circuit_breaker: CircuitState, CircuitBreaker call, state transitions."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from square_ox.circuit_breaker import CircuitBreaker, CircuitState
from square_ox.errors import CircuitOpenError


def _raise_value_error(msg: str = "err") -> None:
    raise ValueError(msg)


def test_circuit_breaker_closed_success() -> None:
    cb = CircuitBreaker(failure_threshold=2, recovery_timeout_sec=60.0)
    assert cb.call(lambda: 42) == 42
    assert cb.get_state() == CircuitState.CLOSED
    assert cb._failure_count == 0


def test_circuit_breaker_closed_failure_increments_count() -> None:
    cb = CircuitBreaker(failure_threshold=3, recovery_timeout_sec=60.0)
    with pytest.raises(ValueError, match="err"):
        cb.call(lambda: _raise_value_error("err"))
    assert cb.get_state() == CircuitState.CLOSED
    assert cb._failure_count == 1


def test_circuit_breaker_success_resets_count() -> None:
    cb = CircuitBreaker(failure_threshold=3, recovery_timeout_sec=60.0)
    with pytest.raises(ValueError):
        cb.call(lambda: _raise_value_error())
    cb.call(lambda: 1)
    assert cb._failure_count == 0


def test_circuit_breaker_opens_after_threshold() -> None:
    cb = CircuitBreaker(failure_threshold=2, recovery_timeout_sec=60.0)
    for _ in range(2):
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("fail"))
    assert cb.get_state() == CircuitState.OPEN
    with pytest.raises(CircuitOpenError, match="Circuit breaker is OPEN"):
        cb.call(lambda: 1)


def test_circuit_open_error_is_runtime_error() -> None:
    cb = CircuitBreaker(failure_threshold=1, recovery_timeout_sec=60.0)
    with pytest.raises(ValueError):
        cb.call(lambda: _raise_value_error())
    with pytest.raises(RuntimeError):
        cb.call(lambda: 1)


def test_circuit_breaker_half_open_after_recovery_timeout() -> None:
    cb = CircuitBreaker(failure_threshold=1, recovery_timeout_sec=1.0)
    with patch("square_ox.circuit_breaker.time.time", return_value=1000.0):
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("fail"))
    assert cb.get_state() == CircuitState.OPEN
    with patch("square_ox.circuit_breaker.time.time", return_value=1001.5):
        assert cb.call(lambda: 100) == 100
    assert cb.get_state() == CircuitState.CLOSED


def test_circuit_breaker_half_open_failure_reopens() -> None:
    cb = CircuitBreaker(failure_threshold=1, recovery_timeout_sec=1.0)
    with patch("square_ox.circuit_breaker.time.time", return_value=1000.0):
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("fail"))
    with patch("square_ox.circuit_breaker.time.time", return_value=1001.5):
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("again"))
    assert cb.get_state() == CircuitState.OPEN


def test_circuit_breaker_ignores_non_failures() -> None:
    cb = CircuitBreaker(
        failure_threshold=1,
        recovery_timeout_sec=60.0,
        is_failure=lambda e: not isinstance(e, KeyError),
    )
    for _ in range(3):
        with pytest.raises(KeyError):
            cb.call(lambda: {}["missing"])
    assert cb.get_state() == CircuitState.CLOSED


def test_circuit_breaker_reset() -> None:
    cb = CircuitBreaker(failure_threshold=1, recovery_timeout_sec=60.0)
    with pytest.raises(ValueError):
        cb.call(lambda: _raise_value_error())
    cb.reset()
    assert cb.get_state() == CircuitState.CLOSED
    assert cb.call(lambda: 7) == 7


def test_circuit_breaker_init_clamps() -> None:
    cb = CircuitBreaker(failure_threshold=0, recovery_timeout_sec=0)
    assert cb._failure_threshold >= 1
    assert cb._recovery_timeout_sec >= 1.0


def test_circuit_state_enum_values() -> None:
    assert CircuitState.CLOSED.value == "closed"
    assert CircuitState.OPEN.value == "open"
    assert CircuitState.HALF_OPEN.value == "half_open"


def test_circuit_breaker_late_success_does_not_close_open_circuit() -> None:
    cb = CircuitBreaker(failure_threshold=1, recovery_timeout_sec=60.0)

    def slow_call() -> str:
        # Another caller trips the breaker while this call is still running
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("concurrent failure"))
        assert cb.get_state() == CircuitState.OPEN
        return "late ok"

    assert cb.call(slow_call) == "late ok"
    assert cb.get_state() == CircuitState.OPEN
    assert cb._failure_count == 1
    with pytest.raises(CircuitOpenError):
        cb.call(lambda: 1)


def test_circuit_breaker_late_non_failure_does_not_close_open_circuit() -> None:
    cb = CircuitBreaker(
        failure_threshold=1,
        recovery_timeout_sec=60.0,
        is_failure=lambda e: not isinstance(e, KeyError),
    )

    def slow_lookup() -> None:
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("concurrent failure"))
        raise KeyError("missing")

    with pytest.raises(KeyError):
        cb.call(slow_lookup)
    assert cb.get_state() == CircuitState.OPEN


def test_circuit_breaker_half_open_allows_single_trial_call() -> None:
    cb = CircuitBreaker(failure_threshold=1, recovery_timeout_sec=1.0)
    with patch("square_ox.circuit_breaker.time.time", return_value=1000.0):
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("fail"))

    def trial() -> str:
        assert cb.get_state() == CircuitState.HALF_OPEN
        with pytest.raises(CircuitOpenError, match="probe in progress"):
            cb.call(lambda: "second caller")
        return "recovered"

    with patch("square_ox.circuit_breaker.time.time", return_value=1001.5):
        assert cb.call(trial) == "recovered"
    assert cb.get_state() == CircuitState.CLOSED
    assert cb.call(lambda: 5) == 5


def test_circuit_breaker_half_open_non_failure_closes() -> None:
    cb = CircuitBreaker(
        failure_threshold=1,
        recovery_timeout_sec=1.0,
        is_failure=lambda e: not isinstance(e, KeyError),
    )
    with patch("square_ox.circuit_breaker.time.time", return_value=1000.0):
        with pytest.raises(ValueError):
            cb.call(lambda: _raise_value_error("fail"))
    with patch("square_ox.circuit_breaker.time.time", return_value=1001.5):
        with pytest.raises(KeyError):
            cb.call(lambda: {}["missing"])
    assert cb.get_state() == CircuitState.CLOSED
