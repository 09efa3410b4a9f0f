"""
Client configuration: a "square" config section merged with defaults,
then overridden by SQUARE_* environment variables (optionally from a .env file).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SQUARE_VERSION = "2024-12-18"

CLIENT_DEFAULTS: dict[str, Any] = {
    "access_token": None,
    "environment": "sandbox",
    "square_version": DEFAULT_SQUARE_VERSION,
    "timeout_sec": 30.0,
    "retry_max": 2,
    "retry_delay_sec": 0.5,
    "circuit_breaker_failure_threshold": 5,
    "circuit_breaker_recovery_timeout_sec": 60.0,
    "ca_bundle": None,
}

# Environment variable -> config key
ENV_OVERRIDES = {
    "SQUARE_ACCESS_TOKEN": "access_token",
    "SQUARE_ENVIRONMENT": "environment",
    "SQUARE_VERSION": "square_version",
    "SQUARE_TIMEOUT_SEC": "timeout_sec",
    "SQUARE_RETRY_MAX": "retry_max",
    "SQUARE_CA_BUNDLE": "ca_bundle",
}


def normalize_environment(value: Any) -> str:
    """Map "production"/"prod"/"live" to production; anything else is the sandbox."""
    v = str(value or "").strip().lower()
    return "production" if v in ("production", "prod", "live") else "sandbox"


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


CLIENT_VALIDATORS: dict[str, Callable[[Any], Any]] = {
    "access_token": _optional_str,
    "environment": normalize_environment,
    "square_version": lambda v: str(v).strip() or DEFAULT_SQUARE_VERSION,
    "timeout_sec": lambda v: max(1.0, min(300.0, float(v))),
    "retry_max": lambda v: max(0, min(10, int(v))),
    "retry_delay_sec": lambda v: max(0.0, min(30.0, float(v))),
    "circuit_breaker_failure_threshold": lambda v: max(1, int(v)),
    "circuit_breaker_recovery_timeout_sec": lambda v: max(1.0, float(v)),
    "ca_bundle": _optional_str,
}


def get_section(
    raw_config: Mapping[str, Any] | None,
    section: str,
    defaults: dict[str, Any],
    validators: dict[str, Callable[[Any], Any]] | None = None,
) -> dict[str, Any]:
    """
    Return a normalized config section by merging the raw section with defaults and applying validators.

    Keys not present in defaults are dropped. A value its validator rejects
    falls back to the default.
    """
    validators = validators or {}
    raw_section = dict((raw_config or {}).get(section) or {})
    out = dict(defaults)
    for k, v in raw_section.items():
        if k in defaults:
            out[k] = v
    for k, validator in validators.items():
        if k not in out:
            continue
        try:
            out[k] = validator(out[k])
        except (TypeError, ValueError):
            logger.debug("Invalid %s.%s=%r, using default", section, k, out[k])
            out[k] = defaults.get(k)
    return out


def load_env(dotenv_path: str | os.PathLike | None = None) -> bool:
    """Load a .env file into os.environ without overriding variables already set."""
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def get_client_config(
    raw_config: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """
    Build SquareClient keyword arguments.

    Args:
        raw_config: Full config dict; only its "square" section is read
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Normalized config dict with every key of CLIENT_DEFAULTS
    """
    environ = os.environ if environ is None else environ
    section = dict((raw_config or {}).get("square") or {})
    for env_name, key in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value is not None and value.strip():
            section[key] = value
    return get_section({"square": section}, "square", CLIENT_DEFAULTS, CLIENT_VALIDATORS)


def configure_logging(level: str | None = None, log_path: str | None = None) -> None:
    """
    Configure root logging for scripts and the example server.
    Level defaults to SQUARE_LOG_LEVEL (or INFO); an optional file handler mirrors the console.
    """
    level_name = (level or os.environ.get("SQUARE_LOG_LEVEL") or "INFO").upper()
    lvl = getattr(logging, level_name, logging.INFO)
    log_fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    logging.basicConfig(level=lvl, format=log_fmt)
    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(lvl)
        fh.setFormatter(logging.Formatter(log_fmt))
        logging.getLogger().addHandler(fh)
