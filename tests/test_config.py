"""Tests for square_ox.config: get_section, env overrides, .env loading, logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from square_ox.config import (
    CLIENT_DEFAULTS,
    CLIENT_VALIDATORS,
    DEFAULT_SQUARE_VERSION,
    configure_logging,
    get_client_config,
    get_section,
    load_env,
    normalize_environment,
)


def test_get_section_defaults_when_missing() -> None:
    out = get_section({}, "square", CLIENT_DEFAULTS, CLIENT_VALIDATORS)
    assert out["environment"] == "sandbox"
    assert out["square_version"] == DEFAULT_SQUARE_VERSION
    assert out["access_token"] is None
    assert out["timeout_sec"] == 30.0


def test_get_section_drops_unknown_keys() -> None:
    out = get_section(
        {"square": {"bogus": 1, "retry_max": 3}},
        "square",
        CLIENT_DEFAULTS,
        CLIENT_VALIDATORS,
    )
    assert "bogus" not in out
    assert out["retry_max"] == 3


def test_get_section_clamps_values() -> None:
    out = get_section(
        {"square": {"timeout_sec": 10_000, "retry_max": -4, "retry_delay_sec": 99}},
        "square",
        CLIENT_DEFAULTS,
        CLIENT_VALIDATORS,
    )
    assert out["timeout_sec"] == 300.0
    assert out["retry_max"] == 0
    assert out["retry_delay_sec"] == 30.0


def test_get_section_invalid_value_falls_back_to_default() -> None:
    out = get_section(
        {"square": {"timeout_sec": "soon"}}, "square", CLIENT_DEFAULTS, CLIENT_VALIDATORS
    )
    assert out["timeout_sec"] == CLIENT_DEFAULTS["timeout_sec"]


@pytest.mark.parametrize(
    "value, expected",
    [
        ("production", "production"),
        ("PROD", "production"),
        (" live ", "production"),
        ("sandbox", "sandbox"),
        ("", "sandbox"),
        (None, "sandbox"),
        ("staging", "sandbox"),
    ],
)
def test_normalize_environment(value: str | None, expected: str) -> None:
    assert normalize_environment(value) == expected


def test_get_client_config_env_overrides_config() -> None:
    cfg = get_client_config(
        {"square": {"access_token": "from-config", "environment": "sandbox"}},
        environ={
            "SQUARE_ACCESS_TOKEN": "from-env",
            "SQUARE_ENVIRONMENT": "production",
            "SQUARE_TIMEOUT_SEC": "12",
            "SQUARE_CA_BUNDLE": "/etc/ssl/cert.pem",
        },
    )
    assert cfg["access_token"] == "from-env"
    assert cfg["environment"] == "production"
    assert cfg["timeout_sec"] == 12.0
    assert cfg["ca_bundle"] == "/etc/ssl/cert.pem"


def test_get_client_config_blank_env_ignored() -> None:
    cfg = get_client_config(
        {"square": {"access_token": "tok"}}, environ={"SQUARE_ACCESS_TOKEN": "  "}
    )
    assert cfg["access_token"] == "tok"


def test_load_env_reads_dotenv_without_override(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SQUARE_TEST_ONLY_A=from-file\nSQUARE_TEST_ONLY_B=from-file\n")
    with patch.dict(os.environ, {"SQUARE_TEST_ONLY_B": "already-set"}):
        assert load_env(env_file) is True
        assert os.environ["SQUARE_TEST_ONLY_A"] == "from-file"
        assert os.environ["SQUARE_TEST_ONLY_B"] == "already-set"
    os.environ.pop("SQUARE_TEST_ONLY_A", None)


def test_configure_logging_uses_env_level(tmp_path: Path) -> None:
    log_file = tmp_path / "square.log"
    root = logging.getLogger()
    before = list(root.handlers)
    with patch.dict(os.environ, {"SQUARE_LOG_LEVEL": "debug"}):
        with patch("square_ox.config.logging.basicConfig") as basic:
            configure_logging(log_path=str(log_file))
    try:
        assert basic.call_args.kwargs["level"] == logging.DEBUG
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert isinstance(added[0], logging.FileHandler)
    finally:
        for h in root.handlers:
            if h not in before:
                root.removeHandler(h)
                h.close()
