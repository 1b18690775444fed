from __future__ import annotations

import dataclasses
import logging

import pytest

from taiwan_bank_rates.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ClientConfig
from taiwan_bank_rates.utils.logger import PACKAGE_LOGGER, get_logger, set_log_level


def test_defaults() -> None:
    config = ClientConfig()

    assert config.base_url == DEFAULT_BASE_URL == "https://rate.bot.com.tw"
    assert config.timeout_ms == 10_000
    assert config.retry_attempts == 3
    assert config.retry_delay_ms == 1_000
    assert config.user_agent == DEFAULT_USER_AGENT
    assert config.timeout_seconds == 10.0
    assert config.retry_delay_seconds == 1.0


def test_partial_overrides_keep_other_defaults() -> None:
    config = ClientConfig(retry_attempts=1, base_url="http://mirror.local/")

    assert config.retry_attempts == 1
    assert config.base_url == "http://mirror.local"
    assert config.timeout_ms == 10_000


def test_config_is_immutable() -> None:
    config = ClientConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.timeout_ms = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"timeout_ms": 0},
        {"retry_attempts": -1},
        {"retry_delay_ms": -5},
        {"base_url": ""},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        ClientConfig(**overrides)


def test_set_log_level_applies_to_package_logger() -> None:
    package_logger = get_logger()
    previous = package_logger.level
    try:
        set_log_level(logging.DEBUG)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert get_logger("taiwan_bank_rates.client").getEffectiveLevel() == logging.DEBUG
    finally:
        package_logger.setLevel(previous)
