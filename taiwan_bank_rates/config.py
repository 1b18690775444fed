"""Client configuration for the Bank of Taiwan rate feeds."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://rate.bot.com.tw"
DEFAULT_USER_AGENT = "taiwan-bank-rate-client/1.0.0"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable settings shared by a client and its gateway.

    Every field has a default, so ``ClientConfig(timeout_ms=5000)`` overrides a
    single value and keeps the rest.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = 10_000
    retry_attempts: int = 3
    retry_delay_ms: int = 1_000
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        if self.retry_attempts < 0:
            raise ValueError("retry_attempts must not be negative")
        if self.retry_delay_ms < 0:
            raise ValueError("retry_delay_ms must not be negative")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def retry_delay_seconds(self) -> float:
        return self.retry_delay_ms / 1000


__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_USER_AGENT"]
