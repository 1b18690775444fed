"""Exception hierarchy raised by the Bank of Taiwan rate client."""

from __future__ import annotations


class RateClientError(Exception):
    """Base class for every error raised by :mod:`taiwan_bank_rates`."""


class MalformedInputError(RateClientError, ValueError):
    """Raised before any network call when a date or month argument is malformed."""


class FetchError(RateClientError):
    """A failed HTTP round-trip, possibly after the retry budget was exhausted."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        raw_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.raw_body = raw_body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class RateLimitedError(FetchError):
    """The feed answered HTTP 429 Too Many Requests."""

    def __init__(self, message: str = "Too many requests", raw_body: str | None = None) -> None:
        super().__init__(message, status_code=429, raw_body=raw_body)


__all__ = ["FetchError", "MalformedInputError", "RateClientError", "RateLimitedError"]
