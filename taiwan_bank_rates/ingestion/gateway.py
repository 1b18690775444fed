"""HTTP access to the Bank of Taiwan CSV rate feeds."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, TypeVar

import requests
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from taiwan_bank_rates.config import ClientConfig
from taiwan_bank_rates.errors import FetchError, MalformedInputError, RateLimitedError
from taiwan_bank_rates.utils.date_range import is_valid_year_month
from taiwan_bank_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

CURRENT_RATES_PATH = "/xrt/flcsv/0/day"
HISTORICAL_RATES_PATH = "/xrt/flcsv/0/{year_month}/{currency}"

T = TypeVar("T")


def backoff_retrying(
    config: ClientConfig, *, sleep: Callable[[float], None] = time.sleep
) -> Retrying:
    """Return a tenacity controller for ``retry_attempts`` extra tries on :class:`FetchError`.

    The wait before retry ``n`` (counting from zero) is
    ``retry_delay_ms * 2 ** n``. Once the budget is spent the last error is
    re-raised unchanged.
    """

    return Retrying(
        stop=stop_after_attempt(config.retry_attempts + 1),
        wait=wait_exponential(multiplier=config.retry_delay_seconds, exp_base=2),
        retry=retry_if_exception_type(FetchError),
        before_sleep=before_sleep_log(LOGGER, logging.WARNING),
        sleep=sleep,
        reraise=True,
    )


class FetchGateway:
    """Issue GET requests against the current and historical CSV endpoints.

    The current-rate call is attempted exactly once. Historical calls are
    retried with exponential backoff on any failure.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or ClientConfig()
        self.sleep = sleep
        self._owns_session = session is None
        self.session = session or requests.Session()

    def current_url(self) -> str:
        return f"{self.config.base_url}{CURRENT_RATES_PATH}"

    def historical_url(self, currency: str, year_month: str) -> str:
        path = HISTORICAL_RATES_PATH.format(year_month=year_month, currency=currency)
        return f"{self.config.base_url}{path}"

    def fetch_current(self) -> str:
        """Download today's rate sheet as CSV text."""

        return self._get(self.current_url())

    def fetch_historical(self, currency: str, year_month: str) -> str:
        """Download one month of daily rates for ``currency`` as CSV text."""

        if not is_valid_year_month(year_month):
            raise MalformedInputError(f"Invalid month {year_month!r}. Expected YYYY-MM")
        url = self.historical_url(currency, year_month)
        return self.with_backoff(self._get, url)

    def with_backoff(self, operation: Callable[..., T], *args: object) -> T:
        """Run ``operation`` under the configured exponential backoff policy."""

        retrying = backoff_retrying(self.config, sleep=self.sleep)
        return retrying(operation, *args)

    def _get(self, url: str) -> str:
        headers = {"User-Agent": self.config.user_agent, "Accept": "text/csv"}
        try:
            response = self.session.get(url, headers=headers, timeout=self.config.timeout_seconds)
        except requests.Timeout as exc:
            raise FetchError(
                f"Request to {url} timed out after {self.config.timeout_ms} ms"
            ) from exc
        except requests.RequestException as exc:
            raise FetchError(f"Request to {url} failed: {exc}") from exc

        self._raise_for_status(response, url)
        LOGGER.info("Fetched %s (%s bytes)", url, len(response.content))
        return response.text

    @staticmethod
    def _raise_for_status(response: requests.Response, url: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        if status == 429:
            raise RateLimitedError(f"Too many requests for {url}", raw_body=response.text)
        raise FetchError(f"HTTP {status} for {url}", status_code=status, raw_body=response.text)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "FetchGateway":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "CURRENT_RATES_PATH",
    "FetchGateway",
    "HISTORICAL_RATES_PATH",
    "backoff_retrying",
]
