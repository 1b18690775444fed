"""High level client answering current and historical rate queries."""

from __future__ import annotations

import time
from datetime import date
from typing import Callable, Iterable, Optional

import requests

from taiwan_bank_rates.config import ClientConfig
from taiwan_bank_rates.errors import FetchError
from taiwan_bank_rates.ingestion.csv_parser import CsvParser
from taiwan_bank_rates.ingestion.gateway import FetchGateway
from taiwan_bank_rates.ingestion.models import HistoricalRateQuote, RateQuote
from taiwan_bank_rates.utils.currency import normalize, supported_currencies
from taiwan_bank_rates.utils.date_range import (
    filter_by_date_range,
    months_between,
    parse_date_range,
)
from taiwan_bank_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RateClient:
    """Fetch, parse and filter Bank of Taiwan exchange rates.

    Parameters
    ----------
    config:
        Optional :class:`ClientConfig`; defaults are used when omitted.
    gateway:
        Pre-built :class:`FetchGateway`. When omitted one is created from
        ``config``, ``session`` and ``sleep``.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        gateway: Optional[FetchGateway] = None,
        parser: Optional[CsvParser] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if gateway is not None:
            self.config = gateway.config
            self.gateway = gateway
        else:
            self.config = config or ClientConfig()
            self.gateway = FetchGateway(self.config, session=session, sleep=sleep)
        self.parser = parser or CsvParser()

    def get_current_rates(
        self, currencies: str | Iterable[str] | None = None
    ) -> RateQuote | list[RateQuote] | None:
        """Return today's quotes.

        ``None`` or an empty string returns every parsed quote. A single code
        returns the matching quote or ``None`` when the feed has no such row.
        An iterable of codes returns the matching subset in feed order, which
        may be empty.
        """

        text = self.gateway.fetch_current()
        quotes = self.parser.parse_current(text)
        if currencies is None or currencies == "":
            return quotes
        if isinstance(currencies, str):
            wanted = normalize(currencies)
            return next((quote for quote in quotes if quote.currency == wanted), None)
        wanted_codes = {normalize(code) for code in currencies}
        return [quote for quote in quotes if quote.currency in wanted_codes]

    def get_historical_rates(
        self, currency: str, start_date: str | date, end_date: str | date
    ) -> list[HistoricalRateQuote]:
        """Return daily quotes for ``currency`` between both dates, inclusive.

        The feed is queried one calendar month at a time, strictly in order,
        and the edges are trimmed afterwards. A failure on any month aborts
        the whole call.
        """

        window = parse_date_range(start_date, end_date)
        code = normalize(currency)
        months = months_between(window.start, window.end)
        LOGGER.info(
            "Fetching %s history %s to %s across %s month(s)",
            code,
            window.start,
            window.end,
            len(months),
        )

        collected: list[HistoricalRateQuote] = []
        for year_month in months:
            text = self._fetch_month(code, year_month)
            collected.extend(self.parser.parse_historical(text))
        return filter_by_date_range(collected, window.start, window.end)

    def _fetch_month(self, currency: str, year_month: str) -> str:
        try:
            return self.gateway.fetch_historical(currency, year_month)
        except FetchError as exc:
            if exc.status_code != 429:
                raise
            # Second retry layer on top of the gateway's own; both are observable.
            LOGGER.warning(
                "Rate limited on %s %s after gateway retries; backing off again",
                currency,
                year_month,
            )
            return self.gateway.with_backoff(self.gateway.fetch_historical, currency, year_month)

    @staticmethod
    def supported_currencies() -> tuple[str, ...]:
        return supported_currencies()

    def close(self) -> None:
        self.gateway.close()

    def __enter__(self) -> "RateClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["RateClient"]
