"""Parse Bank of Taiwan CSV feeds into :mod:`taiwan_bank_rates.ingestion.models` rows.

The feeds are not self-describing: the header repeats identically-named
columns for the "buy" block and then the "sell" block, so fields are picked
by position rather than by header name.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Sequence

from taiwan_bank_rates.ingestion.models import HistoricalRateQuote, RateQuote
from taiwan_bank_rates.utils.currency import is_well_formed
from taiwan_bank_rates.utils.date_range import format_compact_date
from taiwan_bank_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

CURRENT_MIN_FIELDS = 21
HISTORICAL_MIN_FIELDS = 22

# (cash_buy, cash_sell, spot_buy, spot_sell)
CURRENT_PRICE_COLUMNS = (2, 12, 3, 13)
HISTORICAL_PRICE_COLUMNS = (3, 13, 4, 14)

_COMPACT_DATE = re.compile(r"[0-9]{8}")


def split_rows(text: str) -> list[list[str]]:
    """Split CSV text into stripped fields, dropping blank lines.

    No quoting or escaping is understood; the feeds never need it.
    """

    return [
        [field.strip() for field in line.split(",")]
        for line in text.splitlines()
        if line.strip()
    ]


def _parse_price(value: str | None) -> float | None:
    if not value:
        return None
    try:
        price = float(value)
    except ValueError:
        return None
    if not math.isfinite(price) or price < 0:
        return None
    return price


def _parse_prices(
    row: Sequence[str], columns: tuple[int, int, int, int]
) -> tuple[float, ...] | None:
    prices = tuple(_parse_price(row[index]) for index in columns)
    if any(price is None for price in prices):
        return None
    return prices  # type: ignore[return-value]


class CsvParser:
    """Convert the current and historical CSV feeds into typed quotes."""

    def parse_current(self, text: str) -> list[RateQuote]:
        observed_at = datetime.now(timezone.utc)
        quotes: list[RateQuote] = []
        for row in split_rows(text):
            if len(row) < CURRENT_MIN_FIELDS:
                continue
            currency = row[0]
            if not is_well_formed(currency):
                continue
            prices = _parse_prices(row, CURRENT_PRICE_COLUMNS)
            if prices is None:
                LOGGER.debug("Skipping %s row with missing prices", currency)
                continue
            cash_buy, cash_sell, spot_buy, spot_sell = prices
            quotes.append(
                RateQuote(
                    currency=currency,
                    cash_buy=cash_buy,
                    cash_sell=cash_sell,
                    spot_buy=spot_buy,
                    spot_sell=spot_sell,
                    observed_at=observed_at,
                )
            )
        return quotes

    def parse_historical(self, text: str) -> list[HistoricalRateQuote]:
        observed_at = datetime.now(timezone.utc)
        quotes: list[HistoricalRateQuote] = []
        for row in split_rows(text):
            if len(row) < HISTORICAL_MIN_FIELDS:
                continue
            raw_date, currency = row[0], row[1]
            if not _COMPACT_DATE.fullmatch(raw_date) or not is_well_formed(currency):
                continue
            prices = _parse_prices(row, HISTORICAL_PRICE_COLUMNS)
            if prices is None:
                LOGGER.debug("Skipping %s row for %s with missing prices", currency, raw_date)
                continue
            iso_date = format_compact_date(raw_date)
            try:
                rate_date = date.fromisoformat(iso_date)
            except ValueError:
                LOGGER.debug("Skipping %s row with impossible date %s", currency, raw_date)
                continue
            cash_buy, cash_sell, spot_buy, spot_sell = prices
            quotes.append(
                HistoricalRateQuote(
                    currency=currency,
                    cash_buy=cash_buy,
                    cash_sell=cash_sell,
                    spot_buy=spot_buy,
                    spot_sell=spot_sell,
                    observed_at=observed_at,
                    rate_date=rate_date,
                )
            )
        return quotes


__all__ = ["CsvParser", "split_rows"]
