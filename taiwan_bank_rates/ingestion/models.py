"""Typed records produced by the CSV parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class RateQuote:
    """One currency's quoted prices as seen at fetch time."""

    currency: str
    cash_buy: float
    cash_sell: float
    spot_buy: float
    spot_sell: float
    observed_at: datetime


@dataclass(frozen=True, slots=True)
class HistoricalRateQuote(RateQuote):
    """A :class:`RateQuote` published for a specific past calendar day."""

    rate_date: date

    @property
    def iso_date(self) -> str:
        return self.rate_date.isoformat()
