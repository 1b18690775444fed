"""Date helpers for month-chunked historical queries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Protocol, TypeVar

from taiwan_bank_rates.errors import MalformedInputError

_ISO_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_YEAR_MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")
_COMPACT_DATE_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")


class _Dated(Protocol):
    @property
    def rate_date(self) -> date: ...  # pragma: no cover - protocol definition


DatedT = TypeVar("DatedT", bound=_Dated)


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Return ``True`` when ``day`` falls inside the inclusive window."""
        return self.start <= day <= self.end

    def as_tuple(self) -> tuple[date, date]:
        return (self.start, self.end)


def is_valid_date_string(value: str) -> bool:
    """Shape check for ``YYYY-MM-DD`` with month in 1..12 and day in 1..31."""

    match = _ISO_DATE_PATTERN.fullmatch(value)
    if not match:
        return False
    month, day = int(match.group(2)), int(match.group(3))
    return 1 <= month <= 12 and 1 <= day <= 31


def is_valid_year_month(value: str) -> bool:
    """Shape check for ``YYYY-MM`` with month in 1..12."""

    match = _YEAR_MONTH_PATTERN.fullmatch(value)
    if not match:
        return False
    return 1 <= int(match.group(2)) <= 12


def parse_date(value: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` string to :class:`date`.

    ``date`` instances pass through untouched. Strings that fail the shape
    check raise :class:`MalformedInputError`. A day past the end of its month
    rolls over into the next one, so ``2025-02-30`` becomes ``2025-03-02``.
    """

    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not is_valid_date_string(value):
        raise MalformedInputError(f"Invalid date format {value!r}. Expected YYYY-MM-DD")
    year, month, day = (int(part) for part in value.split("-"))
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as exc:
        raise MalformedInputError(f"{value!r} is outside the supported date range") from exc


def parse_date_range(start: str | date, end: str | date) -> DateRange:
    """Validate both bounds and return them as a :class:`DateRange`.

    An inverted window is accepted; it touches no month and matches no record.
    """

    return DateRange(start=parse_date(start), end=parse_date(end))


def format_year_month(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def format_compact_date(value: str) -> str:
    """Convert the feed's ``YYYYMMDD`` dates to ``YYYY-MM-DD``."""

    match = _COMPACT_DATE_PATTERN.fullmatch(value)
    if not match:
        raise MalformedInputError(f"Invalid date format {value!r}. Expected YYYYMMDD")
    return "-".join(match.groups())


def months_between(start: str | date, end: str | date) -> list[str]:
    """Return every ``YYYY-MM`` touched by the inclusive ``start``..``end`` window."""

    start_date = parse_date(start)
    end_date = parse_date(end)
    year, month = start_date.year, start_date.month
    months: list[str] = []
    while (year, month) <= (end_date.year, end_date.month):
        months.append(format_year_month(date(year, month, 1)))
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1
    return months


def filter_by_date_range(
    records: Iterable[DatedT], start: str | date, end: str | date
) -> list[DatedT]:
    """Keep records whose ``rate_date`` lies within ``[start, end]``, order preserved."""

    window = DateRange(start=parse_date(start), end=parse_date(end))
    return [record for record in records if window.contains(record.rate_date)]


__all__ = [
    "DateRange",
    "filter_by_date_range",
    "format_compact_date",
    "format_year_month",
    "is_valid_date_string",
    "is_valid_year_month",
    "months_between",
    "parse_date",
    "parse_date_range",
]
