"""Shared fakes for exercising the client without network access."""

from __future__ import annotations

from typing import Iterable

import pytest

CURRENT_HEADER = (
    "幣別,匯率,現金,即期,遠期10天,遠期30天,遠期60天,遠期90天,遠期120天,遠期150天,遠期180天,"
    "匯率,現金,即期,遠期10天,遠期30天,遠期60天,遠期90天,遠期120天,遠期150天,遠期180天"
)
HISTORICAL_HEADER = "資料日期," + CURRENT_HEADER


def current_row(
    currency: str,
    cash_buy: str = "31.80500",
    spot_buy: str = "32.15500",
    cash_sell: str = "32.47500",
    spot_sell: str = "32.30500",
) -> str:
    """Build a 21-field row laid out as the buy block followed by the sell block."""

    buy = [currency, "本行買入", cash_buy, spot_buy] + ["0.00000"] * 7
    sell = ["本行賣出", cash_sell, spot_sell] + ["0.00000"] * 7
    return ",".join(buy + sell)


def historical_row(day: str, currency: str = "USD", **prices: str) -> str:
    return f"{day},{current_row(currency, **prices)}"


def csv_text(header: str, rows: Iterable[str]) -> str:
    return "\n".join([header, *rows]) + "\n"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    @property
    def content(self) -> bytes:
        return self.text.encode("utf-8")


class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self, *outcomes: FakeResponse | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if not self.outcomes:
            raise AssertionError(f"unexpected request to {url}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]

    def close(self) -> None:
        self.closed = True


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.delays)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()
