from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from taiwan_bank_rates.ingestion.models import HistoricalRateQuote, RateQuote
from taiwan_bank_rates.scripts import fetch_rates

OBSERVED = datetime(2025, 1, 2, 8, 0, tzinfo=timezone.utc)


class _StubClient:
    instances: list["_StubClient"] = []

    def __init__(self, config) -> None:
        self.config = config
        self.calls: list[tuple] = []
        _StubClient.instances.append(self)

    def __enter__(self) -> "_StubClient":
        return self

    def __exit__(self, *exc) -> None:
        return None

    def get_current_rates(self, currencies=None):
        self.calls.append(("current", currencies))
        return [RateQuote("USD", 31.8, 32.4, 32.1, 32.3, OBSERVED)]

    def get_historical_rates(self, currency, start, end):
        self.calls.append(("history", currency, start, end))
        return [HistoricalRateQuote("USD", 31.8, 32.4, 32.1, 32.3, OBSERVED, date(2025, 1, 2))]


@pytest.fixture(autouse=True)
def _stub_client(monkeypatch):
    _StubClient.instances = []
    monkeypatch.setattr(fetch_rates, "RateClient", _StubClient)


def test_current_command_prints_quotes(capsys) -> None:
    fetch_rates.main(["--retries", "1", "current", "usd", "jpy"])

    (client,) = _StubClient.instances
    assert client.calls == [("current", ["usd", "jpy"])]
    assert client.config.retry_attempts == 1
    out = capsys.readouterr().out
    assert "USD cash 31.8000/32.4000 spot 32.1000/32.3000" in out


def test_current_command_without_codes_requests_everything() -> None:
    fetch_rates.main(["current"])

    assert _StubClient.instances[0].calls == [("current", None)]


def test_history_command_passes_window(capsys) -> None:
    fetch_rates.main(["history", "USD", "--from", "2025-01-01", "--to", "2025-01-31"])

    assert _StubClient.instances[0].calls == [("history", "USD", "2025-01-01", "2025-01-31")]
    assert capsys.readouterr().out.startswith("2025-01-02 USD cash")


def test_history_command_requires_bounds() -> None:
    with pytest.raises(SystemExit):
        fetch_rates.parse_args(["history", "USD", "--from", "2025-01-01"])
