"""Print Bank of Taiwan current or historical exchange rates."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from taiwan_bank_rates.client import RateClient
from taiwan_bank_rates.config import DEFAULT_BASE_URL, ClientConfig
from taiwan_bank_rates.ingestion.models import HistoricalRateQuote, RateQuote
from taiwan_bank_rates.utils.logger import get_logger, set_log_level

LOGGER = get_logger(__name__)

__all__ = ["format_quote", "main", "parse_args"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Feed host")
    parser.add_argument("--timeout-ms", type=int, default=10_000, help="Per-request timeout")
    parser.add_argument(
        "--retries", type=int, default=3, help="Extra attempts for historical fetches"
    )
    parser.add_argument(
        "--retry-delay-ms", type=int, default=1_000, help="Base delay for exponential backoff"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    commands = parser.add_subparsers(dest="command", required=True)

    current = commands.add_parser("current", help="Today's rates")
    current.add_argument("currencies", nargs="*", help="Optional currency codes to keep")

    history = commands.add_parser("history", help="Daily rates over a date range")
    history.add_argument("currency", help="Currency code, e.g. USD")
    history.add_argument("--from", dest="start", required=True, help="Start date (YYYY-MM-DD)")
    history.add_argument("--to", dest="end", required=True, help="End date (YYYY-MM-DD)")
    return parser.parse_args(argv)


def format_quote(quote: RateQuote) -> str:
    prefix = f"{quote.iso_date} " if isinstance(quote, HistoricalRateQuote) else ""
    return (
        f"{prefix}{quote.currency} cash {quote.cash_buy:.4f}/{quote.cash_sell:.4f} "
        f"spot {quote.spot_buy:.4f}/{quote.spot_sell:.4f}"
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)
    config = ClientConfig(
        base_url=args.base_url,
        timeout_ms=args.timeout_ms,
        retry_attempts=args.retries,
        retry_delay_ms=args.retry_delay_ms,
    )
    with RateClient(config) as client:
        if args.command == "current":
            quotes = client.get_current_rates(args.currencies or None)
        else:
            quotes = client.get_historical_rates(args.currency, args.start, args.end)
    LOGGER.info("Retrieved %s quote(s)", len(quotes))
    for quote in quotes:
        print(format_quote(quote))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
