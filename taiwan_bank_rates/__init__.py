"""Public interface for the taiwan_bank_rates package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from taiwan_bank_rates.client import RateClient
from taiwan_bank_rates.config import ClientConfig
from taiwan_bank_rates.errors import (
    FetchError,
    MalformedInputError,
    RateClientError,
    RateLimitedError,
)
from taiwan_bank_rates.ingestion.csv_parser import CsvParser
from taiwan_bank_rates.ingestion.gateway import FetchGateway
from taiwan_bank_rates.ingestion.models import HistoricalRateQuote, RateQuote
from taiwan_bank_rates.utils.currency import SUPPORTED_CURRENCIES

__all__ = [
    "__version__",
    "ClientConfig",
    "CsvParser",
    "FetchError",
    "FetchGateway",
    "HistoricalRateQuote",
    "MalformedInputError",
    "RateClient",
    "RateClientError",
    "RateLimitedError",
    "RateQuote",
    "SUPPORTED_CURRENCIES",
]

try:
    __version__ = importlib_metadata.version("taiwan-bank-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "1.0.0"
