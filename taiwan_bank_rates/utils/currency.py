"""Currency code helpers for the Bank of Taiwan feeds."""

from __future__ import annotations

import re

SUPPORTED_CURRENCIES: tuple[str, ...] = (
    "USD",
    "HKD",
    "GBP",
    "AUD",
    "CAD",
    "SGD",
    "CHF",
    "JPY",
    "SEK",
    "NZD",
    "THB",
    "PHP",
    "IDR",
    "EUR",
    "KRW",
    "VND",
    "MYR",
    "CNY",
)

_CURRENCY_PATTERN = re.compile(r"[A-Z]{3}")


def normalize(code: str) -> str:
    """Upper-case a currency code; no other transformation is applied."""
    return code.upper()


def is_supported(code: str) -> bool:
    """Case-insensitive membership test against :data:`SUPPORTED_CURRENCIES`."""
    return normalize(code) in SUPPORTED_CURRENCIES


def is_well_formed(code: str) -> bool:
    """Return ``True`` for exactly three upper-case ASCII letters.

    Used by the CSV parser to decide whether a field looks like a currency at
    all, independently of :func:`is_supported`.
    """
    return bool(_CURRENCY_PATTERN.fullmatch(code))


def supported_currencies() -> tuple[str, ...]:
    return SUPPORTED_CURRENCIES


__all__ = [
    "SUPPORTED_CURRENCIES",
    "is_supported",
    "is_well_formed",
    "normalize",
    "supported_currencies",
]
