"""Query string helpers."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Sequence
from urllib.parse import urlencode

from tradingcz.marketdata.errors import ConversionError

SYMBOL_SEPARATOR = ","


def join_symbols(symbols: Sequence[str]) -> str:
    """Combine symbols into the single comma separated value the API expects."""
    for symbol in symbols:
        if SYMBOL_SEPARATOR in symbol:
            raise ConversionError(f"Symbol {symbol!r} contains the separator {SYMBOL_SEPARATOR!r}")
    return SYMBOL_SEPARATOR.join(symbols)


def encode_query(params: Iterable[tuple[str, object | None]]) -> str | None:
    """Percent-encode ``params`` in order, skipping pairs whose value is None.

    Enum members are written as their token. Returns None when nothing is left.
    """
    pairs = []
    for key, value in params:
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        pairs.append((key, str(value)))
    if not pairs:
        return None
    try:
        return urlencode(pairs, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise ConversionError(f"Cannot encode query parameters: {exc}") from exc
