"""Typed bindings for the Alpaca market data REST API.

This package provides:
- Enums: Feed, CryptoLocation
- DTOs: Bar, Quote, Trade, Snapshot and their wire models
- Endpoint: the descriptor contract every REST operation implements
- Endpoints: snapshots (stocks), crypto_snapshots

Usage:
    from tradingcz.marketdata import Feed, snapshots

    request = snapshots.GetReqInit(feed=Feed.IEX).init(["AAPL", "MSFT"])
    url = snapshots.Get.url(request)
    pairs = snapshots.Get.evaluate(status, body)
"""

from . import crypto_snapshots, snapshots
from .config import Settings, settings
from .enums import CryptoLocation, Feed
from .endpoint import Endpoint, Outcome, OutcomeKind
from .errors import ApiCallError, ApiError, ConversionError, InvalidInput, UnexpectedStatus
from .dto import (
    Bar,
    Quote,
    Trade,
    Snapshot,
    BarResponse,
    QuoteResponse,
    TradeResponse,
    SnapshotResponse,
    BarConverter,
    QuoteConverter,
    TradeConverter,
    SnapshotConverter,
)

__all__ = [
    # Enums
    "Feed",
    "CryptoLocation",
    # DTOs
    "Bar",
    "Quote",
    "Trade",
    "Snapshot",
    # Wire Models
    "BarResponse",
    "QuoteResponse",
    "TradeResponse",
    "SnapshotResponse",
    # Converters
    "BarConverter",
    "QuoteConverter",
    "TradeConverter",
    "SnapshotConverter",
    # Endpoints
    "Endpoint",
    "Outcome",
    "OutcomeKind",
    "snapshots",
    "crypto_snapshots",
    # Errors
    "ApiError",
    "ApiCallError",
    "ConversionError",
    "InvalidInput",
    "UnexpectedStatus",
    # Configuration
    "Settings",
    "settings",
]
