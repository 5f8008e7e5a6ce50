"""Bar (OHLCV candlestick) data model and converters.

``BarResponse`` mirrors the compact wire format of the data API; ``Bar`` is
the provider-agnostic record handed to callers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tradingcz.marketdata.dto.timestamp import Timestamp


@dataclass(slots=True)
class Bar:
    """OHLCV bar (candlestick).

    Domain model used by callers; carries no wire aliases.
    """
    symbol: str
    timestamp: datetime       # Opening time, tz-aware UTC
    open: float
    high: float
    low: float
    close: float
    volume: float
    trade_count: int | None = None   # Number of trades in bar
    vwap: float | None = None        # Volume-weighted average price
    raw: object | None = field(default=None, compare=False, repr=False)  # Decoded wire object

    def to_dict(self) -> dict:
        """Serialize Bar to dict for caching, message buses, etc.

        Returns a pure dict representation suitable for JSON serialization.
        """
        return {
            'symbol': self.symbol,
            'timestamp': self.timestamp.isoformat(),
            'open': self.open,
            'high': self.high,
            'low': self.low,
            'close': self.close,
            'volume': self.volume,
            'trade_count': self.trade_count,
            'vwap': self.vwap,
        }


class BarResponse(BaseModel):
    """Wire model for a single bar as sent by the data API."""
    timestamp: Timestamp = Field(alias="t")
    open: float = Field(alias="o")
    high: float = Field(alias="h")
    low: float = Field(alias="l")
    close: float = Field(alias="c")
    volume: float = Field(alias="v")
    trade_count: Optional[int] = Field(None, alias="n")
    vwap: Optional[float] = Field(None, alias="vw")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "t": "2024-01-15T05:00:00Z",
                "o": 150.0,
                "h": 152.5,
                "l": 149.8,
                "c": 151.2,
                "v": 2500000,
                "n": 45000,
                "vw": 151.05
            }
        }
    )


class BarConverter:
    """Converts between the wire model and the Bar domain model."""

    @staticmethod
    def from_response(response: BarResponse, symbol: str) -> Bar:
        """Convert a decoded wire bar to our Bar.

        Args:
            response: decoded wire object
            symbol: symbol the bar belongs to (the wire format keys bars by symbol)

        Returns:
            Bar domain model
        """
        return Bar(
            symbol=symbol,
            timestamp=response.timestamp,
            open=response.open,
            high=response.high,
            low=response.low,
            close=response.close,
            volume=response.volume,
            trade_count=response.trade_count,
            vwap=response.vwap,
            raw=response,
        )

    @staticmethod
    def to_response(bar: Bar) -> BarResponse:
        """Convert Bar domain model back to its wire model."""
        return BarResponse(
            timestamp=bar.timestamp,
            open=bar.open,
            high=bar.high,
            low=bar.low,
            close=bar.close,
            volume=bar.volume,
            trade_count=bar.trade_count,
            vwap=bar.vwap,
        )

    @staticmethod
    def to_dict(bar: Bar) -> dict:
        """Convert Bar to dict (delegates to Bar.to_dict())."""
        return bar.to_dict()
