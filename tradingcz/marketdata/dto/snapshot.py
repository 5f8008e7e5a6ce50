"""Snapshot (aggregated market state) data model and converters.

Combines latest trade, quote, and bars into a single view for real-time decisions.
Every part is independently optional: the feed may have no recent data for
one of them, which is not an error.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tradingcz.marketdata.dto.bar import Bar, BarConverter, BarResponse
from tradingcz.marketdata.dto.quote import Quote, QuoteConverter, QuoteResponse
from tradingcz.marketdata.dto.trade import Trade, TradeConverter, TradeResponse


@dataclass(slots=True)
class Snapshot:
    """Current market state for one symbol.

    Combines the latest trade, quote, minute bar, daily bar and previous
    daily bar as returned by one snapshot request.
    """
    symbol: str
    latest_trade: Trade | None = None
    latest_quote: Quote | None = None
    minute_bar: Bar | None = None
    daily_bar: Bar | None = None
    previous_daily_bar: Bar | None = None
    raw: object | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        """Serialize Snapshot to dict for caching, message buses, etc."""
        return {
            'symbol': self.symbol,
            'latest_trade': self.latest_trade.to_dict() if self.latest_trade else None,
            'latest_quote': self.latest_quote.to_dict() if self.latest_quote else None,
            'minute_bar': self.minute_bar.to_dict() if self.minute_bar else None,
            'daily_bar': self.daily_bar.to_dict() if self.daily_bar else None,
            'previous_daily_bar': self.previous_daily_bar.to_dict() if self.previous_daily_bar else None,
        }


class SnapshotResponse(BaseModel):
    """Wire model for the snapshot of one symbol.

    Keys may be missing or ``null``.
    """
    latest_trade: Optional[TradeResponse] = Field(None, alias="latestTrade")
    latest_quote: Optional[QuoteResponse] = Field(None, alias="latestQuote")
    minute_bar: Optional[BarResponse] = Field(None, alias="minuteBar")
    daily_bar: Optional[BarResponse] = Field(None, alias="dailyBar")
    previous_daily_bar: Optional[BarResponse] = Field(None, alias="prevDailyBar")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "latestTrade": {"t": "2024-01-15T14:30:00Z", "p": 150.50, "s": 100, "x": "V"},
                "latestQuote": {"t": "2024-01-15T14:30:00Z", "bp": 150.49, "ap": 150.51},
                "minuteBar": {
                    "t": "2024-01-15T14:30:00Z",
                    "o": 150.45, "h": 150.60, "l": 150.40, "c": 150.50, "v": 50000,
                },
                "dailyBar": {
                    "t": "2024-01-15T05:00:00Z",
                    "o": 149.50, "h": 151.00, "l": 149.40, "c": 150.50, "v": 5000000,
                },
                "prevDailyBar": None,
            }
        }
    )


class SnapshotConverter:
    """Converts between the wire model and the Snapshot domain model."""

    @staticmethod
    def from_response(response: SnapshotResponse, symbol: str) -> Snapshot:
        """Convert a decoded wire snapshot to our Snapshot.

        Nested records are converted recursively and tagged with ``symbol``.

        Args:
            response: decoded wire object
            symbol: the key the snapshot was stored under in the response

        Returns:
            Snapshot domain model
        """
        return Snapshot(
            symbol=symbol,
            latest_trade=TradeConverter.from_response(response.latest_trade, symbol)
            if response.latest_trade is not None else None,
            latest_quote=QuoteConverter.from_response(response.latest_quote, symbol)
            if response.latest_quote is not None else None,
            minute_bar=BarConverter.from_response(response.minute_bar, symbol)
            if response.minute_bar is not None else None,
            daily_bar=BarConverter.from_response(response.daily_bar, symbol)
            if response.daily_bar is not None else None,
            previous_daily_bar=BarConverter.from_response(response.previous_daily_bar, symbol)
            if response.previous_daily_bar is not None else None,
            raw=response,
        )

    @staticmethod
    def to_response(snapshot: Snapshot) -> SnapshotResponse:
        """Convert Snapshot domain model back to its wire model.

        ``to_response(s).model_dump_json(by_alias=True)`` yields the body the
        API would send for ``s``.
        """
        return SnapshotResponse(
            latest_trade=TradeConverter.to_response(snapshot.latest_trade) if snapshot.latest_trade else None,
            latest_quote=QuoteConverter.to_response(snapshot.latest_quote) if snapshot.latest_quote else None,
            minute_bar=BarConverter.to_response(snapshot.minute_bar) if snapshot.minute_bar else None,
            daily_bar=BarConverter.to_response(snapshot.daily_bar) if snapshot.daily_bar else None,
            previous_daily_bar=BarConverter.to_response(snapshot.previous_daily_bar)
            if snapshot.previous_daily_bar else None,
        )

    @staticmethod
    def to_dict(snapshot: Snapshot) -> dict:
        """Convert Snapshot to dict (delegates to Snapshot.to_dict())."""
        return snapshot.to_dict()
