"""Trade (tick) data model and converters.

Individual trade data (tick level) useful for tick-level analysis and volume profiling.
"""
# pylint: disable=duplicate-code
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from tradingcz.marketdata.dto.timestamp import Timestamp


@dataclass(slots=True)
class Trade:  # pylint: disable=too-many-instance-attributes
    """Individual trade (tick).

    Represents a single executed trade at a point in time.
    """
    symbol: str
    timestamp: datetime       # tz-aware UTC
    price: float
    size: float
    exchange: str | None = None
    trade_id: str | None = None
    conditions: list[str] | None = None
    tape: str | None = None
    raw: object | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        """Serialize Trade to dict for caching, message buses, etc."""
        return {
            'symbol': self.symbol,
            'timestamp': self.timestamp.isoformat(),
            'price': self.price,
            'size': self.size,
            'exchange': self.exchange,
            'trade_id': self.trade_id,
            'conditions': self.conditions,
            'tape': self.tape,
        }


class TradeResponse(BaseModel):
    """Wire model for a single trade."""
    timestamp: Timestamp = Field(alias="t")
    price: float = Field(alias="p")
    size: float = Field(alias="s")
    exchange: Optional[str] = Field(None, alias="x")
    trade_id: Optional[Union[int, str]] = Field(None, alias="i")  # numeric for stocks
    conditions: Optional[list[str]] = Field(None, alias="c")
    tape: Optional[str] = Field(None, alias="z")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "t": "2024-01-15T14:30:00.123456789Z",
                "p": 150.50,
                "s": 100,
                "x": "V",
                "i": 52983525029461,
                "c": ["@"],
                "z": "C"
            }
        }
    )


class TradeConverter:
    """Converts between the wire model and the Trade domain model."""

    @staticmethod
    def from_response(response: TradeResponse, symbol: str) -> Trade:
        """Convert a decoded wire trade to our Trade.

        The trade id is normalized to a string since crypto venues send
        non-numeric ids.
        """
        return Trade(
            symbol=symbol,
            timestamp=response.timestamp,
            price=response.price,
            size=response.size,
            exchange=response.exchange,
            trade_id=str(response.trade_id) if response.trade_id is not None else None,
            conditions=response.conditions,
            tape=response.tape,
            raw=response,
        )

    @staticmethod
    def to_response(trade: Trade) -> TradeResponse:
        return TradeResponse(
            timestamp=trade.timestamp,
            price=trade.price,
            size=trade.size,
            exchange=trade.exchange,
            trade_id=trade.trade_id,
            conditions=trade.conditions,
            tape=trade.tape,
        )

    @staticmethod
    def to_dict(trade: Trade) -> dict:
        """Convert Trade to dict (delegates to Trade.to_dict())."""
        return trade.to_dict()
