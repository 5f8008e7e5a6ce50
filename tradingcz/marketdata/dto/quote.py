"""Quote (bid/ask level 1) data model and converters.

Level 1 market data (best bid/ask) useful for spread analysis and order routing.
"""
# pylint: disable=duplicate-code
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tradingcz.marketdata.dto.timestamp import Timestamp


@dataclass(slots=True)
class Quote:  # pylint: disable=too-many-instance-attributes
    """Level 1 bid/ask quote.

    Represents the best bid and ask prices (and sometimes sizes) at a point in time.
    """
    symbol: str
    timestamp: datetime       # tz-aware UTC
    bid_price: float
    ask_price: float
    bid_size: float | None = None
    ask_size: float | None = None
    bid_exchange: str | None = None
    ask_exchange: str | None = None
    conditions: list[str] | None = None
    tape: str | None = None
    raw: object | None = field(default=None, compare=False, repr=False)

    @property
    def spread(self) -> float:
        return round(self.ask_price - self.bid_price, 4)

    def to_dict(self) -> dict:
        """Serialize Quote to dict for caching, message buses, etc."""
        return {
            'symbol': self.symbol,
            'timestamp': self.timestamp.isoformat(),
            'bid_price': self.bid_price,
            'ask_price': self.ask_price,
            'bid_size': self.bid_size,
            'ask_size': self.ask_size,
            'bid_exchange': self.bid_exchange,
            'ask_exchange': self.ask_exchange,
            'conditions': self.conditions,
            'tape': self.tape,
        }


class QuoteResponse(BaseModel):
    """Wire model for a single quote."""
    timestamp: Timestamp = Field(alias="t")
    bid_price: float = Field(alias="bp")
    ask_price: float = Field(alias="ap")
    bid_size: Optional[float] = Field(None, alias="bs")
    ask_size: Optional[float] = Field(None, alias="as")
    bid_exchange: Optional[str] = Field(None, alias="bx")
    ask_exchange: Optional[str] = Field(None, alias="ax")
    conditions: Optional[list[str]] = Field(None, alias="c")
    tape: Optional[str] = Field(None, alias="z")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "t": "2024-01-15T14:30:00.123456789Z",
                "bp": 150.49,
                "bs": 5,
                "bx": "Q",
                "ap": 150.51,
                "as": 6,
                "ax": "V",
                "c": ["R"],
                "z": "C"
            }
        }
    )


class QuoteConverter:
    """Converts between the wire model and the Quote domain model."""

    @staticmethod
    def from_response(response: QuoteResponse, symbol: str) -> Quote:
        """Convert a decoded wire quote to our Quote.

        Args:
            response: decoded wire object
            symbol: symbol the quote belongs to

        Returns:
            Quote domain model
        """
        return Quote(
            symbol=symbol,
            timestamp=response.timestamp,
            bid_price=response.bid_price,
            ask_price=response.ask_price,
            bid_size=response.bid_size,
            ask_size=response.ask_size,
            bid_exchange=response.bid_exchange,
            ask_exchange=response.ask_exchange,
            conditions=response.conditions,
            tape=response.tape,
            raw=response,
        )

    @staticmethod
    def to_response(quote: Quote) -> QuoteResponse:
        return QuoteResponse(
            timestamp=quote.timestamp,
            bid_price=quote.bid_price,
            ask_price=quote.ask_price,
            bid_size=quote.bid_size,
            ask_size=quote.ask_size,
            bid_exchange=quote.bid_exchange,
            ask_exchange=quote.ask_exchange,
            conditions=quote.conditions,
            tape=quote.tape,
        )

    @staticmethod
    def to_dict(quote: Quote) -> dict:
        """Convert Quote to dict (delegates to Quote.to_dict())."""
        return quote.to_dict()
