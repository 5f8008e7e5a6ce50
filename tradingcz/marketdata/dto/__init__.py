"""Market data records decoded from API responses.

Each record comes in three parts: a domain dataclass handed to callers, a
``*Response`` pydantic model matching the compact wire keys, and a
``*Converter`` translating between them.
"""

from .timestamp import Timestamp
from .bar import Bar, BarConverter, BarResponse
from .quote import Quote, QuoteConverter, QuoteResponse
from .trade import Trade, TradeConverter, TradeResponse
from .snapshot import Snapshot, SnapshotConverter, SnapshotResponse

__all__ = [
    "Timestamp",
    "Bar", "BarResponse", "BarConverter",
    "Quote", "QuoteResponse", "QuoteConverter",
    "Trade", "TradeResponse", "TradeConverter",
    "Snapshot", "SnapshotResponse", "SnapshotConverter",
]
