"""Data source selectors used as query parameter values.

Both enumerations are open to extension: new members may be added over time,
but an existing member's token never changes. Consumers should not assume the
member lists below are exhaustive.
"""
from enum import Enum


class Feed(str, Enum):
    """Aggregator supplying stock quotes, trades and bars."""

    IEX = "iex"  # Investors Exchange, available on every plan
    SIP = "sip"  # CTA and UTP SIPs, requires the unlimited data plan

    def __str__(self) -> str:
        return self.value


class CryptoLocation(str, Enum):
    """Venue supplying crypto market data."""

    ALPACA_US = "us"
    KRAKEN_US = "us-1"
    KRAKEN_EU = "eu-1"

    def __str__(self) -> str:
        return self.value
