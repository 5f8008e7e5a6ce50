import json

import pytest


@pytest.fixture
def full_snapshot_body() -> bytes:
    return json.dumps({
        "AAPL": {
            "dailyBar": {
                "t": "2024-01-15T05:00:00Z",
                "o": 149.5, "h": 151.0, "l": 149.4, "c": 150.5,
                "v": 5000000, "n": 45000, "vw": 150.12,
            },
            "latestQuote": {
                "t": "2024-01-15T14:30:00.123456789Z",
                "bp": 150.49, "bs": 5, "bx": "Q",
                "ap": 150.51, "as": 6, "ax": "V",
                "c": ["R"], "z": "C",
            },
            "latestTrade": {
                "t": "2024-01-15T14:30:00.5Z",
                "p": 150.5, "s": 100, "x": "V",
                "i": 52983525029461, "c": ["@"], "z": "C",
            },
            "minuteBar": {
                "t": "2024-01-15T14:29:00Z",
                "o": 150.45, "h": 150.6, "l": 150.4, "c": 150.5,
                "v": 50000, "n": 310, "vw": 150.51,
            },
            "prevDailyBar": {
                "t": "2024-01-12T05:00:00Z",
                "o": 148.0, "h": 150.0, "l": 147.5, "c": 149.6,
                "v": 4800000,
            },
        }
    }).encode()
