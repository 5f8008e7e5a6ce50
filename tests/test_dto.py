from datetime import datetime, timezone

from pydantic import TypeAdapter

from tradingcz.marketdata import (
    Bar,
    BarConverter,
    Quote,
    QuoteConverter,
    Snapshot,
    SnapshotConverter,
    Trade,
    TradeConverter,
    snapshots,
)
from tradingcz.marketdata.dto import Timestamp

T0 = datetime(2024, 1, 15, 14, 30, 0, 123456, tzinfo=timezone.utc)


def make_snapshot(symbol="AAPL"):
    def bar(close):
        return Bar(symbol=symbol, timestamp=T0, open=1.25, high=2.5, low=1.0, close=close,
                   volume=1234.5, trade_count=17, vwap=1.75)

    return Snapshot(
        symbol=symbol,
        latest_trade=Trade(symbol=symbol, timestamp=T0, price=150.5, size=100.0, exchange="V",
                           trade_id="9001", conditions=["@", "I"], tape="C"),
        latest_quote=Quote(symbol=symbol, timestamp=T0, bid_price=150.49, ask_price=150.51,
                           bid_size=5.0, ask_size=6.0, bid_exchange="Q", ask_exchange="V",
                           conditions=["R"], tape="C"),
        minute_bar=bar(2.0),
        daily_bar=bar(2.25),
        previous_daily_bar=bar(0.1 + 0.2),
    )


def test_snapshot_round_trip_preserves_every_field():
    original = make_snapshot()
    body = SnapshotConverter.to_response(original).model_dump_json(by_alias=True)
    [(symbol, decoded)] = snapshots.Get.parse(f'{{"AAPL": {body}}}'.encode())
    assert symbol == "AAPL"
    assert decoded == original
    assert decoded.previous_daily_bar.close == 0.1 + 0.2


def test_wire_keys_use_api_names():
    dumped = SnapshotConverter.to_response(make_snapshot()).model_dump(by_alias=True)
    assert set(dumped) == {"latestTrade", "latestQuote", "minuteBar", "dailyBar", "prevDailyBar"}
    assert set(dumped["dailyBar"]) == {"t", "o", "h", "l", "c", "v", "n", "vw"}
    assert dumped["latestQuote"]["as"] == 6.0


def test_to_dict_nests_parts():
    data = make_snapshot().to_dict()
    assert data["symbol"] == "AAPL"
    assert data["latest_trade"]["trade_id"] == "9001"
    assert data["daily_bar"]["timestamp"] == T0.isoformat()
    assert Snapshot(symbol="SPY").to_dict()["previous_daily_bar"] is None


def test_raw_is_kept_but_ignored_in_equality(full_snapshot_body):
    [(_, snapshot)] = snapshots.Get.parse(full_snapshot_body)
    assert snapshot.raw is not None
    assert snapshot.daily_bar.raw is not None
    assert snapshot == Snapshot(
        symbol=snapshot.symbol,
        latest_trade=snapshot.latest_trade,
        latest_quote=snapshot.latest_quote,
        minute_bar=snapshot.minute_bar,
        daily_bar=snapshot.daily_bar,
        previous_daily_bar=snapshot.previous_daily_bar,
    )


def test_converters_to_dict_match_records():
    snapshot = make_snapshot()
    assert SnapshotConverter.to_dict(snapshot) == snapshot.to_dict()
    assert BarConverter.to_dict(snapshot.daily_bar) == snapshot.to_dict()["daily_bar"]
    assert QuoteConverter.to_dict(snapshot.latest_quote)["tape"] == "C"
    assert TradeConverter.to_dict(snapshot.latest_trade)["price"] == 150.5


def test_timestamp_truncates_nanoseconds():
    adapter = TypeAdapter(Timestamp)
    parsed = adapter.validate_python("2024-01-15T14:30:00.123456789Z")
    assert parsed == T0
