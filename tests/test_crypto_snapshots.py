import pytest
from pydantic import ValidationError

from tradingcz.marketdata import ConversionError, CryptoLocation, InvalidInput, crypto_snapshots


def test_default_location_is_alpaca_us():
    request = crypto_snapshots.GetReqInit().init(["BTC/USD"])
    assert request.location is CryptoLocation.ALPACA_US
    assert crypto_snapshots.Get.path(request) == "/v1beta3/crypto/us/snapshots"


def test_path_embeds_location_and_query_encodes_pairs():
    request = crypto_snapshots.GetReqInit(location=CryptoLocation.KRAKEN_EU).init(["BTC/USD", "ETH/USD"])
    assert crypto_snapshots.Get.path(request) == "/v1beta3/crypto/eu-1/snapshots"
    assert crypto_snapshots.Get.query(request) == "symbols=BTC%2FUSD%2CETH%2FUSD"


def test_parse_unwraps_snapshots_key():
    body = b'{"snapshots": {"BTC/USD": {"latestTrade": {"t": "2024-01-15T14:30:00Z", "p": 42000.5, "s": 0.0125, "i": 1234}}}}'
    [(symbol, snapshot)] = crypto_snapshots.Get.parse(body)
    assert symbol == "BTC/USD"
    assert snapshot.latest_trade.size == 0.0125
    assert snapshot.latest_quote is None


def test_parse_requires_snapshots_key():
    with pytest.raises(ConversionError):
        crypto_snapshots.Get.parse(b'{"BTC/USD": {}}')


def test_bad_request_is_invalid_input():
    with pytest.raises(InvalidInput):
        crypto_snapshots.Get.evaluate(400, b'{"code": 42210000, "message": "invalid symbol"}')


def test_init_rejects_misspelled_option():
    with pytest.raises(ValidationError):
        crypto_snapshots.GetReqInit(locaton=CryptoLocation.KRAKEN_US)
