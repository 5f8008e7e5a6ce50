"""GET /v1beta3/crypto/{loc}/snapshots."""
from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from tradingcz.marketdata.config import settings
from tradingcz.marketdata.dto.snapshot import Snapshot, SnapshotResponse
from tradingcz.marketdata.endpoint import Endpoint, decode_json
from tradingcz.marketdata.enums import CryptoLocation
from tradingcz.marketdata.errors import ApiError, InvalidInput
from tradingcz.marketdata.query import encode_query, join_symbols
from tradingcz.marketdata.snapshots import flatten

logger = logging.getLogger(__name__)


class GetReq(BaseModel):
    """A request for the snapshots of crypto pairs such as ``BTC/USD``."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    symbols: list[str] = Field(..., min_length=1)
    location: CryptoLocation = CryptoLocation.ALPACA_US


class GetReqInit(BaseModel):
    """Optional fields of a GetReq; later fields will also be optional."""
    model_config = ConfigDict(extra="forbid")

    location: CryptoLocation = CryptoLocation.ALPACA_US

    def init(self, symbols: Iterable[str]) -> GetReq:
        if isinstance(symbols, str):
            symbols = [symbols]
        return GetReq(symbols=list(symbols), location=self.location)


class _Response(BaseModel):
    snapshots: dict[str, SnapshotResponse]


_RESPONSE = TypeAdapter(_Response)


class Get(Endpoint[GetReq, list[tuple[str, Snapshot]], ApiError]):
    """Retrieve snapshots for multiple crypto pairs at one venue.

    Status table:
        200: the snapshots were retrieved
        400: a symbol was invalid or unknown
    """

    ok_statuses = frozenset({200})
    error_statuses = {400: InvalidInput}

    @classmethod
    def base_url(cls) -> str | None:
        return settings.data_url

    @classmethod
    def path(cls, request: GetReq) -> str:
        return f"/v1beta3/crypto/{request.location.value}/snapshots"

    @classmethod
    def query(cls, request: GetReq) -> str | None:
        return encode_query([("symbols", join_symbols(request.symbols))])

    @classmethod
    def parse(cls, body: bytes) -> list[tuple[str, Snapshot]]:
        response = decode_json(_RESPONSE, body)
        logger.debug("Decoded %d crypto snapshots", len(response.snapshots))
        return flatten(response.snapshots)
