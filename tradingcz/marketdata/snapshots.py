"""GET /v2/stocks/snapshots.

Latest trade, latest quote, minute bar, daily bar and previous daily bar
for each requested stock symbol.
"""
from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from tradingcz.marketdata.config import settings
from tradingcz.marketdata.dto.snapshot import Snapshot, SnapshotConverter, SnapshotResponse
from tradingcz.marketdata.endpoint import Endpoint, decode_json
from tradingcz.marketdata.enums import Feed
from tradingcz.marketdata.errors import ApiError, InvalidInput
from tradingcz.marketdata.query import encode_query, join_symbols

logger = logging.getLogger(__name__)


class GetReq(BaseModel):
    """A request for the snapshots of ``symbols``.

    Symbol order is kept as given but the response is keyed by symbol, not
    position.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    symbols: list[str] = Field(..., min_length=1)
    feed: Feed | None = None


class GetReqInit(BaseModel):
    """Optional fields of a GetReq.

    New optional fields may be added in later releases; they always carry a
    default, so keyword construction keeps working.
    """
    model_config = ConfigDict(extra="forbid")

    feed: Feed | None = None

    def init(self, symbols: Iterable[str]) -> GetReq:
        if isinstance(symbols, str):
            symbols = [symbols]
        return GetReq(symbols=list(symbols), feed=self.feed)


_RESPONSE = TypeAdapter(dict[str, SnapshotResponse])


def flatten(responses: dict[str, SnapshotResponse]) -> list[tuple[str, Snapshot]]:
    """Turn a symbol -> snapshot mapping into (symbol, Snapshot) pairs, in decode order."""
    return [
        (symbol, SnapshotConverter.from_response(response, symbol))
        for symbol, response in responses.items()
    ]


class Get(Endpoint[GetReq, list[tuple[str, Snapshot]], ApiError]):
    """Retrieve snapshots for multiple stock symbols.

    Status table:
        200: the snapshots were retrieved
        400: a symbol was invalid or unknown, or the feed is not covered by the plan
    """

    ok_statuses = frozenset({200})
    error_statuses = {400: InvalidInput}

    @classmethod
    def base_url(cls) -> str | None:
        return settings.data_url

    @classmethod
    def path(cls, request: GetReq) -> str:
        return "/v2/stocks/snapshots"

    @classmethod
    def query(cls, request: GetReq) -> str | None:
        return encode_query([
            ("symbols", join_symbols(request.symbols)),
            ("feed", request.feed),
        ])

    @classmethod
    def parse(cls, body: bytes) -> list[tuple[str, Snapshot]]:
        # Callers correlate by symbol, so the mapping itself is not kept.
        responses = decode_json(_RESPONSE, body)
        logger.debug("Decoded %d stock snapshots", len(responses))
        return flatten(responses)
