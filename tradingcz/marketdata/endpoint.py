"""Generic endpoint descriptor shared by all REST operations.

An endpoint is a class deriving from ``Endpoint`` that supplies:

- ``path()`` and ``query()`` to turn its input into a request target
- ``parse()`` to turn a success body into its output
- a status table: ``ok_statuses`` and ``error_statuses``

Everything else (URL assembly, error body decoding, status classification)
is shared. Descriptors never perform I/O and hold no state, so a dispatcher
can call them from any thread without coordination:

    url = snapshots.Get.url(request)
    status, body = transport.get(url)          # dispatcher's job
    pairs = snapshots.Get.evaluate(status, body)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from tradingcz.marketdata.config import settings
from tradingcz.marketdata.errors import ApiCallError, ApiError, ConversionError, UnexpectedStatus

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")
ApiErrorT = TypeVar("ApiErrorT", bound=BaseModel)

MIN_STATUS = 100
MAX_STATUS = 599


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of looking a status code up in an endpoint's status table."""
    status: int
    kind: OutcomeKind
    error: type[ApiCallError] | None = None


def decode_json(adapter: TypeAdapter[Any], body: bytes) -> Any:
    """Validate ``body`` against ``adapter``, raising ConversionError on failure."""
    try:
        return adapter.validate_json(body)
    except ValidationError as exc:
        raise ConversionError(f"Cannot decode response body: {exc}") from exc


class Endpoint(Generic[InputT, OutputT, ApiErrorT]):
    """Base class for endpoint descriptors.

    Subclasses are used as namespaces; all operations are classmethods.
    """

    method: ClassVar[str] = "GET"
    ok_statuses: ClassVar[frozenset[int]] = frozenset({200})
    error_statuses: ClassVar[Mapping[int, type[ApiCallError]]] = {}
    api_error: ClassVar[type[BaseModel]] = ApiError

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        claimed = cls.ok_statuses & cls.error_statuses.keys()
        if claimed:
            raise TypeError(f"{cls.__name__} claims statuses {sorted(claimed)} as both success and error")
        for status in (*cls.ok_statuses, *cls.error_statuses):
            if not MIN_STATUS <= status <= MAX_STATUS:
                raise TypeError(f"{cls.__name__} declares invalid HTTP status {status}")

    @classmethod
    def base_url(cls) -> str | None:
        """Host override for this endpoint; None selects the default host."""
        return None

    @classmethod
    def path(cls, request: InputT) -> str:
        raise NotImplementedError(f"{cls.__name__} does not define a path")

    @classmethod
    def query(cls, request: InputT) -> str | None:
        return None

    @classmethod
    def body(cls, request: InputT) -> bytes | None:
        return None

    @classmethod
    def parse(cls, body: bytes) -> OutputT:
        raise NotImplementedError(f"{cls.__name__} does not define a response parser")

    @classmethod
    def parse_err(cls, body: bytes) -> ApiErrorT | bytes:
        """Decode an error body, handing back the raw bytes if that fails."""
        try:
            return cls.api_error.model_validate_json(body)  # type: ignore[return-value]
        except ValidationError:
            logger.warning("%s: undecodable error body (%d bytes), returning raw payload",
                           cls.__name__, len(body))
            return bytes(body)

    @classmethod
    def url(cls, request: InputT, default_base_url: str | None = None) -> str:
        """Full request URL: effective host, path and query string.

        The host is the endpoint override, else ``default_base_url``, else the
        configured data host.
        """
        base = cls.base_url() or default_base_url or settings.data_url
        target = base.rstrip("/") + cls.path(request)
        query = cls.query(request)
        logger.debug("%s %s query=%s", cls.method, target, query)
        return f"{target}?{query}" if query else target

    @classmethod
    def classify(cls, status: int) -> Outcome:
        if not MIN_STATUS <= status <= MAX_STATUS:
            raise ValueError(f"HTTP status {status} outside [{MIN_STATUS}, {MAX_STATUS}]")
        if status in cls.ok_statuses:
            return Outcome(status, OutcomeKind.SUCCESS)
        error = cls.error_statuses.get(status)
        if error is not None:
            return Outcome(status, OutcomeKind.ERROR, error)
        return Outcome(status, OutcomeKind.UNEXPECTED, UnexpectedStatus)

    @classmethod
    def evaluate(cls, status: int, body: bytes) -> OutputT:
        """Turn a response into the endpoint's output.

        Raises:
            ConversionError: success status but the body is not decodable
            ApiCallError: any other status, as the class named by the table
        """
        outcome = cls.classify(status)
        logger.debug("%s: status %d classified as %s", cls.__name__, status, outcome.kind.value)
        if outcome.kind is OutcomeKind.SUCCESS:
            return cls.parse(body)
        raise outcome.error(status, cls.parse_err(body))
