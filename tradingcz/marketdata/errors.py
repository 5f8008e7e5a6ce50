"""Error taxonomy shared by all endpoints.

Two disjoint families:

- ConversionError: local failure to encode a request or decode a success body
- ApiCallError: failure reported by the server, one subclass per named outcome
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ApiError(BaseModel):
    """Structured error payload returned by the API."""
    code: int
    message: str

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "code": 40010001,
                "message": "invalid symbol: FOO BAR",
            }
        },
    )


class ConversionError(ValueError):
    """A request could not be serialized or a response could not be decoded."""


class ApiCallError(Exception):
    """The server answered with a non-success status.

    ``error`` holds the decoded ``ApiError`` or, when the body could not be
    decoded, the raw response bytes.
    """

    def __init__(self, status: int, error: BaseModel | bytes) -> None:
        self.status = status
        self.error = error
        super().__init__(f"HTTP {status}: {self.describe(error)}")

    @staticmethod
    def describe(error: BaseModel | bytes) -> str:
        if isinstance(error, ApiError):
            return f"{error.message} (code {error.code})"
        if isinstance(error, BaseModel):
            return error.model_dump_json()
        return error.decode("utf-8", errors="replace")


class InvalidInput(ApiCallError):
    """The request was rejected as invalid (unknown symbol, unsupported feed, ...)."""


class UnexpectedStatus(ApiCallError):
    """The status code is not part of the endpoint's status table."""
