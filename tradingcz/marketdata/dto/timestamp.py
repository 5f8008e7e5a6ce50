"""RFC 3339 timestamp type for wire models."""
from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

_SUBMICRO = re.compile(r"(\.\d{6})\d+")


def _truncate_to_micros(value: Any) -> Any:
    # Alpaca sends nanosecond precision; datetime stops at microseconds.
    if isinstance(value, str):
        return _SUBMICRO.sub(r"\1", value, count=1)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_truncate_to_micros)]
