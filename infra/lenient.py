"""
Lenient parse policy for exchange payloads.

OKEx transmits every numeric field as a string and every timestamp as RFC3339.
A malformed value must not abort the mapping of an otherwise valid response,
so these helpers degrade to zero instead of raising. Each fallback is logged at
DEBUG so a drifting field can still be traced.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

from infra.logger import get_logger

logger = get_logger("Lenient")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# full date, "T", full time with optional fraction, and a mandatory zone
RFC3339_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$")


def lenient_float(value: Any) -> float:
    """Parse a string-encoded decimal; None, "" and garbage become 0.0."""
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.debug("Lenient float fallback for %r", value)
        return 0.0


def lenient_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.debug("Lenient int fallback for %r", value)
        return 0


def lenient_datetime(value: Any) -> datetime:
    """
    Parse an RFC3339 timestamp such as 2019-03-01T09:12:45.123Z.

    Returns the Unix epoch (UTC) when the value cannot be parsed.
    """
    if not isinstance(value, str) or not RFC3339_RE.match(value.strip()):
        logger.debug("Lenient timestamp fallback for %r", value)
        return EPOCH
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat on older interpreters only accepts 3 or 6 fraction digits
    if "." in text:
        head, _, rest = text.partition(".")
        digits = ""
        while rest and rest[0].isdigit():
            digits += rest[0]
            rest = rest[1:]
        text = f"{head}.{(digits + '000000')[:6]}{rest}"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Lenient timestamp fallback for %r", value)
        return EPOCH
    return parsed


def lenient_epoch_ms(value: Any) -> int:
    """RFC3339 timestamp to Unix epoch milliseconds, 0 when unparseable."""
    parsed = lenient_datetime(value)
    return (parsed - EPOCH) // timedelta(milliseconds=1)
