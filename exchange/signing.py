"""
OKEx v3 request signing.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import datetime, timezone
from typing import Optional, Tuple


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision, e.g. 2019-03-01T09:12:45.123Z."""
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def sign_request(secret: str, method: str, path: str, body: str, timestamp: str) -> str:
    """
    Base64 HMAC-SHA256 over timestamp + METHOD + path + body.

    The path includes the query string; body is "" for GET requests.
    """
    message = f"{timestamp}{method.upper()}{path}{body}"
    digest = hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


def signed_params(secret: str, method: str, path: str, body: str) -> Tuple[str, str]:
    """Return (signature, timestamp) for a request issued now."""
    timestamp = iso_timestamp()
    return sign_request(secret, method, path, body, timestamp), timestamp
