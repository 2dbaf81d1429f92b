"""
Blocking HTTP sender for signed OKEx requests.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Tuple

import requests

from config import settings
from exchange.errors import ExchangeError, TransportError
from infra.logger import get_logger


class HttpSender:
    """Issue one HTTP round-trip per call over a pooled requests.Session."""

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout if timeout is not None else getattr(settings, "REQUEST_TIMEOUT", 10.0)
        self.session = session or requests.Session()
        self.logger = get_logger("HttpSender")

    def send(self, method: str, url: str, body: str, headers: Dict[str, str]) -> bytes:
        """
        Send the request and return the raw response body.

        Every HTTP status >= 400 raises: ExchangeError when the body carries
        the exchange's code and message, TransportError otherwise. Connection
        failures raise TransportError.
        """
        self.logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                data=body.encode("utf-8") if body else None,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self.logger.error("Request %s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        return self._handle_response(method, url, response)

    def _handle_response(self, method: str, url: str, response: Any) -> bytes:
        content = response.content or b""
        if response.status_code >= 400:
            self.logger.error("OKEx HTTP error (%s) for %s %s: %s", response.status_code, method, url, response.text)
            envelope = _error_envelope(content)
            if envelope is not None:
                raise ExchangeError(*envelope)
            raise TransportError(f"HTTP {response.status_code}: {response.text}")
        self.logger.debug("Response: %s", content)
        return content

    def close(self) -> None:
        self.session.close()


def _error_envelope(content: bytes) -> Optional[Tuple[str, str]]:
    """Pull (code, message) out of a JSON error body, None when there is none."""
    try:
        payload = json.loads(content)
    except (TypeError, ValueError):
        return None
    if not isinstance(payload, dict):
        return None
    code = payload.get("error_code") or payload.get("code")
    message = payload.get("error_message") or payload.get("message")
    if code in (None, "") and not message:
        return None
    return ("" if code is None else str(code)), str(message or "")
