"""
Error taxonomy for the OKEx swap adapter.
"""

from __future__ import annotations

from dataclasses import dataclass


class OKExSwapError(Exception):
    """Base class for every failure raised by the adapter."""


class TransportError(OKExSwapError):
    """Network or HTTP-layer failure."""


class DecodeError(OKExSwapError):
    """Response body is not the JSON shape we expect."""


class ExchangeError(OKExSwapError):
    """The exchange answered with an error envelope."""

    def __init__(self, code: object, message: str) -> None:
        self.code = "" if code is None else str(code)
        self.message = message or ""
        super().__init__(f"{self.code}:{self.message}")


class UnsupportedError(OKExSwapError):
    """Operation not offered by the swap API; raised before any request."""


@dataclass(frozen=True)
class PartialResult:
    """Non-fatal diagnostic attached to a result that is missing a page."""

    phase: str
    error: OKExSwapError

    def __str__(self) -> str:
        return f"{self.phase} failed: {self.error}"
