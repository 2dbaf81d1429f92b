"""
Exchange-shaped response records and envelope checks for the swap v3 API.

These mirror the JSON the exchange sends, field for field, with numerics kept
as the strings they arrive as. Mapping to normalized types happens in
exchange.okex_swap.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from exchange.errors import DecodeError, ExchangeError
from infra.logger import get_logger

logger = get_logger("Responses")


def decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.error("Failed to decode JSON response from OKEx: %r", raw[:200] if raw else raw)
        raise DecodeError("Invalid JSON response") from exc


def decode_object(raw: bytes) -> Dict[str, Any]:
    payload = decode_json(raw)
    if not isinstance(payload, dict):
        raise DecodeError(f"Expected JSON object, got {type(payload).__name__}")
    return payload


def _str(payload: Dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value)


def _rows(payload: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """A list of JSON objects under key; any other shape is a DecodeError."""
    rows = payload.get(key) or []
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        logger.error("Malformed %s in OKEx response: %r", key, rows)
        raise DecodeError(f"Expected a list of objects under {key!r}")
    return rows


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass
class BaseResponse:
    """error_code / error_message / result triple used by order mutations."""

    error_code: str = ""
    error_message: str = ""
    result: bool = False

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BaseResponse":
        return cls(
            error_code=_str(payload, "error_code"),
            error_message=_str(payload, "error_message"),
            result=_as_bool(payload.get("result", False)),
        )

    def check(self) -> None:
        code = "" if self.error_code == "0" else self.error_code
        if self.error_message or code:
            logger.error("OKEx rejected request: %s:%s", self.error_code, self.error_message)
            raise ExchangeError(self.error_code, self.error_message)


@dataclass
class BizWarmTips:
    """code / message pair used by order queries."""

    code: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BizWarmTips":
        return cls(code=_str(payload, "code"), message=_str(payload, "message"))

    def check(self) -> None:
        if self.message:
            logger.error("OKEx query failed: %s:%s", self.code, self.message)
            raise ExchangeError(self.code, self.message)


@dataclass
class BaseTickerInfo:
    instrument_id: str = ""
    last: str = ""
    high_24h: str = ""
    low_24h: str = ""
    volume_24h: str = ""
    timestamp: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BaseTickerInfo":
        return cls(**{name: _str(payload, name) for name in cls.__dataclass_fields__})


@dataclass
class SwapInstrumentDepth:
    asks: List[List[Any]] = field(default_factory=list)
    bids: List[List[Any]] = field(default_factory=list)
    timestamp: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SwapInstrumentDepth":
        return cls(
            asks=list(payload.get("asks") or []),
            bids=list(payload.get("bids") or []),
            timestamp=_str(payload, "time") or _str(payload, "timestamp"),
        )


@dataclass
class SwapAccountInfo:
    instrument_id: str = ""
    equity: str = ""
    margin: str = ""
    realized_pnl: str = ""
    unrealized_pnl: str = ""
    margin_ratio: str = ""
    total_avail_balance: str = ""
    fixed_balance: str = ""
    margin_mode: str = ""
    timestamp: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SwapAccountInfo":
        return cls(**{name: _str(payload, name) for name in cls.__dataclass_fields__})


@dataclass
class SwapAccounts:
    info: List[SwapAccountInfo] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "SwapAccounts":
        """Accept both the {"info": [...]} envelope and a bare row list."""
        if isinstance(payload, dict):
            rows = payload.get("info") or []
        elif isinstance(payload, list):
            rows = payload
        else:
            raise DecodeError(f"Unexpected accounts payload: {type(payload).__name__}")
        return cls(info=[SwapAccountInfo.from_dict(row) for row in rows if isinstance(row, dict)])


@dataclass
class BaseOrderInfo:
    order_id: str = ""
    client_oid: str = ""
    instrument_id: str = ""
    size: str = ""
    price: str = ""
    filled_qty: str = ""
    price_avg: str = ""
    contract_val: str = ""
    type: str = ""
    status: str = ""
    fee: str = ""
    timestamp: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BaseOrderInfo":
        return cls(**{name: _str(payload, name) for name in cls.__dataclass_fields__})


@dataclass
class SwapOrdersInfo:
    tips: BizWarmTips = field(default_factory=BizWarmTips)
    order_info: List[BaseOrderInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SwapOrdersInfo":
        return cls(
            tips=BizWarmTips.from_dict(payload),
            order_info=[BaseOrderInfo.from_dict(row) for row in _rows(payload, "order_info")],
        )


@dataclass
class SwapPositionHolding:
    instrument_id: str = ""
    side: str = ""
    position: str = ""
    avail_position: str = ""
    avg_cost: str = ""
    settlement_price: str = ""
    realized_pnl: str = ""
    liquidation_price: str = ""
    leverage: str = ""
    margin: str = ""
    timestamp: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SwapPositionHolding":
        return cls(**{name: _str(payload, name) for name in cls.__dataclass_fields__})


@dataclass
class SwapPosition:
    margin_mode: str = ""
    holding: List[SwapPositionHolding] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SwapPosition":
        return cls(
            margin_mode=_str(payload, "margin_mode"),
            holding=[SwapPositionHolding.from_dict(row) for row in _rows(payload, "holding")],
        )


@dataclass
class PlaceOrderResult:
    envelope: BaseResponse = field(default_factory=BaseResponse)
    order_id: str = ""
    client_oid: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "PlaceOrderResult":
        return cls(
            envelope=BaseResponse.from_dict(payload),
            order_id=_str(payload, "order_id"),
            client_oid=_str(payload, "client_oid"),
        )


@dataclass
class SwapCancelOrderResult:
    envelope: BaseResponse = field(default_factory=BaseResponse)
    order_id: str = ""
    client_oid: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SwapCancelOrderResult":
        return cls(
            envelope=BaseResponse.from_dict(payload),
            order_id=_str(payload, "order_id"),
            client_oid=_str(payload, "client_oid"),
        )
