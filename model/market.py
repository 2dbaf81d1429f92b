"""
Normalized market data: ticker and order book depth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from model.currency import UNKNOWN_PAIR, CurrencyPair


@dataclass(frozen=True)
class Ticker:
    pair: CurrencyPair
    last: float
    low: float
    high: float
    vol: float
    date: int  # epoch ms


@dataclass(frozen=True)
class DepthRecord:
    price: float
    amount: float


@dataclass
class Depth:
    """Order book snapshot; index 0 is the best level on both sides."""

    pair: CurrencyPair = UNKNOWN_PAIR
    contract_type: str = ""
    utime: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
    bid_list: List[DepthRecord] = field(default_factory=list)
    ask_list: List[DepthRecord] = field(default_factory=list)
