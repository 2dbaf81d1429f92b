"""
Normalized futures order and its lifecycle state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from model.currency import CurrencyPair


class TradeStatus(Enum):
    ORDER_CANCEL = "cancelled"
    ORDER_UNFINISH = "unfinished"
    ORDER_PART_FINISH = "partially_filled"
    ORDER_FINISH = "fully_filled"


class OpenType(IntEnum):
    """Order type codes accepted by the swap order endpoint."""

    OPEN_BUY = 1
    OPEN_SELL = 2
    CLOSE_BUY = 3
    CLOSE_SELL = 4


@dataclass(frozen=True)
class FutureOrder:
    order_id2: str
    currency: CurrencyPair
    contract_name: str
    amount: float
    price: float
    deal_amount: float
    avg_price: float
    otype: int
    status: TradeStatus
    fee: float
    order_time: int  # epoch ms
