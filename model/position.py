"""
Position model carrying both sides of a swap contract.
"""

from __future__ import annotations

from dataclasses import dataclass

from model.currency import CurrencyPair


@dataclass
class FuturePosition:
    contract_type: str
    symbol: CurrencyPair
    force_liqu_price: float = 0.0
    buy_amount: float = 0.0
    buy_available: float = 0.0
    buy_price_avg: float = 0.0
    buy_profit_real: float = 0.0
    buy_price_cost: float = 0.0
    sell_amount: float = 0.0
    sell_available: float = 0.0
    sell_price_avg: float = 0.0
    sell_profit_real: float = 0.0
    sell_price_cost: float = 0.0
