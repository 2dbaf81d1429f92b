"""
Futures account snapshot keyed by normalized currency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from model.currency import Currency


@dataclass(frozen=True)
class FutureSubAccount:
    currency: Currency
    account_rights: float  # equity
    keep_deposit: float  # margin in use
    profit_real: float
    profit_unreal: float
    risk_rate: float  # margin ratio


@dataclass
class FutureAccount:
    future_sub_accounts: Dict[Currency, FutureSubAccount] = field(default_factory=dict)
