"""
Currency and currency pair value types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    symbol: str
    desc: str = ""

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class CurrencyPair:
    currency_a: Currency
    currency_b: Currency

    def to_symbol(self, sep: str = "_") -> str:
        return f"{self.currency_a.symbol}{sep}{self.currency_b.symbol}"

    def __str__(self) -> str:
        return self.to_symbol()


UNKNOWN = Currency("UNKNOWN", "")
BTC = Currency("BTC", "bitcoin.org")
LTC = Currency("LTC", "litecoin.org")
ETH = Currency("ETH", "ethereum.org")
ETC = Currency("ETC", "ethereumclassic.org")
BCH = Currency("BCH", "bitcoincash.org")
BSV = Currency("BSV", "bitcoinsv.io")
EOS = Currency("EOS", "eos.io")
XRP = Currency("XRP", "ripple.com")
USD = Currency("USD", "")

UNKNOWN_PAIR = CurrencyPair(UNKNOWN, UNKNOWN)
BTC_USD = CurrencyPair(BTC, USD)
LTC_USD = CurrencyPair(LTC, USD)
ETH_USD = CurrencyPair(ETH, USD)
ETC_USD = CurrencyPair(ETC, USD)
BCH_USD = CurrencyPair(BCH, USD)
BSV_USD = CurrencyPair(BSV, USD)
EOS_USD = CurrencyPair(EOS, USD)
XRP_USD = CurrencyPair(XRP, USD)
