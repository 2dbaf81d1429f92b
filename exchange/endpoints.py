"""
Static OKEx swap v3 endpoint, header and instrument tables.
"""

from __future__ import annotations

from typing import Dict

from model.currency import (
    BCH,
    BCH_USD,
    BSV,
    BTC,
    BTC_USD,
    EOS,
    ETC,
    ETC_USD,
    ETH,
    ETH_USD,
    LTC,
    LTC_USD,
    UNKNOWN,
    XRP,
    Currency,
    CurrencyPair,
)

# HTTP headers
OK_ACCESS_KEY = "OK-ACCESS-KEY"
OK_ACCESS_SIGN = "OK-ACCESS-SIGN"
OK_ACCESS_TIMESTAMP = "OK-ACCESS-TIMESTAMP"
OK_ACCESS_PASSPHRASE = "OK-ACCESS-PASSPHRASE"
CONTENT_TYPE = "Content-Type"
ACCEPT = "Accept"
APPLICATION_JSON = "application/json"
APPLICATION_JSON_UTF8 = "application/json; charset=UTF-8"

# Instruments
BTC_USD_SWAP = "BTC-USD-SWAP"
LTC_USD_SWAP = "LTC-USD-SWAP"
ETH_USD_SWAP = "ETH-USD-SWAP"
ETC_USD_SWAP = "ETC-USD-SWAP"
BCH_USD_SWAP = "BCH-USD-SWAP"
BSV_USD_SWAP = "BSV-USD-SWAP"
EOS_USD_SWAP = "EOS-USD-SWAP"
XRP_USD_SWAP = "XRP-USD-SWAP"

# REST paths
GET_ACCOUNTS = "/api/swap/v3/accounts"
PLACE_ORDER = "/api/swap/v3/order"
CANCEL_ORDER = "/api/swap/v3/cancel_order/{instrument_id}/{order_id}"
GET_ORDER = "/api/swap/v3/orders/{instrument_id}/{order_id}"
GET_POSITION = "/api/swap/v3/{instrument_id}/position"
GET_DEPTH = "/api/swap/v3/instruments/{instrument_id}/depth?size={size}"
GET_TICKER = "/api/swap/v3/instruments/{instrument_id}/ticker"
GET_UNFINISHED_ORDERS = "/api/swap/v3/orders/{instrument_id}?status={status}&from={page}&limit={limit}"

# Raw order status codes used as list filters
STATUS_UNFINISHED = 0
STATUS_PART_FILLED = 1

INSTRUMENT_CURRENCY: Dict[str, Currency] = {
    BTC_USD_SWAP: BTC,
    LTC_USD_SWAP: LTC,
    ETH_USD_SWAP: ETH,
    ETC_USD_SWAP: ETC,
    BCH_USD_SWAP: BCH,
    BSV_USD_SWAP: BSV,
    EOS_USD_SWAP: EOS,
    XRP_USD_SWAP: XRP,
}

# USD face value of one contract
CONTRACT_VALUE: Dict[CurrencyPair, float] = {
    BTC_USD: 100.0,
    LTC_USD: 10.0,
    ETH_USD: 10.0,
    ETC_USD: 10.0,
    BCH_USD: 10.0,
}


def currency_for_instrument(instrument_id: str) -> Currency:
    return INSTRUMENT_CURRENCY.get(instrument_id, UNKNOWN)
