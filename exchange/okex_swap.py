"""
OKEx perpetual swap (v3) adapter exposing the normalized futures interface.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from config import settings
from exchange import endpoints
from exchange.errors import OKExSwapError, PartialResult, UnsupportedError
from exchange.http_client import HttpSender
from exchange.responses import (
    BaseOrderInfo,
    BaseTickerInfo,
    BizWarmTips,
    PlaceOrderResult,
    SwapAccounts,
    SwapCancelOrderResult,
    SwapInstrumentDepth,
    SwapOrdersInfo,
    SwapPosition,
    SwapPositionHolding,
    decode_json,
    decode_object,
)
from exchange.signing import signed_params
from infra.lenient import lenient_datetime, lenient_epoch_ms, lenient_float, lenient_int
from infra.logger import get_logger
from model.account import FutureAccount, FutureSubAccount
from model.currency import CurrencyPair
from model.market import Depth, DepthRecord, Ticker
from model.order import FutureOrder, TradeStatus
from model.position import FuturePosition

OKEX_SWAP = "okex_swap"

_TRADE_STATUS: Dict[int, TradeStatus] = {
    -1: TradeStatus.ORDER_CANCEL,
    0: TradeStatus.ORDER_UNFINISH,
    1: TradeStatus.ORDER_PART_FINISH,
    2: TradeStatus.ORDER_FINISH,
}


class Sender(Protocol):
    def send(self, method: str, url: str, body: str, headers: Dict[str, str]) -> bytes:
        ...


@dataclass(frozen=True)
class UnfinishedOrders:
    """Merged unfinished + partially filled orders, with an optional diagnostic."""

    orders: List[FutureOrder]
    diagnostic: Optional[PartialResult] = None

    @property
    def is_partial(self) -> bool:
        return self.diagnostic is not None


def adapt_trade_status(status: int) -> TradeStatus:
    """Map a raw order status code; unknown codes are treated as unfinished."""
    return _TRADE_STATUS.get(status, TradeStatus.ORDER_UNFINISH)


def parse_order(info: BaseOrderInfo, pair: CurrencyPair, contract_type: str) -> FutureOrder:
    return FutureOrder(
        order_id2=info.order_id,
        currency=pair,
        contract_name=contract_type,
        amount=lenient_float(info.size),
        price=lenient_float(info.price),
        deal_amount=lenient_float(info.filled_qty),
        avg_price=lenient_float(info.price_avg),
        otype=lenient_int(info.type),
        status=adapt_trade_status(lenient_int(info.status)),
        fee=lenient_float(info.fee),
        order_time=lenient_epoch_ms(info.timestamp),
    )


def map_depth(raw: SwapInstrumentDepth, pair: CurrencyPair, contract_type: str) -> Depth:
    """Bids keep the feed order; asks arrive worst-first and are reversed."""
    return Depth(
        pair=pair,
        contract_type=contract_type,
        utime=lenient_datetime(raw.timestamp),
        bid_list=_depth_records(raw.bids),
        ask_list=_depth_records(reversed(raw.asks)),
    )


def _depth_records(rows: Any) -> List[DepthRecord]:
    records = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            continue
        records.append(DepthRecord(price=lenient_float(row[0]), amount=lenient_float(row[1])))
    return records


def map_account(raw: SwapAccounts) -> FutureAccount:
    account = FutureAccount()
    for row in raw.info:
        currency = endpoints.currency_for_instrument(row.instrument_id)
        account.future_sub_accounts[currency] = FutureSubAccount(
            currency=currency,
            account_rights=lenient_float(row.equity),
            keep_deposit=lenient_float(row.margin),
            profit_real=lenient_float(row.realized_pnl),
            profit_unreal=lenient_float(row.unrealized_pnl),
            risk_rate=lenient_float(row.margin_ratio),
        )
    return account


def map_position(
    holdings: Sequence[SwapPositionHolding], pair: CurrencyPair, contract_type: str
) -> FuturePosition:
    """
    Merge up to two holding rows into one position, matching rows by side tag.

    force_liqu_price is written from the long row and then overwritten from the
    short slot, which is empty (zero) when only a long row exists.
    """
    position = FuturePosition(contract_type=contract_type, symbol=pair)
    if not holdings:
        return position

    long_row = SwapPositionHolding()
    short_row = SwapPositionHolding()
    for row in holdings:
        side = row.side.lower()
        if side == "long":
            long_row = row
        elif side == "short":
            short_row = row

    position.force_liqu_price = lenient_float(long_row.liquidation_price)
    position.buy_amount = lenient_float(long_row.position)
    position.buy_available = lenient_float(long_row.avail_position)
    position.buy_price_avg = lenient_float(long_row.avg_cost)
    position.buy_profit_real = lenient_float(long_row.realized_pnl)
    position.buy_price_cost = lenient_float(long_row.settlement_price)

    # TODO: keep a liquidation price per side once the exchange confirms whether it is shared.
    position.force_liqu_price = lenient_float(short_row.liquidation_price)
    position.sell_amount = lenient_float(short_row.position)
    position.sell_available = lenient_float(short_row.avail_position)
    position.sell_price_avg = lenient_float(short_row.avg_cost)
    position.sell_profit_real = lenient_float(short_row.realized_pnl)
    position.sell_price_cost = lenient_float(short_row.settlement_price)
    return position


class OKExSwap:
    """Normalized futures interface backed by the OKEx swap REST API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        passphrase: Optional[str] = None,
        endpoint: Optional[str] = None,
        sender: Optional[Sender] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else getattr(settings, "OKEX_API_KEY", "")
        self.api_secret = api_secret if api_secret is not None else getattr(settings, "OKEX_API_SECRET", "")
        self.passphrase = passphrase if passphrase is not None else getattr(settings, "OKEX_PASSPHRASE", "")
        self.endpoint = (endpoint or getattr(settings, "OKEX_ENDPOINT", "https://www.okex.com")).rstrip("/")
        self.sender: Sender = sender or HttpSender()
        self.logger = get_logger("OKExSwap")

    def get_exchange_name(self) -> str:
        return OKEX_SWAP

    # Market data

    def get_future_ticker(self, currency_pair: CurrencyPair, contract_type: str) -> Ticker:
        path = endpoints.GET_TICKER.format(instrument_id=contract_type)
        resp = BaseTickerInfo.from_dict(decode_object(self._do_request("GET", path)))
        return Ticker(
            pair=currency_pair,
            last=lenient_float(resp.last),
            low=lenient_float(resp.low_24h),
            high=lenient_float(resp.high_24h),
            vol=lenient_float(resp.volume_24h),
            date=lenient_epoch_ms(resp.timestamp),
        )

    def get_future_depth(self, currency_pair: CurrencyPair, contract_type: str, size: Optional[int] = None) -> Depth:
        if size is None:
            size = getattr(settings, "DEPTH_SIZE", 20)
        path = endpoints.GET_DEPTH.format(instrument_id=contract_type, size=size)
        resp = SwapInstrumentDepth.from_dict(decode_object(self._do_request("GET", path)))
        return map_depth(resp, currency_pair, contract_type)

    def get_contract_value(self, currency_pair: CurrencyPair) -> float:
        """USD face value of one contract (BTC 100, LTC/ETH/ETC/BCH 10)."""
        try:
            return endpoints.CONTRACT_VALUE[currency_pair]
        except KeyError:
            raise OKExSwapError(f"No contract value for {currency_pair}") from None

    # Account

    def get_future_userinfo(self) -> FutureAccount:
        resp = SwapAccounts.from_payload(decode_json(self._do_request("GET", endpoints.GET_ACCOUNTS)))
        return map_account(resp)

    def get_future_position(self, currency_pair: CurrencyPair, contract_type: str) -> List[FuturePosition]:
        path = endpoints.GET_POSITION.format(instrument_id=contract_type)
        resp = SwapPosition.from_dict(decode_object(self._do_request("GET", path)))
        return [map_position(resp.holding, currency_pair, contract_type)]

    # Orders

    def place_future_order(
        self,
        currency_pair: CurrencyPair,
        contract_type: str,
        price: str,
        amount: str,
        open_type: int,
        match_price: int = 0,
        lever_rate: int = 10,
    ) -> str:
        """
        Submit a single order and return the exchange order id.

        lever_rate is accepted for interface compatibility; swap leverage is
        configured per instrument on the exchange, not per order.
        """
        body = self.build_place_order_body(contract_type, price, amount, open_type, match_price)
        resp = PlaceOrderResult.from_dict(decode_object(self._do_request("POST", endpoints.PLACE_ORDER, body)))
        resp.envelope.check()
        self.logger.info(
            "Placed order %s on %s type=%s price=%s size=%s", resp.order_id, contract_type, open_type, price, amount
        )
        return resp.order_id

    @staticmethod
    def build_place_order_body(
        contract_type: str, price: str, amount: str, open_type: int, match_price: int = 0
    ) -> str:
        payload = {
            "client_oid": uuid.uuid4().hex,
            "price": str(price),
            "match_price": str(int(match_price)),
            "type": str(int(open_type)),
            "size": str(amount),
            "instrument_id": contract_type,
        }
        return json.dumps(payload, separators=(",", ":"))

    def future_cancel_order(self, currency_pair: CurrencyPair, contract_type: str, order_id: str) -> bool:
        path = endpoints.CANCEL_ORDER.format(instrument_id=contract_type, order_id=order_id)
        resp = SwapCancelOrderResult.from_dict(decode_object(self._do_request("POST", path)))
        resp.envelope.check()
        self.logger.info("Cancel order %s on %s result=%s", order_id, contract_type, resp.envelope.result)
        return resp.envelope.result

    def get_future_order(self, order_id: str, currency_pair: CurrencyPair, contract_type: str) -> FutureOrder:
        path = endpoints.GET_ORDER.format(instrument_id=contract_type, order_id=order_id)
        payload = decode_object(self._do_request("GET", path))
        BizWarmTips.from_dict(payload).check()
        return parse_order(BaseOrderInfo.from_dict(payload), currency_pair, contract_type)

    def get_unfinish_future_orders(self, currency_pair: CurrencyPair, contract_type: str) -> List[FutureOrder]:
        return self.fetch_unfinished_future_orders(currency_pair, contract_type).orders

    def fetch_unfinished_future_orders(self, currency_pair: CurrencyPair, contract_type: str) -> UnfinishedOrders:
        """
        Fetch open orders in two phases: unfinished, then partially filled.

        The exchange has no single "open" filter. A failure of the first phase
        raises; a failure of the second is returned as a diagnostic alongside
        the first phase's orders.
        """
        orders = self._fetch_orders_by_status(currency_pair, contract_type, endpoints.STATUS_UNFINISHED)
        try:
            partial = self._fetch_orders_by_status(currency_pair, contract_type, endpoints.STATUS_PART_FILLED)
        except OKExSwapError as exc:
            diagnostic = PartialResult(phase="partially_filled", error=exc)
            self.logger.warning("Returning %s unfinished orders only: %s", len(orders), diagnostic)
            return UnfinishedOrders(orders=orders, diagnostic=diagnostic)
        return UnfinishedOrders(orders=orders + partial)

    def _fetch_orders_by_status(self, currency_pair: CurrencyPair, contract_type: str, status: int) -> List[FutureOrder]:
        path = endpoints.GET_UNFINISHED_ORDERS.format(
            instrument_id=contract_type,
            status=status,
            page=1,
            limit=getattr(settings, "UNFINISHED_PAGE_LIMIT", 100),
        )
        resp = SwapOrdersInfo.from_dict(decode_object(self._do_request("GET", path)))
        resp.tips.check()
        return [parse_order(info, currency_pair, contract_type) for info in resp.order_info]

    def adapt_trade_status(self, status: int) -> TradeStatus:
        return adapt_trade_status(status)

    # Not offered by the swap API

    def get_future_orders(self, order_ids: List[str], currency_pair: CurrencyPair, contract_type: str) -> List[FutureOrder]:
        raise UnsupportedError("get_future_orders is not supported by okex swap")

    def get_fee(self) -> float:
        raise UnsupportedError("get_fee is not supported by okex swap")

    def get_future_estimated_price(self, currency_pair: CurrencyPair) -> float:
        raise UnsupportedError("get_future_estimated_price is not supported by okex swap")

    def get_future_index(self, currency_pair: CurrencyPair) -> float:
        raise UnsupportedError("get_future_index is not supported by okex swap")

    def get_delivery_time(self) -> Tuple[int, int, int, int]:
        raise UnsupportedError("get_delivery_time is not supported by okex swap")

    def get_kline_records(self, contract_type: str, currency_pair: CurrencyPair, period: int, size: int, since: int) -> list:
        raise UnsupportedError("get_kline_records is not supported by okex swap")

    def get_trades(self, contract_type: str, currency_pair: CurrencyPair, since: int) -> list:
        raise UnsupportedError("get_trades is not supported by okex swap")

    def get_exchange_rate(self) -> float:
        raise UnsupportedError("get_exchange_rate is not supported by okex swap")

    # Transport

    def _do_request(self, method: str, path: str, body: str = "") -> bytes:
        url = f"{self.endpoint}{path}"
        sign, timestamp = signed_params(self.api_secret, method, path, body)
        headers = {
            endpoints.CONTENT_TYPE: endpoints.APPLICATION_JSON_UTF8,
            endpoints.ACCEPT: endpoints.APPLICATION_JSON,
            endpoints.OK_ACCESS_KEY: self.api_key,
            endpoints.OK_ACCESS_PASSPHRASE: self.passphrase,
            endpoints.OK_ACCESS_SIGN: sign,
            endpoints.OK_ACCESS_TIMESTAMP: timestamp,
        }
        self.logger.debug("%s %s", method, url)
        return self.sender.send(method, url, body, headers)
