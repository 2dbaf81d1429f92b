"""
Smoke run: print ticker, depth, account and open orders for one swap instrument.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load environment variables before other imports that may read them.
load_dotenv()

from exchange.endpoints import BTC_USD_SWAP
from exchange.errors import OKExSwapError
from exchange.okex_swap import OKExSwap
from infra.logger import get_logger
from model.currency import BTC_USD


def main() -> None:
    logger = get_logger("Main")
    contract = os.getenv("OKEX_CONTRACT", BTC_USD_SWAP)
    swap = OKExSwap()

    ticker = swap.get_future_ticker(BTC_USD, contract)
    logger.info("Ticker %s last=%s high=%s low=%s vol=%s", contract, ticker.last, ticker.high, ticker.low, ticker.vol)

    depth = swap.get_future_depth(BTC_USD, contract, 5)
    if depth.bid_list and depth.ask_list:
        logger.info("Top of book bid=%s ask=%s", depth.bid_list[0].price, depth.ask_list[0].price)

    if not swap.api_key:
        logger.info("No OKEX_API_KEY set; skipping private endpoints")
        return

    try:
        account = swap.get_future_userinfo()
        for currency, sub in account.future_sub_accounts.items():
            logger.info("Account %s equity=%s margin=%s", currency, sub.account_rights, sub.keep_deposit)

        result = swap.fetch_unfinished_future_orders(BTC_USD, contract)
        logger.info("Open orders on %s: %s", contract, len(result.orders))
        if result.is_partial:
            logger.warning("Open orders incomplete: %s", result.diagnostic)
    except OKExSwapError as exc:
        logger.error("Private endpoint failed: %s", exc)


if __name__ == "__main__":
    main()
