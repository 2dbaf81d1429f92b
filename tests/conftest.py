"""
Shared fixtures: a call-counting sender standing in for the HTTP layer.
"""

import json
import os

os.environ.setdefault("LOG_DIR", "")

import pytest

from exchange.okex_swap import OKExSwap


class StubSender:
    """Replays queued responses in order and records every call."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def queue(self, response):
        self.responses.append(response)

    def send(self, method, url, body, headers):
        self.calls.append({"method": method, "url": url, "body": body, "headers": headers})
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, (dict, list)):
            return json.dumps(response).encode("utf-8")
        return response


@pytest.fixture
def sender():
    return StubSender()


@pytest.fixture
def swap(sender):
    return OKExSwap(
        api_key="test_key",
        api_secret="test_secret",
        passphrase="test_pass",
        endpoint="https://www.okex.com",
        sender=sender,
    )
