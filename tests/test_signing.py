"""
Request signing and HTTP sender tests.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from exchange.errors import ExchangeError, TransportError
from exchange.http_client import HttpSender
from exchange.signing import iso_timestamp, sign_request, signed_params


class TestSigning:
    def test_iso_timestamp_has_millis_and_zulu(self):
        now = datetime(2019, 3, 1, 9, 12, 45, 123456, tzinfo=timezone.utc)
        assert iso_timestamp(now) == "2019-03-01T09:12:45.123Z"

    def test_sign_get_without_body(self):
        sign = sign_request("secret", "get", "/api/swap/v3/accounts", "", "2019-03-01T09:12:45.123Z")
        assert sign == "uLkjoaBPzCzXycDiaWkdKchlnPRg23CL/ioselkDvUY="

    def test_sign_post_includes_body(self):
        sign = sign_request("secret", "POST", "/api/swap/v3/order", '{"size":"1"}', "2019-03-01T09:12:45.123Z")
        assert sign == "1CLheVzPKeH55wqnrMBdxk5UHbBUVh4aaFW5RkmSXHo="

    def test_signed_params_returns_fresh_timestamp(self):
        sign, timestamp = signed_params("secret", "GET", "/api/swap/v3/accounts", "")
        assert timestamp.endswith("Z")
        assert sign == sign_request("secret", "GET", "/api/swap/v3/accounts", "", timestamp)


def _response(status_code, content):
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode("utf-8")
    return response


class TestHttpSender:
    def test_returns_body_on_success(self):
        session = MagicMock()
        session.request.return_value = _response(200, b'{"ok":true}')
        sender = HttpSender(timeout=5, session=session)

        body = sender.send("POST", "https://www.okex.com/api/swap/v3/order", '{"a":1}', {"X": "1"})

        assert body == b'{"ok":true}'
        session.request.assert_called_once_with(
            "POST",
            "https://www.okex.com/api/swap/v3/order",
            data=b'{"a":1}',
            headers={"X": "1"},
            timeout=5,
        )

    def test_get_sends_no_body(self):
        session = MagicMock()
        session.request.return_value = _response(200, b"{}")
        HttpSender(timeout=5, session=session).send("GET", "https://x/y", "", {})
        assert session.request.call_args.kwargs["data"] is None

    def test_connection_error_becomes_transport_error(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("boom")
        sender = HttpSender(timeout=5, session=session)

        with pytest.raises(TransportError, match="boom"):
            sender.send("GET", "https://x/y", "", {})

    def test_http_error_without_json_is_transport_error(self):
        session = MagicMock()
        session.request.return_value = _response(502, b"<html>Bad Gateway</html>")
        sender = HttpSender(timeout=5, session=session)

        with pytest.raises(TransportError, match="502"):
            sender.send("GET", "https://x/y", "", {})

    def test_http_error_with_json_envelope_raises_exchange_error(self):
        session = MagicMock()
        session.request.return_value = _response(400, b'{"code":35004,"message":"Order not found"}')
        sender = HttpSender(timeout=5, session=session)

        with pytest.raises(ExchangeError) as info:
            sender.send("GET", "https://x/y", "", {})

        assert str(info.value) == "35004:Order not found"

    def test_http_error_with_error_code_envelope(self):
        session = MagicMock()
        session.request.return_value = _response(
            400, b'{"error_code":"35014","error_message":"Order price is not within limit","result":"false"}'
        )
        sender = HttpSender(timeout=5, session=session)

        with pytest.raises(ExchangeError, match="35014:Order price is not within limit"):
            sender.send("POST", "https://x/y", "{}", {})

    def test_http_error_with_unrelated_json_is_transport_error(self):
        session = MagicMock()
        session.request.return_value = _response(500, b'{"status":"down"}')
        sender = HttpSender(timeout=5, session=session)

        with pytest.raises(TransportError, match="500"):
            sender.send("GET", "https://x/y", "", {})
