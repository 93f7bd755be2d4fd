# -*- coding: utf-8 -*-
# tests/test_auth.py
# Wallet login handshake against a scripted server

import asyncio
from datetime import datetime, timedelta

import pytest
import pytz
from eth_account import Account
from eth_account.messages import encode_defunct

from gaiai.auth import build_login_message, iso_timestamp, login
from gaiai.client import HttpClient
from gaiai.exceptions import AuthFailed, InvalidKeyFormat, NonceFetchFailed, RequestFailed

from conftest import TEST_ADDRESS, TEST_KEY, RoutingTransport, ScriptedTransport

NONCE = "wallet-nonce"
LOGIN = "gaiai-login/wallet"


def run_login(transport, sleep, clock, key=TEST_KEY, **kwargs):
    http = HttpClient(transport=transport, sleep=sleep)
    return asyncio.run(login(http, key, clock=clock, **kwargs))


def test_iso_timestamp():
    moment = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=pytz.utc)
    assert iso_timestamp(moment) == "2025-01-02T03:04:05.678Z"

    shifted = moment.astimezone(pytz.timezone("Asia/Jakarta"))
    assert iso_timestamp(shifted) == "2025-01-02T03:04:05.678Z"
    assert iso_timestamp(moment + timedelta(microseconds=999)) == "2025-01-02T03:04:05.678Z"


def test_build_login_message(fixed_clock):
    message = build_login_message("0xabc", "xyz", fixed_clock())
    assert message == "GaiAI Login\nAddress: 0xabc\nNonce: xyz\nTime: 2025-01-02T03:04:05.678Z"


def test_invalid_key_fails_before_network(sleep, fixed_clock):
    transport = ScriptedTransport([])
    with pytest.raises(InvalidKeyFormat):
        run_login(transport, sleep, fixed_clock, key="0x1234")
    assert transport.calls == []


def test_login_success(sleep, fixed_clock):
    transport = RoutingTransport({
        NONCE: {"code": 0, "data": {"nonce": "xyz"}},
        LOGIN: {"code": 0, "data": {"token": "session-token"}},
    })
    session = run_login(transport, sleep, fixed_clock, proxy="socks5://127.0.0.1:1080")

    address = TEST_ADDRESS.lower()
    assert session.token == "session-token"
    assert session.address == address

    nonce_call, = transport.calls_to(NONCE)
    assert nonce_call["method"] == "GET"
    assert nonce_call["url"].endswith(f"?address={address}")
    assert nonce_call["proxy"] == "socks5://127.0.0.1:1080"
    assert "token" not in nonce_call["headers"]
    assert "signature" not in nonce_call["headers"]

    login_call, = transport.calls_to(LOGIN)
    payload = login_call["payload"]
    assert login_call["method"] == "POST"
    assert "token" not in login_call["headers"]
    assert "signature" not in login_call["headers"]
    assert payload["address"] == address
    assert payload["name"] == "metamask"
    assert payload["inviteCode"] == ""
    assert payload["message"] == build_login_message(address, "xyz", fixed_clock())

    # signature covers the nonce only, not the full message
    recovered = Account.recover_message(encode_defunct(text="xyz"), signature=payload["signature"])
    assert recovered == TEST_ADDRESS


def test_nonce_with_nonzero_code(sleep, fixed_clock):
    transport = RoutingTransport({NONCE: {"code": 1, "message": "busy"}})
    with pytest.raises(NonceFetchFailed):
        run_login(transport, sleep, fixed_clock)
    assert transport.calls_to(LOGIN) == []


def test_nonce_missing(sleep, fixed_clock):
    transport = RoutingTransport({NONCE: {"code": 0, "data": {}}})
    with pytest.raises(NonceFetchFailed, match="Missing nonce"):
        run_login(transport, sleep, fixed_clock)


def test_nonce_request_failure(sleep, fixed_clock):
    transport = RoutingTransport({NONCE: RequestFailed("not found", status=404, detail="unknown address")})
    with pytest.raises(NonceFetchFailed, match="unknown address"):
        run_login(transport, sleep, fixed_clock)


def test_auth_nonzero_code_ignores_token(sleep, fixed_clock):
    transport = RoutingTransport({
        NONCE: {"code": 0, "data": {"nonce": "xyz"}},
        LOGIN: {"code": 1, "data": {"token": "should-not-be-used"}},
    })
    with pytest.raises(AuthFailed):
        run_login(transport, sleep, fixed_clock)


def test_auth_failure_code_only(sleep, fixed_clock):
    transport = RoutingTransport({
        NONCE: {"code": 0, "data": {"nonce": "xyz"}},
        LOGIN: {"code": 1},
    })
    with pytest.raises(AuthFailed, match="Authentication failed"):
        run_login(transport, sleep, fixed_clock)


def test_auth_missing_token(sleep, fixed_clock):
    transport = RoutingTransport({
        NONCE: {"code": 0, "data": {"nonce": "xyz"}},
        LOGIN: {"code": 0, "data": {}},
    })
    with pytest.raises(AuthFailed, match="Missing token"):
        run_login(transport, sleep, fixed_clock)


def test_auth_request_retries_then_fails(sleep, fixed_clock):
    transport = RoutingTransport({
        NONCE: {"code": 0, "data": {"nonce": "xyz"}},
        LOGIN: RequestFailed("Request failed with status code 500", status=500),
    })
    with pytest.raises(AuthFailed):
        run_login(transport, sleep, fixed_clock, retries=3, backoff=2.0)
    assert len(transport.calls_to(LOGIN)) == 3
    assert sleep.calls == [2.0, 3.0]
