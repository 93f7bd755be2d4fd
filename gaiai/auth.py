# -*- coding: utf-8 -*-
"""
Wallet login: nonce -> signature -> session token.
"""

from datetime import datetime
from urllib.parse import urlencode

import pytz

from gaiai.client import build_headers
from gaiai.exceptions import AuthFailed, NonceFetchFailed
from gaiai.wallet import derive_address, normalize_private_key, sign_nonce

BASE_URL = "https://api.metagaia.io"
NONCE_PATH = "/api/v2/gaiai-login/wallet-nonce"
LOGIN_PATH = "/api/v2/gaiai-login/wallet"
CLIENT_NAME = "metamask"


def utcnow():
    return datetime.now(pytz.utc)


def iso_timestamp(moment: datetime) -> str:
    """UTC time as YYYY-MM-DDTHH:MM:SS.mmmZ."""
    moment = moment.astimezone(pytz.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


def build_login_message(address: str, nonce: str, now: datetime) -> str:
    return f"GaiAI Login\nAddress: {address}\nNonce: {nonce}\nTime: {iso_timestamp(now)}"


class Session:
    """Bearer token of one account for one cycle."""

    def __init__(self, token: str, address: str) -> None:
        self.token = token
        self.address = address

    def __repr__(self):
        return f"Session(address={self.address!r})"


async def fetch_nonce(client, address, proxy=None, base_url=BASE_URL, retries=3, backoff=2.0, context=None):
    url = f"{base_url}{NONCE_PATH}?{urlencode({'address': address})}"
    result = await client.request_with_retry(
        "GET", url, headers=build_headers(signed=False), proxy=proxy,
        retries=retries, backoff=backoff, context=context
    )
    if not result.ok:
        raise NonceFetchFailed(result.message or "Failed to get nonce")
    if result.code != 0:
        raise NonceFetchFailed(result.message or "Failed to get nonce")
    nonce = result.data.get("nonce")
    if not nonce:
        raise NonceFetchFailed("Missing nonce in response")
    return nonce


async def login(client, private_key: str, proxy=None, base_url=BASE_URL, clock=utcnow,
                retries=3, backoff=2.0, context=None) -> Session:
    """
    Log in with a wallet signature and return the session.

    The key is validated before any network call (InvalidKeyFormat).
    The signature covers the nonce alone; the full login message is only sent
    along for the server to display. Raises NonceFetchFailed or AuthFailed
    when the server side of the handshake fails.
    """
    key = normalize_private_key(private_key)
    address = derive_address(key).lower()

    nonce = await fetch_nonce(client, address, proxy, base_url, retries, backoff, context)

    message = build_login_message(address, nonce, clock())
    signature = sign_nonce(key, nonce)

    payload = {
        "address": address,
        "signature": signature,
        "message": message,
        "name": CLIENT_NAME,
        "inviteCode": ""
    }
    result = await client.request_with_retry(
        "POST", f"{base_url}{LOGIN_PATH}", payload, headers=build_headers(signed=False), proxy=proxy,
        retries=retries, backoff=backoff, context=context
    )
    if not result.ok:
        raise AuthFailed(result.message or "Authentication failed")
    if result.code != 0:
        raise AuthFailed(result.message or "Authentication failed")

    token = result.data.get("token")
    if not token:
        raise AuthFailed("Missing token in authentication response")
    return Session(token, address)
