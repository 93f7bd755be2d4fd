# -*- coding: utf-8 -*-
"""
HTTP layer: browser-like headers, proxy wiring and the retrying request call.
"""

import asyncio
import time

from aiohttp import ClientError, ClientSession, ClientTimeout
from aiohttp_socks import ProxyConnector
from fake_useragent import FakeUserAgent

from gaiai import console
from gaiai.exceptions import RequestFailed, UnsupportedMethod
from gaiai.result import Failure, Success

SUPPORTED_METHODS = ("GET", "POST")
PERMANENT_STATUSES = (400, 404)
BACKOFF_MULTIPLIER = 1.5

_user_agent = None


def random_user_agent():
    global _user_agent
    if _user_agent is None:
        _user_agent = FakeUserAgent()
    return _user_agent.random


def build_headers(token=None, signed=True):
    """
    Headers of the GaiAI web client.
    `signature` carries the current time in milliseconds, not a crypto signature.
    Login calls pass signed=False and no token.
    """
    headers = {
        "Accept": "application/json, text/plain, */*",
        "Accept-Encoding": "gzip, deflate, br, zstd",
        "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8,id;q=0.7",
        "Cache-Control": "no-cache",
        "Connection": "keep-alive",
        "Content-Type": "application/json",
        "Host": "api.metagaia.io",
        "Lang": "en-US",
        "Origin": "https://www.gaiai.io",
        "Pragma": "no-cache",
        "Referer": "https://www.gaiai.io/",
        "Sec-Ch-Ua": '"Opera";v="120", "Not-A.Brand";v="8", "Chromium";v="135"',
        "Sec-Ch-Ua-Mobile": "?0",
        "Sec-Ch-Ua-Platform": '"Windows"',
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "cross-site",
        "User-Agent": random_user_agent()
    }
    if signed:
        headers["signature"] = str(int(time.time() * 1000))
    if token:
        headers["token"] = token
    return headers


def build_ip_headers():
    return {
        "Accept": "application/json, text/plain, */*",
        "Accept-Encoding": "gzip, deflate, br",
        "Accept-Language": "en-US,en;q=0.9",
        "User-Agent": random_user_agent()
    }


def build_proxy_config(proxy=None):
    """
    Returns (connector, proxy_url) for aiohttp.
    SOCKS proxies go through a ProxyConnector, HTTP(S) proxies through aiohttp
    itself, with any user:pass@ credentials left in the URL.
    """
    if not proxy:
        return None, None

    if proxy.startswith("socks"):
        return ProxyConnector.from_url(proxy), None

    if proxy.startswith("http"):
        return None, proxy

    raise ValueError(f"Unsupported proxy: {proxy}")


async def error_detail(response):
    try:
        body = await response.json(content_type=None)
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("message")
    return None


async def aiohttp_transport(method, url, payload, headers, proxy, timeout):
    """Perform one HTTP call and return the decoded JSON body."""
    connector, proxy_url = build_proxy_config(proxy)
    async with ClientSession(connector=connector, timeout=ClientTimeout(total=timeout)) as session:
        async with session.request(
            method, url, json=payload, headers=headers, proxy=proxy_url
        ) as response:
            if response.status >= 400:
                detail = await error_detail(response)
                raise RequestFailed(
                    f"Request failed with status code {response.status}",
                    status=response.status,
                    detail=detail
                )
            return await response.json(content_type=None)


class HttpClient:
    def __init__(self, timeout=60, transport=None, sleep=asyncio.sleep) -> None:
        self.timeout = timeout
        self.transport = transport or aiohttp_transport
        self.sleep = sleep

    async def request_with_retry(self, method: str, url: str, payload=None, headers=None, proxy=None,
                                 retries=3, backoff=2.0, context=None):
        """
        Run one request with bounded retries.

        400 and 404 fail at once. Every other failure is retried up to
        `retries` attempts in total, sleeping `backoff` seconds between
        attempts and growing it by 1.5 each time.
        Returns Success(body) or Failure(message, status).
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise UnsupportedMethod(method)

        attempts = max(retries, 1)
        for attempt in range(attempts):
            try:
                body = await self.transport(method, url, payload, headers, proxy, self.timeout)
                return Success(body)
            except (Exception, ClientError) as e:
                status = getattr(e, "status", None)
                if status in PERMANENT_STATUSES:
                    return Failure(getattr(e, "detail", None) or "Bad request", status)
                message = str(e) or e.__class__.__name__
                if attempt < attempts - 1:
                    console.warn(f"Retrying {method} {url} ({attempt + 1}/{attempts})", context)
                    await self.sleep(backoff)
                    backoff *= BACKOFF_MULTIPLIER
                    continue
                console.error(f"Request failed: {message} - Status: {status}", context)
                return Failure(message, status)
