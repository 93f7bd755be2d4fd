# -*- coding: utf-8 -*-
# tests/conftest.py
# Shared fakes: recording sleep, scripted transports, fixed clock

import sys
from datetime import datetime
from pathlib import Path

import pytest
import pytz

# Ensure project root (which contains the `gaiai/` package directory) is on sys.path
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from gaiai import client  # noqa: E402

# Well-known development key (Hardhat account #0)
TEST_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class RecordingSleep:
    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)


class ScriptedTransport:
    """Returns (or raises) the scripted responses in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    async def __call__(self, method, url, payload, headers, proxy, timeout):
        self.calls.append({"method": method, "url": url, "payload": payload,
                           "headers": headers, "proxy": proxy})
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


class RoutingTransport:
    """
    Picks the response by URL suffix (query string ignored).
    A list value is consumed in order and its last item repeats.
    """

    def __init__(self, routes):
        self.routes = {key: (list(value) if isinstance(value, list) else [value])
                       for key, value in routes.items()}
        self.calls = []

    def calls_to(self, suffix):
        return [c for c in self.calls if c["url"].split("?")[0].endswith(suffix)]

    async def __call__(self, method, url, payload, headers, proxy, timeout):
        self.calls.append({"method": method, "url": url, "payload": payload,
                           "headers": headers, "proxy": proxy})
        base = url.split("?")[0]
        for key, responses in self.routes.items():
            if base.endswith(key):
                response = responses.pop(0) if len(responses) > 1 else responses[0]
                if isinstance(response, BaseException):
                    raise response
                return response
        raise AssertionError(f"unexpected url {url}")


@pytest.fixture(autouse=True)
def fixed_user_agent(monkeypatch):
    monkeypatch.setattr(client, "random_user_agent", lambda: "pytest-agent")


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def fixed_clock():
    moment = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=pytz.utc)
    return lambda: moment
