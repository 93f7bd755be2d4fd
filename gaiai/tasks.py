# -*- coding: utf-8 -*-
"""
Daily actions of an authenticated account.
"""

import random

from gaiai import console
from gaiai.auth import BASE_URL
from gaiai.client import build_headers, build_ip_headers
from gaiai.result import Failure, Success

CHECKIN_PATH = "/api/v1/gaiai-sign"
CREATE_TASK_PATH = "/api/v2/gaiai-ai/create-task"
PROFILE_PATH = "/api/v2/gaiai-user/profile"
IP_URL = "https://api.ipify.org?format=json"

ASPECT_OPTIONS = [
    {"width": "1024", "height": "576", "aspectRatio": "4"},
    {"width": "1024", "height": "768", "aspectRatio": "2"},
    {"width": "1024", "height": "1024", "aspectRatio": "1"},
    {"width": "768", "height": "1024", "aspectRatio": "6"},
    {"width": "576", "height": "1024", "aspectRatio": "8"},
]


def failure_message(result, default):
    return result.message or default


async def perform_checkin(client, token, proxy=None, base_url=BASE_URL, retries=3, backoff=2.0, context=None):
    """Daily check-in. Success carries the response data (gPoints)."""
    result = await client.request_with_retry(
        "POST", f"{base_url}{CHECKIN_PATH}", {}, headers=build_headers(token), proxy=proxy,
        retries=retries, backoff=backoff, context=context
    )
    if result.ok and result.code == 0:
        console.info("Check-in successful", context)
        return Success(result.body)

    message = failure_message(result, "Already checked in today")
    console.warn(message, context)
    return Failure(message, getattr(result, "status", None))


def build_prompt_payload(prompts, rng=random):
    aspect = rng.choice(ASPECT_OPTIONS)
    return {
        "type": "1",
        "prompt": rng.choice(prompts),
        "width": aspect["width"],
        "height": aspect["height"],
        "aspectRatio": aspect["aspectRatio"]
    }


async def complete_prompt(client, token, prompts, proxy=None, base_url=BASE_URL, rng=random,
                          retries=3, backoff=2.0, context=None):
    """Submit one random prompt as an image generation task."""
    if not prompts:
        console.error("Prompt failed: No prompts available", context)
        return Failure("No prompts available")

    payload = build_prompt_payload(prompts, rng)
    result = await client.request_with_retry(
        "POST", f"{base_url}{CREATE_TASK_PATH}", payload, headers=build_headers(token), proxy=proxy,
        retries=retries, backoff=backoff, context=context
    )
    if result.ok and result.code == 0:
        console.info("Prompt completed successfully", context)
        return Success(result.body)

    message = failure_message(result, "Already completed today")
    console.warn(message, context)
    return Failure(message, getattr(result, "status", None))


async def fetch_user_info(client, token, proxy=None, base_url=BASE_URL, retries=3, backoff=2.0, context=None):
    result = await client.request_with_retry(
        "GET", f"{base_url}{PROFILE_PATH}", headers=build_headers(token), proxy=proxy,
        retries=retries, backoff=backoff, context=context
    )
    if not result.ok or result.code != 0:
        console.error(f"Failed to fetch user info: {failure_message(result, 'Failed to fetch profile')}", context)
        return {"username": "Unknown", "gPoints": "N/A"}

    data = result.data
    return {
        "username": data.get("username") or "Unknown",
        "gPoints": data.get("gPoints") or "N/A"
    }


async def get_public_ip(client, proxy=None, retries=3, backoff=2.0, context=None):
    """Outbound IP as seen by ipify, for display."""
    result = await client.request_with_retry(
        "GET", IP_URL, headers=build_ip_headers(), proxy=proxy,
        retries=retries, backoff=backoff, context=context
    )
    if not result.ok:
        console.error(f"Failed to get IP: {result.message}", context)
        return "Error retrieving IP"
    body = result.body if isinstance(result.body, dict) else {}
    return body.get("ip") or "Unknown"
