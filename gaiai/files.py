# -*- coding: utf-8 -*-
"""
Newline-delimited input files and proxy assignment.
"""

from gaiai import console

PROXY_SCHEMES = ["http://", "https://", "socks4://", "socks5://"]


def read_lines(path):
    """Trimmed, non-empty lines of a text file."""
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def plural(count, one, many):
    return one if count == 1 else many


def load_private_keys(path):
    try:
        keys = read_lines(path)
    except OSError as e:
        console.error(f"Failed to read {path}: {e}")
        return []
    console.info(f"Loaded {len(keys)} private {plural(len(keys), 'key', 'keys')}")
    return keys


def load_prompts(path):
    try:
        prompts = read_lines(path)
    except OSError as e:
        console.error(f"Failed to read {path}: {e}")
        return []
    console.info(f"Loaded {len(prompts)} {plural(len(prompts), 'prompt', 'prompts')}")
    return prompts


def check_proxy_scheme(proxy: str):
    """
    Keep supported proxy URLs, add http:// to a bare host:port.
    Any other scheme is reported and dropped (None).
    """
    if any(proxy.startswith(s) for s in PROXY_SCHEMES):
        return proxy
    if "://" in proxy:
        console.warn(f"Unsupported proxy: {proxy}")
        return None
    return f"http://{proxy}"


def load_proxies(path):
    try:
        lines = read_lines(path)
    except OSError:
        console.warn(f"{path} not found.")
        return []

    proxies = [p for p in (check_proxy_scheme(line) for line in lines) if p]
    if not proxies:
        console.warn("No proxies found. Proceeding without proxy.")
    else:
        console.info(f"Loaded {len(proxies)} {plural(len(proxies), 'proxy', 'proxies')}")
    return proxies


def proxy_for_index(proxies, index):
    """Round-robin proxy for the account at `index`, or None."""
    if not proxies:
        return None
    return proxies[index % len(proxies)]
