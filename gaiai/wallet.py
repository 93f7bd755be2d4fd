# -*- coding: utf-8 -*-
import re

from eth_account import Account
from eth_account.messages import encode_defunct

from gaiai.exceptions import InvalidKeyFormat

KEY_RE = re.compile(r'^[0-9a-fA-F]{64}$')


def normalize_private_key(account: str) -> str:
    """
    Strip an optional 0x prefix and check for 64 hex digits.
    Returns the key with a 0x prefix.
    """
    key = (account or "").strip()
    if key.startswith("0x"):
        key = key[2:]
    if not KEY_RE.match(key):
        raise InvalidKeyFormat("Invalid Private Key Format.")
    return f"0x{key}"


def derive_address(account: str) -> str:
    """Checksummed wallet address of a private key."""
    return Account.from_key(normalize_private_key(account)).address


def generate_address(account: str):
    """Like derive_address, but returns None for a malformed key."""
    try:
        return derive_address(account)
    except (InvalidKeyFormat, ValueError):
        return None


def sign_nonce(account: str, nonce: str) -> str:
    """Personal-sign (EIP-191) signature over the nonce text."""
    encoded = encode_defunct(text=nonce)
    signed = Account.sign_message(encoded, private_key=normalize_private_key(account))
    return f"0x{bytes(signed.signature).hex()}"


def mask_account(account):
    """Mask a key or address for display: first and last 6 characters."""
    if not account or len(account) <= 12:
        return account
    return account[:6] + '*' * 6 + account[-6:]
