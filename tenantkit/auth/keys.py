"""API key generation and hashing."""

import hashlib
import secrets

API_KEY_BYTES = 24  # 48 hex chars


def generate_api_key() -> str:
    """Return a fresh random API key as a hex string."""
    return secrets.token_hex(API_KEY_BYTES)


def hash_api_key(api_key: str) -> str:
    """Hash API key for storage/lookup. The server re-hashes bearer tokens the same way."""
    return hashlib.sha256(api_key.encode("utf-8")).hexdigest()


def bearer_header(api_key: str) -> str:
    return f"Authorization: Bearer {api_key}"
