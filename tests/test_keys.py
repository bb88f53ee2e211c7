"""Unit tests for API key generation and hashing."""

import hashlib
import string

from tenantkit.auth.keys import bearer_header, generate_api_key, hash_api_key


def test_generated_key_is_48_hex_chars():
    key = generate_api_key()
    assert len(key) == 48
    assert set(key) <= set(string.hexdigits.lower())


def test_generated_keys_do_not_repeat():
    keys = {generate_api_key() for _ in range(5000)}
    assert len(keys) == 5000


def test_hash_is_deterministic_sha256():
    key = generate_api_key()
    h = hash_api_key(key)
    assert h == hash_api_key(key)
    assert h == hashlib.sha256(key.encode()).hexdigest()
    assert len(h) == 64  # SHA256 hex


def test_hash_does_not_contain_plaintext():
    key = generate_api_key()
    assert key not in hash_api_key(key)


def test_bearer_header():
    assert bearer_header("abc") == "Authorization: Bearer abc"
