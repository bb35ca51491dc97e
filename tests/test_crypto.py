"""Tests for AES-256-GCM secret encryption."""

from __future__ import annotations

import base64
import os

import pytest

from otpgate.config import Settings


def _use_key(monkeypatch, key: str) -> None:
    monkeypatch.setattr("otpgate.crypto.settings", Settings(_env_file=None, master_key=key))


def test_encrypt_decrypt(monkeypatch):
    key = base64.b64encode(os.urandom(32)).decode()
    _use_key(monkeypatch, key)

    from otpgate.crypto import decrypt, encrypt, is_encrypted

    plaintext = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
    token = encrypt(plaintext)
    assert is_encrypted(token)
    assert plaintext not in token
    assert decrypt(token) == plaintext


def test_encrypt_produces_different_ciphertexts(monkeypatch):
    _use_key(monkeypatch, base64.b64encode(os.urandom(32)).decode())

    from otpgate.crypto import encrypt

    # Same plaintext should produce different ciphertexts (random nonce)
    assert encrypt("test") != encrypt("test")


def test_missing_key_raises(monkeypatch):
    _use_key(monkeypatch, "")

    from otpgate.crypto import encrypt

    with pytest.raises(RuntimeError, match="OTPGATE_MASTER_KEY not set"):
        encrypt("test")


def test_short_key_raises(monkeypatch):
    _use_key(monkeypatch, base64.b64encode(os.urandom(16)).decode())

    from otpgate.crypto import encrypt

    with pytest.raises(ValueError, match="32 bytes"):
        encrypt("test")


def test_wrong_key_fails_to_decrypt(monkeypatch):
    _use_key(monkeypatch, base64.b64encode(os.urandom(32)).decode())
    from otpgate.crypto import decrypt, encrypt

    token = encrypt("test")
    _use_key(monkeypatch, base64.b64encode(os.urandom(32)).decode())

    with pytest.raises(ValueError, match="Cannot decrypt"):
        decrypt(token)
