"""AES-256-GCM encryption for TOTP secrets stored in the users file."""

from __future__ import annotations

import base64
import binascii
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from otpgate.config import settings

_NONCE_SIZE = 12  # 96-bit nonce for AES-GCM
PREFIX = "enc:"


def _get_key() -> bytes:
    raw = settings.master_key
    if not raw:
        raise RuntimeError("OTPGATE_MASTER_KEY not set")
    key = base64.b64decode(raw)
    if len(key) != 32:
        raise ValueError("OTPGATE_MASTER_KEY must be 32 bytes (base64-encoded)")
    return key


def is_encrypted(value: str) -> bool:
    return value.startswith(PREFIX)


def encrypt(plaintext: str) -> str:
    """Encrypt a string. Returns 'enc:' + base64(nonce + ciphertext)."""
    key = _get_key()
    nonce = os.urandom(_NONCE_SIZE)
    ct = AESGCM(key).encrypt(nonce, plaintext.encode(), None)
    return PREFIX + base64.b64encode(nonce + ct).decode()


def decrypt(token: str) -> str:
    """Decrypt an 'enc:' token (prefix optional) back to plaintext."""
    key = _get_key()
    if is_encrypted(token):
        token = token[len(PREFIX):]
    try:
        raw = base64.b64decode(token, validate=True)
        nonce, ct = raw[:_NONCE_SIZE], raw[_NONCE_SIZE:]
        return AESGCM(key).decrypt(nonce, ct, None).decode()
    except (binascii.Error, InvalidTag) as e:
        raise ValueError("Cannot decrypt secret: wrong key or corrupted value") from e
