"""HMAC-based one-time codes (RFC 4226)."""

from __future__ import annotations

import hashlib

import pyotp

from otpgate.otp import base32

DIGITS = 6
_MAX_COUNTER = 2**64 - 1


def generate(secret: bytes, counter: int) -> str:
    """Return the 6-digit code for `counter`, zero-padded."""
    if not 0 <= counter <= _MAX_COUNTER:
        raise ValueError(f"Counter out of 64-bit range: {counter}")
    return pyotp.HOTP(base32.encode(secret), digits=DIGITS, digest=hashlib.sha1).at(counter)
