"""Unpadded RFC 4648 Base32, the textual form of shared secrets."""

from __future__ import annotations

import base64
import binascii
import re

from otpgate.otp.errors import InvalidEncoding

_ALPHABET = re.compile(r"[A-Z2-7]*")

# Unpadded lengths (mod 8) whose trailing bits cannot form a whole byte
_INVALID_REMAINDERS = frozenset({1, 3, 6})


def encode(data: bytes) -> str:
    """Encode bytes as Base32 without '=' padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode(text: str) -> bytes:
    """Decode Base32 text; trailing padding is tolerated, lower case is folded.

    Raises InvalidEncoding on foreign characters or impossible lengths.
    """
    s = text.strip().rstrip("=")
    if not s.isascii():
        raise InvalidEncoding("Secret contains characters outside the Base32 alphabet")
    s = s.upper()
    if not _ALPHABET.fullmatch(s):
        raise InvalidEncoding("Secret contains characters outside the Base32 alphabet")
    if len(s) % 8 in _INVALID_REMAINDERS:
        raise InvalidEncoding(f"Base32 length {len(s)} does not encode whole bytes")
    pad = "=" * (-len(s) % 8)
    try:
        return base64.b32decode(s + pad)
    except binascii.Error as e:
        raise InvalidEncoding(f"Invalid Base32 secret: {e}") from e
