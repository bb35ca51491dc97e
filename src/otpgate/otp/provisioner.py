"""Secret generation and the minimum-entropy check."""

from __future__ import annotations

import logging
import secrets

from otpgate.otp import base32
from otpgate.otp.errors import SecretTooShort

logger = logging.getLogger(__name__)

MIN_SECRET_BYTES = 16  # 128 bits, mandatory minimum
DEFAULT_SECRET_BYTES = 20  # 160 bits, recommended


def validate_length(secret: bytes) -> bytes:
    """Return `secret` unchanged, or raise SecretTooShort below the floor."""
    if len(secret) < MIN_SECRET_BYTES:
        raise SecretTooShort(len(secret), MIN_SECRET_BYTES)
    return secret


def generate_secret(byte_length: int | None = None) -> bytes:
    """Draw a fresh secret from the OS CSPRNG.

    Lengths below MIN_SECRET_BYTES are raised to the floor, never truncated.
    """
    n = DEFAULT_SECRET_BYTES if byte_length is None else byte_length
    if n < MIN_SECRET_BYTES:
        logger.debug("Requested %d secret bytes, using floor of %d", n, MIN_SECRET_BYTES)
        n = MIN_SECRET_BYTES
    return secrets.token_bytes(n)


def generate_base32_secret(byte_length: int | None = None) -> str:
    """Generate a secret and return its unpadded Base32 text."""
    return base32.encode(generate_secret(byte_length))
