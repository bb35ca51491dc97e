"""Errors raised by the OTP engine.

A wrong code is not an error: verification returns False.
"""

from __future__ import annotations


class OtpError(Exception):
    """Base class for engine faults."""


class InvalidEncoding(OtpError, ValueError):
    """Secret text is not valid unpadded Base32."""


class SecretTooShort(OtpError, ValueError):
    """Decoded secret is below the minimum entropy floor."""

    def __init__(self, actual: int, minimum: int) -> None:
        self.actual = actual
        self.minimum = minimum
        super().__init__(
            f"Shared secret too short: {actual} bytes, need >= {minimum} ({minimum * 8} bits)"
        )
