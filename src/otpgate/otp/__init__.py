"""TOTP/HOTP engine: Base32 secrets, code generation, verification, enrollment URIs."""

from otpgate.otp.errors import InvalidEncoding, OtpError, SecretTooShort
from otpgate.otp.provisioner import (
    DEFAULT_SECRET_BYTES,
    MIN_SECRET_BYTES,
    generate_base32_secret,
    generate_secret,
    validate_length,
)
from otpgate.otp.totp import Totp, build_totp, check, code_at, counter_for

__all__ = [
    "DEFAULT_SECRET_BYTES",
    "MIN_SECRET_BYTES",
    "InvalidEncoding",
    "OtpError",
    "SecretTooShort",
    "Totp",
    "build_totp",
    "check",
    "code_at",
    "counter_for",
    "generate_base32_secret",
    "generate_secret",
    "validate_length",
]
