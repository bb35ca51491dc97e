"""otpauth:// enrollment URIs for authenticator apps and QR codes."""

from __future__ import annotations

from urllib.parse import quote

from otpgate.models import TotpParameters


def _escape(value: str) -> str:
    # Everything outside the unreserved set, including ':' and '@'
    return quote(value, safe="")


def build(
    issuer: str,
    account: str,
    secret_base32: str,
    params: TotpParameters | None = None,
) -> str:
    """Return the otpauth://totp/ URI for `account` at `issuer`.

    Example:
        otpauth://totp/ACME:alice%40example.com?secret=...&digits=6&algorithm=SHA1&issuer=ACME&period=30
    """
    params = params or TotpParameters(issuer=issuer, account=account)
    label = f"{_escape(issuer)}:{_escape(account)}" if issuer else _escape(account)
    query = "&".join(
        f"{key}={_escape(str(value))}"
        for key, value in (
            ("secret", secret_base32),
            ("digits", params.digits),
            ("algorithm", params.algorithm.value),
            ("issuer", issuer),
            ("period", params.period),
        )
    )
    return f"otpauth://totp/{label}?{query}"
