"""Time-based one-time codes (RFC 6238) on top of HOTP.

Time maps to a counter with a fixed period; verification scans the
counters within +-skew of the current one and accepts the first match.
"""

from __future__ import annotations

import logging
import time as _time
from collections.abc import Iterator
from dataclasses import dataclass, field

from pyotp.utils import strings_equal

from otpgate.models import TotpParameters
from otpgate.otp import base32, hotp, uri
from otpgate.otp.provisioner import validate_length

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 30
DEFAULT_SKEW = 1
_MAX_COUNTER = 2**64 - 1


def counter_for(time: float, period: int = DEFAULT_PERIOD) -> int:
    """Number of whole periods elapsed since the Unix epoch."""
    if period <= 0:
        raise ValueError(f"Period must be positive, got {period}")
    if time < 0:
        raise ValueError(f"Time before the Unix epoch: {time}")
    return int(time // period)


def candidate_counters(c0: int, skew: int = DEFAULT_SKEW) -> Iterator[int]:
    """Yield c0, c0-1, c0+1, ... c0-skew, c0+skew, skipping out-of-range counters."""
    if 0 <= c0 <= _MAX_COUNTER:
        yield c0
    for delta in range(1, skew + 1):
        for c in (c0 - delta, c0 + delta):
            if 0 <= c <= _MAX_COUNTER:
                yield c


def code_at(secret: bytes, time: float | None = None, *, period: int = DEFAULT_PERIOD) -> str:
    """The code valid at `time` (defaults to now)."""
    if time is None:
        time = _time.time()
    return hotp.generate(secret, counter_for(time, period))


def check(
    secret: bytes,
    submitted_code: str,
    time: float | None = None,
    *,
    skew: int = DEFAULT_SKEW,
    period: int = DEFAULT_PERIOD,
) -> bool:
    """True if `submitted_code` matches any counter in the skew window.

    Malformed codes (wrong length, non-digits) are a plain False, not an error.
    """
    if not isinstance(submitted_code, str):
        return False
    if len(submitted_code) != hotp.DIGITS or not (submitted_code.isascii() and submitted_code.isdigit()):
        return False
    if time is None:
        time = _time.time()

    c0 = counter_for(time, period)
    for counter in candidate_counters(c0, skew):
        if strings_equal(hotp.generate(secret, counter), submitted_code):
            if counter != c0:
                logger.debug("Code accepted at drift %+d steps", counter - c0)
            return True
    return False


@dataclass(frozen=True)
class Totp:
    """A decoded secret bound to its parameters."""

    secret: bytes = field(repr=False)
    params: TotpParameters = field(default_factory=TotpParameters)

    def at(self, time: float) -> str:
        return code_at(self.secret, time, period=self.params.period)

    def now(self) -> str:
        return code_at(self.secret, period=self.params.period)

    def check(self, code: str, time: float | None = None) -> bool:
        return check(self.secret, code, time, skew=self.params.skew, period=self.params.period)

    @property
    def secret_base32(self) -> str:
        return base32.encode(self.secret)

    def provisioning_uri(self) -> str:
        return uri.build(self.params.issuer, self.params.account, self.secret_base32, self.params)


def build_totp(
    issuer: str,
    account: str,
    secret_base32: str,
    *,
    period: int = DEFAULT_PERIOD,
    skew: int = DEFAULT_SKEW,
) -> Totp:
    """Decode and validate a stored secret and bind it to issuer/account.

    Raises InvalidEncoding or SecretTooShort.
    """
    secret = validate_length(base32.decode(secret_base32))
    params = TotpParameters(issuer=issuer, account=account, period=period, skew=skew)
    return Totp(secret=secret, params=params)
