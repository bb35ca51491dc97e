"""Tests for Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from otpgate.models import HashAlgorithm, LoginRequest, TotpParameters, UserRecord


def test_totp_parameters_defaults():
    p = TotpParameters(issuer="miempresa", account="alfredo@example.com")
    assert p.algorithm == HashAlgorithm.SHA1
    assert p.algorithm == "SHA1"
    assert p.digits == 6
    assert p.period == 30
    assert p.skew == 1


def test_totp_parameters_frozen():
    p = TotpParameters()
    with pytest.raises(ValidationError):
        p.skew = 3


def test_totp_parameters_only_six_digits():
    with pytest.raises(ValidationError):
        TotpParameters(digits=8)


def test_totp_parameters_bounds():
    with pytest.raises(ValidationError):
        TotpParameters(period=0)
    with pytest.raises(ValidationError):
        TotpParameters(skew=-1)
    assert TotpParameters(skew=0).skew == 0


def test_user_record_hides_secret_in_repr():
    u = UserRecord(email="a@example.com", company="ACME", secret="GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ")
    assert "GEZDGNBV" not in repr(u)


def test_login_request_requires_code():
    with pytest.raises(ValidationError):
        LoginRequest(email="a@example.com")
