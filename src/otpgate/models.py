"""Pydantic models shared by the engine, directory and HTTP layer."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HashAlgorithm(StrEnum):
    SHA1 = "SHA1"


# === Engine parameters ===


class TotpParameters(BaseModel):
    """Immutable per-request TOTP settings, passed explicitly to engine calls."""

    model_config = ConfigDict(frozen=True)

    issuer: str = ""
    account: str = ""
    algorithm: HashAlgorithm = HashAlgorithm.SHA1
    digits: Literal[6] = 6
    period: int = Field(default=30, gt=0)
    skew: int = Field(default=1, ge=0)


# === Directory ===


class UserRecord(BaseModel):
    """A user entry from the users file. `secret` is Base32 text."""

    model_config = ConfigDict(frozen=True)

    email: str
    company: str
    secret: str = Field(repr=False)


# === HTTP bodies ===


class LoginRequest(BaseModel):
    email: str
    code: str


class SetupResponse(BaseModel):
    email: str
    company: str
    otpauth_url: str


class SecretResponse(BaseModel):
    secret: str
    bytes: int
    email: str | None = None
