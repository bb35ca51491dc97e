"""HTTP routes. Errors never echo secret material or counters."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response

from otpgate import qr
from otpgate.config import settings
from otpgate.directory import UserDirectory
from otpgate.models import LoginRequest, SecretResponse, SetupResponse, UserRecord
from otpgate.otp import (
    MIN_SECRET_BYTES,
    OtpError,
    Totp,
    build_totp,
    generate_base32_secret,
)

logger = logging.getLogger(__name__)

router = APIRouter()

USER_NOT_FOUND = {"error": "user not found"}
MAX_SECRET_BYTES = 1024


def get_directory(request: Request) -> UserDirectory:
    return request.app.state.directory


def _totp_for(user: UserRecord) -> Totp:
    return build_totp(
        user.company, user.email, user.secret, period=settings.period, skew=settings.skew
    )


@router.get("/health")
def health(directory: UserDirectory = Depends(get_directory)):
    return {"ok": True, "users": len(directory)}


@router.get("/secret", response_model=SecretResponse, response_model_exclude_none=True)
def secret_generate(
    bytes_: int | None = Query(None, alias="bytes", le=MAX_SECRET_BYTES),
    s: int | None = Query(None, le=MAX_SECRET_BYTES, description="Alias for bytes"),
    email: str | None = Query(None, description="Echoed back only"),
):
    """Return a fresh Base32 secret. Nothing is stored."""
    n = bytes_ if bytes_ is not None else s
    if n is None:
        n = settings.secret_bytes
    n = max(n, MIN_SECRET_BYTES)
    return SecretResponse(secret=generate_base32_secret(n), bytes=n, email=email)


@router.get("/setup", response_model=SetupResponse)
def setup(email: str = Query(...), directory: UserDirectory = Depends(get_directory)):
    """otpauth:// URL for the user, for authenticator enrollment."""
    user = directory.find(email)
    if user is None:
        return JSONResponse(USER_NOT_FOUND, status_code=404)
    try:
        totp = _totp_for(user)
    except OtpError as e:
        logger.warning("Unusable secret for %s: %s", email, e)
        return JSONResponse({"error": str(e)}, status_code=500)
    return SetupResponse(email=user.email, company=user.company, otpauth_url=totp.provisioning_uri())


@router.get("/qrcode")
def qrcode_png(email: str = Query(...), directory: UserDirectory = Depends(get_directory)):
    """PNG QR code of the user's otpauth:// URL."""
    user = directory.find(email)
    if user is None:
        return JSONResponse(USER_NOT_FOUND, status_code=404)
    try:
        totp = _totp_for(user)
    except OtpError as e:
        logger.warning("Unusable secret for %s: %s", email, e)
        return Response("invalid secret", status_code=500, media_type="text/plain")
    return Response(qr.render_png(totp.provisioning_uri()), media_type="image/png")


@router.post("/login")
def login(body: LoginRequest, directory: UserDirectory = Depends(get_directory)):
    """Verify the current code with the configured skew."""
    user = directory.find(body.email)
    if user is None:
        return JSONResponse(USER_NOT_FOUND, status_code=404)
    try:
        totp = _totp_for(user)
    except OtpError as e:
        logger.warning("Unusable secret for %s: %s", body.email, e)
        return JSONResponse({"error": str(e)}, status_code=500)

    ok = totp.check(body.code)
    logger.info("Login for %s: %s", body.email, "accepted" if ok else "rejected")
    return JSONResponse({"ok": ok}, status_code=200 if ok else 401)
