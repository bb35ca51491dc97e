"""Central configuration loaded from environment variables and .env."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from otpgate.otp.provisioner import DEFAULT_SECRET_BYTES


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OTPGATE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # User directory
    users_file: Path = Path("users.json")

    # Encryption (base64 of 32 bytes); needed only for enc: secrets
    master_key: str = ""

    # Enrollment / verification
    default_issuer: str = "otpgate"
    secret_bytes: int = DEFAULT_SECRET_BYTES
    period: int = Field(default=30, gt=0)
    skew: int = Field(default=1, ge=0)

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "info"


settings = Settings()
