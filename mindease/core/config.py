"""Application configuration from environment."""
import re
from datetime import datetime, timedelta, timezone

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Mind Ease - Pomodoro API"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./mindease.db"

    # JWT access token + opaque refresh token lifetimes ("15m", "7d", ...)
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expires_in: str = "15m"
    refresh_token_expires_in: str = "7d"

    # Boards created without a color get this one
    default_board_color: str = "#3B82F6"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


_EXPIRES_IN_RE = re.compile(r"^(\d+)([smhd])$")
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 60 * 60, "d": 24 * 60 * 60}


def parse_expires_in(expires_in: str) -> int:
    """Convert a duration like "15m" or "7d" to seconds."""
    match = _EXPIRES_IN_RE.match(expires_in or "")
    if not match:
        raise ValueError(f"Invalid expiresIn format: {expires_in!r}")
    return int(match.group(1)) * _UNIT_SECONDS[match.group(2)]


def get_expiration_date(expires_in: str) -> datetime:
    return datetime.now(timezone.utc) + timedelta(seconds=parse_expires_in(expires_in))
