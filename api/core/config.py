"""
Configuration helpers for the records API.

The Settings object reads environment variables (backing file, shared secret,
credential header, logging, bind address) so that routers/services do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_RECORDS_FILE = Path(__file__).resolve().parents[2] / "user.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    records_file: Path
    shared_secret: str
    auth_header: str
    log_level: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    records_file = os.getenv("RECORDS_FILE") or str(DEFAULT_RECORDS_FILE)
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        records_file=Path(records_file),
        shared_secret=os.getenv("SHARED_SECRET", "robel"),
        auth_header=os.getenv("AUTH_HEADER") or "Authorization",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "8080"), 8080),
    )
