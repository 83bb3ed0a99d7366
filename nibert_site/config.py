"""Configuration helpers for the Nibert Investments site API."""
from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:3001/api"
DEFAULT_PORT = 3001


class ConfigError(RuntimeError):
    """Raised when configuration values are present but unusable."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration for the API server and client."""

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    contacts_file: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def expose_error_details(self) -> bool:
        """Error text is only echoed to callers outside production."""
        return not self.is_production


def _parse_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return ["*"]
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def load_settings(*, env_file: Optional[str] = None) -> Settings:
    """Load settings from environment variables (and a ``.env`` file if present).

    Args:
        env_file: Optional explicit dotenv path. Values already set in the
            environment take precedence over the file.

    Returns:
        Settings populated from ``NIBERT_*`` variables, ``PORT`` and ``HOST``.

    Raises:
        ConfigError: if ``PORT`` is not an integer.
    """

    load_dotenv(env_file)

    raw_port = os.getenv("PORT", str(DEFAULT_PORT)).strip()
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from exc

    contacts_file = os.getenv("NIBERT_CONTACTS_FILE", "").strip() or None

    return Settings(
        environment=os.getenv("NIBERT_ENV", "development").strip() or "development",
        host=os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=port,
        allowed_origins=_parse_origins(os.getenv("NIBERT_ALLOWED_ORIGINS")),
        contacts_file=contacts_file,
        api_url=os.getenv("NIBERT_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL,
        log_level=os.getenv("NIBERT_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
