"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SECRET_KEY is validated at load time; Firestore
credentials are optional so the service can boot without a data store.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "pvsf-api"
    app_version: str = "1.0.0"
    debug: bool = False

    # Session tokens (bearer JWT issued by the auth front door)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    session_expire_minutes: int = 60 * 24 * 30  # 30 days, matches the NextAuth default

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firestore_timeout_seconds: float = 30.0

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env (SECRET_KEY) and the signing algorithm."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32. "
                "It must match the secret used by the session issuer."
            )
        if not self.algorithm.startswith("HS"):
            raise ValueError(
                f"Only HMAC session algorithms are supported, got: {self.algorithm!r}"
            )
        return self

    @property
    def firestore_configured(self) -> bool:
        """True when either Firestore credential source is set."""
        has_key = (
            self.firebase_service_account_key is not None
            and bool(self.firebase_service_account_key.get_secret_value())
        )
        return has_key or bool(self.firebase_service_account_path)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
