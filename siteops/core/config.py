"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. SECRET_KEY is validated at load time; Firebase
credentials are optional so the API can start (and report not-ready)
without them.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Upper bound on documents fetched per listing page.
FIRESTORE_MAX_PAGE_SIZE = 300


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "siteops"
    app_version: str = "1.0.0"
    debug: bool = False

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firestore_timeout_seconds: float = 30.0
    firestore_page_size: int = FIRESTORE_MAX_PAGE_SIZE

    # Cleanup gate: team-member roles allowed to purge, and the text the
    # operator must type as the second confirmation.
    cleanup_allowed_roles: str = "Admin"
    cleanup_confirmation_text: str = "YES"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def cleanup_roles(self) -> frozenset[str]:
        """Allowed roles as a set (whitespace stripped, empty entries dropped)."""
        return frozenset(
            r.strip() for r in self.cleanup_allowed_roles.split(",") if r.strip()
        )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate SECRET_KEY, Firestore paging bounds and the confirmation phrase."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if not 1 <= self.firestore_page_size <= FIRESTORE_MAX_PAGE_SIZE:
            raise ValueError(
                f"firestore_page_size must be between 1 and {FIRESTORE_MAX_PAGE_SIZE}, "
                f"got: {self.firestore_page_size}"
            )
        phrase = self.cleanup_confirmation_text
        if not phrase.strip():
            raise ValueError("cleanup_confirmation_text must not be empty")
        if phrase != phrase.strip():
            raise ValueError(
                f"cleanup_confirmation_text must not have surrounding whitespace, got: {phrase!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
