"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend-specific requirements (e.g. DATABASE_URL for
postgres) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Defaults run the service against the in-memory store so it starts
    without any infrastructure; set DATABASE_BACKEND=postgres for a real database.
    """

    # App
    app_name: str = "cardfile"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: "postgres" (SQLAlchemy + asyncpg) or "memory" (process-local store)
    database_backend: str = "memory"
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Security (tokens are issued by the external auth service; we only verify)
    secret_key: SecretStr = SecretStr("change-me")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480
    roles_claim: str = "roles"

    # CORS
    allowed_origins: str = "http://localhost:4200,http://localhost:3000"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    pagination_header: str = "X-Pagination"

    # Text material listing
    default_page_size: int = 10
    max_page_size: int = 50

    # Notifications: author emails are sent only when enabled (log-only sink by default)
    notifications_enabled: bool = True
    notification_sender: str = "no-reply@cardfile.local"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backend_and_paging(self) -> "Settings":
        """Validate database backend and page size bounds."""
        if self.database_backend == "postgres":
            if not self.database_url:
                raise ValueError(
                    "DATABASE_URL is required when database_backend is 'postgres'. "
                    "Set in environment or .env file."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'postgres' or 'memory', got: {self.database_backend!r}"
            )
        if self.max_page_size < 1:
            raise ValueError("MAX_PAGE_SIZE must be at least 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE ({self.max_page_size}), "
                f"got: {self.default_page_size}"
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
