"""Runtime configuration for Inkwell.

Every option can be set through an environment variable (the alias next to
each field) or a ``.env`` file in the working directory.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Async drivers that tooling (Alembic, the seed script) cannot use directly.
_ASYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql+psycopg",
}


class Settings(BaseSettings):
    """Inkwell settings."""

    app_name: str = Field(default="Inkwell", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Storage
    database_url: str = Field(default="sqlite:///./inkwell.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    seed_on_startup: bool = Field(default=False, alias="SEED_ON_STARTUP")

    # Publishing
    # Applied by the API layer only; the assembler never assumes a status.
    default_post_status: str = Field(default="published", alias="DEFAULT_POST_STATUS")
    comments_auto_approve: bool = Field(default=True, alias="COMMENTS_AUTO_APPROVE")
    words_per_minute: int = Field(default=200, ge=1, alias="WORDS_PER_MINUTE")

    # CORS for the blog frontend
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Database URL in use, honouring ``USE_TEST_DATABASE``."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url

    @property
    def database_url_sync(self) -> str:
        """``effective_database_url`` rewritten for a synchronous driver."""
        url = self.effective_database_url
        for async_prefix, sync_prefix in _ASYNC_DRIVERS.items():
            if url.startswith(async_prefix):
                return sync_prefix + url[len(async_prefix):]
        return url


settings = Settings()
