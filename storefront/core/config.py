
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Storefront API"
    app_env: str = Field(default="development", alias="APP_ENV")  # development | testing | production
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"
    log_level: str | None = Field(default=None, alias="LOG_LEVEL")

    # Database (SQLite via aiosqlite for local dev and tests)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./storefront_dev.db",
        alias="DATABASE_URL",
    )
    auto_create_schema: bool = Field(default=True, alias="AUTO_CREATE_SCHEMA")

    # List endpoints
    default_page_limit: int = Field(default=20, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int = Field(default=100, alias="MAX_PAGE_LIMIT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_testing(self) -> bool:
        return self.app_env == "testing"

settings = Settings()
