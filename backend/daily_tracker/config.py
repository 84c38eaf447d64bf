"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Store credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - storage_timezone always names a resolvable IANA zone

Design Decisions:
    - Store location split into DB_HOST/DB_USER/DB_PASS/DB_NAME/DB_PORT, with
      DATABASE_URL as a full override (tests point it at SQLite)
    - URL built with URL.create so passwords with '@' or '/' survive
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    db_host: str = "localhost"
    db_user: str = "root"
    db_pass: str = ""
    db_name: str = "daily_tracker"
    db_port: int = 3306
    database_url: str | None = None

    database_pool_size: int = 10
    database_pool_timeout: float = 30.0
    create_tables: bool = False

    # Wire format
    storage_timezone: str = "UTC"

    @field_validator("storage_timezone")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {v}") from e
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def storage_zone(self) -> ZoneInfo:
        return ZoneInfo(self.storage_timezone)

    @property
    def sqlalchemy_url(self) -> str | URL:
        """DATABASE_URL if given, else a MySQL URL for the async aiomysql driver."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_pass,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
