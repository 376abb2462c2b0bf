"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    ENV: str = "local"
    APP_NAME: str = "plan-craft"

    # API Configuration
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "wails://wails",
    ]

    # Database Configuration (embedded SQLite file)
    DATABASE_PATH: str = "data/plancraft.db"
    DB_JOURNAL_MODE: str = "WAL"
    DB_SYNCHRONOUS: str = "NORMAL"
    DB_FOREIGN_KEYS: str = "ON"
    DB_BUSY_TIMEOUT: int = 5000
    DB_CACHE_SIZE: int = -64000
    DB_TEMP_STORE: str = "MEMORY"
    DB_AUTO_VACUUM: str = "INCREMENTAL"
    DB_CASE_SENSITIVE_LIKE: str = "ON"

    # Connection pool: 5 idle + 5 overflow = 10 open connections at most
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def sqlite_pragmas(self) -> dict[str, str]:
        """PRAGMA name -> value applied to every new connection, in order."""
        # auto_vacuum only takes effect before the first table exists
        return {
            "auto_vacuum": self.DB_AUTO_VACUUM,
            "journal_mode": self.DB_JOURNAL_MODE,
            "synchronous": self.DB_SYNCHRONOUS,
            "foreign_keys": self.DB_FOREIGN_KEYS,
            "busy_timeout": str(self.DB_BUSY_TIMEOUT),
            "cache_size": str(self.DB_CACHE_SIZE),
            "temp_store": self.DB_TEMP_STORE,
            "case_sensitive_like": self.DB_CASE_SENSITIVE_LIKE,
        }


# Global settings instance
settings = Settings()
