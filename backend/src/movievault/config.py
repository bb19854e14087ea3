from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOVIEVAULT_",
        case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./movievault.db"
    database_echo: bool = False

    # Security
    secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60

    # App
    environment: str = "development"
    debug: bool = False
    app_name: str = "MovieVault"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # CORS: use JSON array in .env: MOVIEVAULT_CORS_ORIGINS=["http://localhost:5173"]
    cors_origins: list[str] = ["http://localhost:5173"]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Load settings from the environment once. Only entry points call this."""
    return Settings()
