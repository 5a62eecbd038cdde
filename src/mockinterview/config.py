"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./mockinterview.db"

    # Auth Settings
    jwt_secret: str = "placement-panic-secret-key"
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7
    bcrypt_rounds: int = 12

    # Question Bank Settings
    default_question_count: int = 10
    max_question_count: int = 50
    seed_question_bank: bool = True

    # Environment Settings
    log_level: str = "INFO"
    environment: str = "development"
    debug: bool = False

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
