"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Centralised settings — no hardcoded values anywhere else."""

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./reservations.db", env="DATABASE_URL"
    )

    # Google AI
    google_api_key: str = Field("", env="GOOGLE_API_KEY")
    llm_model: str = Field("gemini-2.5-flash", env="LLM_MODEL")
    llm_timeout_seconds: int = Field(30, env="LLM_TIMEOUT_SECONDS")

    # Single-restaurant deployment defaults used by the AI agent
    default_restaurant_id: str = Field("rest_001", env="DEFAULT_RESTAURANT_ID")
    default_customer_id: str = Field("cust_001", env="DEFAULT_CUSTOMER_ID")
    default_party_size: int = Field(2, env="DEFAULT_PARTY_SIZE")
    fallback_confidence: float = Field(0.7, env="FALLBACK_CONFIDENCE")

    # CORS
    allowed_origins: str = Field("*", env="ALLOWED_ORIGINS")

    # App
    app_env: str = Field("development", env="APP_ENV")
    log_level: str = Field("INFO", env="LOG_LEVEL")

    # Derived
    @property
    def allowed_origins_list(self) -> list[str]:
        """Return ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.allowed_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


settings = get_settings()
