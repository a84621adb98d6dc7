"""Configuration settings for the 4CAST screening package."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from FOURCAST_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FOURCAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        protected_namespaces=(),
    )

    # Service identification
    service_name: str = "fourcast"

    # Coefficient set used by the default screening service.
    # Selects among shipped revisions only; coefficients themselves are not configurable.
    model_revision: str = "4cast-v1"

    # Logging
    log_level: str = "INFO"


settings = Settings()
