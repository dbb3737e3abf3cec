"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "bdinvest-advisor"
    log_level: str = "INFO"

    # Recommendation engine
    min_suitability_score: int = 60

    # Projection calculator
    default_projection_years: int = 5
    max_projection_years: int = 50


settings = Settings()
