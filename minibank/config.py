"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "minibank"
    log_level: str = "INFO"

    # Load the Alice/Bob demo accounts at startup (registry starts empty otherwise)
    seed_demo_accounts: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080


settings = Settings()
