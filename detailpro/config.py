"""
Configuration settings for the DetailPro backend.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "DetailPro"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database ("sqlite://" keeps everything in process memory)
    database_url: str = "sqlite://"
    seed_demo_data: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # API
    api_prefix: str = "/api"

    # Billing
    default_tax_rate: float = 0.0825  # 8.25%
    invoice_number_prefix: str = "INV-"
    invoice_number_start: int = 10000
    invoice_due_days: int = 15

    # Listings
    default_page_size: int = 10
    default_feed_limit: int = 10
    top_services_limit: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
