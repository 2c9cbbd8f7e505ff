"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Verification settings
    code_ttl_seconds: int = 600  # Validity window promised in the email copy
    strict_delivery: bool = False  # Report notifier failures as errors

    # Notifier configuration
    notifier_backend: str = "console"  # "console" or "smtp"
    mail_server: str = "localhost"
    mail_port: int = 587
    mail_username: str = ""
    mail_password: str = ""
    mail_from: str = "pedidos@barista.coffee"
    mail_from_name: str = "Barista Coffee"
    mail_starttls: bool = True
    mail_ssl_tls: bool = False

    # Storefront settings
    seed_demo_orders: bool = True
    placeholder_image_url: str = "https://placehold.co/250x250/F7F4EF/2C2C2C?text={text}"

    # Image generation
    image_backend: str = "placeholder"  # "placeholder" or "genai"
    genai_api_key: str = ""
    genai_image_model: str = "imagen-4.0-generate-001"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
