"""Storefront Configuration"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file="config/.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront"
    debug: bool = True
    host: str = "127.0.0.1"
    port: int = 8001

    # Local key-value store (stands in for the browser's localStorage)
    storage_path: str = "data/storage.json"

    # Pricing
    tax_rate: Decimal = Decimal("0.08")
    free_shipping_threshold: Decimal = Decimal("100")
    flat_shipping_cost: Decimal = Decimal("10")

    # Cart policy; capped at the line item ceiling of 99
    max_quantity: int = Field(default=99, ge=1, le=99)

    # Catalog
    page_size: int = 12

    # Mocked checkout
    checkout_delay_seconds: float = 2.0


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
