"""Storefront Configuration"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

ENV_FILE = Path(__file__).resolve().parent.parent.parent / "config" / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Neon Pet Store"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001

    # Storefront
    store_name: str = "NEON PET STORE"
    catalog_url: str = "http://localhost:8001/api/categories"

    # Admin role (admin endpoints are disabled when unset)
    admin_api_key: Optional[str] = None

    # Catalog QR code
    qr_width: int = 400
    qr_border: int = 2

    # Carts untouched for longer than this are discarded
    cart_max_age_hours: int = 24

    class Config:
        env_file = str(ENV_FILE)
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def admin_enabled(self) -> bool:
        """Check if an admin key is configured"""
        return bool(self.admin_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
