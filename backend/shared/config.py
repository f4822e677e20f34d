"""
Centralized configuration for the BagEase backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, PRICING_*, BOOKING_*).
"""

from decimal import Decimal
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

    # Application
    app_name: str = "BagEase API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, only used by run_migrations.py

    # Booking cost estimate (INR)
    pricing_base: Decimal = Decimal("150")
    pricing_per_extra_bag: Decimal = Decimal("50")
    pricing_weight_surcharges: dict[str, Decimal] = {
        "0-10kg": Decimal("0"),
        "10-20kg": Decimal("40"),
        "20kg+": Decimal("80"),
    }
    pricing_tier_multipliers: dict[str, Decimal] = {
        "Standard": Decimal("1.0"),
        "Express": Decimal("1.5"),
    }

    # Booking flow
    booking_default_status: str = "Pending"
    booking_success_overlay_seconds: float = 3.0

    # Auth panel behaviour
    suggest_signup_on_invalid_credentials: bool = True
    surface_missing_profile: bool = False


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
