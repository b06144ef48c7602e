"""Application configuration using Pydantic Settings."""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class FloorConfig(BaseModel):
    """One row of the floor table used to generate rooms."""

    name: str
    first_number: int
    last_number: int
    category: str
    base_price: Decimal


DEFAULT_FLOOR_TABLE = [
    FloorConfig(name="1st floor", first_number=25, last_number=38, category="standard", base_price=Decimal("250")),
    FloorConfig(name="2nd floor", first_number=41, last_number=59, category="luxury", base_price=Decimal("400")),
    FloorConfig(name="3rd floor", first_number=61, last_number=79, category="master", base_price=Decimal("750")),
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_name: str = "Front Desk"
    hotel_name: str = "Hotel Rudge Ramos"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    allowed_origins: str = "http://localhost:5173"
    log_level: str = "INFO"

    # Database (staff directory, catalog, pricing, assistant log)
    database_url: str = "sqlite+aiosqlite:///./frontdesk.db"

    # Room board
    floor_table: list[FloorConfig] = DEFAULT_FLOOR_TABLE
    seed_path: Optional[str] = None
    allow_unblock: bool = False

    # Wake calls
    wake_call_poll_seconds: float = 15.0
    wake_call_grace_minutes: int = 5
    snooze_minutes: int = 10

    # Cashier
    shift_discrepancy_tolerance: Decimal = Decimal("10")

    # Assistant (Gemini)
    assistant_enabled: bool = True
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    assistant_timeout_seconds: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
