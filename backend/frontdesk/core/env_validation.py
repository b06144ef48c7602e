"""
Runtime Environment Validation Module

This module validates the loaded settings at application startup.
If validation fails, the application will refuse to start (hard fail).

This prevents runtime errors from missing or misconfigured environment variables.
"""

import os
import sys
from typing import Optional

from pydantic import ValidationError

from frontdesk.core.config import Settings

SUPPORTED_DATABASE_SCHEMES = ("postgresql", "sqlite")


def _fatal(*lines: str) -> None:
    for line in lines:
        print(line, file=sys.stderr)
    sys.exit(1)


def _check_floor_table(settings: Settings) -> Optional[str]:
    """Return an error message if the floor table has bad or overlapping ranges."""
    seen: set[int] = set()
    for floor in settings.floor_table:
        if floor.first_number > floor.last_number:
            return f"Floor '{floor.name}' has first_number > last_number"
        if floor.category not in ("standard", "luxury", "master"):
            return f"Floor '{floor.name}' has unknown category '{floor.category}'"
        numbers = set(range(floor.first_number, floor.last_number + 1))
        if seen & numbers:
            return f"Floor '{floor.name}' overlaps room numbers of another floor"
        seen |= numbers
    return None


def validate_environment(settings: Optional[Settings] = None) -> Settings:
    """
    Validate configuration at startup.

    This function MUST be called before the FastAPI app starts.
    If validation fails, the application will exit with code 1.

    Returns:
        Settings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """

    try:
        settings = settings or Settings()
    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   • {field}: {error['msg']}", file=sys.stderr)
        _fatal("\nPlease check your .env file or environment variables.")

    # 1. CORS: Ensure wildcard is not used in production
    if not settings.debug:
        origins = [o.strip() for o in settings.allowed_origins.split(",")]
        if "*" in origins:
            _fatal(
                "❌ FATAL: Wildcard CORS origin (*) detected in production mode.",
                "   Set ALLOWED_ORIGINS to specific domains (comma-separated).",
            )

    # 2. Database URL: Basic format validation
    if not settings.database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
        _fatal(
            "❌ FATAL: DATABASE_URL must be a PostgreSQL or SQLite connection string "
            "(postgresql+asyncpg:// or sqlite+aiosqlite://)",
        )
    if settings.database_url.startswith("sqlite") and not settings.debug:
        print("⚠️  WARNING: SQLite database in production mode", file=sys.stderr)

    # 3. Seed fixture must exist if configured
    if settings.seed_path and not os.path.exists(settings.seed_path):
        _fatal(f"❌ FATAL: Room seed fixture not found: {settings.seed_path}")

    # 4. Floor table sanity
    floor_error = _check_floor_table(settings)
    if floor_error:
        _fatal(f"❌ FATAL: Invalid FLOOR_TABLE: {floor_error}")

    # 5. Assistant degrades to its fallback answer without a key
    if settings.assistant_enabled and not settings.gemini_api_key:
        print("⚠️  WARNING: ASSISTANT_ENABLED without GEMINI_API_KEY; assistant will answer with fallback", file=sys.stderr)

    print("✅ Environment validation passed")
    print(f"   App: {settings.app_name}")
    print(f"   Debug: {settings.debug}")
    print(f"   Rooms: {sum(f.last_number - f.first_number + 1 for f in settings.floor_table)}")
    print(f"   CORS Origins: {settings.allowed_origins}")

    return settings


if __name__ == "__main__":
    # Allow running this module directly to test validation
    validate_environment()
    print("\n✅ All environment variables are valid!")
