"""
NutriSnap Backend - Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory and the console entry point.
When:  Loaded once at module import time.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Bundled single-page UI shipped inside the package
DEFAULT_PUBLIC_DIR = Path(__file__).resolve().parent / "public"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default, so the server starts with no
    environment at all. Attributes are grouped by concern.
    """

    # ── Record Store ──────────────────────────────────────────────────────
    # What: Directory holding both collection files, relative to the CWD
    data_dir: str = Field(default="./data")

    meals_filename: str = Field(default="meals.json", min_length=1)
    calories_filename: str = Field(default="calories.json", min_length=1)

    # ── Static UI ─────────────────────────────────────────────────────────
    # What: Directory served at "/" (index.html) and for any unmatched GET path
    # None means the UI bundled with the package
    public_dir: Optional[str] = Field(default=None)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    # Wildcard bind so phones on the same Wi-Fi can reach the UI
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    rate_limit_enabled: bool = Field(default=True)
    rate_limit_requests: int = Field(default=600, ge=10, le=100000)
    rate_limit_window: int = Field(default=60, ge=1, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATA_DIR and data_dir both work
        "extra": "ignore",
    }

    @property
    def meals_path(self) -> Path:
        return Path(self.data_dir) / self.meals_filename

    @property
    def calories_path(self) -> Path:
        return Path(self.data_dir) / self.calories_filename

    @property
    def public_path(self) -> Path:
        return Path(self.public_dir) if self.public_dir else DEFAULT_PUBLIC_DIR


# Singleton instance used by the module-level app and the console script
settings = Settings()
