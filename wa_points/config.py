"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package root: wa_points/
PACKAGE_ROOT = Path(__file__).parent
# Bundled scoring tables: wa_points/data/
DATA_DIR = PACKAGE_ROOT / "data"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === Scoring tables ===
    data_dir: Path = Field(
        default=DATA_DIR,
        description="Directory holding the scoring table files"
    )
    events_file: str = Field(default="events.yaml")
    coefficients_file: str = Field(
        default="coefficients_2025.yaml",
        description="Coefficient table (absolute path or relative to data_dir)"
    )
    placement_file: str = Field(default="placement_2025.yaml")
    verify_catalog_on_load: bool = Field(
        default=True,
        description="Check every event's coefficients against its direction"
    )

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug' as well as 'DEBUG'."""
        return v.upper()

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    def resolve(self, filename: str) -> Path:
        """Full path of a table file."""
        path = Path(filename)
        return path if path.is_absolute() else self.data_dir / path

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
