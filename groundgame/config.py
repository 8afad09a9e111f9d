"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


# Municipalities covered by the zone catalog
MUNICIPALITIES: tuple[str, ...] = ("Medellín", "Bello")

# Focus area value that disables the municipality adjustment
ALL_AREAS = "All"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Settings
    app_env: str = "development"
    debug: bool = True

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path(__file__).parent.parent / "logs"

    # Map rendering
    hex_radius_degrees: float = 0.006  # Geographic hexagon radius around zone anchors
    hex_size_px: float = 60.0  # Schematic (axial grid) hexagon size

    # Ranking display
    top_zones_limit: int = 8

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def is_valid_focus_area(area: str) -> bool:
    """Check if a focus area is 'All' or a known municipality."""
    return area == ALL_AREAS or area in MUNICIPALITIES
