"""
Configuration settings for the geospatial filtering component using Pydantic Settings.

This module centralizes the boundary dataset location, the municipality
to resolve and the fail-open policy, loaded from environment variables
or a .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any


# OpenPolis municipalities of the Metropolitan City of Turin (province code 001 -> P_1)
TURIN_PROVINCE_GEOJSON_URL = (
    "https://raw.githubusercontent.com/openpolis/geojson-italy/master/"
    "geojson/limits_P_1_municipalities.geojson"
)


class GeoSettings(BaseSettings):
    """
    Settings for boundary resolution and report geofencing.

    Uses Pydantic Settings to load and validate configuration from
    environment variables with proper type checking and defaults.
    """

    # Boundary dataset
    boundary_url: str = Field(
        default=TURIN_PROVINCE_GEOJSON_URL,
        alias="CIVICGEO_BOUNDARY_URL",
        description="GeoJSON FeatureCollection with municipal limits"
    )
    municipality_name: str = Field(
        default="Torino",
        alias="CIVICGEO_MUNICIPALITY_NAME",
        description="Name of the municipality feature to resolve (case-insensitive)"
    )
    boundary_cache_ttl: int = Field(
        default=86400,  # 1 day
        alias="CIVICGEO_BOUNDARY_CACHE_TTL",
        description="Seconds a resolved (or missing) boundary is kept by BoundaryStore"
    )

    # Geofencing policy
    permit_on_missing_boundary: bool = Field(
        default=True,
        alias="CIVICGEO_PERMIT_ON_MISSING_BOUNDARY",
        description="Accept report locations when the boundary is unavailable"
    )

    # Report search
    default_search_radius_m: float = Field(
        default=500.0,
        gt=0,
        alias="CIVICGEO_DEFAULT_SEARCH_RADIUS_M",
        description="Default radius in meters for nearby report searches"
    )

    # API server
    civicgeo_host: str = Field(
        default="127.0.0.1",
        alias="CIVICGEO_HOST",
        description="API server host"
    )
    civicgeo_port: int = Field(
        default=8000,
        alias="CIVICGEO_PORT",
        description="API server port"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_prefix": "",
        "extra": "ignore",  # Allow extra fields from .env but ignore them
    }

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


# Global settings instance
_settings: Optional[GeoSettings] = None


def get_settings() -> GeoSettings:
    """
    Get global settings instance (singleton pattern).

    Returns:
        Validated GeoSettings instance
    """
    global _settings
    if _settings is None:
        _settings = GeoSettings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing)."""
    global _settings
    _settings = None
