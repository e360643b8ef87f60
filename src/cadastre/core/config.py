"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ParcelDataConfig(BaseSettings):
    """Parcel data source configuration."""

    model_config = {"env_prefix": "CADASTRE_PARCELS_"}

    data_path: str = "data/data.geojson"
    owned_only: bool = True


class MeasurementConfig(BaseSettings):
    """Measurement tool configuration."""

    model_config = {"env_prefix": "CADASTRE_MEASUREMENT_"}

    units_path: str | None = None
    # Mean radius for great-circle distance, equatorial radius for ring area.
    distance_radius_m: float = 6_371_000.0
    area_radius_m: float = 6_378_137.0
    decimals: int = 2


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "CADASTRE_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    parcels: ParcelDataConfig = Field(default_factory=ParcelDataConfig)
    measurement: MeasurementConfig = Field(default_factory=MeasurementConfig)
