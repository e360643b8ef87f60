"""FastAPI application for the cadastre parcel viewer.

Exposes parcel search and selection over the session's parcel set, plus
measurement sessions that the map front-end feeds with click coordinates.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from cadastre.core.config import Settings
from cadastre.measurement.sessions import MeasurementSessionManager
from cadastre.parcels.store import ParcelStore
from cadastre.web.measurement_router import router as measurement_router
from cadastre.web.parcel_router import router as parcel_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"
    parcels: int = 0


def create_app(
    settings: Settings | None = None,
    parcel_store: ParcelStore | None = None,
    measurement_sessions: MeasurementSessionManager | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with fixture parcel sets.

    Args:
        settings: Application settings. Defaults to Settings().
        parcel_store: Optional pre-loaded parcel store. Loaded from
            ``settings.parcels.data_path`` when omitted; a missing file
            yields an empty store.
        measurement_sessions: Optional pre-built session registry.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Cadastre Parcel Viewer",
        description="Parcel search, duplicate resolution and map measurement",
        version="0.1.0",
    )

    # CORS for the map front-end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if parcel_store is None:
        try:
            parcel_store = ParcelStore.from_config(settings.parcels)
        except FileNotFoundError:
            logger.warning("Parcel data %s not found, starting empty", settings.parcels.data_path)
            parcel_store = ParcelStore()

    if measurement_sessions is None:
        measurement_sessions = MeasurementSessionManager(config=settings.measurement)

    app.state.settings = settings
    app.state.parcel_store = parcel_store
    app.state.measurement_sessions = measurement_sessions

    app.include_router(parcel_router)
    app.include_router(measurement_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="cadastre-viewer",
            parcels=len(parcel_store),
        )

    return app
