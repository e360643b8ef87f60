"""FastAPI router for measurement sessions driven by map clicks."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from cadastre.core.types import MeasureMode
from cadastre.measurement.engine import MeasurementEngine
from cadastre.measurement.sessions import MeasurementSessionManager

router = APIRouter()


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class SessionCreateRequest(BaseModel):
    mode: str = MeasureMode.NONE.value


class ModeRequest(BaseModel):
    mode: str
    toggle: bool = False


class PointRequest(BaseModel):
    lat: float
    lng: float


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_manager(request: Request) -> MeasurementSessionManager:
    manager = getattr(request.app.state, "measurement_sessions", None)
    if manager is None:
        raise HTTPException(status_code=503, detail="Measurement service not available")
    return manager


def _get_engine(session_id: str, request: Request) -> MeasurementEngine:
    engine = _get_manager(request).get(session_id)
    if engine is None:
        raise HTTPException(status_code=404, detail=f"Measurement session {session_id!r} not found")
    return engine


def _state(engine: MeasurementEngine) -> dict[str, Any]:
    return {
        "session_id": engine.session_id,
        "mode": engine.mode.value,
        "points": [p.model_dump() for p in engine.points],
        "result": engine.last_result,
        "total": engine.total(),
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.post("/api/measurements")
async def create_measurement(
    request: Request, body: SessionCreateRequest | None = None
) -> dict[str, Any]:
    """Start a measurement session."""
    manager = _get_manager(request)
    mode = body.mode if body else MeasureMode.NONE.value
    try:
        engine = manager.create(mode)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid measure mode: {mode!r}")
    return _state(engine)


@router.get("/api/measurements")
async def list_measurements(request: Request) -> list[dict[str, Any]]:
    return [_state(e) for e in _get_manager(request).list_sessions()]


@router.get("/api/measurements/{session_id}")
async def get_measurement(session_id: str, request: Request) -> dict[str, Any]:
    return _state(_get_engine(session_id, request))


@router.delete("/api/measurements/{session_id}")
async def discard_measurement(session_id: str, request: Request) -> dict[str, Any]:
    """Tear down a measurement session."""
    if not _get_manager(request).discard(session_id):
        raise HTTPException(status_code=404, detail=f"Measurement session {session_id!r} not found")
    return {"session_id": session_id, "discarded": True}


@router.put("/api/measurements/{session_id}/mode")
async def set_measurement_mode(
    session_id: str, body: ModeRequest, request: Request
) -> dict[str, Any]:
    """Switch tools. Any mode change, including to the same mode, resets the session."""
    engine = _get_engine(session_id, request)
    try:
        if body.toggle:
            engine.toggle(body.mode)
        else:
            engine.set_mode(body.mode)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid measure mode: {body.mode!r}")
    return _state(engine)


@router.post("/api/measurements/{session_id}/points")
async def add_measurement_point(
    session_id: str, body: PointRequest, request: Request
) -> dict[str, Any]:
    """Record a map click. Ignored while no tool is active."""
    engine = _get_engine(session_id, request)
    engine.add_point((body.lat, body.lng))
    return _state(engine)


@router.delete("/api/measurements/{session_id}/points")
async def clear_measurement(session_id: str, request: Request) -> dict[str, Any]:
    engine = _get_engine(session_id, request)
    engine.clear()
    return _state(engine)


@router.post("/api/measurements/{session_id}/cancel")
async def cancel_measurement(session_id: str, request: Request) -> dict[str, Any]:
    engine = _get_engine(session_id, request)
    engine.cancel()
    return _state(engine)
