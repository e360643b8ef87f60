"""Interactive distance/area measurement over map clicks.

The engine is a small state machine. Clicks arrive one at a time through
``add_point``; after each one the running total is recomputed from the full
point list and rendered as a human-readable string. Changing the mode, even
to the mode already active, starts a fresh session.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from cadastre.core.config import MeasurementConfig
from cadastre.core.types import MeasureMode
from cadastre.measurement.geometry import path_length, ring_area
from cadastre.measurement.units import MeasurementUnits, default_units, load_units
from cadastre.parcels.models import LatLng

logger = logging.getLogger(__name__)

MIN_DISTANCE_POINTS = 2
MIN_AREA_POINTS = 3

_DEFAULT_UNITS = default_units()


def format_distance(meters: float, units: MeasurementUnits | None = None) -> str:
    """Render a distance, e.g. ``"111.19 m"`` or ``"1.11 km"``."""
    return (units or _DEFAULT_UNITS).distance.format(meters)


def format_area(square_meters: float, units: MeasurementUnits | None = None) -> str:
    """Render an area, e.g. ``"950.00 m²"`` or ``"2.25 ha"``."""
    return (units or _DEFAULT_UNITS).area.format(square_meters)


class MeasurementSession(BaseModel):
    """Accumulated state of one measurement interaction."""

    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    mode: MeasureMode = MeasureMode.NONE
    points: list[LatLng] = Field(default_factory=list)
    last_result: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_active: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class MeasurementEngine:
    """Owns a ``MeasurementSession`` and drives it from UI events.

    Args:
        config: Earth radii and formatting precision. Defaults to
            ``MeasurementConfig()``.
        units: Pre-loaded unit ladders. Loaded from ``config.units_path``
            when omitted.
        session: Existing session state to continue.
    """

    def __init__(
        self,
        config: MeasurementConfig | None = None,
        units: MeasurementUnits | None = None,
        session: MeasurementSession | None = None,
    ) -> None:
        self._config = config or MeasurementConfig()
        self._units = units or load_units(self._config.units_path, decimals=self._config.decimals)
        self._session = session or MeasurementSession()

    @property
    def session(self) -> MeasurementSession:
        return self._session

    @property
    def session_id(self) -> str:
        return self._session.session_id

    @property
    def mode(self) -> MeasureMode:
        return self._session.mode

    @property
    def points(self) -> tuple[LatLng, ...]:
        return tuple(self._session.points)

    @property
    def last_result(self) -> str | None:
        return self._session.last_result

    def set_mode(self, mode: MeasureMode | str) -> MeasureMode:
        """Switch the active tool and start a fresh session.

        Raises:
            ValueError: If *mode* is not a known measure mode.
        """
        new_mode = MeasureMode(mode)
        if new_mode != self._session.mode:
            logger.debug("Measurement %s: %s -> %s", self.session_id, self._session.mode, new_mode)
        self._session.mode = new_mode
        self._reset()
        return new_mode

    def toggle(self, mode: MeasureMode | str) -> MeasureMode:
        """Tool-button behaviour: pressing the active tool switches it off."""
        requested = MeasureMode(mode)
        if requested == self._session.mode:
            return self.set_mode(MeasureMode.NONE)
        return self.set_mode(requested)

    def add_point(self, coordinate: LatLng | Mapping[str, float] | Sequence[float]) -> str | None:
        """Record a map click and return the updated result.

        Ignored while no tool is active. Returns None until enough points
        exist for the active mode.
        """
        if self._session.mode == MeasureMode.NONE:
            return None

        self._session.points.append(LatLng.parse(coordinate))
        self._session.last_active = datetime.now(timezone.utc)
        self._session.last_result = self._compute()
        return self._session.last_result

    def clear(self) -> None:
        """Drop collected points and the result; the active mode is kept."""
        self._reset()

    def cancel(self) -> None:
        self.set_mode(MeasureMode.NONE)

    def total(self) -> float | None:
        """Raw measurement in meters or square meters, None when not computable."""
        points = self._session.points
        if self._session.mode == MeasureMode.DISTANCE and len(points) >= MIN_DISTANCE_POINTS:
            return path_length(points, self._config.distance_radius_m)
        if self._session.mode == MeasureMode.AREA and len(points) >= MIN_AREA_POINTS:
            return ring_area(points, self._config.area_radius_m)
        return None

    def _compute(self) -> str | None:
        value = self.total()
        if value is None:
            return None
        if self._session.mode == MeasureMode.DISTANCE:
            return format_distance(value, self._units)
        return format_area(value, self._units)

    def _reset(self) -> None:
        self._session.points = []
        self._session.last_result = None
        self._session.last_active = datetime.now(timezone.utc)
