"""Distance and area measurement over map clicks.

Provides spherical geometry primitives, configurable unit ladders, the
per-surface measurement state machine and an in-memory session registry.
"""

from cadastre.measurement.engine import (
    MeasurementEngine,
    MeasurementSession,
    format_area,
    format_distance,
)
from cadastre.measurement.geometry import haversine_distance, path_length, ring_area
from cadastre.measurement.sessions import MeasurementSessionManager
from cadastre.measurement.units import MeasurementUnits, UnitLadder, UnitStep, load_units

__all__ = [
    "MeasurementEngine",
    "MeasurementSession",
    "MeasurementSessionManager",
    "MeasurementUnits",
    "UnitLadder",
    "UnitStep",
    "format_area",
    "format_distance",
    "haversine_distance",
    "load_units",
    "path_length",
    "ring_area",
]
