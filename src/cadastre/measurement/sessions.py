"""In-memory registry of measurement engines, one per viewer surface."""

from __future__ import annotations

from cadastre.core.config import MeasurementConfig
from cadastre.core.types import MeasureMode
from cadastre.measurement.engine import MeasurementEngine
from cadastre.measurement.units import load_units


class MeasurementSessionManager:
    """Creates, looks up and discards measurement engines by session id.

    Unit ladders are loaded once and shared by every engine.
    """

    def __init__(self, config: MeasurementConfig | None = None) -> None:
        self._config = config or MeasurementConfig()
        self._units = load_units(self._config.units_path, decimals=self._config.decimals)
        self._engines: dict[str, MeasurementEngine] = {}

    def create(self, mode: MeasureMode | str = MeasureMode.NONE) -> MeasurementEngine:
        """Start a new measurement session.

        Raises:
            ValueError: If *mode* is not a known measure mode.
        """
        engine = MeasurementEngine(config=self._config, units=self._units)
        engine.set_mode(mode)
        self._engines[engine.session_id] = engine
        return engine

    def get(self, session_id: str) -> MeasurementEngine | None:
        return self._engines.get(session_id)

    def discard(self, session_id: str) -> bool:
        return self._engines.pop(session_id, None) is not None

    def list_sessions(self) -> list[MeasurementEngine]:
        """Return all engines, most recently active first."""
        return sorted(
            self._engines.values(),
            key=lambda e: e.session.last_active,
            reverse=True,
        )
