"""Unit ladders used to render measurement results.

A ladder is an ordered list of steps; a value is rendered with the first
step (largest threshold first) whose threshold it reaches. Ladders are read
from ``config/measurement_units.yml`` and fall back to metric defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "measurement_units.yml"


class UnitStep(BaseModel):
    """One rung of a unit ladder."""

    suffix: str
    divisor: float = 1.0
    threshold: float = 0.0


class UnitLadder(BaseModel):
    steps: list[UnitStep] = Field(min_length=1)
    decimals: int = 2

    def format(self, value: float) -> str:
        ordered = sorted(self.steps, key=lambda s: s.threshold, reverse=True)
        step = next((s for s in ordered if value >= s.threshold), ordered[-1])
        return f"{value / step.divisor:.{self.decimals}f} {step.suffix}"


class MeasurementUnits(BaseModel):
    distance: UnitLadder
    area: UnitLadder


def default_units(decimals: int = 2) -> MeasurementUnits:
    return MeasurementUnits(
        distance=UnitLadder(
            steps=[
                UnitStep(suffix="km", divisor=1000.0, threshold=1000.0),
                UnitStep(suffix="m"),
            ],
            decimals=decimals,
        ),
        area=UnitLadder(
            steps=[
                UnitStep(suffix="ha", divisor=10_000.0, threshold=10_000.0),
                UnitStep(suffix="m²"),
            ],
            decimals=decimals,
        ),
    )


def load_units(path: str | Path | None = None, decimals: int = 2) -> MeasurementUnits:
    """Load unit ladders from YAML, keeping defaults for anything not given.

    Raises:
        ValueError: If the file is not a YAML mapping.
        pydantic.ValidationError: If a ladder in the file is malformed.
    """
    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH
    units = default_units(decimals)
    if not config_path.exists():
        logger.debug("Unit file %s not found, using defaults", config_path)
        return units

    with open(config_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping of unit ladders")

    decimals = data.get("decimals", decimals)
    ladders = {}
    for kind in ("distance", "area"):
        steps = data.get(kind)
        if steps:
            ladders[kind] = UnitLadder(steps=steps, decimals=decimals)
        else:
            ladders[kind] = getattr(units, kind).model_copy(update={"decimals": decimals})
    return MeasurementUnits(**ladders)
