"""Tests for measurement unit ladders."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from cadastre.measurement.units import UnitLadder, UnitStep, default_units, load_units


class TestUnitLadder:
    def test_steps_are_ordered_by_threshold(self):
        ladder = UnitLadder(steps=[
            UnitStep(suffix="m"),
            UnitStep(suffix="km", divisor=1000, threshold=1000),
        ])
        assert ladder.format(1500) == "1.50 km"
        assert ladder.format(15) == "15.00 m"

    def test_value_below_every_threshold_uses_smallest_step(self):
        ladder = UnitLadder(steps=[UnitStep(suffix="ha", divisor=10_000, threshold=10_000)])
        assert ladder.format(60) == "0.01 ha"

    def test_empty_ladder_rejected(self):
        with pytest.raises(ValidationError):
            UnitLadder(steps=[])


class TestLoadUnits:
    def test_missing_file_uses_defaults(self, tmp_path: Path):
        units = load_units(tmp_path / "nope.yml")
        assert units == default_units()

    def test_shipped_config_matches_defaults(self):
        units = load_units()
        assert units.distance.format(1000) == "1.00 km"
        assert units.area.format(9_999.5) == "9999.50 m²"
        assert units.area.format(10_000) == "1.00 ha"

    def test_partial_file_keeps_other_ladder(self, tmp_path: Path):
        path = tmp_path / "units.yml"
        path.write_text(yaml.dump({
            "area": [
                {"suffix": "km²", "divisor": 1_000_000, "threshold": 1_000_000},
                {"suffix": "m²"},
            ],
        }, allow_unicode=True))
        units = load_units(path)
        assert units.area.format(2_500_000) == "2.50 km²"
        assert units.distance.format(1500) == "1.50 km"

    def test_malformed_step_raises(self, tmp_path: Path):
        path = tmp_path / "units.yml"
        path.write_text(yaml.dump({"distance": [{"divisor": 1}]}))
        with pytest.raises(ValidationError):
            load_units(path)

    def test_shipped_config_uses_requested_precision(self):
        units = load_units(decimals=3)
        assert units.distance.format(111.1949) == "111.195 m"
        assert units.area.format(25_000) == "2.500 ha"

    def test_non_mapping_file_raises(self, tmp_path: Path):
        path = tmp_path / "units.yml"
        path.write_text("- km\n- m\n")
        with pytest.raises(ValueError, match="units.yml"):
            load_units(path)
