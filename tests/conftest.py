"""Shared test fixtures and helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cadastre.parcels.store import ParcelStore


def _square(lng: float, lat: float, size: float = 0.0005) -> dict[str, Any]:
    ring = [
        [lng, lat],
        [lng + size, lat],
        [lng + size, lat + size],
        [lng, lat + size],
        [lng, lat],
    ]
    return {"type": "MultiPolygon", "coordinates": [[ring]]}


def make_feature(**properties: Any) -> dict[str, Any]:
    """Build a GeoJSON parcel feature using the export's attribute names."""
    lng = properties.pop("_lng", 112.67)
    lat = properties.pop("_lat", -7.34)
    base = {
        "Id": 0,
        "KODEBD": None,
        "IDTANAH": None,
        "NAMAMIL": None,
        "NAMAEKS": None,
        "LUASGIS": 0,
    }
    base.update(properties)
    return {"type": "Feature", "properties": base, "geometry": _square(lng, lat)}


@pytest.fixture()
def feature_factory():
    return make_feature


@pytest.fixture()
def sample_features() -> list[dict[str, Any]]:
    """Parcel features with one duplicated parcel code (BD-002)."""
    return [
        make_feature(
            Id=1, KODEBD="BD-001", IDTANAH="T-001", NAMAMIL="Siti Aminah",
            DESAKEL="Wonocolo", KECAMTN="Taman", KABKOTA="Sidoarjo", PROVINS="Jawa Timur",
            LUASGIS=350.5, LUASDOK=348, HARGAMT=1500000,
        ),
        make_feature(
            Id=2, KODEBD="BD-002", IDTANAH="T-002", NAMAMIL="Budi Santoso",
            DESAKEL="Bebekan", KECAMTN="Taman", KABKOTA="Sidoarjo",
            _lng=112.68, _lat=-7.35,
        ),
        make_feature(
            Id=3, KODEBD="BD-002", IDTANAH="T-002", NAMAMIL="Budi Santoso",
            NAMAEKS="Hadi Wijaya", DESAKEL="Bebekan", KECAMTN="Taman", KABKOTA="Sidoarjo",
            LUASGIS=512.0, _lng=112.68, _lat=-7.35,
        ),
        make_feature(
            Id=4, KODEBD="BD-003", IDTANAH="T-003",
            DESAKEL="Kletek", KECAMTN="Taman", KABKOTA="Sidoarjo",
            _lng=112.69, _lat=-7.33,
        ),
    ]


@pytest.fixture()
def parcel_geojson(tmp_path: Path, sample_features: list[dict[str, Any]]) -> Path:
    """Write the sample features as a FeatureCollection and return its path."""
    path = tmp_path / "data.geojson"
    path.write_text(json.dumps({
        "type": "FeatureCollection",
        "name": "aset_tanah",
        "features": sample_features,
    }))
    return path


@pytest.fixture()
def parcel_store(parcel_geojson: Path) -> ParcelStore:
    return ParcelStore.from_geojson(parcel_geojson)
