"""Parcel data models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class LatLng(BaseModel):
    """A geographic coordinate as delivered by a map click."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @classmethod
    def parse(cls, value: LatLng | Mapping[str, float] | Sequence[float]) -> LatLng:
        """Coerce a ``LatLng``, a ``{"lat", "lng"}`` mapping or a ``(lat, lng)`` pair."""
        if isinstance(value, LatLng):
            return value
        if isinstance(value, Mapping):
            return cls(lat=value["lat"], lng=value["lng"])
        lat, lng = value
        return cls(lat=lat, lng=lng)


class ParcelGeometry(BaseModel):
    """Polygon or multi-polygon footprint in GeoJSON ``[lng, lat]`` order."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Polygon", "MultiPolygon"]
    coordinates: list[Any] = Field(default_factory=list)

    def polygons(self) -> list[list[list[list[float]]]]:
        """Return the coordinates with multi-polygon nesting."""
        if self.type == "Polygon":
            return [self.coordinates]
        return self.coordinates

    def bbox(self) -> tuple[float, float, float, float] | None:
        """Return ``(min_lng, min_lat, max_lng, max_lat)``, or None when empty."""
        lngs: list[float] = []
        lats: list[float] = []
        for polygon in self.polygons():
            for ring in polygon:
                for position in ring:
                    lngs.append(position[0])
                    lats.append(position[1])
        if not lngs:
            return None
        return (min(lngs), min(lats), max(lngs), max(lats))


class ParcelRecord(BaseModel):
    """A single land parcel.

    Attribute names from the cadastral export (``KODEBD``, ``IDTANAH``,
    ``NAMAMIL`` ...) are accepted as aliases so features can be validated
    straight from the GeoJSON properties.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    record_id: int | None = Field(default=None, alias="Id")
    primary_id: str | None = Field(default=None, alias="KODEBD")
    secondary_id: str | None = Field(default=None, alias="IDTANAH")

    owner_name: str | None = Field(default=None, alias="NAMAMIL")
    former_owner_name: str | None = Field(default=None, alias="NAMAEKS")
    surveyed_area: float | None = Field(default=None, alias="LUASGIS")

    right_type: str | None = Field(default=None, alias="JENISHAK")
    village: str | None = Field(default=None, alias="DESAKEL")
    district: str | None = Field(default=None, alias="KECAMTN")
    regency: str | None = Field(default=None, alias="KABKOTA")
    province: str | None = Field(default=None, alias="PROVINS")
    deed_document: str | None = Field(default=None, alias="BERKDOK")
    drawing_document: str | None = Field(default=None, alias="BERKGBR")
    tax_document: str | None = Field(default=None, alias="BERKPJK")
    history: str | None = Field(default=None, alias="HISTORI")
    market_price: float | None = Field(default=None, alias="HARGAMT")
    purchase_price: float | None = Field(default=None, alias="HARGABL")
    remark: str | None = Field(default=None, alias="REMARK")
    documented_area: float | None = Field(default=None, alias="LUASDOK")

    geometry: ParcelGeometry | None = None

    @classmethod
    def from_feature(cls, feature: Mapping[str, Any]) -> ParcelRecord:
        """Build a record from a GeoJSON Feature mapping."""
        properties = dict(feature.get("properties") or {})
        properties["geometry"] = feature.get("geometry")
        return cls.model_validate(properties)

    def address(self, include_province: bool = True) -> str:
        parts = [self.village, self.district, self.regency]
        if include_province:
            parts.append(self.province)
        return ", ".join(part for part in parts if part)
