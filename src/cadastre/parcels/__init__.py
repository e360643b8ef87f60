"""Parcel records, duplicate resolution and the session parcel store."""

from cadastre.parcels.models import LatLng, ParcelGeometry, ParcelRecord
from cadastre.parcels.resolver import completeness_score, resolve
from cadastre.parcels.store import ParcelStore

__all__ = [
    "LatLng",
    "ParcelGeometry",
    "ParcelRecord",
    "ParcelStore",
    "completeness_score",
    "resolve",
]
