"""In-memory parcel store loaded once from a GeoJSON FeatureCollection."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from cadastre.core.config import ParcelDataConfig
from cadastre.parcels.models import ParcelRecord
from cadastre.parcels.resolver import resolve

logger = logging.getLogger(__name__)


class ParcelStore:
    """Read-only parcel set for one viewer session.

    Records keep their source order; resolution tie-breaks depend on it.
    """

    def __init__(
        self,
        records: Iterable[ParcelRecord] = (),
        name: str = "",
        last_modified: datetime | None = None,
    ) -> None:
        self._records: tuple[ParcelRecord, ...] = tuple(records)
        self.name = name
        self.last_modified = last_modified

    @classmethod
    def from_geojson(cls, path: str | Path) -> ParcelStore:
        """Load parcels from a GeoJSON file.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the document is not a FeatureCollection.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)

        if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
            raise ValueError(f"{path} is not a GeoJSON FeatureCollection")

        records: list[ParcelRecord] = []
        for index, feature in enumerate(data.get("features") or []):
            try:
                records.append(ParcelRecord.from_feature(feature))
            except (ValidationError, AttributeError) as exc:
                logger.warning("Skipping malformed feature #%d in %s: %s", index, path, exc)

        last_modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
        logger.info("Loaded %d parcels from %s", len(records), path)
        return cls(records, name=data.get("name") or "", last_modified=last_modified)

    @classmethod
    def from_config(cls, config: ParcelDataConfig) -> ParcelStore:
        return cls.from_geojson(config.data_path)

    @property
    def records(self) -> tuple[ParcelRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def search(
        self,
        query: str = "",
        address_query: str = "",
        owned_only: bool = True,
    ) -> list[ParcelRecord]:
        """Filter parcels by name/identifier and by locality.

        Both queries are case-insensitive substring matches and both must
        match; an empty query matches everything.
        """
        q_name = query.lower()
        q_address = address_query.lower()
        results: list[ParcelRecord] = []
        for record in self._records:
            if owned_only and not record.owner_name:
                continue
            if q_name and not _contains(
                q_name,
                record.owner_name,
                record.former_owner_name,
                record.secondary_id,
                record.primary_id,
            ):
                continue
            if q_address and not _contains(
                q_address, record.village, record.district, record.regency
            ):
                continue
            results.append(record)
        return results

    def resolve(self, primary_id: str | None, secondary_id: str | None) -> ParcelRecord | None:
        return resolve(self._records, primary_id, secondary_id)

    def select_by_ids(self, primary_id: str | None, secondary_id: str | None) -> ParcelRecord | None:
        """Resolve a click given the clicked feature's own identifiers.

        ``primary_id`` is the feature's parcel code and ``secondary_id`` its
        land id; they are handed to the resolver as (land id, parcel code).
        Returns None when no record shares either identifier.
        """
        return resolve(self._records, secondary_id, primary_id)

    def select(self, record: ParcelRecord) -> ParcelRecord:
        """Return the record to display when *record* is clicked."""
        return self.select_by_ids(record.primary_id, record.secondary_id) or record

    def duplicates(self) -> dict[str, list[ParcelRecord]]:
        """Group records sharing a non-empty ``primary_id``."""
        groups: dict[str, list[ParcelRecord]] = {}
        for record in self._records:
            if record.primary_id:
                groups.setdefault(record.primary_id, []).append(record)
        return {key: group for key, group in groups.items() if len(group) > 1}

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Union bounding box ``(min_lng, min_lat, max_lng, max_lat)`` of all parcels."""
        boxes = [r.geometry.bbox() for r in self._records if r.geometry is not None]
        boxes = [b for b in boxes if b is not None]
        if not boxes:
            return None
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )


def _contains(needle: str, *values: str | None) -> bool:
    return any(needle in (value or "").lower() for value in values)
