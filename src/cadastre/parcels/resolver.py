"""Best-record resolution over duplicate parcel records.

Merged cadastral imports often carry several features for the same parcel,
only some of which have the ownership attributes filled in. When a parcel is
selected, the viewer shows the most complete record sharing its identifier
instead of the raw feature that was clicked.

Match order: the caller's coarse code (``kode_bd``) is compared against the
records' ``primary_id`` first; only when that yields nothing is the caller's
land id (``id_tanah``) compared against ``secondary_id``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cadastre.parcels.models import ParcelRecord

logger = logging.getLogger(__name__)

FORMER_OWNER_WEIGHT = 4
OWNER_WEIGHT = 2
SURVEYED_AREA_WEIGHT = 1


def completeness_score(record: ParcelRecord) -> int:
    """Weighted count of the populated ownership attributes of *record*."""
    score = 0
    if record.former_owner_name:
        score += FORMER_OWNER_WEIGHT
    if record.owner_name:
        score += OWNER_WEIGHT
    if record.surveyed_area:
        score += SURVEYED_AREA_WEIGHT
    return score


def resolve(
    records: Sequence[ParcelRecord],
    primary_id: str | None,
    secondary_id: str | None,
) -> ParcelRecord | None:
    """Return the most complete record matching the given identifiers.

    Args:
        records: The full parcel set, in source order.
        primary_id: Land id (``IDTANAH``) of the selected parcel, matched
            against ``ParcelRecord.secondary_id`` as a fallback.
        secondary_id: Parcel code (``KODEBD``) of the selected parcel,
            matched against ``ParcelRecord.primary_id`` first.

    Returns:
        The best candidate, or None when nothing matches. Among several
        candidates the highest completeness score wins; equal scores keep
        the candidate that comes first in *records*.
    """
    if not records:
        return None

    candidates: list[ParcelRecord] = []
    if secondary_id:
        candidates = [r for r in records if r.primary_id == secondary_id]

    if not candidates and primary_id:
        candidates = [r for r in records if r.secondary_id == primary_id]

    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    best = candidates[0]
    best_score = completeness_score(best)
    for candidate in candidates[1:]:
        score = completeness_score(candidate)
        if score > best_score:
            best, best_score = candidate, score

    logger.debug(
        "Resolved %d duplicate records for (%r, %r) with score %d",
        len(candidates), primary_id, secondary_id, best_score,
    )
    return best
