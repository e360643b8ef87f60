"""FastAPI router for parcel listing, search and selection."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from cadastre.parcels.display import describe
from cadastre.parcels.models import ParcelRecord
from cadastre.parcels.store import ParcelStore

router = APIRouter()


class SelectRequest(BaseModel):
    """Identifiers of the feature the user clicked."""

    primary_id: str | None = None
    secondary_id: str | None = None


def _get_parcel_store(request: Request) -> ParcelStore:
    store = getattr(request.app.state, "parcel_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Parcel store not available")
    return store


def _record_payload(record: ParcelRecord) -> dict[str, Any]:
    return record.model_dump(mode="json")


@router.get("/api/parcels")
async def list_parcels(
    request: Request,
    q: str = "",
    address: str = "",
    owned_only: bool | None = None,
) -> dict[str, Any]:
    """Search parcels by name/identifier and locality."""
    store = _get_parcel_store(request)
    if owned_only is None:
        owned_only = request.app.state.settings.parcels.owned_only
    results = store.search(query=q, address_query=address, owned_only=owned_only)
    return {
        "name": store.name,
        "last_modified": store.last_modified.isoformat() if store.last_modified else None,
        "total": len(store),
        "count": len(results),
        "parcels": [_record_payload(r) for r in results],
    }


@router.get("/api/parcels/resolve")
async def resolve_parcel(
    request: Request,
    id_tanah: str | None = None,
    kode_bd: str | None = None,
) -> dict[str, Any]:
    """Return the most complete record for a land id / parcel code pair."""
    store = _get_parcel_store(request)
    record = store.resolve(id_tanah, kode_bd)
    if record is None:
        raise HTTPException(
            status_code=404,
            detail=f"No parcel matches id_tanah={id_tanah!r}, kode_bd={kode_bd!r}",
        )
    return _record_payload(record)


@router.post("/api/parcels/select")
async def select_parcel(body: SelectRequest, request: Request) -> dict[str, Any]:
    """Resolve a clicked feature to the record shown in the detail panel.

    Only identifiers are posted, so there is no clicked record to fall back
    to; an unmatched selection is a 404.
    """
    store = _get_parcel_store(request)
    record = store.select_by_ids(body.primary_id, body.secondary_id)
    if record is None:
        raise HTTPException(status_code=404, detail="No parcel matches the selection")
    return {
        "record": _record_payload(record),
        "detail": describe(record).model_dump(),
    }


@router.get("/api/parcels/duplicates")
async def list_duplicates(request: Request) -> list[dict[str, Any]]:
    """List parcel codes carried by more than one record."""
    store = _get_parcel_store(request)
    groups = []
    for primary_id, records in store.duplicates().items():
        best = store.resolve(None, primary_id)
        groups.append({
            "primary_id": primary_id,
            "count": len(records),
            "resolved": _record_payload(best) if best is not None else None,
        })
    return groups
