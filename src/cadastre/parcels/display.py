"""Detail view formatting for parcels (Indonesian number grouping)."""

from __future__ import annotations

from pydantic import BaseModel

from cadastre.parcels.models import ParcelRecord

PLACEHOLDER = "-"


def _group(value: float, decimals: int) -> str:
    """Format *value* with ``.`` thousands and ``,`` decimal separators."""
    text = f"{value:,.{decimals}f}"
    if decimals:
        text = text.rstrip("0").rstrip(".")
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_area(value: float | None, decimals: int = 2) -> str:
    if not value:
        return PLACEHOLDER
    return f"{_group(value, decimals)} m²"


def format_currency(value: float | None) -> str:
    if not value:
        return PLACEHOLDER
    return f"Rp {_group(value, 0)}"


class ParcelDetail(BaseModel):
    """Display-ready view of a parcel record."""

    id_tanah: str
    kode_bidang: str
    owner: str
    former_owner: str
    right_type: str
    address: str
    documented_area: str
    surveyed_area: str
    market_price: str
    purchase_price: str
    remark: str
    history: str


def describe(record: ParcelRecord) -> ParcelDetail:
    return ParcelDetail(
        id_tanah=record.secondary_id or PLACEHOLDER,
        kode_bidang=record.primary_id or PLACEHOLDER,
        owner=record.owner_name or PLACEHOLDER,
        former_owner=record.former_owner_name or PLACEHOLDER,
        right_type=record.right_type or PLACEHOLDER,
        address=record.address() or PLACEHOLDER,
        documented_area=format_area(record.documented_area),
        surveyed_area=format_area(record.surveyed_area),
        market_price=format_currency(record.market_price),
        purchase_price=format_currency(record.purchase_price),
        remark=record.remark or PLACEHOLDER,
        history=record.history or PLACEHOLDER,
    )
