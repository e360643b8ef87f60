#!/usr/bin/env python3
"""CLI script to summarise a parcel GeoJSON file and its duplicate records."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from cadastre.core.config import Settings  # noqa: E402
from cadastre.parcels.resolver import completeness_score  # noqa: E402
from cadastre.parcels.store import ParcelStore  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report parcel counts and how duplicate parcel codes resolve."
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Path to the parcel GeoJSON file (defaults to CADASTRE_PARCELS_DATA_PATH).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=20,
        help="Maximum number of duplicate groups to print.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    data_path = args.data or settings.parcels.data_path
    try:
        store = ParcelStore.from_geojson(data_path)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: cannot load parcels: {exc}")
        sys.exit(1)

    owned = store.search(owned_only=True)
    print(f"Collection:    {store.name or '-'}")
    if store.last_modified:
        print(f"Last modified: {store.last_modified:%Y-%m-%d}")
    print(f"Parcels:       {len(store)} ({len(owned)} with owner name)")
    print(f"Bounds:        {store.bounds()}")

    duplicates = store.duplicates()
    print(f"Duplicate parcel codes: {len(duplicates)}")
    for primary_id, records in list(duplicates.items())[: args.limit]:
        best = store.resolve(None, primary_id)
        scores = ", ".join(str(completeness_score(r)) for r in records)
        winner = records.index(best) if best is not None else "-"
        print(f"  {primary_id}: {len(records)} records, scores [{scores}], using #{winner}")


if __name__ == "__main__":
    main()
