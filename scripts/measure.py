#!/usr/bin/env python3
"""CLI script to measure a distance or area from a list of coordinates.

Usage:
    python scripts/measure.py distance 0,0 0,0.01
    python scripts/measure.py area -7.34,112.67 -7.34,112.68 -7.35,112.68
"""

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
from cadastre.core.types import MeasureMode  # noqa: E402
from cadastre.measurement.engine import MeasurementEngine  # noqa: E402


def _coordinate(text: str) -> tuple[float, float]:
    try:
        lat, lng = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'lat,lng', got {text!r}")
    return lat, lng


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Measure the path length or enclosed area of map coordinates."
    )
    parser.add_argument(
        "mode",
        choices=[MeasureMode.DISTANCE.value, MeasureMode.AREA.value],
        help="What to measure.",
    )
    parser.add_argument(
        "points",
        nargs="+",
        type=_coordinate,
        help="Coordinates as 'lat,lng', in click order.",
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print the running result after every point.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    engine = MeasurementEngine(config=settings.measurement)
    engine.set_mode(args.mode)
    for index, point in enumerate(args.points, start=1):
        result = engine.add_point(point)
        if args.steps:
            print(f"{index:>3}  {point[0]:.6f},{point[1]:.6f}  {result or '-'}")

    if engine.last_result is None:
        needed = 2 if args.mode == MeasureMode.DISTANCE else 3
        print(f"ERROR: {args.mode} needs at least {needed} points")
        sys.exit(1)
    print(engine.last_result)


if __name__ == "__main__":
    main()
