"""Distance and area primitives on a spherical earth."""

from __future__ import annotations

import math
from collections.abc import Sequence

from cadastre.parcels.models import LatLng

MEAN_EARTH_RADIUS_M = 6_371_000.0
EQUATORIAL_EARTH_RADIUS_M = 6_378_137.0


def haversine_distance(a: LatLng, b: LatLng, radius: float = MEAN_EARTH_RADIUS_M) -> float:
    """Great-circle distance between two coordinates in meters."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    delta_phi = math.radians(b.lat - a.lat)
    delta_lambda = math.radians(b.lng - a.lng)

    h = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    # Rounding can push h marginally outside [0, 1] for antipodal points.
    h = min(1.0, max(0.0, h))
    return radius * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def path_length(points: Sequence[LatLng], radius: float = MEAN_EARTH_RADIUS_M) -> float:
    """Sum of the segment lengths along *points*, without a closing segment."""
    return sum(
        haversine_distance(points[i], points[i + 1], radius)
        for i in range(len(points) - 1)
    )


def ring_area(points: Sequence[LatLng], radius: float = EQUATORIAL_EARTH_RADIUS_M) -> float:
    """Area in square meters of the ring formed by *points*.

    The ring is closed implicitly. Winding order is not significant and
    self-intersecting rings are measured as given. Fewer than three points
    enclose nothing.
    """
    n = len(points)
    if n < 3:
        return 0.0

    total = 0.0
    for i in range(n):
        lower = points[i]
        middle = points[(i + 1) % n]
        upper = points[(i + 2) % n]
        total += (math.radians(upper.lng) - math.radians(lower.lng)) * math.sin(math.radians(middle.lat))

    return abs(total * radius * radius / 2.0)
