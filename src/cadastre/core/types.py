"""Core type definitions shared across all cadastre modules."""

from __future__ import annotations

from enum import StrEnum


class MeasureMode(StrEnum):
    """Active measurement tool. ``NONE`` means no measurement is running."""

    NONE = "none"
    DISTANCE = "distance"
    AREA = "area"
