"""Shared models"""

from .body_zone import (
    ALL_ZONES,
    BodyZone,
    RoutineVariant,
    UPPER_ZONES,
    LOWER_ZONES,
    zones_for_variant,
)

__all__ = [
    "ALL_ZONES",
    "BodyZone",
    "RoutineVariant",
    "UPPER_ZONES",
    "LOWER_ZONES",
    "zones_for_variant",
]
