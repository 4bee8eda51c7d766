"""Shared module - 재활 로테이션 엔진과 API 서버가 공유하는 모듈"""

from shared.models.body_zone import (
    BodyZone,
    RoutineVariant,
    UPPER_ZONES,
    LOWER_ZONES,
    zones_for_variant,
)

__all__ = [
    "BodyZone",
    "RoutineVariant",
    "UPPER_ZONES",
    "LOWER_ZONES",
    "zones_for_variant",
]
