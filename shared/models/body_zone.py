"""신체 부위(존) 모델 (공유)"""

from typing import FrozenSet, Literal, get_args

BodyZone = Literal[
    "neck",
    "shoulder_left",
    "shoulder_right",
    "elbow_left",
    "elbow_right",
    "wrist_left",
    "wrist_right",
    "upper_back",
    "lower_back",
    "hip_left",
    "hip_right",
    "knee_left",
    "knee_right",
    "ankle_left",
    "ankle_right",
    "foot_left",
    "foot_right",
    "other",
]

RoutineVariant = Literal["all", "upper", "lower"]

ALL_ZONES: FrozenSet[str] = frozenset(get_args(BodyZone))

# 상체 루틴 대상 부위
UPPER_ZONES: FrozenSet[str] = frozenset({
    "neck",
    "shoulder_left",
    "shoulder_right",
    "elbow_left",
    "elbow_right",
    "wrist_left",
    "wrist_right",
    "upper_back",
})

# 하체 루틴 대상 부위
LOWER_ZONES: FrozenSet[str] = frozenset({
    "lower_back",
    "hip_left",
    "hip_right",
    "knee_left",
    "knee_right",
    "ankle_left",
    "ankle_right",
    "foot_left",
    "foot_right",
})


def zones_for_variant(variant: str) -> FrozenSet[str]:
    """
    루틴 변형에 해당하는 부위 집합 반환

    Args:
        variant: all / upper / lower

    Returns:
        허용 부위 집합 ("all"은 전체 부위)
    """
    if variant == "upper":
        return UPPER_ZONES
    if variant == "lower":
        return LOWER_ZONES
    return ALL_ZONES
