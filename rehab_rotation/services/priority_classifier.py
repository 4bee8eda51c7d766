"""재활 운동 우선순위 분류

운동 이름 + 설명 텍스트 키워드 기반
- 1: 필수 (워밍업, 등척성, 신경 가동술, 코어 안정화)
- 2: 일반 (스트레칭, 근력 - 기본값)
- 3: 보조 (폼롤러, 자가 마사지)
"""

from typing import Tuple

from rehab_rotation.models.candidate import PriorityTier
from rehab_rotation.models.catalog import RehabExercise

# 순서대로 검사 (먼저 매칭된 키워드로 결정)
HIGH_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "warmup",
    "warm-up",
    "nerve floss",
    "nerve glid",
    "isométrique",
    "isometric",
    "mckenzie",
    "dead bug",
    "bird dog",
    "chin tuck",
    "spanish squat",
)

LOW_PRIORITY_KEYWORDS: Tuple[str, ...] = (
    "foam roll",
    "massage",
    "balle",
    "auto-massage",
)


def classify(candidate_text: str) -> PriorityTier:
    """
    텍스트 우선순위 분류

    우선순위 1 검사가 항상 먼저 (양쪽 키워드가 모두 있으면 1)

    Args:
        candidate_text: 소문자화된 "이름 설명" 텍스트

    Returns:
        1 / 2 / 3
    """
    for keyword in HIGH_PRIORITY_KEYWORDS:
        if keyword in candidate_text:
            return 1

    for keyword in LOW_PRIORITY_KEYWORDS:
        if keyword in candidate_text:
            return 3

    return 2


def candidate_text(name: str, notes: str) -> str:
    """분류용 텍스트 구성"""
    return f"{name.lower()} {notes.lower()}"


def classify_exercise(exercise: RehabExercise) -> PriorityTier:
    """카탈로그 운동 우선순위 분류"""
    return classify(candidate_text(exercise.name, exercise.notes))
