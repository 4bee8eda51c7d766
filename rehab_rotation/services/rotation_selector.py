"""재활 운동 로테이션 선택 서비스

최근에 하지 않은 운동을 먼저 선택해서 풀 전체를 순환시키되,
우선순위 1 운동은 항상 최소 1개 포함시킨다.
"""

from typing import Callable, Dict, List, Optional, Sequence
import logging

from langsmith import traceable

from rehab_rotation.models.candidate import ExerciseCandidate, PriorityTier, ProtocolExercise
from rehab_rotation.models.catalog import RehabExercise
from rehab_rotation.services.priority_classifier import classify_exercise

logger = logging.getLogger(__name__)


class RotationSelector:
    """로테이션 기반 운동 선택"""

    def __init__(
        self,
        classifier: Optional[Callable[[RehabExercise], PriorityTier]] = None,
    ):
        """
        Args:
            classifier: 우선순위 분류 함수 (기본값: 키워드 분류)
        """
        self._classify = classifier or classify_exercise

    def enrich(
        self,
        entries: Sequence[ProtocolExercise],
        history: Dict[str, int],
    ) -> List[ExerciseCandidate]:
        """
        우선순위와 마지막 수행 시각 부여

        Args:
            entries: 프로토콜 출처가 붙은 운동 목록
            history: 운동 이름 → 마지막 수행 시각 (epoch ms)

        Returns:
            후보 목록 (입력 순서 유지)
        """
        return [
            ExerciseCandidate(
                exercise=entry.exercise,
                protocol_name=entry.protocol_name,
                target_zone=entry.target_zone,
                priority=self._classify(entry.exercise),
                last_used_at=history.get(entry.exercise.name),
            )
            for entry in entries
        ]

    @traceable(name="rotation_selection")
    def select(
        self,
        pool: Sequence[ExerciseCandidate],
        max_count: int,
    ) -> List[ExerciseCandidate]:
        """
        로테이션 선택

        알고리즘:
        1. 풀 크기 <= max_count → 입력 순서 그대로 반환
        2. (마지막 수행 시각, 우선순위) 오름차순 안정 정렬 (수행 기록 없음 = 0)
        3. 앞에서 max_count개 선택
        4. 우선순위 1이 없으면 나머지에서 첫 우선순위 1 운동으로 마지막 슬롯 교체

        Args:
            pool: 후보 목록
            max_count: 최대 선택 수

        Returns:
            선택된 후보 (길이 = min(len(pool), max_count))
        """
        max_count = max(0, max_count)

        if len(pool) <= max_count:
            return list(pool)

        # sorted()는 안정 정렬 - 같은 키는 입력 순서 유지
        ordered = sorted(pool, key=lambda c: c.rotation_key)
        selected = ordered[:max_count]

        if selected and not any(c.priority == 1 for c in selected):
            fallback = next((c for c in ordered[max_count:] if c.priority == 1), None)
            if fallback is not None:
                logger.debug(
                    f"우선순위 1 보장: '{selected[-1].exercise_name}' → '{fallback.exercise_name}'"
                )
                selected[-1] = fallback

        return selected
