"""휴식일 재활 루틴 조립 서비스

활성 질환 → 프로토콜 매칭 → 후보 풀 (중복 제거) → 로테이션 선택
→ 시간 계산 → 외부 프로그램 항목 추가
"""

from typing import Iterable, List, Optional, Sequence
import logging
import re

from langsmith import traceable

from shared.models import zones_for_variant
from shared.utils import now_ms
from rehab_rotation.models.candidate import ExerciseCandidate, ProtocolExercise
from rehab_rotation.models.catalog import RehabExercise
from rehab_rotation.models.input import HealthCondition
from rehab_rotation.models.output import Routine, RoutineItem
from rehab_rotation.services.accent_selector import AccentAwareSelector
from rehab_rotation.services.history_store import HistoryStore, JsonFileHistoryStore
from rehab_rotation.services.protocol_catalog import ProtocolCatalog
from rehab_rotation.services.rotation_selector import RotationSelector
from rehab_rotation.config import settings

logger = logging.getLogger(__name__)

DEFAULT_DURATION = "1 min"

# "30 sec", "45s", "2 min", "1 minute" 등
_SECONDS_RE = re.compile(r"(\d+(?:[.,]\d+)?)\s*(?:s|sec|secs|secondes?|seconds?)\b", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+(?:[.,]\d+)?)\s*(?:min|mins|minutes?)\b", re.IGNORECASE)


def has_time_unit(reps: object) -> bool:
    """반복 지정이 시간 문자열인지 여부"""
    if not isinstance(reps, str):
        return False
    return bool(_SECONDS_RE.search(reps) or _MINUTES_RE.search(reps))


def estimate_duration(exercise: RehabExercise) -> str:
    """세트당 시간 (시간 문자열이면 그대로, 아니면 1분)"""
    if has_time_unit(exercise.reps):
        return exercise.reps
    return DEFAULT_DURATION


def parse_duration_minutes(duration: str) -> float:
    """
    시간 문자열 → 분

    범위("30-45 sec")는 첫 숫자 사용
    - 분 단위가 있으면 분으로 해석
    - 초 단위만 있으면 초 / 60
    - 단위가 없으면 숫자를 분으로 해석 (숫자도 없으면 1분)
    """
    match = re.search(r"(\d+(?:[.,]\d+)?)", duration)
    if match is None:
        return 1.0
    value = float(match.group(1).replace(",", "."))

    if _MINUTES_RE.search(duration):
        return value
    if _SECONDS_RE.search(duration):
        return value / 60
    return value


class RoutineAssembler:
    """휴식일 재활 루틴 조립"""

    def __init__(
        self,
        catalog: Optional[ProtocolCatalog] = None,
        history_store: Optional[HistoryStore] = None,
        rotation_selector: Optional[RotationSelector] = None,
        accent_selector: Optional[AccentAwareSelector] = None,
        max_exercises: Optional[int] = None,
    ):
        """
        Args:
            catalog: 프로토콜 카탈로그
            history_store: 운동 이력 저장소 (기본값: JSON 파일)
            rotation_selector: 로테이션 선택기
            accent_selector: 강조 부위 선택기 (rotation_selector를 감쌈)
            max_exercises: 루틴당 최대 재활 운동 수 (기본값: 설정에서 로드)
        """
        self.catalog = catalog or ProtocolCatalog()
        self.history_store = history_store or JsonFileHistoryStore()
        self.rotation_selector = rotation_selector or RotationSelector()
        self.accent_selector = accent_selector or AccentAwareSelector(self.rotation_selector)
        self.max_exercises = (
            max_exercises if max_exercises is not None else settings.max_exercises
        )

    def filter_conditions(
        self,
        conditions: Sequence[HealthCondition],
        variant: str,
    ) -> List[HealthCondition]:
        """활성 질환 + 루틴 변형 필터"""
        allowed = zones_for_variant(variant)
        return [c for c in conditions if c.is_active and c.body_zone in allowed]

    def build_pool(self, conditions: Sequence[HealthCondition]) -> List[ProtocolExercise]:
        """
        후보 풀 구성

        질환 입력 순서대로 프로토콜을 매칭하고 운동 이름으로 중복 제거
        (먼저 나온 것이 유지됨). 매칭 프로토콜이 없는 질환은 건너뜀.
        """
        pool: List[ProtocolExercise] = []
        seen_names = set()

        for condition in conditions:
            protocol = self.catalog.find_for_condition(condition.body_zone, condition.diagnosis)
            if protocol is None:
                logger.debug(f"프로토콜 없음: {condition.body_zone} / '{condition.diagnosis}' → 건너뜀")
                continue

            for exercise in protocol.exercises:
                if exercise.name in seen_names:
                    continue
                seen_names.add(exercise.name)
                pool.append(
                    ProtocolExercise(
                        exercise=exercise,
                        protocol_name=protocol.condition_label,
                        target_zone=protocol.target_zone,
                    )
                )

        return pool

    def select(
        self,
        candidates: Sequence[ExerciseCandidate],
        accent_zones: Sequence[str],
    ) -> List[ExerciseCandidate]:
        """강조 부위 유무에 따라 선택기 호출"""
        if accent_zones:
            return self.accent_selector.select_with_accent(
                candidates, accent_zones, self.max_exercises
            )
        return self.rotation_selector.select(candidates, self.max_exercises)

    @traceable(name="rehab_routine_generation")
    def generate_routine(
        self,
        conditions: Sequence[HealthCondition],
        variant: str = "all",
        accent_zones: Sequence[str] = (),
    ) -> Routine:
        """
        휴식일 루틴 생성

        Args:
            conditions: 사용자 질환 목록
            variant: all / upper / lower
            accent_zones: 강조 부위

        Returns:
            Routine (재활 운동 + 외부 프로그램 항목)
        """
        retained = self.filter_conditions(conditions, variant)
        pool = self.build_pool(retained)

        selected: List[ExerciseCandidate] = []
        if pool:
            history = self.history_store.read()
            candidates = self.rotation_selector.enrich(pool, history)
            selected = self.select(candidates, list(accent_zones))

        items = [self._to_item(c) for c in selected]
        total_minutes = sum(parse_duration_minutes(item.duration) * item.sets for item in items)

        items.append(self._external_item())

        logger.info(
            f"휴식일 루틴 생성: 질환 {len(retained)}개, 후보 {len(pool)}개, "
            f"선택 {len(selected)}개, {round(total_minutes)}분 (variant={variant})"
        )

        return Routine(items=items, total_minutes=round(total_minutes), variant=variant)

    @traceable(name="rehab_history_record")
    def record_completed(self, names: Iterable[str], now: Optional[int] = None) -> List[str]:
        """
        완료 운동 기록

        Args:
            names: 완료한 운동 이름
            now: 완료 시각 (epoch ms, 기본값: 현재 시각)

        Returns:
            기록한 운동 이름 (중복 제거, 입력 순서)
        """
        unique_names = list(dict.fromkeys(names))
        self.history_store.record(unique_names, now if now is not None else now_ms())
        return unique_names

    def _to_item(self, candidate: ExerciseCandidate) -> RoutineItem:
        exercise = candidate.exercise
        return RoutineItem(
            name=exercise.name,
            sets=exercise.sets,
            reps=str(exercise.reps),
            duration=estimate_duration(exercise),
            intensity=exercise.intensity,
            notes=exercise.notes,
            is_external=False,
            protocol_name=candidate.protocol_name,
            target_zone=candidate.target_zone,
        )

    def _external_item(self) -> RoutineItem:
        return RoutineItem(
            name=settings.external_item_name,
            sets=1,
            reps=settings.external_item_duration,
            duration=settings.external_item_duration,
            intensity="very_light",
            notes="Vidéos d'étirement personnelles (programme externe)",
            is_external=True,
        )
