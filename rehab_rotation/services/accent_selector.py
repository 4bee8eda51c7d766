"""강조 부위 선택 서비스

외부 신호(통증 보고 등)로 지정된 부위에 최소 슬롯을 보장한다.
보장 슬롯은 모든 강조 부위가 공유하며 부위별로 나누지 않는다.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from langsmith import traceable

from rehab_rotation.models.candidate import ExerciseCandidate
from rehab_rotation.services.rotation_selector import RotationSelector
from rehab_rotation.config import settings

logger = logging.getLogger(__name__)


class AccentAwareSelector:
    """강조 부위 보장 선택"""

    def __init__(
        self,
        rotation_selector: Optional[RotationSelector] = None,
        guaranteed_slots: Optional[int] = None,
    ):
        """
        Args:
            rotation_selector: 풀별 선택에 사용할 로테이션 선택기
            guaranteed_slots: 강조 부위 보장 슬롯 수 (기본값: 설정에서 로드)
        """
        self.rotation_selector = rotation_selector or RotationSelector()
        self.guaranteed_slots = (
            guaranteed_slots
            if guaranteed_slots is not None
            else settings.accent_guaranteed_slots
        )

    def split_quota(
        self,
        accent_size: int,
        other_size: int,
        max_count: int,
    ) -> Tuple[int, int]:
        """
        강조/일반 풀 슬롯 배분

        - 강조 풀: min(강조 풀 크기, 보장 슬롯, max_count)
        - 일반 풀: 나머지
        - 일반 풀이 부족하면 강조 풀에서 백필

        Returns:
            (강조 풀 선택 수, 일반 풀 선택 수)
        """
        max_count = max(0, max_count)
        accent_take = min(accent_size, self.guaranteed_slots, max_count)
        other_take = max_count - accent_take

        if other_size < other_take:
            shortfall = other_take - other_size
            accent_take = min(accent_size, accent_take + shortfall)
            other_take = other_size

        return accent_take, other_take

    @traceable(name="accent_selection")
    def select_with_accent(
        self,
        pool: Sequence[ExerciseCandidate],
        accent_zones: Iterable[str],
        max_count: int,
    ) -> List[ExerciseCandidate]:
        """
        강조 부위 보장 선택

        Args:
            pool: 후보 목록
            accent_zones: 강조 부위
            max_count: 최대 선택 수

        Returns:
            강조 부위 선택분 + 일반 선택분 (길이 = min(len(pool), max_count))
        """
        zones = set(accent_zones)
        if not zones:
            return self.rotation_selector.select(pool, max_count)

        if len(pool) <= max(0, max_count):
            return list(pool)

        accent_pool = [c for c in pool if c.target_zone in zones]
        other_pool = [c for c in pool if c.target_zone not in zones]

        accent_take, other_take = self.split_quota(
            len(accent_pool), len(other_pool), max_count
        )
        logger.debug(
            f"강조 부위 {sorted(zones)}: 강조 {accent_take}/{len(accent_pool)}, "
            f"일반 {other_take}/{len(other_pool)}"
        )

        return (
            self.rotation_selector.select(accent_pool, accent_take)
            + self.rotation_selector.select(other_pool, other_take)
        )
