"""선택 후보 모델"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import BodyZone
from rehab_rotation.models.catalog import RehabExercise

PriorityTier = Literal[1, 2, 3]


class ProtocolExercise(BaseModel):
    """프로토콜 출처가 붙은 운동 (우선순위/이력 부여 전)"""

    model_config = ConfigDict(frozen=True)

    exercise: RehabExercise
    protocol_name: str = Field(..., description="출처 프로토콜 질환명")
    target_zone: BodyZone = Field(..., description="출처 프로토콜 부위")


class ExerciseCandidate(BaseModel):
    """선택 후보 운동

    한 번의 선택 호출 동안 불변
    """

    model_config = ConfigDict(frozen=True)

    exercise: RehabExercise
    protocol_name: str = Field(..., description="출처 프로토콜 질환명")
    target_zone: BodyZone = Field(..., description="부위")
    priority: PriorityTier = Field(
        ..., description="우선순위 (1: 필수, 2: 일반, 3: 보조)"
    )
    last_used_at: Optional[int] = Field(
        default=None, description="마지막 수행 시각 (epoch ms, 없으면 None)"
    )

    @property
    def exercise_name(self) -> str:
        """운동 이름 (고유 키)"""
        return self.exercise.name

    @property
    def rotation_key(self) -> tuple:
        """로테이션 정렬 키 (오래된 것 먼저, 같으면 우선순위 높은 것 먼저)"""
        return (self.last_used_at or 0, self.priority)
