"""재활 프로토콜 카탈로그 모델

외부 정적 데이터 (data/rehab/protocols.json) - 읽기 전용
"""

from typing import List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

from shared.models import BodyZone


class RehabExercise(BaseModel):
    """프로토콜에 포함된 재활 운동"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="운동 이름 (선택 호출 내 고유 키)")
    sets: int = Field(default=1, ge=0, description="세트 수")
    reps: Union[int, str] = Field(
        default=10,
        description="반복 횟수 (숫자) 또는 시간 문자열 (예: '30 sec', '2 min')"
    )
    intensity: Literal["very_light", "light", "moderate"] = Field(
        default="light", description="강도"
    )
    notes: str = Field(default="", description="운동 설명")
    placement: Literal["warmup", "active_wait", "cooldown", "rest_day"] = Field(
        default="rest_day", description="세션 내 배치"
    )


class RehabProtocol(BaseModel):
    """질환별 재활 프로토콜"""

    model_config = ConfigDict(frozen=True)

    target_zone: BodyZone = Field(..., description="대상 부위")
    condition_label: str = Field(..., description="질환명")
    exercises: List[RehabExercise] = Field(default_factory=list, description="운동 목록")
    frequency: Literal["every_session", "daily", "3x_week"] = Field(
        default="daily", description="권장 빈도"
    )
    priority: int = Field(default=2, ge=1, description="프로토콜 우선순위")
    progression_criteria: str = Field(default="", description="진행 기준")
