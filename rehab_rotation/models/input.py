"""재활 루틴 입력 모델

질환 데이터 - 외부 질환 저장소에서 전달받음
"""

from typing import List
from pydantic import BaseModel, Field

from shared.models import BodyZone, RoutineVariant


class HealthCondition(BaseModel):
    """사용자 질환 (외부 질환 저장소)"""

    body_zone: BodyZone = Field(..., description="부위")
    label: str = Field(default="", description="사용자 표시명 (예: 'Golf elbow')")
    diagnosis: str = Field(
        default="",
        description="진단명 - 프로토콜 condition_label과 정확히 일치하면 우선 매칭"
    )
    is_active: bool = Field(default=True, description="활성 여부")


class RoutineRequest(BaseModel):
    """휴식일 루틴 요청

    API 엔드포인트: POST /api/v1/rehab-routine

    예시:
    {
        "conditions": [
            {"body_zone": "knee_right", "diagnosis": "Tendinopathie rotulienne", "is_active": true}
        ],
        "variant": "lower",
        "accent_zones": ["knee_right"]
    }
    """

    conditions: List[HealthCondition] = Field(default_factory=list, description="질환 목록")
    variant: RoutineVariant = Field(default="all", description="루틴 변형 (all/upper/lower)")
    accent_zones: List[BodyZone] = Field(
        default_factory=list,
        description="강조 부위 (최근 통증 보고 등 외부 신호)"
    )


class CompletionRequest(BaseModel):
    """운동 완료 기록 요청

    API 엔드포인트: POST /api/v1/rehab-routine/complete
    """

    exercise_names: List[str] = Field(..., description="완료한 운동 이름 목록")
