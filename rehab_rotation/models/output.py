"""휴식일 루틴 출력 모델"""

from typing import List, Optional
from pydantic import BaseModel, Field

from shared.models import BodyZone, RoutineVariant


class RoutineItem(BaseModel):
    """루틴 항목"""

    name: str = Field(..., description="운동 이름")
    sets: int = Field(..., description="세트 수")
    reps: str = Field(..., description="반복/시간")
    duration: str = Field(..., description="세트당 시간 (예: '1 min', '30 sec')")
    intensity: str = Field(default="", description="강도")
    notes: str = Field(default="", description="설명")
    is_external: bool = Field(
        default=False,
        description="외부 프로그램 항목 여부 (재활 풀에서 선택된 것이 아님)"
    )
    protocol_name: Optional[str] = Field(default=None, description="출처 프로토콜")
    target_zone: Optional[BodyZone] = Field(default=None, description="부위")


class Routine(BaseModel):
    """휴식일 루틴

    API 엔드포인트: POST /api/v1/rehab-routine 응답
    """

    items: List[RoutineItem] = Field(default_factory=list, description="루틴 항목 (외부 항목이 마지막)")
    total_minutes: int = Field(..., ge=0, description="재활 운동 총 시간 (분, 외부 항목 제외)")
    variant: RoutineVariant = Field(..., description="루틴 변형")

    @property
    def rehab_items(self) -> List[RoutineItem]:
        """외부 항목을 제외한 재활 운동"""
        return [item for item in self.items if not item.is_external]
