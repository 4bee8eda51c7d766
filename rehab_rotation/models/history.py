"""운동 이력 조회 결과 모델"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field


class HistoryReadResult(BaseModel):
    """이력 조회 결과

    케이스:
    1. ok: 정상 조회
    2. missing: 저장된 이력 없음 (최초 사용)
    3. corrupt: 저장소 읽기 실패 또는 손상 (빈 이력으로 진행)
    """

    status: Literal["ok", "missing", "corrupt"] = Field(..., description="조회 상태")
    entries: Dict[str, int] = Field(
        default_factory=dict, description="운동 이름 → 마지막 수행 시각 (epoch ms)"
    )
    error: Optional[str] = Field(default=None, description="실패 사유 (status=corrupt일 때)")

    @property
    def is_available(self) -> bool:
        """이력 사용 가능 여부"""
        return self.status == "ok"
