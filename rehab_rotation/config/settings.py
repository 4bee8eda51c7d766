"""Rehab Rotation 설정

환경 변수:
- MAX_EXERCISES: 루틴당 최대 재활 운동 수 (기본값: 5)
- ACCENT_GUARANTEED_SLOTS: 강조 부위 보장 슬롯 수 (기본값: 4)
- HISTORY_FILE: 운동 이력 JSON 파일 경로
- LOG_LEVEL: 로그 레벨 (기본값: INFO)
"""

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field

PROJECT_ROOT = Path(__file__).parent.parent.parent


class RehabRotationSettings(BaseSettings):
    """재활 로테이션 설정"""

    # 선택 설정
    max_exercises: int = Field(default=5, ge=0, description="루틴당 최대 재활 운동 수")
    accent_guaranteed_slots: int = Field(
        default=4,
        ge=0,
        description="강조 부위 보장 슬롯 수 (모든 강조 부위 합산)"
    )

    # 데이터 경로
    data_dir: Path = Field(
        default=PROJECT_ROOT / "data",
        description="데이터 디렉토리"
    )
    catalog_file: str = Field(
        default="rehab/protocols.json",
        description="재활 프로토콜 카탈로그 (data_dir 기준 상대 경로)"
    )
    history_file: Path = Field(
        default=PROJECT_ROOT / "data" / "state" / "rehab_exercise_history.json",
        description="운동 이력 저장 파일"
    )

    # 외부 프로그램 항목
    external_item_name: str = Field(
        default="Stretching (programme externe)",
        description="루틴 마지막에 붙는 외부 프로그램 항목 이름"
    )
    external_item_duration: str = Field(
        default="10 min",
        description="외부 프로그램 항목 시간"
    )

    # 로깅
    log_level: str = Field(default="INFO", description="로그 레벨")

    # 서버 설정
    host: str = Field(default="0.0.0.0", description="호스트")
    port: int = Field(default=8000, description="포트")

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"

    @property
    def catalog_path(self) -> Path:
        """카탈로그 전체 경로"""
        return self.data_dir / self.catalog_file


settings = RehabRotationSettings()
