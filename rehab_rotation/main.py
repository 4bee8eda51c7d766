"""Rehab Rotation FastAPI 서버

휴식일 재활 루틴 생성 + 완료 기록
포트: 8000 (기본)

사용법:
    python -m rehab_rotation.main
"""

import os
from dotenv import load_dotenv
load_dotenv(override=True)

# LangSmith 프로젝트 분리
os.environ.setdefault("LANGSMITH_PROJECT", "rehab-rotation")

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from shared.utils import get_logger
from rehab_rotation.models import CompletionRequest, Routine, RoutineRequest
from rehab_rotation.services import RoutineAssembler
from rehab_rotation.config import settings

logger = get_logger("rehab_rotation", settings.log_level)

app = FastAPI(
    title="Rehab Rotation",
    description="휴식일 재활 루틴 API (로테이션 + 강조 부위)",
    version="1.0.0",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 조립기 인스턴스 (카탈로그는 첫 요청 시 로드)
assembler = RoutineAssembler()


@app.get("/health")
async def health_check():
    """헬스 체크"""
    return {"status": "healthy", "service": "rehab-rotation"}


@app.post("/api/v1/rehab-routine", response_model=Routine)
async def generate_routine(request: RoutineRequest):
    """
    휴식일 루틴 생성 API

    입력:
    - conditions: 사용자 질환 목록 (활성 질환만 사용)
    - variant: all / upper / lower
    - accent_zones: 강조 부위 (선택)

    출력:
    - Routine (재활 운동 최대 5개 + 외부 프로그램 항목)
    """
    try:
        return assembler.generate_routine(
            request.conditions,
            variant=request.variant,
            accent_zones=request.accent_zones,
        )
    except Exception as e:
        logger.exception("루틴 생성 실패")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/v1/rehab-routine/complete")
async def complete_routine(request: CompletionRequest):
    """운동 완료 기록 (로테이션 이력 갱신)"""
    try:
        recorded = assembler.record_completed(request.exercise_names)
    except Exception as e:
        logger.exception("운동 완료 기록 실패")
        raise HTTPException(status_code=500, detail=str(e))
    return {"recorded": len(recorded)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rehab_rotation.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
