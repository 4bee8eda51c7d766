"""Rehab Rotation - 재활 운동 로테이션 엔진

사용 빈도: 매일 (휴식일 루틴)
저장소: 운동별 마지막 수행 시각 (JSON)

주요 기능:
- 키워드 기반 우선순위 분류 (1: 필수 / 2: 일반 / 3: 보조)
- 최근 수행 기반 로테이션 선택 (우선순위 1 보장)
- 강조 부위 최소 슬롯 보장 (부족 시 백필)
- 휴식일 루틴 구성 (중복 제거, 시간 계산, 외부 프로그램 항목)
"""

__version__ = "1.0.0"
