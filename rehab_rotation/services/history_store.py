"""운동 이력 저장소

운동 이름 → 마지막 수행 시각 (epoch ms)
읽기/쓰기 모두 best-effort: 실패해도 예외를 던지지 않음
"""

from typing import Dict, Iterable, Optional, Protocol
import json
import logging
import os
from pathlib import Path

from rehab_rotation.models.history import HistoryReadResult
from rehab_rotation.config import settings

logger = logging.getLogger(__name__)


class HistoryStore(Protocol):
    """이력 저장소 인터페이스 (선택기/조립기에 주입)"""

    def load(self) -> HistoryReadResult:
        ...

    def read(self) -> Dict[str, int]:
        ...

    def record(self, names: Iterable[str], now: int) -> None:
        ...


class InMemoryHistoryStore:
    """메모리 이력 저장소 (테스트/임시 세션용)"""

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._entries: Dict[str, int] = dict(initial or {})

    def load(self) -> HistoryReadResult:
        if not self._entries:
            return HistoryReadResult(status="missing")
        return HistoryReadResult(status="ok", entries=dict(self._entries))

    def read(self) -> Dict[str, int]:
        return self.load().entries

    def record(self, names: Iterable[str], now: int) -> None:
        for name in names:
            self._entries[name] = now


class JsonFileHistoryStore:
    """JSON 파일 이력 저장소

    재시작 후에도 유지되는 영구 저장소.
    파일이 없거나 손상되면 빈 이력으로 처리하고, 저장 실패는 무시한다.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: 이력 JSON 파일 경로 (기본값: 설정에서 로드)
        """
        self.path = Path(path) if path else settings.history_file

    def load(self) -> HistoryReadResult:
        """
        이력 조회 (상태 포함)

        Returns:
            HistoryReadResult (missing / corrupt / ok)
        """
        try:
            if not self.path.exists():
                return HistoryReadResult(status="missing")

            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                raise ValueError(f"JSON 객체가 아님: {type(raw).__name__}")
            entries = {str(name): int(ts) for name, ts in raw.items()}
        except (OSError, ValueError, TypeError, OverflowError, RecursionError) as e:
            # 무한대 타임스탬프(OverflowError), 과도한 중첩(RecursionError)도 손상으로 처리
            logger.warning(f"운동 이력 읽기 실패 ({self.path}): {e}. 빈 이력으로 진행")
            return HistoryReadResult(status="corrupt", error=str(e))

        return HistoryReadResult(status="ok", entries=entries)

    def read(self) -> Dict[str, int]:
        """이력 조회 (실패 시 빈 dict)"""
        return self.load().entries

    def record(self, names: Iterable[str], now: int) -> None:
        """
        완료 운동 기록 (기존 값 덮어쓰기)

        Args:
            names: 완료한 운동 이름
            now: 완료 시각 (epoch ms)
        """
        history = self.read()
        for name in names:
            history[name] = now

        temp_file = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(history, f, ensure_ascii=False, indent=2)
            os.replace(temp_file, self.path)
            logger.debug(f"운동 이력 저장: {len(history)}개 ({self.path})")
        except OSError as e:
            logger.warning(f"운동 이력 저장 실패 ({self.path}): {e}")
