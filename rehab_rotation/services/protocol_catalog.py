"""재활 프로토콜 카탈로그 서비스"""

from typing import List, Optional
import json
import logging
from pathlib import Path

from rehab_rotation.models.catalog import RehabProtocol
from rehab_rotation.config import settings

logger = logging.getLogger(__name__)


class ProtocolCatalog:
    """프로토콜 카탈로그 (읽기 전용, 최초 1회 로드)"""

    def __init__(
        self,
        protocols: Optional[List[RehabProtocol]] = None,
        path: Optional[Path] = None,
    ):
        """
        Args:
            protocols: 프로토콜 목록 (주어지면 파일을 읽지 않음)
            path: 카탈로그 JSON 경로 (기본값: 설정에서 로드)
        """
        self._protocols: Optional[List[RehabProtocol]] = (
            list(protocols) if protocols is not None else None
        )
        self.path = Path(path) if path else settings.catalog_path

    @property
    def protocols(self) -> List[RehabProtocol]:
        """프로토콜 목록 (지연 로드)"""
        if self._protocols is None:
            self._protocols = self._load()
        return self._protocols

    def _load(self) -> List[RehabProtocol]:
        """카탈로그 파일 로드"""
        if not self.path.exists():
            raise FileNotFoundError(f"프로토콜 카탈로그를 찾을 수 없습니다: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            raw_data = json.load(f)

        # protocols 키가 있으면 그 안의 데이터 사용
        protocols_data = raw_data.get("protocols", []) if isinstance(raw_data, dict) else raw_data

        protocols = [RehabProtocol.model_validate(p) for p in protocols_data]
        logger.info(f"프로토콜 카탈로그 로드: {len(protocols)}개 ({self.path})")
        return protocols

    def find_for_condition(
        self,
        body_zone: str,
        diagnosis: str = "",
    ) -> Optional[RehabProtocol]:
        """
        질환에 맞는 프로토콜 검색

        매칭 순서:
        1. (부위, 질환명) 정확히 일치
        2. 같은 부위의 첫 프로토콜
        3. 없음 → None

        Args:
            body_zone: 부위
            diagnosis: 진단명 (비어 있으면 부위로만 매칭)

        Returns:
            RehabProtocol 또는 None
        """
        if diagnosis:
            exact = next(
                (
                    p for p in self.protocols
                    if p.target_zone == body_zone and p.condition_label == diagnosis
                ),
                None,
            )
            if exact is not None:
                return exact

        return next((p for p in self.protocols if p.target_zone == body_zone), None)
