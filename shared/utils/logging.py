"""공유 로깅 유틸리티"""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """로거 인스턴스 반환

    Args:
        name: 로거 이름
        level: 로그 레벨 (int 또는 "DEBUG" 같은 이름, 기본값: INFO)

    Returns:
        logging.Logger 인스턴스
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level or logging.INFO)
    return logger
