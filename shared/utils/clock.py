"""시간 유틸리티"""

import time


def now_ms() -> int:
    """현재 시각 (epoch 밀리초)"""
    return int(time.time() * 1000)
