"""
로깅 시스템 모듈
세션 엔진 전체에서 하나의 로거를 공유합니다.
"""
import logging
import os
import sys
from typing import Optional


LOGGER_NAME = "shadow_rush"
LOG_LEVEL_ENV = "SHADOW_RUSH_LOG_LEVEL"


class GameLogger:
    """엔진 로거를 한 번만 구성하는 싱글톤"""

    _instance: Optional['GameLogger'] = None
    _logger: Optional[logging.Logger] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._logger is not None:
            return

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        # stdout 핸들러는 한 번만 붙입니다
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(_level_from_env())
            handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
            logger.addHandler(handler)

        type(self)._logger = logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """구성된 로거를 반환합니다."""
        return cls()._logger


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    """로거를 반환하는 편의 함수"""
    return GameLogger.get_logger()
