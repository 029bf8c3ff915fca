"""
설정 관리 모듈
모든 설정을 중앙에서 관리합니다.
"""
import json
import os
from typing import Any, Dict, Optional

from shadow_rush.game_rules import GameRules
from shadow_rush.logger import get_logger


logger = get_logger()

DEFAULT_CONFIG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config")


class ConfigManager:
    """게임 설정을 중앙에서 관리하는 클래스"""

    def __init__(self, config_dir: Optional[str] = None):
        self.config_dir = config_dir or DEFAULT_CONFIG_DIR
        self.rules: Dict[str, Any] = {}
        self.feedback: Dict[str, Any] = {}

        self._load_all_configs()

    def _load_all_configs(self) -> None:
        """모든 설정 파일을 로드합니다."""
        try:
            self.rules = self._load_json("rules.json")
            self.feedback = self._load_json("feedback.json")
        except FileNotFoundError as e:
            logger.error(f"설정 파일을 찾을 수 없습니다: {e}")
            raise
        logger.debug(f"Config loaded from {self.config_dir}")

    def _load_json(self, filename: str) -> Dict[str, Any]:
        """JSON 파일을 로드합니다."""
        filepath = os.path.join(self.config_dir, filename)
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{filepath}: 최상위 값은 객체여야 합니다")
        return data

    def get_rules(self) -> GameRules:
        """
        검증된 게임 규칙을 반환합니다.

        Returns:
            rules.json 기반 GameRules (빠진 값은 기본값)
        """
        return GameRules.from_dict(self.rules)

    def get_feedback_settings(self) -> Dict[str, Any]:
        """톤/햅틱 피드백 설정을 반환합니다."""
        return dict(self.feedback)

    def get_config(self) -> Dict[str, Any]:
        """전체 설정을 반환합니다."""
        return {
            "rules": self.rules,
            "feedback": self.feedback,
        }
