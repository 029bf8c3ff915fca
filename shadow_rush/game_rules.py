"""
게임 규칙 모듈
rules.json 값을 검증된 불변 객체로 묶습니다.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from shadow_rush import constants
from shadow_rush.game_state import Tier


def _default_tiers() -> Tuple[Tier, ...]:
    return tuple(Tier.from_dict(item) for item in constants.TIERS)


@dataclass(frozen=True)
class GameRules:
    """한 판을 지배하는 튜닝 값 모음"""
    game_duration: int = constants.GAME_DURATION
    base_interval_ms: int = constants.MOVE_INTERVAL_MS
    speed_min_ms: int = constants.SPEED_MIN_MS
    speed_step_ms: int = constants.SPEED_STEP
    combo_timeout_ms: int = constants.COMBO_TIMEOUT_MS
    max_combo: int = constants.MAX_COMBO
    max_high_scores: int = constants.MAX_HIGH_SCORES
    high_scores_key: str = constants.HIGH_SCORES_KEY
    x_range: Tuple[float, float] = constants.TARGET_X_RANGE
    y_range: Tuple[float, float] = constants.TARGET_Y_RANGE
    tiers: Tuple[Tier, ...] = field(default_factory=_default_tiers)

    def __post_init__(self) -> None:
        for name in ("game_duration", "base_interval_ms", "speed_min_ms",
                     "combo_timeout_ms", "max_combo", "max_high_scores"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.speed_step_ms < 0:
            raise ValueError(f"speed_step_ms must not be negative, got {self.speed_step_ms}")
        for name in ("x_range", "y_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} is inverted: {low} > {high}")
        if not self.tiers:
            raise ValueError("at least one tier is required")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GameRules":
        """
        rules.json 딕셔너리로부터 규칙을 만듭니다.

        Args:
            data: 설정 딕셔너리. 빠진 키는 기본값을 사용합니다.

        Returns:
            GameRules 인스턴스
        """
        data = data or {}
        bounds = data.get("target_bounds", {})
        kwargs: Dict[str, Any] = {}

        int_keys = (
            "game_duration", "base_interval_ms", "speed_min_ms", "speed_step_ms",
            "combo_timeout_ms", "max_combo", "max_high_scores",
        )
        for key in int_keys:
            if key in data:
                kwargs[key] = int(data[key])
        if "high_scores_key" in data:
            kwargs["high_scores_key"] = str(data["high_scores_key"])
        if "x" in bounds:
            kwargs["x_range"] = (float(bounds["x"][0]), float(bounds["x"][1]))
        if "y" in bounds:
            kwargs["y_range"] = (float(bounds["y"][0]), float(bounds["y"][1]))
        if "tiers" in data:
            kwargs["tiers"] = tuple(Tier.from_dict(item) for item in data["tiers"])

        return cls(**kwargs)
