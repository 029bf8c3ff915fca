"""
피드백 모듈
히트음 높이와 햅틱 패턴을 계산해 화면/오디오 쪽 리스너에 넘깁니다.
소리를 내거나 진동시키는 일은 리스너가 담당합니다.
"""
from typing import Any, Dict, List, Optional, Sequence

from shadow_rush.constants import HIT_HAPTIC, MISS_HAPTIC, TONE_STEP_HZ
from shadow_rush.game_state import Tier
from shadow_rush.logger import get_logger


logger = get_logger()


class FeedbackListener:
    """피드백 수신자. 필요한 메서드만 오버라이드합니다."""

    def on_hit_feedback(self, tone_hz: int, haptic: Optional[List[int]]) -> None:
        pass

    def on_miss_feedback(self, haptic: Optional[List[int]]) -> None:
        pass


def hit_tone(tier: Tier, combo_level: int, step_hz: int = TONE_STEP_HZ) -> int:
    """티어 기본 톤에 콤보 단계만큼 올린 히트음 높이(Hz)"""
    return tier.tone + combo_level * step_hz


class FeedbackDispatcher:
    """히트/미스 피드백 파라미터를 만들어 리스너들에게 전달합니다."""

    def __init__(
        self,
        tone_step_hz: int = TONE_STEP_HZ,
        hit_haptic: Sequence[int] = HIT_HAPTIC,
        miss_haptic: Sequence[int] = MISS_HAPTIC,
        haptics_enabled: bool = True
    ):
        self.tone_step_hz = tone_step_hz
        self.hit_haptic = list(hit_haptic)
        self.miss_haptic = list(miss_haptic)
        self.haptics_enabled = haptics_enabled
        self.listeners: List[FeedbackListener] = []

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]]) -> "FeedbackDispatcher":
        settings = settings or {}
        return cls(
            tone_step_hz=int(settings.get("tone_step_hz", TONE_STEP_HZ)),
            hit_haptic=[int(v) for v in settings.get("hit_haptic", HIT_HAPTIC)],
            miss_haptic=[int(v) for v in settings.get("miss_haptic", MISS_HAPTIC)],
            haptics_enabled=bool(settings.get("haptics_enabled", True)),
        )

    def add_listener(self, listener: FeedbackListener) -> None:
        if listener not in self.listeners:
            self.listeners.append(listener)

    def remove_listener(self, listener: FeedbackListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def set_haptics(self, enabled: bool) -> None:
        self.haptics_enabled = bool(enabled)

    def _haptic(self, pattern: List[int]) -> Optional[List[int]]:
        return list(pattern) if self.haptics_enabled else None

    def hit(self, tier: Tier, combo_level: int) -> int:
        """
        히트 피드백을 보냅니다.

        Args:
            tier: 히트 시점의 티어
            combo_level: 점수에 반영된 (증가 전) 콤보 단계

        Returns:
            히트음 높이 (Hz)
        """
        tone = hit_tone(tier, combo_level, self.tone_step_hz)
        haptic = self._haptic(self.hit_haptic)
        for listener in list(self.listeners):
            try:
                listener.on_hit_feedback(tone, haptic)
            except Exception as exc:
                logger.warning(f"히트 피드백 리스너 오류: {exc}")
        return tone

    def miss(self) -> None:
        haptic = self._haptic(self.miss_haptic)
        for listener in list(self.listeners):
            try:
                listener.on_miss_feedback(haptic)
            except Exception as exc:
                logger.warning(f"미스 피드백 리스너 오류: {exc}")
