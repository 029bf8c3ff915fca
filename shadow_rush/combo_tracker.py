"""
콤보 관리 모듈
콤보 단계와 연속 히트 수를 관리하고, 일정 시간 히트가 없으면 콤보를 풉니다.
"""
from typing import Callable, Optional

from shadow_rush.constants import COMBO_TIMEOUT_MS, MAX_COMBO
from shadow_rush.scheduler import Scheduler, TimerHandle, cancel_handle


class ComboTracker:
    """콤보/스트릭 및 콤보 만료 타이머를 관리하는 클래스"""

    def __init__(
        self,
        scheduler: Scheduler,
        max_combo: int = MAX_COMBO,
        timeout_ms: int = COMBO_TIMEOUT_MS,
        on_decay: Optional[Callable[[], None]] = None
    ):
        self.scheduler = scheduler
        self.max_combo = max(1, int(max_combo))
        self.timeout = timeout_ms / 1000.0
        self.on_decay = on_decay

        self.level: int = 1
        self.streak: int = 0
        self._decay_handle: Optional[TimerHandle] = None

    @property
    def decay_pending(self) -> bool:
        return self._decay_handle is not None and self._decay_handle.active

    def on_hit(self) -> int:
        """
        히트를 반영합니다.

        Returns:
            갱신된 콤보 단계
        """
        self.streak += 1
        self.level = min(self.max_combo, self.level + 1)
        self._arm_decay()
        return self.level

    def on_miss(self) -> None:
        """미스 시 콤보를 초기화합니다."""
        self.reset()

    def reset(self) -> None:
        """콤보를 1, 스트릭을 0으로 되돌리고 만료 타이머를 취소합니다."""
        self.level = 1
        self.streak = 0
        self.cancel()

    def cancel(self) -> None:
        """만료 타이머만 취소합니다. 콤보 값은 그대로 둡니다."""
        cancel_handle(self._decay_handle)
        self._decay_handle = None

    def _arm_decay(self) -> None:
        # 만료 타이머는 항상 하나만 살아 있습니다
        self.cancel()
        self._decay_handle = self.scheduler.after(self.timeout, self._decay)

    def _decay(self) -> None:
        self._decay_handle = None
        self.level = 1
        self.streak = 0
        if self.on_decay is not None:
            self.on_decay()
