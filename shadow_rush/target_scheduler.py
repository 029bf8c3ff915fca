"""
타겟 이동 관리 모듈
점수가 오를수록 짧아지는 간격으로 타겟 위치를 바꿉니다.
"""
import random
from typing import Callable, Optional, Tuple

from shadow_rush.constants import (
    MOVE_INTERVAL_MS, SPEED_MIN_MS, SPEED_STEP, TARGET_X_RANGE, TARGET_Y_RANGE
)
from shadow_rush.game_state import TargetPosition
from shadow_rush.scheduler import Scheduler, TimerHandle, cancel_handle


def cadence_for_score(
    score: int,
    base_ms: int = MOVE_INTERVAL_MS,
    step_ms: int = SPEED_STEP,
    min_ms: int = SPEED_MIN_MS
) -> int:
    """점수에 따른 타겟 이동 간격(ms). 점수가 오를수록 줄고 min_ms에서 멈춥니다."""
    return max(min_ms, base_ms - max(0, score) * step_ms)


class TargetScheduler:
    """타겟 위치 샘플링과 이동 타이머를 담당하는 클래스"""

    def __init__(
        self,
        scheduler: Scheduler,
        rng: Optional[random.Random] = None,
        x_range: Tuple[float, float] = TARGET_X_RANGE,
        y_range: Tuple[float, float] = TARGET_Y_RANGE,
        base_interval_ms: int = MOVE_INTERVAL_MS,
        on_move: Optional[Callable[[TargetPosition], None]] = None
    ):
        self.scheduler = scheduler
        self.rng = rng or random.Random()
        self.x_range = x_range
        self.y_range = y_range
        self.base_interval_ms = base_interval_ms
        self.on_move = on_move

        self.cadence_ms: int = base_interval_ms
        self.position: Optional[TargetPosition] = None
        self._handle: Optional[TimerHandle] = None
        self._last_move_at: float = 0.0
        self._active: bool = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def cadence(self) -> float:
        """현재 간격 (초)"""
        return self.cadence_ms / 1000.0

    def sample_position(self) -> TargetPosition:
        """여백 안에서 균등 분포로 위치를 뽑습니다. 직전 위치와 같아도 됩니다."""
        x = self.rng.uniform(*self.x_range)
        y = self.rng.uniform(*self.y_range)
        return TargetPosition(x, y)

    def activate(self, cadence_ms: Optional[int] = None) -> TargetPosition:
        """
        첫 타겟을 바로 배치하고 반복 타이머를 겁니다.

        Args:
            cadence_ms: 시작 간격. 없으면 기본 간격을 사용합니다.

        Returns:
            첫 타겟 위치
        """
        self._cancel_timer()
        self._active = True
        self.cadence_ms = cadence_ms if cadence_ms is not None else self.base_interval_ms
        self.reposition()
        self._handle = self.scheduler.every(self.cadence, self.reposition)
        return self.position

    def deactivate(self) -> None:
        """타이머를 취소하고 타겟을 숨깁니다."""
        self._active = False
        self._cancel_timer()
        self.position = None

    def reposition(self) -> None:
        if not self._active:
            return
        self.position = self.sample_position()
        self._last_move_at = self.scheduler.now()
        if self.on_move is not None:
            self.on_move(self.position)

    def set_cadence(self, cadence_ms: int) -> None:
        """
        이동 간격을 바꿉니다.

        다음 이동은 마지막 이동 시각 + 새 간격에 일어나며 (이미 지났으면 즉시),
        그 뒤로는 새 간격마다 반복합니다. 진행 중인 주기를 처음부터 다시
        세지 않습니다.
        """
        cadence_ms = int(cadence_ms)
        if cadence_ms <= 0:
            raise ValueError(f"cadence must be positive, got {cadence_ms}")
        if cadence_ms == self.cadence_ms:
            return
        self.cadence_ms = cadence_ms
        if not self._active:
            return

        self._cancel_timer()
        next_due = self._last_move_at + self.cadence
        delay = max(0.0, next_due - self.scheduler.now())
        self._handle = self.scheduler.after(delay, self._resume)

    def _resume(self) -> None:
        self._handle = None
        self.reposition()
        if self._active:
            self._handle = self.scheduler.every(self.cadence, self.reposition)

    def _cancel_timer(self) -> None:
        cancel_handle(self._handle)
        self._handle = None
