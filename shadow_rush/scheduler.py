"""
타이머 스케줄러 모듈
after/every 타이머와 취소 가능한 핸들을 제공합니다.

모든 콜백은 한 스레드에서 하나씩 실행됩니다. 세션 상태를 건드리는
콜백끼리 서로 끼어들 수 없습니다.
"""
import heapq
import itertools
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple


Callback = Callable[[], None]


class TimerHandle:
    """예약된 타이머 하나. cancel() 이후에는 절대 실행되지 않습니다."""

    def __init__(self, callback: Callback, interval: Optional[float] = None):
        self.callback = callback
        self.interval = interval
        self.cancelled = False
        self.fired = False
        self.on_cancel: Optional[Callable[["TimerHandle"], None]] = None

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    @property
    def active(self) -> bool:
        if self.cancelled:
            return False
        return self.repeating or not self.fired

    def cancel(self) -> None:
        if self.cancelled:
            return
        self.cancelled = True
        if self.on_cancel is not None:
            self.on_cancel(self)
            self.on_cancel = None

    def __repr__(self) -> str:
        kind = f"every {self.interval}s" if self.repeating else "once"
        return f"<TimerHandle {kind} active={self.active}>"


def cancel_handle(handle: Optional[TimerHandle]) -> None:
    """None 허용 취소 헬퍼"""
    if handle is not None:
        handle.cancel()


class Scheduler(ABC):
    """타이머 추상 클래스 (시간 단위: 초)"""

    @abstractmethod
    def now(self) -> float:
        """스케줄러 기준 현재 시각"""

    @abstractmethod
    def after(self, delay: float, callback: Callback) -> TimerHandle:
        """delay초 후 한 번 실행합니다."""

    @abstractmethod
    def every(self, interval: float, callback: Callback) -> TimerHandle:
        """interval초마다 반복 실행합니다. 첫 실행은 interval초 후입니다."""

    @staticmethod
    def _check_interval(interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")


class ManualScheduler(Scheduler):
    """
    가상 시계 스케줄러.

    advance()가 호출될 때만 시간이 흐르고, 만기된 타이머를 만기 순서대로
    (같은 시각이면 예약 순서대로) 실행합니다. 테스트와 헤드리스 시뮬레이션에서
    사용합니다.
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def after(self, delay: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(callback)
        self._push(self._now + max(0.0, delay), handle)
        return handle

    def every(self, interval: float, callback: Callback) -> TimerHandle:
        self._check_interval(interval)
        handle = TimerHandle(callback, interval)
        self._push(self._now + interval, handle)
        return handle

    def _push(self, due: float, handle: TimerHandle) -> None:
        heapq.heappush(self._queue, (due, next(self._seq), handle))

    @property
    def pending(self) -> int:
        """아직 실행될 수 있는 타이머 수"""
        return sum(1 for _, _, handle in self._queue if handle.active)

    def advance(self, seconds: float) -> int:
        """
        시간을 seconds만큼 흘리며 만기된 콜백을 실행합니다.

        Args:
            seconds: 흘릴 시간 (초)

        Returns:
            실행된 콜백 수
        """
        if seconds < 0:
            raise ValueError(f"cannot advance by a negative amount: {seconds}")
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target + 1e-9:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = max(self._now, due)
            handle.fired = True
            handle.callback()
            fired += 1
            if handle.repeating and not handle.cancelled:
                self._push(due + handle.interval, handle)
        self._now = target
        return fired

    def advance_ms(self, milliseconds: float) -> int:
        return self.advance(milliseconds / 1000.0)
