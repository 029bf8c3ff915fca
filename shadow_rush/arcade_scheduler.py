"""
Arcade 클럭 기반 스케줄러
arcade 게임 루프 안에서 세션 타이머를 돌립니다.
"""
from __future__ import annotations

import time
from typing import Callable

import arcade

from shadow_rush.scheduler import Callback, Scheduler, TimerHandle


class ArcadeScheduler(Scheduler):
    """arcade.schedule / schedule_once / unschedule 위에 올린 스케줄러"""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock

    def now(self) -> float:
        return self._clock()

    def after(self, delay: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(callback)

        def _fire(delta_time: float) -> None:
            if handle.cancelled:
                return
            handle.fired = True
            handle.callback()

        handle.on_cancel = lambda _h: self._unschedule(_h, _fire)
        arcade.schedule_once(_fire, max(0.0, delay))
        return handle

    def every(self, interval: float, callback: Callback) -> TimerHandle:
        self._check_interval(interval)
        handle = TimerHandle(callback, interval)

        def _fire(delta_time: float) -> None:
            if handle.cancelled:
                return
            handle.fired = True
            handle.callback()

        handle.on_cancel = lambda _h: self._unschedule(_h, _fire)
        arcade.schedule(_fire, interval)
        return handle

    @staticmethod
    def _unschedule(handle: TimerHandle, fire: Callable[[float], None]) -> None:
        # 이미 끝난 단발 타이머는 arcade 쪽에서 빠져 있습니다
        if handle.repeating or not handle.fired:
            arcade.unschedule(fire)
