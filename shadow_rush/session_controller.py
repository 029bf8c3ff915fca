"""
세션 컨트롤러 모듈
30초 한 판의 시작, 카운트다운, 종료, 결과 요약을 관리합니다.
"""
import random
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from shadow_rush.combo_tracker import ComboTracker
from shadow_rush.constants import COUNTDOWN_TICK
from shadow_rush.feedback import FeedbackDispatcher
from shadow_rush.game_rules import GameRules
from shadow_rush.game_state import (
    HighScoreEntry, RunResult, SessionState, TargetPosition, Tier
)
from shadow_rush.high_score_ledger import HighScoreLedger
from shadow_rush.logger import get_logger
from shadow_rush.scheduler import Scheduler, TimerHandle, cancel_handle
from shadow_rush.scoreboard import ScoreBoard
from shadow_rush.target_scheduler import TargetScheduler, cadence_for_score
from shadow_rush.tier_classifier import TierClassifier


logger = get_logger()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionController:
    """
    한 판의 상태 머신.

    IDLE --start()--> ACTIVE --tick()이 0에 도달--> ENDED --start()--> ACTIVE
    ACTIVE --abort()--> IDLE

    ACTIVE가 아닐 때 tick, 타겟 히트, 필드 미스는 모두 무시됩니다.
    self_clocked=True(기본값)면 내부 카운트다운 타이머가 시계를 돌리고,
    False면 호스트가 1초마다 tick()을 호출해야 합니다.
    ACTIVE를 벗어나면 이 판의 타이머(카운트다운, 타겟 이동, 콤보 만료)를
    모두 취소합니다.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        ledger: HighScoreLedger,
        rules: Optional[GameRules] = None,
        rng: Optional[random.Random] = None,
        feedback: Optional[FeedbackDispatcher] = None,
        clock: Callable[[], datetime] = _utc_now,
        self_clocked: bool = True
    ):
        self.rules = rules or GameRules()
        self.scheduler = scheduler
        self.ledger = ledger
        self.feedback = feedback or FeedbackDispatcher()
        self.clock = clock
        self.self_clocked = self_clocked

        self.scoreboard = ScoreBoard()
        self.combo_tracker = ComboTracker(
            scheduler,
            max_combo=self.rules.max_combo,
            timeout_ms=self.rules.combo_timeout_ms,
        )
        self.target = TargetScheduler(
            scheduler,
            rng=rng,
            x_range=self.rules.x_range,
            y_range=self.rules.y_range,
            base_interval_ms=self.rules.base_interval_ms,
        )
        self.tiers = TierClassifier(self.rules.tiers)

        self.state = SessionState.IDLE
        self.time_left: int = self.rules.game_duration
        self.last_result: Optional[RunResult] = None

        self._countdown: Optional[TimerHandle] = None
        self._generation: int = 0

    # ------------------------------------------------------------------ #
    # Read accessors
    # ------------------------------------------------------------------ #
    @property
    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def misses(self) -> int:
        return self.scoreboard.misses

    @property
    def accuracy(self) -> int:
        return self.scoreboard.accuracy()

    @property
    def combo(self) -> int:
        return self.combo_tracker.level

    @property
    def streak(self) -> int:
        return self.combo_tracker.streak

    @property
    def tier(self) -> Tier:
        return self.tiers.classify(self.score)

    @property
    def target_position(self) -> Optional[TargetPosition]:
        return self.target.position

    @property
    def cadence_ms(self) -> int:
        return self.target.cadence_ms

    @property
    def high_scores(self) -> Tuple[HighScoreEntry, ...]:
        return self.ledger.entries

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #
    def start(self) -> None:
        """새 판을 시작합니다. 진행 중인 판이 있으면 타이머를 먼저 정리합니다."""
        if self.is_active:
            logger.info("Run restarted before the clock expired")
            self._stop_timers()

        self._generation += 1
        generation = self._generation

        self.scoreboard.reset()
        self.combo_tracker.reset()
        self.time_left = self.rules.game_duration
        self.last_result = None
        self.state = SessionState.ACTIVE

        self.target.activate(self.rules.base_interval_ms)
        if self.self_clocked:
            self._countdown = self.scheduler.every(
                COUNTDOWN_TICK, lambda: self._on_countdown(generation)
            )
        logger.info(f"Run started ({self.rules.game_duration}s)")

    def tick(self) -> None:
        """
        호스트 구동 1초 카운트다운. 0이 되면 판을 끝냅니다.

        내부 카운트다운이 돌고 있는 동안에는 아무 일도 하지 않습니다.
        """
        if self._countdown is not None and self._countdown.active:
            return
        self._advance_clock()

    def _advance_clock(self) -> None:
        if not self.is_active:
            return
        self.time_left = max(0, self.time_left - 1)
        if self.time_left == 0:
            self._finish()

    def abort(self) -> bool:
        """
        진행 중인 판을 결과 없이 중단합니다.

        Returns:
            중단했으면 True, ACTIVE가 아니었으면 False
        """
        if not self.is_active:
            return False
        self._stop_timers()
        self.state = SessionState.IDLE
        self.time_left = self.rules.game_duration
        logger.info(f"Run aborted (score={self.score}, misses={self.misses})")
        return True

    # ------------------------------------------------------------------ #
    # Player input
    # ------------------------------------------------------------------ #
    def on_target_hit(self) -> int:
        """
        타겟 히트를 처리합니다.

        Returns:
            획득한 점수 (ACTIVE가 아니면 0)
        """
        if not self.is_active:
            return 0
        level = self.combo_tracker.level
        tier = self.tier

        gained = self.scoreboard.record_hit(level)
        self.combo_tracker.on_hit()
        self.target.set_cadence(self._cadence_for(self.score))

        self.feedback.hit(tier, level)
        return gained

    def on_field_miss(self) -> None:
        """필드(타겟 바깥) 클릭을 미스로 처리합니다."""
        if not self.is_active:
            return
        self.scoreboard.record_miss()
        self.combo_tracker.on_miss()
        self.feedback.miss()

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #
    def _cadence_for(self, score: int) -> int:
        return cadence_for_score(
            score,
            base_ms=self.rules.base_interval_ms,
            step_ms=self.rules.speed_step_ms,
            min_ms=self.rules.speed_min_ms,
        )

    def _on_countdown(self, generation: int) -> None:
        # 이전 판에서 예약된 콜백은 무시합니다
        if generation != self._generation:
            return
        self._advance_clock()

    def _stop_timers(self) -> None:
        cancel_handle(self._countdown)
        self._countdown = None
        self.target.deactivate()
        self.combo_tracker.cancel()

    def _finish(self) -> None:
        self._stop_timers()
        self.state = SessionState.ENDED

        result = RunResult(
            score=self.score,
            misses=self.misses,
            streak=self.streak,
            accuracy=self.accuracy,
        )
        self.last_result = result
        logger.info(
            f"Run ended: score={result.score} misses={result.misses} "
            f"streak={result.streak} accuracy={result.accuracy}% ({result.badge})"
        )

        if result.score > 0:
            self.ledger.submit(result.score, self.clock())
