"""
게임 팩토리 모듈
세션 컴포넌트 생성 및 의존성 주입을 담당합니다.
"""
import random
from pathlib import Path
from typing import Optional, Union

from shadow_rush.config_manager import ConfigManager
from shadow_rush.feedback import FeedbackDispatcher
from shadow_rush.game_rules import GameRules
from shadow_rush.high_score_ledger import HighScoreLedger
from shadow_rush.logger import get_logger
from shadow_rush.scheduler import Scheduler
from shadow_rush.score_store import HighScoreStore, JsonFileScoreStore
from shadow_rush.session_controller import SessionController


logger = get_logger()


class GameFactory:
    """세션 컴포넌트 생성 및 의존성 주입"""

    @staticmethod
    def create_config_manager(config_dir: Optional[str] = None) -> ConfigManager:
        """설정 매니저를 생성합니다."""
        try:
            logger.info("Loading config files...")
            return ConfigManager(config_dir)
        except FileNotFoundError as exc:
            logger.error(f"필수 config 파일을 찾을 수 없습니다: {exc}")
            raise

    @staticmethod
    def create_scheduler() -> Scheduler:
        """arcade 게임 루프용 스케줄러를 생성합니다."""
        # arcade는 실제 게임 루프에서만 필요하므로 여기서 가져옵니다
        from shadow_rush.arcade_scheduler import ArcadeScheduler
        return ArcadeScheduler()

    @staticmethod
    def create_store(rules: GameRules, path: Optional[Union[str, Path]] = None) -> HighScoreStore:
        """하이스코어 파일 저장소를 생성합니다."""
        store = JsonFileScoreStore(path, key=rules.high_scores_key)
        logger.info(f"High scores stored at {store.path}")
        return store

    @staticmethod
    def create_ledger(store: HighScoreStore, rules: GameRules) -> HighScoreLedger:
        """하이스코어 원장을 생성합니다. 저장소가 깨져 있어도 빈 원장으로 시작합니다."""
        return HighScoreLedger(store, max_entries=rules.max_high_scores)

    @classmethod
    def create_session(
        cls,
        config_manager: Optional[ConfigManager] = None,
        scheduler: Optional[Scheduler] = None,
        store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None
    ) -> SessionController:
        """
        완전히 연결된 세션 컨트롤러를 생성합니다.

        Args:
            config_manager: 설정. 없으면 기본 config 디렉터리를 읽습니다.
            scheduler: 타이머. 없으면 ArcadeScheduler를 사용합니다.
            store: 하이스코어 저장소. 없으면 홈 디렉터리의 JSON 파일입니다.
            rng: 타겟 위치용 난수 생성기

        Returns:
            IDLE 상태의 SessionController
        """
        config_manager = config_manager or cls.create_config_manager()
        rules = config_manager.get_rules()
        scheduler = scheduler or cls.create_scheduler()
        store = store or cls.create_store(rules)

        ledger = cls.create_ledger(store, rules)
        feedback = FeedbackDispatcher.from_settings(config_manager.get_feedback_settings())
        return SessionController(
            scheduler,
            ledger,
            rules=rules,
            rng=rng,
            feedback=feedback,
        )
