from __future__ import annotations

import random
from datetime import datetime, timezone

import pytest

from shadow_rush.game_rules import GameRules
from shadow_rush.high_score_ledger import HighScoreLedger
from shadow_rush.scheduler import ManualScheduler
from shadow_rush.score_store import MemoryScoreStore
from shadow_rush.session_controller import SessionController


FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, tzinfo=timezone.utc)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def store() -> MemoryScoreStore:
    return MemoryScoreStore()


@pytest.fixture
def rules() -> GameRules:
    return GameRules()


@pytest.fixture
def ledger(store: MemoryScoreStore, rules: GameRules) -> HighScoreLedger:
    return HighScoreLedger(store, max_entries=rules.max_high_scores)


@pytest.fixture
def session(
    scheduler: ManualScheduler, ledger: HighScoreLedger, rules: GameRules
) -> SessionController:
    return SessionController(
        scheduler,
        ledger,
        rules=rules,
        rng=random.Random(1234),
        clock=lambda: FIXED_NOW,
    )
