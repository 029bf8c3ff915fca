"""
하이스코어 원장 모듈
점수순으로 정렬된, 길이가 제한된 기록을 관리합니다.
"""
from datetime import datetime
from typing import List, Optional, Tuple, Union

from shadow_rush.constants import MAX_HIGH_SCORES
from shadow_rush.game_state import HighScoreEntry, iso_timestamp
from shadow_rush.logger import get_logger
from shadow_rush.score_store import HighScoreStore


logger = get_logger()


def rank_entries(entries: List[HighScoreEntry], limit: int) -> List[HighScoreEntry]:
    """점수 내림차순 안정 정렬 후 limit개로 자릅니다."""
    return sorted(entries, key=lambda entry: entry.score, reverse=True)[:limit]


class HighScoreLedger:
    """하이스코어 원장. 변경될 때마다 저장소 전체를 다시 씁니다."""

    def __init__(self, store: HighScoreStore, max_entries: int = MAX_HIGH_SCORES):
        self.store = store
        self.max_entries = max(1, int(max_entries))
        self._entries: List[HighScoreEntry] = rank_entries(store.load(), self.max_entries)
        logger.debug(f"High score ledger loaded: {len(self._entries)} entries")

    @property
    def entries(self) -> Tuple[HighScoreEntry, ...]:
        return tuple(self._entries)

    @property
    def best(self) -> Optional[HighScoreEntry]:
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def submit(self, score: int, timestamp: Union[datetime, str, None] = None) -> bool:
        """
        점수를 원장에 기록합니다.

        새 엔트리를 기존 엔트리 앞에 두고 안정 정렬하므로, 같은 점수끼리는
        최근 기록이 앞에 옵니다.

        Args:
            score: 최종 점수. 0 이하면 아무것도 바꾸지 않습니다.
            timestamp: 기록 시각 (datetime 또는 ISO-8601 문자열)

        Returns:
            엔트리가 원장에 남았으면 True
        """
        if score <= 0:
            return False
        date = timestamp if isinstance(timestamp, str) else iso_timestamp(timestamp)
        entry = HighScoreEntry(score=int(score), date=date)

        self._entries = rank_entries([entry] + self._entries, self.max_entries)
        self.store.save(self._entries)

        kept = any(item is entry for item in self._entries)
        logger.info(f"High score submitted: {score} ({'kept' if kept else 'below the board'})")
        return kept

    def clear(self) -> None:
        """원장을 비우고 저장합니다."""
        self._entries = []
        self.store.save(self._entries)
        logger.info("High score ledger cleared")
