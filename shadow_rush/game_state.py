"""
세션 상태 및 값 타입 모듈
엔진이 주고받는 불변 값들을 정의합니다.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from shadow_rush.constants import BADGE_LOGGED, BADGE_PERFECT


class SessionState(Enum):
    """한 판의 진행 상태"""
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass(frozen=True)
class TargetPosition:
    """플레이 필드 기준 % 좌표"""
    x: float
    y: float


@dataclass(frozen=True)
class Tier:
    """점수 구간별 티어. tone은 히트음 높이(Hz)로만 쓰입니다."""
    id: str
    label: str
    min_score: int
    tone: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tier":
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", data["id"])),
            min_score=int(data["min_score"]),
            tone=int(data.get("tone", 0)),
        )


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 문자열 (밀리초, Z 접미사)을 만듭니다."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class HighScoreEntry:
    """하이스코어 한 줄"""
    score: int
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "date": self.date}

    @classmethod
    def from_dict(cls, data: Any) -> Optional["HighScoreEntry"]:
        """
        저장된 레코드를 엔트리로 변환합니다.

        Args:
            data: {"score": int, "date": str} 형태의 값

        Returns:
            모양이 맞지 않으면 None
        """
        if not isinstance(data, dict):
            return None
        score = data.get("score")
        date = data.get("date")
        # bool은 int의 하위 타입이라 따로 걸러냅니다
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            return None
        if not isinstance(date, str):
            return None
        return cls(score=score, date=date)


@dataclass(frozen=True)
class RunResult:
    """
    한 판이 끝났을 때의 스냅샷.

    hits는 실제 타격 횟수가 아니라 콤보 가중 점수(score)와 같은 값입니다.
    기존 화면이 이 값을 "hits"로 표시하기 때문에 이름을 유지합니다.
    """
    score: int
    misses: int
    streak: int
    accuracy: int = 0

    @property
    def hits(self) -> int:
        return self.score

    @property
    def perfect(self) -> bool:
        return self.misses == 0 and self.score > 0

    @property
    def badge(self) -> str:
        return BADGE_PERFECT if self.perfect else BADGE_LOGGED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "hits": self.hits,
            "misses": self.misses,
            "streak": self.streak,
            "accuracy": self.accuracy,
            "badge": self.badge,
        }
