"""
티어 분류 모듈
누적 점수를 티어로 매핑합니다.
"""
from typing import Iterable, Optional, Sequence

from shadow_rush.game_state import Tier


def classify_tier(score: int, tiers: Sequence[Tier]) -> Tier:
    """
    점수에 해당하는 티어를 반환합니다.

    min_score가 점수 이하인 티어 중 가장 높은 것을 고릅니다.
    어떤 티어도 해당하지 않으면 가장 낮은 티어를 돌려줍니다.

    Args:
        score: 누적 점수
        tiers: 티어 목록 (순서 무관)

    Returns:
        선택된 Tier
    """
    if not tiers:
        raise ValueError("tiers must not be empty")
    best: Optional[Tier] = None
    for tier in tiers:
        if tier.min_score <= score and (best is None or tier.min_score > best.min_score):
            best = tier
    if best is None:
        return lowest_tier(tiers)
    return best


def lowest_tier(tiers: Iterable[Tier]) -> Tier:
    return min(tiers, key=lambda tier: tier.min_score)


class TierClassifier:
    """규칙에 묶인 티어 목록으로 분류합니다."""

    def __init__(self, tiers: Sequence[Tier]):
        self.tiers = tuple(sorted(tiers, key=lambda tier: tier.min_score))

    def classify(self, score: int) -> Tier:
        return classify_tier(score, self.tiers)
