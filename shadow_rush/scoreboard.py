"""
점수 관리 모듈
점수와 미스를 집계하고 정확도를 계산합니다.
"""
from dataclasses import dataclass


def accuracy_percent(score: int, misses: int) -> int:
    """
    정확도(%)를 계산합니다.

    Args:
        score: 콤보 가중 점수
        misses: 미스 횟수

    Returns:
        0~100 정수. 합계가 0이면 0을 반환합니다.
    """
    total = score + misses
    if total <= 0:
        return 0
    # 100 * score / total 을 0.5 올림 반올림 (정수 연산)
    return (200 * score + total) // (2 * total)


@dataclass
class ScoreBoard:
    """한 판의 점수 및 미스를 관리하는 클래스"""
    score: int = 0
    misses: int = 0

    def reset(self) -> None:
        """상태를 초기화합니다."""
        self.score = 0
        self.misses = 0

    def record_hit(self, combo_level: int) -> int:
        """
        히트를 등록합니다. 현재 콤보 배율만큼 점수가 오릅니다.

        Args:
            combo_level: 히트 시점의 콤보 단계

        Returns:
            획득한 점수
        """
        gained = max(1, int(combo_level))
        self.score += gained
        return gained

    def record_miss(self) -> None:
        """미스를 등록합니다."""
        self.misses += 1

    def accuracy(self) -> int:
        return accuracy_percent(self.score, self.misses)
