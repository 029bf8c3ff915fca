"""Tests for score and accuracy bookkeeping."""

from __future__ import annotations

import pytest

from shadow_rush.scoreboard import ScoreBoard, accuracy_percent


@pytest.mark.parametrize(
    ("score", "misses", "expected"),
    [(0, 0, 0), (3, 1, 75), (1, 3, 25), (1, 1, 50), (5, 0, 100), (0, 4, 0), (1, 7, 13), (2, 1, 67)],
)
def test_accuracy_percent(score: int, misses: int, expected: int) -> None:
    assert accuracy_percent(score, misses) == expected


def test_hit_reward_scales_with_combo() -> None:
    board = ScoreBoard()

    assert board.record_hit(1) == 1
    assert board.record_hit(2) == 2
    assert board.record_hit(6) == 6
    assert board.score == 9


def test_hit_reward_is_at_least_one() -> None:
    board = ScoreBoard()
    board.record_hit(0)
    assert board.score == 1


def test_miss_and_reset() -> None:
    board = ScoreBoard()
    board.record_hit(3)
    board.record_miss()

    assert board.misses == 1
    assert board.accuracy() == 75

    board.reset()
    assert (board.score, board.misses, board.accuracy()) == (0, 0, 0)
