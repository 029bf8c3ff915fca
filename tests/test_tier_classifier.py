"""Tests for score-to-tier classification."""

from __future__ import annotations

import pytest

from shadow_rush.game_rules import GameRules
from shadow_rush.game_state import Tier
from shadow_rush.tier_classifier import TierClassifier, classify_tier


@pytest.mark.parametrize(
    ("score", "expected"),
    [(0, "ember"), (19, "ember"), (20, "inferno"), (44, "inferno"), (45, "doom"), (500, "doom")],
)
def test_default_tier_thresholds(score: int, expected: str) -> None:
    tiers = GameRules().tiers
    assert classify_tier(score, tiers).id == expected


def test_tier_order_in_config_does_not_matter() -> None:
    tiers = tuple(reversed(GameRules().tiers))
    assert classify_tier(21, tiers).id == "inferno"


def test_falls_back_to_lowest_tier_when_none_qualifies() -> None:
    tiers = (Tier("bronze", "Bronze", 10), Tier("silver", "Silver", 30))
    assert classify_tier(3, tiers).id == "bronze"


def test_empty_tier_list_is_rejected() -> None:
    with pytest.raises(ValueError):
        classify_tier(0, ())


def test_classifier_sorts_configured_tiers() -> None:
    classifier = TierClassifier(tuple(reversed(GameRules().tiers)))

    assert [tier.id for tier in classifier.tiers] == ["ember", "inferno", "doom"]
    assert classifier.classify(44).id == "inferno"
