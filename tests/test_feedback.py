"""Tests for hit/miss feedback parameters."""

from __future__ import annotations

from shadow_rush.feedback import FeedbackDispatcher, FeedbackListener, hit_tone
from shadow_rush.game_state import Tier


DOOM = Tier("doom", "Doom", 45, tone=680)


class Recorder(FeedbackListener):
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_hit_feedback(self, tone_hz, haptic):
        self.events.append(("hit", tone_hz, haptic))

    def on_miss_feedback(self, haptic):
        self.events.append(("miss", haptic))


class Broken(FeedbackListener):
    def on_hit_feedback(self, tone_hz, haptic):
        raise RuntimeError("no audio device")


def test_hit_tone() -> None:
    assert hit_tone(DOOM, 3) == 680 + 54
    assert hit_tone(DOOM, 1, step_hz=10) == 690


def test_haptics_can_be_disabled() -> None:
    dispatcher = FeedbackDispatcher()
    recorder = Recorder()
    dispatcher.add_listener(recorder)

    dispatcher.set_haptics(False)
    dispatcher.hit(DOOM, 2)
    dispatcher.miss()

    assert recorder.events == [("hit", 716, None), ("miss", None)]


def test_listener_failure_does_not_propagate() -> None:
    dispatcher = FeedbackDispatcher()
    recorder = Recorder()
    dispatcher.add_listener(Broken())
    dispatcher.add_listener(recorder)

    assert dispatcher.hit(DOOM, 1) == 698
    assert recorder.events == [("hit", 698, [30])]


def test_from_settings() -> None:
    dispatcher = FeedbackDispatcher.from_settings(
        {"tone_step_hz": 5, "hit_haptic": [10], "miss_haptic": [1, 2], "haptics_enabled": False}
    )

    assert dispatcher.tone_step_hz == 5
    assert dispatcher.hit_haptic == [10]
    assert dispatcher.miss_haptic == [1, 2]
    assert dispatcher.haptics_enabled is False


def test_remove_listener() -> None:
    dispatcher = FeedbackDispatcher()
    recorder = Recorder()
    dispatcher.add_listener(recorder)
    dispatcher.add_listener(recorder)
    dispatcher.remove_listener(recorder)

    dispatcher.miss()

    assert recorder.events == []
