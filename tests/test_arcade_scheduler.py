"""Tests for the arcade clock adapter, with the arcade clock faked out."""

from __future__ import annotations

import pytest

arcade = pytest.importorskip("arcade")

from shadow_rush.arcade_scheduler import ArcadeScheduler  # noqa: E402


class FakeClock:
    def __init__(self) -> None:
        self.repeating: dict = {}
        self.once: dict = {}
        self.unscheduled: list = []

    def schedule(self, func, interval):
        self.repeating[func] = interval

    def schedule_once(self, func, delay):
        self.once[func] = delay

    def unschedule(self, func):
        self.unscheduled.append(func)
        self.repeating.pop(func, None)
        self.once.pop(func, None)


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(arcade, "schedule", fake.schedule)
    monkeypatch.setattr(arcade, "schedule_once", fake.schedule_once)
    monkeypatch.setattr(arcade, "unschedule", fake.unschedule)
    return fake


def test_after_uses_schedule_once(clock: FakeClock) -> None:
    calls: list[int] = []
    scheduler = ArcadeScheduler(clock=lambda: 12.5)

    handle = scheduler.after(1.2, lambda: calls.append(1))

    (fire, delay), = clock.once.items()
    assert delay == 1.2
    fire(1.2)
    assert calls == [1]
    assert not handle.active
    assert scheduler.now() == 12.5

    handle.cancel()
    assert clock.unscheduled == []


def test_every_uses_schedule_and_cancel_unschedules(clock: FakeClock) -> None:
    calls: list[int] = []
    scheduler = ArcadeScheduler()

    handle = scheduler.every(0.75, lambda: calls.append(1))
    (fire, interval), = clock.repeating.items()
    assert interval == 0.75

    fire(0.75)
    fire(0.75)
    handle.cancel()

    assert calls == [1, 1]
    assert clock.unscheduled == [fire]
    assert clock.repeating == {}

    fire(0.75)
    assert calls == [1, 1]


def test_cancel_before_once_fires(clock: FakeClock) -> None:
    scheduler = ArcadeScheduler()
    handle = scheduler.after(0.5, lambda: None)
    (fire, _), = clock.once.items()

    handle.cancel()

    assert clock.unscheduled == [fire]


def test_every_rejects_non_positive_interval(clock: FakeClock) -> None:
    with pytest.raises(ValueError):
        ArcadeScheduler().every(0, lambda: None)
