"""Tests for frame pacing."""

import pytest

from game.subboom.pacing import FramePacer


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class TestFramePacer:
    def test_sleeps_the_remaining_budget(self):
        clock = FakeClock()
        pacer = FramePacer(33, clock=clock, sleep=clock.sleep)

        pacer.start()
        clock.now += 0.010
        slept = pacer.finish()

        assert slept == pytest.approx(23.0)
        assert clock.sleeps == [pytest.approx(0.023)]

    def test_overrun_does_not_sleep_or_catch_up(self):
        clock = FakeClock()
        pacer = FramePacer(33, clock=clock, sleep=clock.sleep)

        pacer.start()
        clock.now += 0.050
        assert pacer.finish() == 0.0

        pacer.start()
        clock.now += 0.005
        assert pacer.finish() == pytest.approx(28.0)

        assert pacer.overruns == 1
        assert len(clock.sleeps) == 1

    def test_exact_budget_does_not_sleep(self):
        clock = FakeClock()
        pacer = FramePacer(20, clock=clock, sleep=clock.sleep)

        pacer.start()
        clock.now += 0.020
        pacer.finish()

        assert clock.sleeps == []
