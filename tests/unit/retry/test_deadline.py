"""Unit tests for DeadlineTracker."""

import pytest

from ja_translator.exceptions import OverallTimeoutError
from ja_translator.retry.deadline import DeadlineTracker


def test_remaining_and_elapsed(clock):
    deadline = DeadlineTracker(60.0, clock=clock)
    clock.advance(12.5)

    assert deadline.elapsed() == 12.5
    assert deadline.remaining() == 47.5


def test_remaining_is_non_increasing(clock):
    deadline = DeadlineTracker(10.0, clock=clock)
    readings = []
    for _ in range(5):
        readings.append(deadline.remaining())
        clock.advance(3.0)

    assert readings == sorted(readings, reverse=True)
    assert readings[-1] < 0


def test_check_alive_passes_with_budget(clock):
    deadline = DeadlineTracker(10.0, clock=clock)
    clock.advance(9.9)
    deadline.check_alive()


def test_check_alive_raises_when_spent(clock):
    deadline = DeadlineTracker(10.0, clock=clock)
    clock.advance(10.0)

    with pytest.raises(OverallTimeoutError) as exc_info:
        deadline.check_alive()

    assert exc_info.value.limit == 10.0
    assert "10 seconds" in exc_info.value.message


class TestAttemptTimeout:
    """clamp(remaining - buffer, minimum, cap)."""

    def test_capped_by_api_timeout(self, clock):
        deadline = DeadlineTracker(60.0, clock=clock)
        assert deadline.attempt_timeout(cap=30.0, buffer=1.0, minimum=1.0) == 30.0

    def test_shrinks_with_remaining_budget(self, clock):
        deadline = DeadlineTracker(60.0, clock=clock)
        clock.advance(50.0)
        assert deadline.attempt_timeout(cap=30.0, buffer=1.0, minimum=1.0) == 9.0

    def test_never_below_minimum(self, clock):
        deadline = DeadlineTracker(60.0, clock=clock)
        clock.advance(59.5)
        assert deadline.attempt_timeout(cap=30.0, buffer=1.0, minimum=1.0) == 1.0

    def test_minimum_even_when_spent(self, clock):
        deadline = DeadlineTracker(60.0, clock=clock)
        clock.advance(100.0)
        assert deadline.attempt_timeout(cap=30.0, buffer=1.0, minimum=1.0) == 1.0
