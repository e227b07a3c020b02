"""
Overall time budget of one translate() call.

Every attempt and every backoff wait is sized against the same deadline,
so the whole operation (retries and fallbacks included) finishes within
roughly `overall_limit + buffer` seconds.
"""

import time
from typing import Callable

from ja_translator.exceptions import OverallTimeoutError


class DeadlineTracker:
    """
    Tracks elapsed and remaining time against a fixed limit.

    Attributes:
        overall_limit: Budget in seconds
        started_at: Clock reading at construction
    """

    def __init__(self, overall_limit: float, clock: Callable[[], float] = time.monotonic):
        """
        Start the clock.

        Args:
            overall_limit: Budget in seconds
            clock: Monotonic clock, injectable for tests
        """
        self.overall_limit = overall_limit
        self._clock = clock
        self.started_at = clock()

    def elapsed(self) -> float:
        return self._clock() - self.started_at

    def remaining(self) -> float:
        """Seconds left; negative once the budget is spent."""
        return self.overall_limit - self.elapsed()

    def check_alive(self) -> None:
        """
        Raise if the budget is spent.

        Raises:
            OverallTimeoutError: remaining() <= 0
        """
        if self.remaining() <= 0:
            raise OverallTimeoutError(self.overall_limit)

    def attempt_timeout(self, cap: float, buffer: float, minimum: float) -> float:
        """
        Timeout for the next provider call.

        clamp(remaining - buffer, minimum, cap). Never below `minimum`, even
        when the budget is nearly gone; callers check_alive() first.
        """
        return max(minimum, min(cap, self.remaining() - buffer))
