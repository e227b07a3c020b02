"""
Quota-aware retry on a single model.

Per model the state machine is:

    Attempting(n) -> Success
                  -> RetryWait(n+1)   quota failure, attempts left
                  -> GiveUp           quota failure on the last attempt
                  -> raise            any other failure

GiveUp is signalled with RetryExhausted so the orchestrator can hand over
to the fallback chain.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import structlog

from ja_translator.config import Settings
from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.models.outcome import AttemptFailure, AttemptSuccess
from ja_translator.monitoring.metrics import retries_total
from ja_translator.retry.attempt import run_attempt
from ja_translator.retry.deadline import DeadlineTracker
from ja_translator.retry.exceptions import RetryExhausted, to_public_error
from ja_translator.retry.metadata import AttemptLog


SleepFunc = Callable[[float], Awaitable[None]]


class RetryScheduler:
    """
    Retries a model while it fails with quota errors.

    Attributes:
        max_attempts: Attempts per model, the first one included
        initial_delay: Backoff base in seconds (doubles per attempt)
        max_delay: Upper bound on any single wait
        attempt_cap: Upper bound on a single attempt timeout
        buffer: Time kept free before the overall deadline
        min_attempt_timeout: Lower bound on a single attempt timeout
    """

    def __init__(
        self,
        max_attempts: int = 2,
        initial_delay: float = 2.0,
        max_delay: float = 10.0,
        attempt_cap: float = 30.0,
        buffer: float = 1.0,
        min_attempt_timeout: float = 1.0,
        sleep: SleepFunc = asyncio.sleep,
        logger=None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.attempt_cap = attempt_cap
        self.buffer = buffer
        self.min_attempt_timeout = min_attempt_timeout
        self._sleep = sleep
        self.logger = logger or structlog.get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, sleep: SleepFunc = asyncio.sleep, logger=None) -> "RetryScheduler":
        return cls(
            max_attempts=settings.MAX_RETRY_ATTEMPTS,
            initial_delay=settings.INITIAL_RETRY_DELAY,
            max_delay=settings.MAX_RETRY_DELAY,
            attempt_cap=settings.API_TIMEOUT,
            buffer=settings.RETRY_BUFFER,
            min_attempt_timeout=settings.MIN_ATTEMPT_TIMEOUT,
            sleep=sleep,
            logger=logger,
        )

    def backoff_delay(self, attempt: int, retry_hint: Optional[float], deadline: DeadlineTracker) -> float:
        """
        Wait before attempt `attempt + 1`.

        min(hint or initial * 2**attempt, max_delay, remaining - buffer).
        A result <= 0 means "do not sleep".
        """
        base = retry_hint or self.initial_delay * (2 ** attempt)
        return min(base, self.max_delay, deadline.remaining() - self.buffer)

    async def run(
        self,
        client: BaseProviderClient,
        model: str,
        prompt: str,
        api_key: str,
        deadline: DeadlineTracker,
        attempt_log: AttemptLog,
    ) -> str:
        """
        Attempt `model` up to max_attempts times.

        Returns:
            Translated text

        Raises:
            RetryExhausted: Every attempt failed with a quota error
            OverallTimeoutError: Deadline spent before an attempt
            TranslationError: First non-quota failure, as its public error
        """
        last_failure: Optional[AttemptFailure] = None

        for attempt in range(self.max_attempts):
            deadline.check_alive()
            timeout = deadline.attempt_timeout(self.attempt_cap, self.buffer, self.min_attempt_timeout)

            if attempt > 0:
                self.logger.info(
                    "Retrying model",
                    provider=client.provider.value,
                    model=model,
                    attempt=attempt + 1,
                    max_attempts=self.max_attempts,
                )

            outcome = await run_attempt(
                client, model, prompt, api_key, timeout, "primary", attempt_log, logger=self.logger
            )
            if isinstance(outcome, AttemptSuccess):
                return outcome.text

            if not outcome.is_quota:
                raise to_public_error(outcome, client.provider, model, timeout) from outcome.error

            last_failure = outcome
            if attempt == self.max_attempts - 1:
                break

            delay = self.backoff_delay(attempt, outcome.retry_hint, deadline)
            retries_total.labels(provider=client.provider.value).inc()
            self.logger.info(
                "Quota exceeded, backing off",
                provider=client.provider.value,
                model=model,
                attempt=attempt + 1,
                delay=round(max(delay, 0.0), 3),
                retry_hint=outcome.retry_hint,
            )
            if delay > 0:
                await self._sleep(delay)

        raise RetryExhausted(model, last_failure, self.max_attempts)
