"""
Ordered fallback across models of the same provider.

Used only after the primary model gave up on quota. Each candidate gets a
single attempt; quota moves on to the next candidate, anything else ends
the operation.
"""

from dataclasses import dataclass
from typing import Sequence

import structlog

from ja_translator.config import Settings
from ja_translator.exceptions import QuotaExceededError
from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.models.enums import ProviderName
from ja_translator.models.outcome import AttemptSuccess
from ja_translator.monitoring.metrics import fallbacks_total
from ja_translator.retry.attempt import run_attempt
from ja_translator.retry.deadline import DeadlineTracker
from ja_translator.retry.exceptions import to_public_error
from ja_translator.retry.metadata import AttemptLog


@dataclass(frozen=True)
class FallbackCandidate:
    provider: ProviderName
    model: str


@dataclass(frozen=True)
class FallbackResult:
    """Text produced by a fallback model, and which model produced it."""

    text: str
    model: str


def fallback_models(settings: Settings, provider: ProviderName) -> list[str]:
    """Configured fallback order for `provider`."""
    if provider is ProviderName.GEMINI:
        return list(settings.GEMINI_FALLBACK_MODELS)
    return list(settings.GROQ_FALLBACK_MODELS)


class FallbackChain:
    """
    Walks a provider's fallback list in order.

    Attributes:
        models_by_provider: Configured fallback order per provider
        attempt_cap: Upper bound on a single attempt timeout
        buffer: Time kept free before the overall deadline
        min_attempt_timeout: Lower bound on a single attempt timeout
    """

    def __init__(
        self,
        models_by_provider: dict[ProviderName, Sequence[str]],
        attempt_cap: float = 30.0,
        buffer: float = 1.0,
        min_attempt_timeout: float = 1.0,
        logger=None,
    ):
        self.models_by_provider = {p: tuple(models) for p, models in models_by_provider.items()}
        self.attempt_cap = attempt_cap
        self.buffer = buffer
        self.min_attempt_timeout = min_attempt_timeout
        self.logger = logger or structlog.get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, logger=None) -> "FallbackChain":
        return cls(
            models_by_provider={p: fallback_models(settings, p) for p in ProviderName},
            attempt_cap=settings.API_TIMEOUT,
            buffer=settings.RETRY_BUFFER,
            min_attempt_timeout=settings.MIN_ATTEMPT_TIMEOUT,
            logger=logger,
        )

    def plan(self, provider: ProviderName, primary_model: str) -> list[FallbackCandidate]:
        """Ordered candidates for `provider`, the primary model excluded."""
        return [
            FallbackCandidate(provider=provider, model=model)
            for model in self.models_by_provider.get(provider, ())
            if model != primary_model
        ]

    async def run(
        self,
        client: BaseProviderClient,
        primary_model: str,
        prompt: str,
        api_key: str,
        deadline: DeadlineTracker,
        attempt_log: AttemptLog,
    ) -> FallbackResult:
        """
        Try each fallback candidate once.

        Returns:
            FallbackResult of the first candidate that succeeded

        Raises:
            QuotaExceededError: Every candidate hit quota (tried_fallback=True),
                or there was no candidate (tried_fallback=False)
            OverallTimeoutError: Deadline spent before a candidate
            TranslationError: First non-quota failure, as its public error
        """
        provider = client.provider
        candidates = self.plan(provider, primary_model)

        if not candidates:
            self.logger.warning("No fallback models configured", provider=provider.value, model=primary_model)
            raise QuotaExceededError(primary_model, tried_fallback=False, provider=provider)

        for candidate in candidates:
            deadline.check_alive()
            timeout = deadline.attempt_timeout(self.attempt_cap, self.buffer, self.min_attempt_timeout)

            self.logger.info(
                "Trying fallback model",
                provider=provider.value,
                primary_model=primary_model,
                fallback_model=candidate.model,
            )
            fallbacks_total.labels(provider=provider.value, model=candidate.model).inc()

            outcome = await run_attempt(
                client, candidate.model, prompt, api_key, timeout, "fallback", attempt_log, logger=self.logger
            )
            if isinstance(outcome, AttemptSuccess):
                self.logger.info(
                    "Fallback model succeeded",
                    provider=provider.value,
                    primary_model=primary_model,
                    fallback_model=candidate.model,
                )
                return FallbackResult(text=outcome.text, model=candidate.model)

            if not outcome.is_quota:
                raise to_public_error(outcome, provider, candidate.model, timeout) from outcome.error

        raise QuotaExceededError(primary_model, tried_fallback=True, provider=provider)
