"""
Resilient translation orchestrator.

Turns raw text plus a provider/model selection into a Japanese translation:

    sanitize -> validate -> prompt -> RetryScheduler(primary)
             -> [quota give-up] FallbackChain -> result

Validation happens before any network call and is never retried. The
DeadlineTracker started after validation bounds the whole call, retries
and fallbacks included.
"""

import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

import structlog

from ja_translator.config import Settings
from ja_translator.exceptions import (
    EmptyTextError,
    InvalidApiKeyFormatError,
    TextTooLongError,
    TranslationError,
)
from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.llm.prompt_builder import PromptBuilder
from ja_translator.llm.text_utils import sanitize_input
from ja_translator.models.enums import ProviderName
from ja_translator.models.request_models import TranslationRequest
from ja_translator.monitoring.metrics import translation_requests_total
from ja_translator.retry.deadline import DeadlineTracker
from ja_translator.retry.exceptions import RetryExhausted
from ja_translator.retry.fallback import FallbackChain
from ja_translator.retry.metadata import AttemptLog, RetryMetadata
from ja_translator.retry.scheduler import RetryScheduler


ProgressCallback = Callable[[str, bool], None]


@dataclass(frozen=True)
class TranslationOutcome:
    """Translated text plus how it was obtained."""

    text: str
    metadata: RetryMetadata


def progress_message(model: str, from_fallback_source: bool) -> str:
    if from_fallback_source:
        return f"Using clipboard ({model}, auto-retry enabled)"
    return f"Using {model} (auto-retry enabled)"


class TranslationOrchestrator:
    """
    Entry point for one translation.

    Holds no per-request state; concurrent calls only share the provider
    clients (connection pool and in-flight task set).

    Attributes:
        clients: One provider client per ProviderName
        prompt_builder: Renders the translation prompt
        settings: Limits, timeouts and fallback lists
        scheduler: Retry policy for the primary model
        fallback_chain: Fallback policy after quota give-up
    """

    def __init__(
        self,
        clients: Mapping[ProviderName, BaseProviderClient],
        prompt_builder: PromptBuilder,
        settings: Settings,
        scheduler: Optional[RetryScheduler] = None,
        fallback_chain: Optional[FallbackChain] = None,
        clock: Callable[[], float] = time.monotonic,
        logger=None,
    ):
        self.clients = dict(clients)
        self.prompt_builder = prompt_builder
        self.settings = settings
        self.logger = logger or structlog.get_logger(__name__)
        self.scheduler = scheduler or RetryScheduler.from_settings(settings, logger=self.logger)
        self.fallback_chain = fallback_chain or FallbackChain.from_settings(settings, logger=self.logger)
        self._clock = clock

    def _client_for(self, provider: ProviderName) -> BaseProviderClient:
        try:
            return self.clients[provider]
        except KeyError:
            raise ValueError(f"No client configured for provider: {provider.value}") from None

    def validate_api_key(self, provider: ProviderName, api_key: str) -> None:
        """
        Check the key format for `provider`.

        Raises:
            InvalidApiKeyFormatError: Too short or not matching the provider pattern
        """
        client = self._client_for(provider)
        if not client.is_valid_api_key(api_key, self.settings.MIN_API_KEY_LENGTH):
            raise InvalidApiKeyFormatError(provider)

    async def translate(
        self,
        request: TranslationRequest,
        on_progress: Optional[ProgressCallback] = None,
        from_fallback_source: bool = False,
    ) -> str:
        """
        Translate `request.raw_text` to Japanese.

        Args:
            request: Text, key, provider and primary model
            on_progress: Called once with (message, from_fallback_source)
                after validation, before the first provider call
            from_fallback_source: Whether the text came from the fallback source

        Returns:
            Trimmed translation

        Raises:
            TranslationError: See ja_translator.exceptions
        """
        outcome = await self.execute(request, on_progress, from_fallback_source)
        return outcome.text

    async def execute(
        self,
        request: TranslationRequest,
        on_progress: Optional[ProgressCallback] = None,
        from_fallback_source: bool = False,
    ) -> TranslationOutcome:
        """Like translate(), but also returns the attempt metadata."""
        provider = request.provider
        log = self.logger.bind(provider=provider.value, model=request.model)

        try:
            outcome = await self._execute(request, on_progress, from_fallback_source, log)
        except TranslationError as e:
            translation_requests_total.labels(provider=provider.value, status=type(e).__name__).inc()
            log.warning("Translation failed", error_type=type(e).__name__, error=e.message)
            raise

        translation_requests_total.labels(provider=provider.value, status="success").inc()
        log.info(
            "Translation succeeded",
            model_used=outcome.metadata.model_used,
            used_fallback=outcome.metadata.used_fallback,
            attempts=outcome.metadata.total_attempts,
            duration_ms=outcome.metadata.total_latency_ms,
        )
        return outcome

    async def _execute(
        self,
        request: TranslationRequest,
        on_progress: Optional[ProgressCallback],
        from_fallback_source: bool,
        log,
    ) -> TranslationOutcome:
        sanitized = sanitize_input(request.raw_text)
        if not sanitized:
            raise EmptyTextError()
        if len(sanitized) > self.settings.MAX_TEXT_LENGTH:
            raise TextTooLongError(len(sanitized), self.settings.MAX_TEXT_LENGTH)

        api_key = request.api_key.get_secret_value().strip()
        self.validate_api_key(request.provider, api_key)

        client = self._client_for(request.provider)
        prompt = self.prompt_builder.build(sanitized)
        deadline = DeadlineTracker(self.settings.OVERALL_TIMEOUT, clock=self._clock)
        attempt_log = AttemptLog()

        log.info("Starting translation", text_length=len(sanitized), overall_timeout=deadline.overall_limit)
        if on_progress is not None:
            on_progress(progress_message(request.model, from_fallback_source), from_fallback_source)

        try:
            text = await self.scheduler.run(client, request.model, prompt, api_key, deadline, attempt_log)
            model_used = request.model
        except RetryExhausted as e:
            log.warning(
                "Primary model out of quota, switching to fallback models",
                attempts=e.attempts,
                last_error=e.last_failure.message,
            )
            result = await self.fallback_chain.run(client, request.model, prompt, api_key, deadline, attempt_log)
            text, model_used = result.text, result.model

        metadata = RetryMetadata(
            model_used=model_used,
            used_fallback=model_used != request.model,
            total_attempts=len(attempt_log),
            total_latency_ms=int(deadline.elapsed() * 1000),
            attempts=tuple(attempt_log.records),
        )
        return TranslationOutcome(text=text.strip(), metadata=metadata)
