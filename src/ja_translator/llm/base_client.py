"""
Abstract base client for LLM providers.

Defines the interface that all provider clients (Gemini, Groq) must adhere
to, and implements the part they share: racing one HTTP call against a
local attempt timer. The orchestrator only ever talks to this interface.
"""

import asyncio
import re
import time
from abc import ABC, abstractmethod
from typing import Optional

import httpx
import structlog

from ja_translator.llm.exceptions import (
    LLMEmptyResponseError,
    LLMRequestError,
    LLMTimeoutError,
)
from ja_translator.llm.text_utils import redact_secret
from ja_translator.models.enums import ProviderName
from ja_translator.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from ja_translator.monitoring.metrics import (
    abandoned_calls_total,
    llm_latency_seconds,
    llm_tokens_total,
)


logger = structlog.get_logger(__name__)


class BaseProviderClient(ABC):
    """
    Abstract base class for provider clients.

    Subclasses set `provider`, `api_key_pattern` and `min_api_key_length`
    and implement `_send()`, which maps one LLMGenerationRequest onto the
    provider's wire format.

    Responsibilities:
    - Send exactly one HTTP request per invoke()
    - Stop waiting when the attempt timer fires
    - Turn blank answers and HTTP failures into LLMClientError subclasses

    Does NOT handle:
    - Retries, backoff or fallback (RetryScheduler / FallbackChain)
    - Error classification (error_classifier)

    A timed-out call is *abandoned*, not cancelled: the HTTP task keeps
    running until the transport gives up (HTTP_TIMEOUT), and its late
    result is logged and dropped. Tasks are kept in `_in_flight` so the
    event loop does not garbage-collect them mid-flight.
    """

    provider: ProviderName
    api_key_pattern: re.Pattern
    min_api_key_length: int

    def __init__(
        self,
        base_url: str,
        http_timeout: float = 120.0,
        temperature: float = 0.3,
        max_tokens: int = 4096,
        http_client: Optional[httpx.AsyncClient] = None,
        connection_limits: Optional[httpx.Limits] = None,
    ):
        """
        Initialize base client.

        Args:
            base_url: Provider API root (e.g., https://api.groq.com)
            http_timeout: Transport-level timeout, bounds how long abandoned calls live
            temperature: Sampling temperature sent with every request
            max_tokens: Completion token cap sent with every request
            http_client: Pre-built client (tests inject one with a MockTransport)
            connection_limits: httpx connection pool limits
        """
        self.base_url = base_url.rstrip("/")
        self.http_timeout = http_timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0,
            )
        self._connection_limits = connection_limits
        self._client: Optional[httpx.AsyncClient] = http_client
        self._in_flight: set[asyncio.Task] = set()
        self._abandoned: set[asyncio.Task] = set()

        logger.info(
            "Initialized provider client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            http_timeout=http_timeout,
        )

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.http_timeout),
                limits=self._connection_limits,
                follow_redirects=True,
            )
            logger.debug("Created new httpx AsyncClient", provider=self.provider.value)
        return self._client

    @abstractmethod
    async def _send(self, request: LLMGenerationRequest, api_key: str) -> LLMGenerationResponse:
        """
        Send one generation request and parse the answer.

        Implementations should call `response.raise_for_status()` and let
        httpx errors propagate; `_call()` converts them.

        Args:
            request: Provider-neutral generation request
            api_key: Plain API key for this call

        Returns:
            LLMGenerationResponse (content may be empty)
        """

    def is_valid_api_key(self, api_key: str, min_length: int = 0) -> bool:
        """
        Check the key's *format* (no network).

        Args:
            api_key: Candidate key, surrounding whitespace ignored
            min_length: Extra length floor from settings

        Returns:
            True if long enough and matching the provider pattern
        """
        key = api_key.strip()
        if len(key) < max(min_length, self.min_api_key_length):
            return False
        return self.api_key_pattern.fullmatch(key) is not None

    @property
    def in_flight_count(self) -> int:
        """Number of HTTP calls not yet settled, abandoned ones included."""
        return len(self._in_flight)

    async def invoke(self, model: str, prompt: str, api_key: str, timeout: float) -> str:
        """
        Make one provider call and wait at most `timeout` seconds for it.

        Args:
            model: Model identifier
            prompt: Complete prompt
            api_key: Plain API key
            timeout: Attempt timeout in seconds

        Returns:
            Trimmed, non-empty generated text

        Raises:
            LLMTimeoutError: Timer fired first (the call keeps running)
            LLMEmptyResponseError: Provider answered with blank text
            LLMRequestError: HTTP or transport failure, raw message preserved
        """
        request = LLMGenerationRequest(
            prompt=prompt,
            model=model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        task = asyncio.ensure_future(self._call(request, api_key))
        self._in_flight.add(task)
        task.add_done_callback(self._on_settled)

        # asyncio.wait never cancels the task, neither on timeout nor when
        # the caller itself is cancelled.
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            self._abandoned.add(task)
            logger.info(
                "Caller cancelled, provider call left running",
                provider=self.provider.value,
                model=model,
            )
            raise

        if task not in done:
            self._abandoned.add(task)
            abandoned_calls_total.labels(provider=self.provider.value).inc()
            logger.warning(
                "Provider call timed out, abandoning in-flight request",
                provider=self.provider.value,
                model=model,
                timeout=timeout,
            )
            raise LLMTimeoutError(timeout, details={"model": model})

        response = task.result()
        text = response.content.strip()
        if not text:
            raise LLMEmptyResponseError(
                f"Empty response from {model}",
                details={"model": model, "finish_reason": response.finish_reason},
            )
        return text

    async def _call(self, request: LLMGenerationRequest, api_key: str) -> LLMGenerationResponse:
        """Run `_send()` with latency/token metrics and error conversion."""
        start_time = time.monotonic()
        labels = {"provider": self.provider.value, "model": request.model}

        logger.debug(
            "Sending generation request",
            prompt_length=len(request.prompt),
            **labels,
        )

        try:
            response = await self._send(request, api_key)
        except httpx.HTTPStatusError as e:
            llm_latency_seconds.labels(success="false", **labels).observe(time.monotonic() - start_time)
            status = e.response
            message = redact_secret(f"[{status.status_code} {status.reason_phrase}] {status.text}", api_key)
            logger.warning(
                "Provider HTTP error",
                status_code=status.status_code,
                error_text=message,
                **labels,
            )
            raise LLMRequestError(message, status_code=status.status_code) from e
        except httpx.HTTPError as e:
            llm_latency_seconds.labels(success="false", **labels).observe(time.monotonic() - start_time)
            logger.warning("Provider transport error", error=str(e), error_type=type(e).__name__, **labels)
            raise LLMRequestError(
                f"Network error: {redact_secret(str(e), api_key)}",
                details={"error_type": type(e).__name__},
            ) from e
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # JSON decode failures and unexpected payload shapes
            llm_latency_seconds.labels(success="false", **labels).observe(time.monotonic() - start_time)
            logger.error("Failed to parse provider response", error=str(e), **labels)
            raise LLMRequestError(
                f"Invalid response from provider: {e}",
                details={"parse_error": str(e)},
            ) from e

        llm_latency_seconds.labels(success="true", **labels).observe(time.monotonic() - start_time)
        if response.prompt_tokens:
            llm_tokens_total.labels(token_type="prompt", **labels).inc(response.prompt_tokens)
        if response.completion_tokens:
            llm_tokens_total.labels(token_type="completion", **labels).inc(response.completion_tokens)

        logger.info(
            "Provider generation finished",
            latency_ms=response.latency_ms,
            prompt_tokens=response.prompt_tokens,
            completion_tokens=response.completion_tokens,
            finish_reason=response.finish_reason,
            **labels,
        )
        return response

    def _on_settled(self, task: asyncio.Task) -> None:
        self._in_flight.discard(task)
        abandoned = task in self._abandoned
        self._abandoned.discard(task)

        if task.cancelled():
            return
        # Always retrieve the exception so asyncio does not warn about it
        error = task.exception()
        if not abandoned:
            return
        if error is not None:
            logger.info(
                "Abandoned provider call failed after timeout",
                provider=self.provider.value,
                error=str(error),
            )
        else:
            logger.info(
                "Abandoned provider call completed after timeout, result discarded",
                provider=self.provider.value,
            )

    async def close(self) -> None:
        """Close the HTTP client connection."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed provider client connection", provider=self.provider.value)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url}, http_timeout={self.http_timeout}s)"
