"""
Retry layer exceptions and failure mapping.

RetryExhausted is internal: it tells the orchestrator that the primary
model gave up on quota and the fallback chain should take over. It never
reaches callers of translate(); every other failure is converted into the
public taxonomy by `to_public_error()`.
"""

from ja_translator.exceptions import (
    AttemptTimeoutError,
    EmptyResponseError,
    InvalidApiKeyError,
    InvalidModelError,
    PermissionDeniedError,
    ProviderRequestError,
    QuotaExceededError,
    TranslationError,
)
from ja_translator.models.enums import ErrorKind, ProviderName
from ja_translator.models.outcome import AttemptFailure


class RetryExhausted(Exception):
    """
    Raised when every attempt on a model failed with a quota error.

    Attributes:
        model: Model that was retried
        last_failure: Failure of the final attempt
        attempts: Number of attempts made on `model`
    """

    def __init__(self, model: str, last_failure: AttemptFailure, attempts: int) -> None:
        self.model = model
        self.last_failure = last_failure
        self.attempts = attempts
        super().__init__(
            f"Quota retries exhausted for {model} after {attempts} attempts. "
            f"Final error: {last_failure.kind.value}"
        )


def to_public_error(
    failure: AttemptFailure,
    provider: ProviderName,
    model: str,
    attempt_timeout: float,
) -> TranslationError:
    """
    Build the user-facing error for a terminal failure.

    Quota failures map to QuotaExceededError(tried_fallback=False) here;
    the fallback chain raises its own variant when it gives up.

    Args:
        failure: Classified failure (message already scrubbed of the key)
        provider: Provider that was called
        model: Model that was called
        attempt_timeout: Timeout the failed attempt ran with

    Returns:
        TranslationError subclass matching failure.kind
    """
    kind = failure.kind
    if kind is ErrorKind.QUOTA:
        return QuotaExceededError(model, tried_fallback=False, provider=provider)
    if kind is ErrorKind.TIMEOUT:
        return AttemptTimeoutError(attempt_timeout, model=model)
    if kind is ErrorKind.AUTH_INVALID_KEY:
        return InvalidApiKeyError(provider, reason=failure.message)
    if kind is ErrorKind.AUTH_PERMISSION_DENIED:
        return PermissionDeniedError(provider, reason=failure.message)
    if kind is ErrorKind.INVALID_MODEL:
        return InvalidModelError(model, reason=failure.message)
    if kind is ErrorKind.EMPTY_RESPONSE:
        return EmptyResponseError(model)
    return ProviderRequestError(failure.message, model=model)
