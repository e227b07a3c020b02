"""
Deadline, retry and fallback policy for provider calls.

1. **DeadlineTracker**: One time budget for the whole translate() call
2. **RetryScheduler**: Quota-aware retries with backoff on the primary model
3. **FallbackChain**: One attempt per configured fallback model
4. **RetryExhausted**: Internal hand-over from (2) to (3)

Only quota failures are retried or fall back; every other failure is
terminal and mapped to the public error taxonomy.

Usage:
    >>> from ja_translator.retry import DeadlineTracker, RetryScheduler
    >>> deadline = DeadlineTracker(settings.OVERALL_TIMEOUT)
    >>> text = await RetryScheduler.from_settings(settings).run(client, model, prompt, key, deadline, log)
"""

from ja_translator.retry.deadline import DeadlineTracker
from ja_translator.retry.exceptions import RetryExhausted, to_public_error
from ja_translator.retry.fallback import FallbackCandidate, FallbackChain, FallbackResult
from ja_translator.retry.metadata import AttemptLog, AttemptRecord, RetryMetadata
from ja_translator.retry.scheduler import RetryScheduler

__all__ = [
    "DeadlineTracker",
    "RetryScheduler",
    "FallbackChain",
    "FallbackCandidate",
    "FallbackResult",
    "RetryExhausted",
    "to_public_error",
    "AttemptLog",
    "AttemptRecord",
    "RetryMetadata",
]
