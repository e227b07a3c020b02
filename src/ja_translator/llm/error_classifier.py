"""
Classification of raw provider failures.

Provider APIs do not expose typed errors, so the only signal is the wording
of the error message. All string matching lives in this module; callers
receive an AttemptFailure with a closed ErrorKind and branch on that.

Timeouts and empty responses are recognized by exception type, never by
message text.
"""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from ja_translator.llm.exceptions import LLMEmptyResponseError, LLMTimeoutError
from ja_translator.models.enums import ErrorKind
from ja_translator.models.outcome import AttemptFailure


# Checked in this order; the first matching group wins.
QUOTA_MARKERS = ("quota", "RESOURCE_EXHAUSTED", "429", "Too Many Requests")
AUTH_INVALID_KEY_MARKERS = ("API_KEY_INVALID", "API key")
AUTH_PERMISSION_DENIED_MARKERS = ("PERMISSION_DENIED",)
INVALID_MODEL_MARKERS = ("model", "NOT_FOUND")

# (kind, markers, ignore_case). Markers are exact substrings except for the
# key group: Groq says "Invalid API Key", Gemini says "API key not valid".
_MESSAGE_RULES: tuple[tuple[ErrorKind, tuple[str, ...], bool], ...] = (
    (ErrorKind.QUOTA, QUOTA_MARKERS, False),
    (ErrorKind.AUTH_INVALID_KEY, AUTH_INVALID_KEY_MARKERS, True),
    (ErrorKind.AUTH_PERMISSION_DENIED, AUTH_PERMISSION_DENIED_MARKERS, False),
    (ErrorKind.INVALID_MODEL, INVALID_MODEL_MARKERS, False),
)

RETRY_IN_PATTERN = re.compile(r"retry in ([\d.]+)s", re.IGNORECASE)
RETRY_DELAY_JSON_PATTERN = re.compile(r'"retryDelay"\s*:\s*"([\d.]+)s"', re.IGNORECASE)


def _matches_any(message: str, markers: tuple[str, ...], ignore_case: bool = False) -> bool:
    if ignore_case:
        folded = message.casefold()
        return any(marker.casefold() in folded for marker in markers)
    return any(marker in message for marker in markers)


def classify_message(message: str) -> ErrorKind:
    """
    Map a provider error message to an ErrorKind.

    Args:
        message: Raw error message

    Returns:
        The first matching kind, or ErrorKind.UNKNOWN
    """
    for kind, markers, ignore_case in _MESSAGE_RULES:
        if _matches_any(message, markers, ignore_case):
            return kind
    return ErrorKind.UNKNOWN


def parse_retry_hint(message: str) -> Optional[float]:
    """
    Extract a server-suggested backoff from an error message.

    Understands "Please retry in 8.490937993s" and the JSON fragment
    "retryDelay":"8s". The value is rounded *up* to the next millisecond so
    that callers never wait less than the server asked for.

    Args:
        message: Raw error message

    Returns:
        Delay in seconds, or None when no hint is present

    Examples:
        >>> parse_retry_hint("Please retry in 8.49s")
        8.49
        >>> parse_retry_hint('{"retryDelay": "8s"}')
        8.0
    """
    for pattern in (RETRY_IN_PATTERN, RETRY_DELAY_JSON_PATTERN):
        match = pattern.search(message)
        if match is None:
            continue
        try:
            # Decimal keeps "8.49" exact so ceil() does not round 8490 up to 8491
            milliseconds = math.ceil(Decimal(match.group(1)) * 1000)
        except InvalidOperation:
            continue
        return milliseconds / 1000
    return None


def classify(error: BaseException) -> AttemptFailure:
    """
    Turn a raw client failure into an AttemptFailure.

    Args:
        error: Exception raised by a provider client

    Returns:
        AttemptFailure with kind, original message and optional retry hint
    """
    message = str(error)

    if isinstance(error, LLMTimeoutError):
        return AttemptFailure(kind=ErrorKind.TIMEOUT, message=message, error=error)
    if isinstance(error, LLMEmptyResponseError):
        return AttemptFailure(kind=ErrorKind.EMPTY_RESPONSE, message=message, error=error)

    kind = classify_message(message)
    retry_hint = parse_retry_hint(message) if kind is ErrorKind.QUOTA else None
    return AttemptFailure(kind=kind, message=message, retry_hint=retry_hint, error=error)
