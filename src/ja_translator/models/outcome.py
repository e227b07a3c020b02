"""
Outcome of a single provider attempt.

An attempt either succeeds with text or fails with a classified ErrorKind.
Frozen dataclasses, created per attempt and discarded with the request.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ja_translator.models.enums import ErrorKind


@dataclass(frozen=True)
class AttemptSuccess:
    """Attempt produced a non-empty translation."""

    text: str


@dataclass(frozen=True)
class AttemptFailure:
    """
    Attempt failed.

    Attributes:
        kind: Classified failure kind
        message: Original provider message (credential-scrubbed by the caller)
        retry_hint: Server-suggested wait in seconds, when the message carried one
        error: The raw exception, kept for chaining
    """

    kind: ErrorKind
    message: str
    retry_hint: Optional[float] = None
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @property
    def is_quota(self) -> bool:
        return self.kind is ErrorKind.QUOTA


AttemptOutcome = Union[AttemptSuccess, AttemptFailure]
