"""
Retry metadata tracking.

This module defines the dataclasses that capture the attempt history of
one translate() call for audit trails, metrics and the HTTP response.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AttemptRecord:
    """
    One provider call.

    Attributes:
        model: Model that was called
        stage: "primary" or "fallback"
        outcome: "success" or an ErrorKind value
        duration_ms: Time spent waiting on the call
        retry_hint: Server-suggested backoff, if the failure carried one
    """

    model: str
    stage: str
    outcome: str
    duration_ms: int
    retry_hint: Optional[float] = None

    def __post_init__(self) -> None:
        if self.stage not in ("primary", "fallback"):
            raise ValueError(f"stage must be 'primary' or 'fallback', got '{self.stage}'")
        if self.duration_ms < 0:
            raise ValueError("duration_ms must be >= 0")


@dataclass
class AttemptLog:
    """Mutable list of AttemptRecord filled while a request runs."""

    records: list[AttemptRecord] = field(default_factory=list)

    def add(self, record: AttemptRecord) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class RetryMetadata:
    """
    Complete attempt history of a successful translate() call.

    Attributes:
        model_used: Model whose answer was returned
        used_fallback: True when model_used is not the requested model
        total_attempts: Number of provider calls made
        total_latency_ms: Wall time from validation to result
        attempts: Per-call records, in order
    """

    model_used: str
    used_fallback: bool
    total_attempts: int
    total_latency_ms: int
    attempts: tuple[AttemptRecord, ...] = ()

    def __post_init__(self) -> None:
        """Validate metadata invariants."""
        if self.total_attempts < 1:
            raise ValueError("total_attempts must be >= 1")

        if self.total_latency_ms < 0:
            raise ValueError("total_latency_ms must be >= 0")

    @property
    def retries(self) -> int:
        """Extra calls on the primary model after the first."""
        return max(0, sum(1 for r in self.attempts if r.stage == "primary") - 1)
