"""
Single provider attempt: invoke, classify, record.
"""

import dataclasses
import time

import structlog

from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.llm.error_classifier import classify
from ja_translator.llm.text_utils import redact_secret
from ja_translator.models.outcome import AttemptOutcome, AttemptSuccess
from ja_translator.monitoring.metrics import llm_attempts_total
from ja_translator.retry.metadata import AttemptLog, AttemptRecord


async def run_attempt(
    client: BaseProviderClient,
    model: str,
    prompt: str,
    api_key: str,
    timeout: float,
    stage: str,
    attempt_log: AttemptLog,
    logger=None,
) -> AttemptOutcome:
    """
    Make one provider call and return its classified outcome.

    Never raises for provider failures; cancellation still propagates.
    The failure message is scrubbed of `api_key` before it leaves here.
    """
    log = logger or structlog.get_logger(__name__)
    provider = client.provider.value
    start = time.monotonic()

    try:
        text = await client.invoke(model, prompt, api_key, timeout)
        outcome: AttemptOutcome = AttemptSuccess(text=text)
    except Exception as e:
        failure = classify(e)
        outcome = dataclasses.replace(failure, message=redact_secret(failure.message, api_key))

    duration_ms = int((time.monotonic() - start) * 1000)
    if isinstance(outcome, AttemptSuccess):
        label = "success"
        attempt_log.add(AttemptRecord(model=model, stage=stage, outcome=label, duration_ms=duration_ms))
    else:
        label = outcome.kind.value
        attempt_log.add(
            AttemptRecord(
                model=model,
                stage=stage,
                outcome=label,
                duration_ms=duration_ms,
                retry_hint=outcome.retry_hint,
            )
        )
        log.warning(
            "Provider attempt failed",
            provider=provider,
            model=model,
            stage=stage,
            error_kind=label,
            error_message=outcome.message,
            retry_hint=outcome.retry_hint,
            timeout=timeout,
        )

    llm_attempts_total.labels(provider=provider, model=model, outcome=label).inc()
    return outcome
