"""Monitoring and metrics instrumentation for the Japanese translation layer.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from ja_translator.monitoring.metrics import (
    abandoned_calls_total,
    fallbacks_total,
    llm_attempts_total,
    llm_latency_seconds,
    llm_tokens_total,
    retries_total,
    translation_requests_total,
)

__all__ = [
    "translation_requests_total",
    "llm_attempts_total",
    "retries_total",
    "fallbacks_total",
    "llm_latency_seconds",
    "llm_tokens_total",
    "abandoned_calls_total",
]
