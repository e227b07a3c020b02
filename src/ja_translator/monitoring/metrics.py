"""Custom Prometheus metrics for the Japanese translation layer.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- translation_requests_total (high quota / timeout share)
- fallbacks_total (primary model regularly out of quota)
- abandoned_calls_total (provider calls outliving their attempt timer)
"""

from prometheus_client import Counter, Histogram

# === Request Metrics ===

translation_requests_total = Counter(
    "translation_requests_total",
    "Total translate() calls by provider and final status",
    ["provider", "status"],
)
"""
Translation requests counter.

Labels:
- provider: gemini, groq
- status: success, or the error class name (QuotaExceededError, OverallTimeoutError, ...)
"""

llm_attempts_total = Counter(
    "llm_attempts_total",
    "Total provider attempts by model and outcome",
    ["provider", "model", "outcome"],
)
"""
Provider attempts counter.

Labels:
- outcome: success, or an ErrorKind value (quota, timeout, auth_invalid_key, ...)
"""

# === Retry Metrics ===

retries_total = Counter(
    "retries_total",
    "Total backoff waits before re-attempting the primary model",
    ["provider"],
)
"""
Retry counter, incremented once per scheduled backoff.

Alert thresholds:
- WARN: retry rate > 10% of total requests
- CRITICAL: retry rate > 30% of total requests
"""

fallbacks_total = Counter(
    "fallbacks_total",
    "Total attempts made on a fallback model",
    ["provider", "model"],
)

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Provider call latency in seconds",
    ["provider", "model", "success"],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0],
)
"""
Provider latency histogram, observed when the HTTP call settles.

Abandoned calls are observed too, so the tail shows how long providers
kept working after we stopped waiting.

Alert thresholds:
- WARN: p95 > 10s
- CRITICAL: p95 > 30s (the default attempt timeout)
"""

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens reported by providers",
    ["provider", "model", "token_type"],
)
"""
Token usage counter.

Labels:
- token_type: prompt, completion
"""

abandoned_calls_total = Counter(
    "abandoned_calls_total",
    "Provider calls still running when their attempt timer fired",
    ["provider"],
)
