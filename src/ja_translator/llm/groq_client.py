"""
Groq client.

Groq exposes an OpenAI-compatible API:
- POST /openai/v1/chat/completions (bearer auth)
"""

import re
import time

from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.models.enums import ProviderName
from ja_translator.models.llm_models import LLMGenerationRequest, LLMGenerationResponse


# gsk_ prefix + at least 40 alphanumerics, no underscores or hyphens after the prefix
GROQ_API_KEY_PATTERN = re.compile(r"^gsk_[A-Za-z0-9]{40,}$")
GROQ_MIN_API_KEY_LENGTH = 44


class GroqClient(BaseProviderClient):
    """
    Groq-specific client.

    Request payload:
    {
        "model": "openai/gpt-oss-120b",
        "messages": [{"role": "user", "content": "..."}],
        "temperature": 0.3,
        "max_tokens": 4096
    }

    Response:
    {
        "id": "chatcmpl-...",
        "model": "openai/gpt-oss-120b",
        "choices": [{"message": {"role": "assistant", "content": "..."}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 50, "completion_tokens": 150}
    }
    """

    provider = ProviderName.GROQ
    api_key_pattern = GROQ_API_KEY_PATTERN
    min_api_key_length = GROQ_MIN_API_KEY_LENGTH

    def __init__(self, base_url: str = "https://api.groq.com", **kwargs):
        super().__init__(base_url, **kwargs)

    async def _send(self, request: LLMGenerationRequest, api_key: str) -> LLMGenerationResponse:
        start_time = time.monotonic()
        payload = {
            "model": request.model,
            "messages": [{"role": "user", "content": request.prompt}],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }

        client = self._get_client()
        response = await client.post(
            "/openai/v1/chat/completions",
            json=payload,
            headers={"Authorization": f"Bearer {api_key}"},
        )
        response.raise_for_status()
        data = response.json()
        latency_ms = int((time.monotonic() - start_time) * 1000)

        choices = data.get("choices") or []
        content = ""
        finish_reason = None
        if choices:
            message = choices[0].get("message") or {}
            content = message.get("content") or ""
            finish_reason = choices[0].get("finish_reason")

        usage = data.get("usage") or {}
        return LLMGenerationResponse(
            content=content,
            model_version=data.get("model", request.model),
            finish_reason=finish_reason,
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
            latency_ms=latency_ms,
            raw_metadata={"id": data.get("id"), "system_fingerprint": data.get("system_fingerprint")},
        )
