"""
Google Gemini client.

Talks to the Generative Language REST API with httpx:
- POST /v1beta/models/{model}:generateContent
"""

import re
import time

import structlog

from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.models.enums import ProviderName
from ja_translator.models.llm_models import LLMGenerationRequest, LLMGenerationResponse


logger = structlog.get_logger(__name__)

# "AIza..." keys plus older/alternative "AI..." formats
GEMINI_API_KEY_PATTERN = re.compile(r"^AI[A-Za-z0-9_-]{28,}$")
GEMINI_MIN_API_KEY_LENGTH = 30


class GeminiClient(BaseProviderClient):
    """
    Gemini-specific client.

    Request payload:
    {
        "contents": [{"role": "user", "parts": [{"text": "..."}]}],
        "generationConfig": {"temperature": 0.3, "maxOutputTokens": 4096}
    }

    Response:
    {
        "candidates": [{
            "content": {"parts": [{"text": "..."}], "role": "model"},
            "finishReason": "STOP"
        }],
        "usageMetadata": {"promptTokenCount": 50, "candidatesTokenCount": 150},
        "modelVersion": "gemini-2.5-flash"
    }
    """

    provider = ProviderName.GEMINI
    api_key_pattern = GEMINI_API_KEY_PATTERN
    min_api_key_length = GEMINI_MIN_API_KEY_LENGTH

    def __init__(self, base_url: str = "https://generativelanguage.googleapis.com", **kwargs):
        super().__init__(base_url, **kwargs)

    async def _send(self, request: LLMGenerationRequest, api_key: str) -> LLMGenerationResponse:
        start_time = time.monotonic()
        payload = {
            "contents": [{"role": "user", "parts": [{"text": request.prompt}]}],
            "generationConfig": {
                "temperature": request.temperature,
                "maxOutputTokens": request.max_tokens,
            },
        }

        client = self._get_client()
        response = await client.post(
            f"/v1beta/models/{request.model}:generateContent",
            json=payload,
            headers={"x-goog-api-key": api_key},
        )
        response.raise_for_status()
        data = response.json()
        latency_ms = int((time.monotonic() - start_time) * 1000)

        candidates = data.get("candidates") or []
        content = ""
        finish_reason = None
        if candidates:
            first = candidates[0]
            parts = (first.get("content") or {}).get("parts") or []
            content = "".join(part.get("text", "") for part in parts)
            finish_reason = first.get("finishReason")
        else:
            # Blocked prompts come back without candidates
            logger.warning(
                "Gemini returned no candidates",
                model=request.model,
                prompt_feedback=data.get("promptFeedback"),
            )

        usage = data.get("usageMetadata") or {}
        return LLMGenerationResponse(
            content=content,
            model_version=data.get("modelVersion", request.model),
            finish_reason=finish_reason,
            prompt_tokens=usage.get("promptTokenCount"),
            completion_tokens=usage.get("candidatesTokenCount"),
            latency_ms=latency_ms,
            raw_metadata={
                "prompt_feedback": data.get("promptFeedback"),
                "response_id": data.get("responseId"),
            },
        )
