"""Integration tests against the real Gemini and Groq APIs.

These tests spend real quota. They are skipped unless GEMINI_API_KEY or
GROQ_API_KEY is set:

    GROQ_API_KEY=gsk_... pytest tests/integration/llm
"""

import pytest

from ja_translator.exceptions import InvalidApiKeyError, QuotaExceededError
from ja_translator.llm.factory import create_clients
from ja_translator.llm.gemini_client import GeminiClient
from ja_translator.llm.groq_client import GroqClient
from ja_translator.models.enums import ProviderName
from ja_translator.models.request_models import TranslationRequest
from ja_translator.translation.orchestrator import TranslationOrchestrator


def contains_japanese(text: str) -> bool:
    return any("\u3040" <= ch <= "\u30ff" or "\u4e00" <= ch <= "\u9fff" for ch in text)


@pytest.fixture
async def live_orchestrator(live_settings, prompt_builder):
    clients = create_clients(live_settings)
    yield TranslationOrchestrator(clients=clients, prompt_builder=prompt_builder, settings=live_settings)
    for client in clients.values():
        await client.close()


@pytest.mark.asyncio
async def test_gemini_invoke(live_gemini_key):
    async with GeminiClient(base_url="https://generativelanguage.googleapis.com") as client:
        text = await client.invoke("gemini-2.5-flash-lite", "Say 'pong' and nothing else.", live_gemini_key, 30.0)

    assert "pong" in text.lower()


@pytest.mark.asyncio
async def test_groq_invoke(live_groq_key):
    async with GroqClient(base_url="https://api.groq.com") as client:
        text = await client.invoke("openai/gpt-oss-20b", "Say 'pong' and nothing else.", live_groq_key, 30.0)

    assert "pong" in text.lower()


@pytest.mark.asyncio
async def test_groq_translation(live_orchestrator, live_groq_key):
    request = TranslationRequest(
        raw_text="Good morning. The weather is nice today.",
        api_key=live_groq_key,
        provider=ProviderName.GROQ,
        model="openai/gpt-oss-120b",
    )

    try:
        outcome = await live_orchestrator.execute(request)
    except QuotaExceededError:
        pytest.skip("Groq quota exhausted")

    assert contains_japanese(outcome.text)
    assert outcome.metadata.total_attempts >= 1


@pytest.mark.asyncio
async def test_gemini_rejects_wrong_key(live_orchestrator, live_gemini_key):
    """A well-formed but revoked key is reported by the provider, not by format checks."""
    fake_key = "AIza" + "x" * 35
    request = TranslationRequest(
        raw_text="Hello",
        api_key=fake_key,
        provider=ProviderName.GEMINI,
        model="gemini-2.5-flash-lite",
    )

    with pytest.raises(InvalidApiKeyError) as exc_info:
        await live_orchestrator.translate(request)

    assert fake_key not in str(exc_info.value)
