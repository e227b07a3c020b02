"""Unit test fixtures: fake time and scripted provider clients."""

import pytest

from ja_translator.models.enums import ProviderName
from ja_translator.translation.orchestrator import TranslationOrchestrator
from ja_translator.retry.fallback import FallbackChain
from ja_translator.retry.scheduler import RetryScheduler
from tests.fixtures.fakes import (
    FakeClock,
    FakeSleep,
    ScriptedGeminiClient,
    ScriptedGroqClient,
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_sleep(clock: FakeClock) -> FakeSleep:
    return FakeSleep(clock)


@pytest.fixture
def groq_client() -> ScriptedGroqClient:
    """Scripted Groq client; set `.script` in the test."""
    return ScriptedGroqClient()


@pytest.fixture
def gemini_client() -> ScriptedGeminiClient:
    """Scripted Gemini client; set `.script` in the test."""
    return ScriptedGeminiClient()


@pytest.fixture
def make_orchestrator(test_settings, prompt_builder, groq_client, gemini_client, clock, fake_sleep):
    """Factory building an orchestrator on fake time and scripted clients.

    Usage:
        orchestrator = make_orchestrator(GROQ_FALLBACK_MODELS=[])
    """

    def factory(**setting_overrides) -> TranslationOrchestrator:
        settings = test_settings.model_copy(update=setting_overrides)
        return TranslationOrchestrator(
            clients={ProviderName.GROQ: groq_client, ProviderName.GEMINI: gemini_client},
            prompt_builder=prompt_builder,
            settings=settings,
            scheduler=RetryScheduler.from_settings(settings, sleep=fake_sleep),
            fallback_chain=FallbackChain.from_settings(settings),
            clock=clock,
        )

    return factory
