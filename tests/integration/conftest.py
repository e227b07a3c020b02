"""Integration test fixtures (API wiring and live provider prerequisites).

API tests run the real FastAPI app with scripted provider clients swapped
in through dependency_overrides. Live provider tests are skipped unless
GEMINI_API_KEY / GROQ_API_KEY are set in the environment.
"""

import os

import pytest
from fastapi.testclient import TestClient

from ja_translator.api.dependencies import get_orchestrator, get_provider_clients, get_settings
from ja_translator.main import app
from ja_translator.models.enums import ProviderName
from ja_translator.retry.fallback import FallbackChain
from ja_translator.retry.scheduler import RetryScheduler
from ja_translator.translation.orchestrator import TranslationOrchestrator
from tests.fixtures.fakes import (
    FakeClock,
    FakeSleep,
    ScriptedGeminiClient,
    ScriptedGroqClient,
)


@pytest.fixture
def scripted_clients():
    """Scripted provider clients; set `.script` in the test."""
    return {ProviderName.GEMINI: ScriptedGeminiClient(), ProviderName.GROQ: ScriptedGroqClient()}


@pytest.fixture
def api_client(test_settings, prompt_builder, scripted_clients):
    """TestClient on the real app with scripted providers and fake time.

    Overrides are cleared after the test so other tests see the real wiring.
    """
    clock = FakeClock()
    sleep = FakeSleep(clock)

    def orchestrator_override() -> TranslationOrchestrator:
        return TranslationOrchestrator(
            clients=scripted_clients,
            prompt_builder=prompt_builder,
            settings=test_settings,
            scheduler=RetryScheduler.from_settings(test_settings, sleep=sleep),
            fallback_chain=FallbackChain.from_settings(test_settings),
            clock=clock,
        )

    app.dependency_overrides[get_orchestrator] = orchestrator_override
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_provider_clients] = lambda: scripted_clients

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def _require_env(name: str) -> str:
    value = os.environ.get(name, "")
    if not value:
        pytest.skip(f"{name} not set")
    return value


@pytest.fixture(scope="session")
def live_gemini_key() -> str:
    """Real Gemini key from the environment; skips the test when absent."""
    return _require_env("GEMINI_API_KEY")


@pytest.fixture(scope="session")
def live_groq_key() -> str:
    """Real Groq key from the environment; skips the test when absent."""
    return _require_env("GROQ_API_KEY")


@pytest.fixture
def live_settings(test_settings):
    """Settings pointing at the real provider endpoints."""
    return test_settings.model_copy(
        update={
            "GEMINI_BASE_URL": "https://generativelanguage.googleapis.com",
            "GROQ_BASE_URL": "https://api.groq.com",
        }
    )
