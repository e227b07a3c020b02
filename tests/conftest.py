"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from pathlib import Path

import pytest

from ja_translator.config import DEFAULT_PROMPT_TEMPLATES_DIR, Settings
from ja_translator.llm.prompt_builder import PromptBuilder
from tests.fixtures.fakes import VALID_GEMINI_KEY, VALID_GROQ_KEY


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.MAX_RETRY_ATTEMPTS = 3
    """
    return Settings(
        # === Application ===
        APP_NAME="Japanese Translation Layer (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Providers ===
        DEFAULT_PROVIDER="groq",
        DEFAULT_GEMINI_MODEL="gemini-2.5-flash-lite",
        DEFAULT_GROQ_MODEL="openai/gpt-oss-120b",
        GEMINI_API_KEY="",
        GROQ_API_KEY="",
        GEMINI_BASE_URL="http://gemini.test",
        GROQ_BASE_URL="http://groq.test",

        # === Limits & timeouts ===
        MAX_TEXT_LENGTH=10000,
        MIN_API_KEY_LENGTH=30,
        API_TIMEOUT=30.0,
        OVERALL_TIMEOUT=60.0,
        RETRY_BUFFER=1.0,
        MIN_ATTEMPT_TIMEOUT=1.0,
        MAX_RETRY_ATTEMPTS=2,
        INITIAL_RETRY_DELAY=2.0,
        MAX_RETRY_DELAY=10.0,
        GEMINI_FALLBACK_MODELS=["gemini-2.5-flash-lite", "gemini-2.5-flash", "gemini-2.5-pro"],
        GROQ_FALLBACK_MODELS=[
            "openai/gpt-oss-120b",
            "openai/gpt-oss-20b",
            "llama-3.3-70b-versatile",
            "llama-3.1-70b-versatile",
            "mixtral-8x7b-32768",
        ],

        PROMPT_TEMPLATES_DIR=DEFAULT_PROMPT_TEMPLATES_DIR,
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def templates_dir() -> Path:
    """Bundled prompt templates."""
    return Path(DEFAULT_PROMPT_TEMPLATES_DIR)


@pytest.fixture
def prompt_builder(templates_dir: Path) -> PromptBuilder:
    return PromptBuilder(templates_dir=templates_dir)


@pytest.fixture
def gemini_key() -> str:
    return VALID_GEMINI_KEY


@pytest.fixture
def groq_key() -> str:
    return VALID_GROQ_KEY
