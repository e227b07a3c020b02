"""
Provider client construction from settings.
"""

from typing import Dict

from ja_translator.config import Settings
from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.llm.gemini_client import GeminiClient
from ja_translator.llm.groq_client import GroqClient
from ja_translator.models.enums import ProviderName


def create_client(provider: ProviderName, settings: Settings) -> BaseProviderClient:
    """Build the client for `provider` using base URL and generation params from settings."""
    common = {
        "http_timeout": settings.HTTP_TIMEOUT,
        "temperature": settings.LLM_TEMPERATURE,
        "max_tokens": settings.LLM_MAX_TOKENS,
    }
    if provider is ProviderName.GEMINI:
        return GeminiClient(base_url=settings.GEMINI_BASE_URL, **common)
    if provider is ProviderName.GROQ:
        return GroqClient(base_url=settings.GROQ_BASE_URL, **common)
    raise ValueError(f"Unsupported provider: {provider}")


def create_clients(settings: Settings) -> Dict[ProviderName, BaseProviderClient]:
    """One client per supported provider."""
    return {provider: create_client(provider, settings) for provider in ProviderName}
