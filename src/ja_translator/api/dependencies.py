"""
FastAPI dependency injection for the translation layer.

Provides singleton instances of expensive resources (provider clients,
prompt builder) and factory functions for the per-request orchestrator.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict

from fastapi import Depends

from ja_translator.config import Settings, settings
from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.llm.factory import create_clients
from ja_translator.llm.prompt_builder import PromptBuilder
from ja_translator.models.enums import ProviderName
from ja_translator.translation.orchestrator import TranslationOrchestrator
from ja_translator.translation.service import TranslationService


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_provider_clients() -> Dict[ProviderName, BaseProviderClient]:
    """
    Get singleton provider clients with connection pooling.

    One client per provider; each keeps its own httpx connection pool and
    the set of calls abandoned after their attempt timer fired, so they
    must outlive individual requests.

    Returns:
        Mapping of ProviderName to client
    """
    return create_clients(get_settings())


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder.

    Loads the Jinja2 template once and reuses it across requests.

    Returns:
        PromptBuilder instance
    """
    return PromptBuilder(templates_dir=Path(get_settings().PROMPT_TEMPLATES_DIR))


def get_orchestrator(
    clients: Dict[ProviderName, BaseProviderClient] = Depends(get_provider_clients),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    settings: Settings = Depends(get_settings),
) -> TranslationOrchestrator:
    """
    Create the orchestrator with injected dependencies.

    Note: not cached, it is lightweight and holds no per-request state.
    All heavy resources (clients, builder) are singletons.

    Returns:
        TranslationOrchestrator instance
    """
    return TranslationOrchestrator(
        clients=clients,
        prompt_builder=prompt_builder,
        settings=settings,
    )


def get_translation_service(
    orchestrator: TranslationOrchestrator = Depends(get_orchestrator),
) -> TranslationService:
    return TranslationService(orchestrator)
