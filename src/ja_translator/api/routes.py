"""
API routes for translation.

POST /translate runs one translation synchronously, bounded by
OVERALL_TIMEOUT. GET /models and GET /health expose the catalogue and
configuration status.
"""

from typing import Dict

import structlog
from fastapi import APIRouter, Depends, status
from pydantic import SecretStr

from ja_translator.api.dependencies import get_orchestrator, get_provider_clients, get_settings
from ja_translator.api.models import (
    AttemptInfo,
    ErrorResponse,
    HealthResponse,
    ModelInfo,
    ModelsResponse,
    ProviderModels,
    TranslateRequestBody,
    TranslateResponse,
)
from ja_translator.config import Settings
from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.models.enums import PROVIDER_MODELS, ProviderName, get_model_display_name
from ja_translator.models.request_models import TranslationRequest
from ja_translator.retry.fallback import fallback_models
from ja_translator.translation.orchestrator import TranslationOrchestrator

logger = structlog.get_logger(__name__)

router = APIRouter()


def default_model(settings: Settings, provider: ProviderName) -> str:
    if provider is ProviderName.GEMINI:
        return settings.DEFAULT_GEMINI_MODEL
    return settings.DEFAULT_GROQ_MODEL


def default_api_key(settings: Settings, provider: ProviderName) -> str:
    if provider is ProviderName.GEMINI:
        return settings.GEMINI_API_KEY
    return settings.GROQ_API_KEY


@router.post(
    "/translate",
    response_model=TranslateResponse,
    status_code=status.HTTP_200_OK,
    summary="Translate text to Japanese",
    description="""
    Translate text with the selected provider and model.

    Quota errors are retried with backoff and then fall back to the
    provider's other models. Any other provider error ends the request.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request or model"},
        401: {"model": ErrorResponse, "description": "Invalid API key"},
        403: {"model": ErrorResponse, "description": "Permission denied"},
        422: {"model": ErrorResponse, "description": "Empty text, text too long or malformed API key"},
        429: {"model": ErrorResponse, "description": "Quota exceeded on all models"},
        502: {"model": ErrorResponse, "description": "Provider error or empty response"},
        504: {"model": ErrorResponse, "description": "Attempt or overall timeout"},
    },
)
async def translate(
    body: TranslateRequestBody,
    orchestrator: TranslationOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
) -> TranslateResponse:
    provider = body.provider or ProviderName(settings.DEFAULT_PROVIDER)
    model = body.model or default_model(settings, provider)
    api_key = body.api_key or SecretStr(default_api_key(settings, provider))

    logger.info("Translate request received", provider=provider.value, model=model, text_length=len(body.text))

    # Raises pydantic ValidationError (400) for a model outside the provider's catalogue
    request = TranslationRequest(raw_text=body.text, api_key=api_key, provider=provider, model=model)
    outcome = await orchestrator.execute(request)
    metadata = outcome.metadata

    return TranslateResponse(
        translated_text=outcome.text,
        original_text=body.text,
        provider=provider,
        model_used=metadata.model_used,
        used_fallback=metadata.used_fallback,
        attempts=metadata.total_attempts,
        duration_ms=metadata.total_latency_ms,
        attempt_history=[
            AttemptInfo(model=r.model, stage=r.stage, outcome=r.outcome, duration_ms=r.duration_ms)
            for r in metadata.attempts
        ],
    )


@router.get(
    "/models",
    response_model=ModelsResponse,
    summary="List providers and models",
)
async def list_models(settings: Settings = Depends(get_settings)) -> ModelsResponse:
    providers = [
        ProviderModels(
            provider=provider,
            display_name=provider.display_name,
            default_model=default_model(settings, provider),
            models=[ModelInfo(id=m, display_name=get_model_display_name(m)) for m in PROVIDER_MODELS[provider]],
            fallback_order=fallback_models(settings, provider),
        )
        for provider in ProviderName
    ]
    return ModelsResponse(default_provider=ProviderName(settings.DEFAULT_PROVIDER), providers=providers)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
)
async def health(
    settings: Settings = Depends(get_settings),
    clients: Dict[ProviderName, BaseProviderClient] = Depends(get_provider_clients),
) -> HealthResponse:
    """
    Report configuration status.

    Providers are not called here; a health check must not burn quota.
    "degraded" means no provider has a usable default key, which only
    matters for requests that do not carry their own key.
    """
    providers: dict[str, str] = {}
    for provider in ProviderName:
        client = clients.get(provider)
        if client is None:
            providers[provider.value] = "not_configured"
        elif client.is_valid_api_key(default_api_key(settings, provider), settings.MIN_API_KEY_LENGTH):
            providers[provider.value] = "configured"
        else:
            providers[provider.value] = "no_default_key"

    overall = "healthy" if "configured" in providers.values() else "degraded"
    return HealthResponse(status=overall, version=settings.APP_VERSION, providers=providers)
