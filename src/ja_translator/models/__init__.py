"""
Data models for the translation layer.

Includes:
- Enums (ProviderName, GeminiModel, GroqModel, ErrorKind) and the model catalogue
- Request models (TranslationRequest, TranslationOptions, TranslationResult)
- Attempt outcomes (AttemptSuccess, AttemptFailure)
- LLM models (LLMGenerationRequest, LLMGenerationResponse)
"""

from ja_translator.models.enums import (
    ErrorKind,
    GeminiModel,
    GroqModel,
    ProviderName,
    get_model_display_name,
    is_valid_model,
)
from ja_translator.models.llm_models import LLMGenerationRequest, LLMGenerationResponse
from ja_translator.models.outcome import AttemptFailure, AttemptOutcome, AttemptSuccess
from ja_translator.models.request_models import (
    TranslationOptions,
    TranslationRequest,
    TranslationResult,
)

__all__ = [
    # Enums
    "ErrorKind",
    "GeminiModel",
    "GroqModel",
    "ProviderName",
    "get_model_display_name",
    "is_valid_model",
    # Requests
    "TranslationOptions",
    "TranslationRequest",
    "TranslationResult",
    # Outcomes
    "AttemptFailure",
    "AttemptOutcome",
    "AttemptSuccess",
    # LLM models
    "LLMGenerationRequest",
    "LLMGenerationResponse",
]
