"""
API-specific request and response models for FastAPI endpoints.

These models wrap the core translation models with API-specific metadata
(attempts, fallback usage, timing).
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, SecretStr

from ja_translator.models.enums import ProviderName


class TranslateRequestBody(BaseModel):
    """Request for POST /translate. Omitted fields fall back to settings."""

    text: str = Field(
        description="Text to translate to Japanese",
        examples=["Hello, world!"],
    )
    provider: Optional[ProviderName] = Field(
        default=None,
        description="Provider to use (default: DEFAULT_PROVIDER)",
    )
    model: Optional[str] = Field(
        default=None,
        description="Primary model (default: the provider's default model)",
        examples=["gemini-2.5-flash", "openai/gpt-oss-120b"],
    )
    api_key: Optional[SecretStr] = Field(
        default=None,
        description="Provider API key (default: GEMINI_API_KEY / GROQ_API_KEY)",
    )


class AttemptInfo(BaseModel):
    model: str
    stage: str = Field(examples=["primary", "fallback"])
    outcome: str = Field(examples=["success", "quota", "timeout"])
    duration_ms: int


class TranslateResponse(BaseModel):
    """Response for POST /translate."""

    translated_text: str
    original_text: str
    provider: ProviderName
    model_used: str = Field(description="Model whose answer was returned")
    used_fallback: bool = Field(description="True when model_used is a fallback model")
    attempts: int = Field(ge=1, description="Number of provider calls made")
    duration_ms: int = Field(ge=0)
    attempt_history: list[AttemptInfo] = Field(default_factory=list)


class ModelInfo(BaseModel):
    id: str
    display_name: str


class ProviderModels(BaseModel):
    provider: ProviderName
    display_name: str
    default_model: str
    models: list[ModelInfo]
    fallback_order: list[str] = Field(description="Models tried, in order, after quota give-up")


class ModelsResponse(BaseModel):
    """Response for GET /models."""

    default_provider: ProviderName
    providers: list[ProviderModels]


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Overall health status",
        examples=["healthy", "degraded"]
    )
    version: str = Field(
        description="Service version",
        examples=["0.1.0"]
    )
    providers: dict[str, str] = Field(
        description="Per-provider configuration status",
        examples=[{"gemini": "configured", "groq": "no_default_key"}]
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(
        description="Error code",
        examples=["quota_exceeded", "validation_failed", "internal_error"]
    )
    message: str = Field(description="Human-readable error message")
    hint: str = Field(default="", description="What the user can do about it")
    details: Optional[dict] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp (UTC)"
    )
