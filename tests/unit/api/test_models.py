"""
Unit tests for API request and response models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from ja_translator.api.models import (
    AttemptInfo,
    ErrorResponse,
    HealthResponse,
    TranslateRequestBody,
    TranslateResponse,
)
from ja_translator.models.enums import ProviderName
from tests.fixtures.fakes import VALID_GROQ_KEY


def test_request_body_defaults():
    """Only text is required; the rest falls back to settings."""
    body = TranslateRequestBody(text="Hello")

    assert body.provider is None
    assert body.model is None
    assert body.api_key is None


def test_request_body_hides_api_key():
    body = TranslateRequestBody(text="Hello", provider="groq", api_key=VALID_GROQ_KEY)

    assert body.provider is ProviderName.GROQ
    assert body.api_key.get_secret_value() == VALID_GROQ_KEY
    assert VALID_GROQ_KEY not in repr(body)
    assert VALID_GROQ_KEY not in body.model_dump_json()


def test_request_body_unknown_provider():
    with pytest.raises(ValidationError):
        TranslateRequestBody(text="Hello", provider="openai")


def test_request_body_missing_text():
    with pytest.raises(ValidationError):
        TranslateRequestBody()


def test_translate_response():
    response = TranslateResponse(
        translated_text="こんにちは",
        original_text="Hello",
        provider=ProviderName.GEMINI,
        model_used="gemini-2.5-flash",
        used_fallback=True,
        attempts=3,
        duration_ms=4200,
        attempt_history=[
            AttemptInfo(model="gemini-2.5-flash-lite", stage="primary", outcome="quota", duration_ms=300),
            AttemptInfo(model="gemini-2.5-flash-lite", stage="primary", outcome="quota", duration_ms=250),
            AttemptInfo(model="gemini-2.5-flash", stage="fallback", outcome="success", duration_ms=1400),
        ],
    )

    data = response.model_dump(mode="json")
    assert data["provider"] == "gemini"
    assert data["attempt_history"][2]["stage"] == "fallback"


def test_translate_response_requires_an_attempt():
    with pytest.raises(ValidationError):
        TranslateResponse(
            translated_text="x",
            original_text="y",
            provider=ProviderName.GROQ,
            model_used="openai/gpt-oss-120b",
            used_fallback=False,
            attempts=0,
            duration_ms=0,
        )


def test_health_response_model():
    """Test HealthResponse model."""
    response = HealthResponse(
        status="degraded",
        version="0.1.0",
        providers={"gemini": "no_default_key", "groq": "no_default_key"},
    )

    assert response.status == "degraded"
    assert isinstance(response.timestamp, datetime)


def test_error_response_model():
    """Test ErrorResponse model."""
    response = ErrorResponse(
        error="quota_exceeded",
        message="API quota exceeded for model: gemini-2.5-pro",
        hint="All alternative models also exceeded quota. Please try again later.",
        details={"model": "gemini-2.5-pro", "tried_fallback": True},
    )

    assert response.error == "quota_exceeded"
    assert response.details["tried_fallback"] is True
    assert isinstance(response.timestamp, datetime)
