"""
LLM-specific data models for the request/response cycle.

These models are internal to the LLM layer and describe the raw exchange
with a provider (Gemini, Groq). They are separate from the translation
models so that each client can map them onto its own wire format.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ConfigDict


class LLMGenerationRequest(BaseModel):
    """
    Provider-neutral generation request.

    Built once per attempt by the client and translated into the
    provider's payload.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Complete prompt including delimiters")
    model: str = Field(..., description="Model identifier (e.g., 'gemini-2.5-flash')")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=4096, ge=1, le=65536, description="Maximum tokens to generate")


class LLMGenerationResponse(BaseModel):
    """
    Provider response reduced to the generated text plus metadata.

    `content` may be empty here; emptiness is judged by the client's
    invoke() so that every provider treats it the same way.
    """
    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Generated text")
    model_version: str = Field(..., description="Model that actually served the request")
    finish_reason: Optional[str] = Field(default=None, description="Why generation stopped")
    prompt_tokens: Optional[int] = Field(default=None, description="Tokens in prompt")
    completion_tokens: Optional[int] = Field(default=None, description="Tokens in completion")
    latency_ms: int = Field(..., ge=0, description="Round-trip latency in milliseconds")
    raw_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific metadata (for debugging)"
    )
