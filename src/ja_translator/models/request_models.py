"""
Translation request and result models.

TranslationRequest is the immutable input of one orchestrator call.
TranslationOptions / TranslationResult belong to the service layer, which
also knows where the text came from.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from ja_translator.models.enums import ProviderName, is_valid_model


class TranslationRequest(BaseModel):
    """
    Input of a single translate() call.

    The API key is held as a SecretStr so that repr() and logging of the
    request never expose it. Key *format* is checked by the orchestrator,
    not here, so that a malformed key surfaces as InvalidApiKeyFormatError.
    """
    model_config = ConfigDict(frozen=True)

    raw_text: str = Field(..., description="Text to translate, before sanitization")
    api_key: SecretStr = Field(..., description="Provider API key (opaque)")
    provider: ProviderName = Field(..., description="Provider to call")
    model: str = Field(..., description="Primary model, must belong to the provider")

    @model_validator(mode="after")
    def check_model_belongs_to_provider(self) -> "TranslationRequest":
        if not is_valid_model(self.provider, self.model):
            raise ValueError(
                f"Model '{self.model}' is not available for provider '{self.provider.value}'"
            )
        return self


class TranslationOptions(BaseModel):
    """Options for the service-level translate_text() call."""
    model_config = ConfigDict(frozen=True)

    provider: ProviderName
    api_key: SecretStr
    model: str
    original_text: Optional[str] = Field(
        default=None,
        description="Text of a previous run; when set the text source is not consulted",
    )


class TranslationResult(BaseModel):
    """Service-level result: original text, translation and its source."""

    original_text: str
    translated_text: str
    used_fallback_source: bool = Field(
        default=False,
        description="True when the text came from the fallback source (e.g. clipboard)",
    )
