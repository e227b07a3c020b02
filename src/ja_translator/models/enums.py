"""
Enumerations for the translation layer.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class ProviderName(str, Enum):
    """Supported LLM providers."""

    GEMINI = "gemini"
    GROQ = "groq"

    @property
    def display_name(self) -> str:
        return PROVIDER_DISPLAY_NAMES[self]


class GeminiModel(str, Enum):
    """Gemini models accepted for translation."""

    PRO_2_5 = "gemini-2.5-pro"
    FLASH_2_5 = "gemini-2.5-flash"
    FLASH_LITE_2_5 = "gemini-2.5-flash-lite"


class GroqModel(str, Enum):
    """Groq-hosted models accepted for translation."""

    LLAMA_3_3_70B = "llama-3.3-70b-versatile"
    LLAMA_3_1_70B = "llama-3.1-70b-versatile"
    MIXTRAL_8X7B = "mixtral-8x7b-32768"
    OSS_120B = "openai/gpt-oss-120b"
    OSS_20B = "openai/gpt-oss-20b"


class ErrorKind(str, Enum):
    """
    Closed classification of a failed provider attempt.

    Retry and fallback decisions branch on these values only; raw error
    strings never leave the classifier.
    """

    QUOTA = "quota"
    TIMEOUT = "timeout"
    AUTH_INVALID_KEY = "auth_invalid_key"
    AUTH_PERMISSION_DENIED = "auth_permission_denied"
    INVALID_MODEL = "invalid_model"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


PROVIDER_DISPLAY_NAMES: dict[ProviderName, str] = {
    ProviderName.GEMINI: "Google Gemini",
    ProviderName.GROQ: "Groq",
}

MODEL_DISPLAY_NAMES: dict[str, str] = {
    GeminiModel.PRO_2_5.value: "Gemini 2.5 Pro",
    GeminiModel.FLASH_2_5.value: "Gemini 2.5 Flash",
    GeminiModel.FLASH_LITE_2_5.value: "Gemini 2.5 Flash Lite",
    GroqModel.LLAMA_3_3_70B.value: "Llama 3.3 70B Versatile",
    GroqModel.LLAMA_3_1_70B.value: "Llama 3.1 70B Versatile",
    GroqModel.MIXTRAL_8X7B.value: "Mixtral 8x7B",
    GroqModel.OSS_120B.value: "GPT-oss 120B",
    GroqModel.OSS_20B.value: "GPT-oss 20B",
}

PROVIDER_MODELS: dict[ProviderName, tuple[str, ...]] = {
    ProviderName.GEMINI: tuple(m.value for m in GeminiModel),
    ProviderName.GROQ: tuple(m.value for m in GroqModel),
}


def is_valid_model(provider: ProviderName, model: str) -> bool:
    """Check whether `model` belongs to `provider`'s catalogue."""
    return model in PROVIDER_MODELS[provider]


def get_model_display_name(model: str) -> str:
    """Human-readable model name, falling back to the raw identifier."""
    return MODEL_DISPLAY_NAMES.get(model, model)
