"""
Public error taxonomy of the translation layer.

Every error carries a human-readable remediation hint. str(error) joins the
message and the hint, which is what end users should see. Messages are built
from classified failures only, never from the API key.
"""

from typing import Any

from ja_translator.models.enums import ProviderName


API_KEY_CONSOLES: dict[ProviderName, str] = {
    ProviderName.GEMINI: "https://makersuite.google.com/app/apikey",
    ProviderName.GROQ: "https://console.groq.com/keys",
}

QUOTA_DASHBOARDS: dict[ProviderName, str] = {
    ProviderName.GEMINI: "https://console.cloud.google.com/",
    ProviderName.GROQ: "https://console.groq.com/settings/limits",
}


class TranslationError(Exception):
    """
    Base exception for all errors surfaced by translate().

    Attributes:
        message: What went wrong
        hint: What the user can do about it
        details: Structured data for logging and API responses
    """

    def __init__(self, message: str, hint: str = "", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n\n{self.hint}"
        return self.message


# === Validation (pre-network, never retried) ===


class ValidationError(TranslationError):
    """Input rejected before any provider call."""


class EmptyTextError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "Text to translate cannot be empty",
            hint="Select or copy some text and try again.",
        )


class TextTooLongError(ValidationError):
    """Sanitized text exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Text is too long ({length} characters). Maximum allowed: {max_length} characters",
            hint="Split the text into smaller parts and translate them one by one.",
            details={"length": length, "max_length": max_length},
        )


class InvalidApiKeyFormatError(ValidationError):
    """API key does not match the provider's key format."""

    def __init__(self, provider: ProviderName):
        self.provider = provider
        super().__init__(
            f"Invalid API key format. Please set a valid {provider.display_name} API key.",
            hint=f"Get your API key from: {API_KEY_CONSOLES[provider]}",
            details={"provider": provider.value},
        )


class NoTextAvailableError(ValidationError):
    """No text source produced any text."""

    def __init__(self) -> None:
        super().__init__(
            "No text to translate.",
            hint="Please either:\n1. Select text before running this command, or\n2. Copy text to clipboard",
        )


# === Timeouts ===


class TranslationTimeoutError(TranslationError):
    """Base class for per-attempt and overall timeouts."""


class AttemptTimeoutError(TranslationTimeoutError):
    """A single provider call did not answer within its attempt timeout."""

    def __init__(self, timeout: float, model: str | None = None):
        self.timeout = timeout
        self.model = model
        super().__init__(
            f"Translation timed out after {timeout:g} seconds",
            hint="Please try again with shorter text or check your internet connection.",
            details={"timeout": timeout, "model": model},
        )


class OverallTimeoutError(TranslationTimeoutError):
    """The request's overall deadline was exhausted."""

    def __init__(self, limit: float):
        self.limit = limit
        super().__init__(
            f"Translation exceeded overall timeout of {limit:g} seconds after multiple retry attempts",
            hint="Please try again later with shorter text.",
            details={"limit": limit},
        )


# === Provider failures ===


class QuotaExceededError(TranslationError):
    """
    Quota exhausted on the primary model (and its fallbacks, if tried).

    tried_fallback=False means no alternative model was available to try.
    """

    def __init__(self, model: str, tried_fallback: bool, provider: ProviderName | None = None):
        self.model = model
        self.tried_fallback = tried_fallback
        self.provider = provider
        if tried_fallback:
            hint = "All alternative models also exceeded quota. Please try again later."
        else:
            hint = "Tip: Try switching to a different model in preferences; quota usually recovers after a short wait."
        if provider is not None:
            hint += f"\n\nCheck your quota at: {QUOTA_DASHBOARDS[provider]}"
        super().__init__(
            f"API quota exceeded for model: {model}",
            hint=hint,
            details={"model": model, "tried_fallback": tried_fallback},
        )


class AuthError(TranslationError):
    """Base class for credential problems reported by the provider."""


class InvalidApiKeyError(AuthError):
    def __init__(self, provider: ProviderName, reason: str = ""):
        self.provider = provider
        super().__init__(
            f"Invalid API key: {reason}" if reason else "Invalid API key",
            hint=(
                f"Please check your {provider.display_name} API key in preferences.\n"
                f"Get your API key from: {API_KEY_CONSOLES[provider]}"
            ),
            details={"provider": provider.value},
        )


class PermissionDeniedError(AuthError):
    def __init__(self, provider: ProviderName, reason: str = ""):
        self.provider = provider
        super().__init__(
            f"Permission denied: {reason}" if reason else "Permission denied",
            hint=(
                "Please check your API key permissions.\n"
                f"Manage your keys at: {API_KEY_CONSOLES[provider]}"
            ),
            details={"provider": provider.value},
        )


class InvalidModelError(TranslationError):
    def __init__(self, model: str, reason: str = ""):
        self.model = model
        super().__init__(
            f"Invalid model selected: {reason}" if reason else f"Invalid model selected: {model}",
            hint="Please check your model preference in settings.",
            details={"model": model},
        )


class EmptyResponseError(TranslationError):
    """The provider answered successfully but with no text."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(
            "Translation result is empty",
            hint="The provider returned no text. Please try again or pick another model.",
            details={"model": model},
        )


class ProviderRequestError(TranslationError):
    """Unclassified provider failure; the original message is preserved."""

    def __init__(self, message: str, model: str | None = None):
        self.model = model
        super().__init__(
            f"Translation failed: {message}",
            hint="Please try again. If the problem persists, check the provider status page.",
            details={"model": model},
        )
