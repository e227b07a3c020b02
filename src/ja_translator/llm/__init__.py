"""
LLM provider clients and helpers.

Components:
- BaseProviderClient: Abstract base class, owns the attempt timer race
- GeminiClient / GroqClient: Provider implementations over httpx
- PromptBuilder: Renders the translation prompt (Jinja2)
- error_classifier: Maps raw failures onto ErrorKind
- text_utils: Input sanitization and secret redaction
- exceptions: Client-level exceptions
"""

from ja_translator.llm.base_client import BaseProviderClient
from ja_translator.llm.error_classifier import classify, classify_message, parse_retry_hint
from ja_translator.llm.exceptions import (
    LLMClientError,
    LLMEmptyResponseError,
    LLMRequestError,
    LLMTimeoutError,
)
from ja_translator.llm.factory import create_client, create_clients
from ja_translator.llm.gemini_client import GeminiClient
from ja_translator.llm.groq_client import GroqClient
from ja_translator.llm.prompt_builder import PromptBuilder
from ja_translator.llm.text_utils import redact_secret, sanitize_input

__all__ = [
    "BaseProviderClient",
    "GeminiClient",
    "GroqClient",
    "PromptBuilder",
    "create_client",
    "create_clients",
    "classify",
    "classify_message",
    "parse_retry_hint",
    "sanitize_input",
    "redact_secret",
    "LLMClientError",
    "LLMEmptyResponseError",
    "LLMRequestError",
    "LLMTimeoutError",
]
