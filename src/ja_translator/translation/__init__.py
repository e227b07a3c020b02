"""
Translation orchestration and service layer.

- TranslationOrchestrator: validate, then retry/fallback within one deadline
- TranslationService: text acquisition (TextSource) + orchestrator
- text_source: TextSource protocol and implementations
"""

from ja_translator.translation.orchestrator import (
    ProgressCallback,
    TranslationOrchestrator,
    TranslationOutcome,
)
from ja_translator.translation.service import TranslationService
from ja_translator.translation.text_source import (
    FirstAvailableTextSource,
    StaticTextSource,
    TextSource,
    TextSourceResult,
)

__all__ = [
    "ProgressCallback",
    "TranslationOrchestrator",
    "TranslationOutcome",
    "TranslationService",
    "TextSource",
    "TextSourceResult",
    "StaticTextSource",
    "FirstAvailableTextSource",
]
