"""
Service-level translation: text acquisition plus orchestration.
"""

from typing import Optional

import structlog

from ja_translator.exceptions import NoTextAvailableError
from ja_translator.models.request_models import (
    TranslationOptions,
    TranslationRequest,
    TranslationResult,
)
from ja_translator.translation.orchestrator import ProgressCallback, TranslationOrchestrator
from ja_translator.translation.text_source import TextSource, read_text


logger = structlog.get_logger(__name__)


class TranslationService:
    """
    Fetches the text to translate and hands it to the orchestrator.

    A re-translation (e.g. with another model) passes the previous text as
    options.original_text, in which case the text source is not consulted.
    """

    def __init__(self, orchestrator: TranslationOrchestrator):
        self.orchestrator = orchestrator

    async def translate_text(
        self,
        options: TranslationOptions,
        text_source: Optional[TextSource] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> TranslationResult:
        """
        Translate text from `text_source` (or options.original_text).

        The key format is checked before the text source is read.

        Raises:
            InvalidApiKeyFormatError: Malformed key
            NoTextAvailableError: No original_text and the source had nothing
            TranslationError: Anything the orchestrator raises
        """
        api_key = options.api_key.get_secret_value().strip()
        self.orchestrator.validate_api_key(options.provider, api_key)

        if options.original_text:
            text = options.original_text
            used_fallback_source = False
        elif text_source is not None:
            source_result = await read_text(text_source)
            text = source_result.text
            used_fallback_source = source_result.used_fallback_source
        else:
            raise NoTextAvailableError()

        logger.debug(
            "Text acquired",
            provider=options.provider.value,
            model=options.model,
            used_fallback_source=used_fallback_source,
            retranslation=bool(options.original_text),
        )

        request = TranslationRequest(
            raw_text=text,
            api_key=options.api_key,
            provider=options.provider,
            model=options.model,
        )
        translated = await self.orchestrator.translate(
            request,
            on_progress=on_progress,
            from_fallback_source=used_fallback_source,
        )
        return TranslationResult(
            original_text=text,
            translated_text=translated,
            used_fallback_source=used_fallback_source,
        )
