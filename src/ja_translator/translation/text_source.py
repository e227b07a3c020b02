"""
Where the text to translate comes from.

Hosts supply concrete sources (current selection, clipboard, request
body). FirstAvailableTextSource chains two of them and reports whether
the second one was used.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import structlog

from ja_translator.exceptions import NoTextAvailableError


logger = structlog.get_logger(__name__)


@runtime_checkable
class TextSource(Protocol):
    async def get_text(self) -> str:
        """Return non-blank text or raise NoTextAvailableError."""
        ...


@dataclass(frozen=True)
class TextSourceResult:
    text: str
    used_fallback_source: bool = False


class StaticTextSource:
    """Fixed text, e.g. a request body."""

    def __init__(self, text: str):
        self.text = text

    async def get_text(self) -> str:
        if not self.text or not self.text.strip():
            raise NoTextAvailableError()
        return self.text


class FirstAvailableTextSource:
    """
    Primary source first, fallback source when the primary has nothing.

    Mirrors "selected text, else clipboard".
    """

    def __init__(self, primary: TextSource, fallback: TextSource):
        self.primary = primary
        self.fallback = fallback

    async def fetch(self) -> TextSourceResult:
        """
        Read text, preferring the primary source.

        Raises:
            NoTextAvailableError: Neither source produced non-blank text
        """
        try:
            text = await self.primary.get_text()
            if text and text.strip():
                return TextSourceResult(text=text, used_fallback_source=False)
        except Exception as e:
            # Selection APIs raise when nothing is selected
            logger.debug("Primary text source unavailable", error=str(e), error_type=type(e).__name__)

        try:
            text = await self.fallback.get_text()
        except NoTextAvailableError:
            raise
        except Exception as e:
            logger.debug("Fallback text source unavailable", error=str(e), error_type=type(e).__name__)
            raise NoTextAvailableError() from e

        if not text or not text.strip():
            raise NoTextAvailableError()
        return TextSourceResult(text=text, used_fallback_source=True)

    async def get_text(self) -> str:
        return (await self.fetch()).text


async def read_text(source: TextSource) -> TextSourceResult:
    """Read from any TextSource, keeping the fallback flag when the source reports one."""
    if isinstance(source, FirstAvailableTextSource):
        return await source.fetch()
    text = await source.get_text()
    if not text or not text.strip():
        raise NoTextAvailableError()
    return TextSourceResult(text=text)
