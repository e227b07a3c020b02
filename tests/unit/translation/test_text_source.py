"""Unit tests for text sources."""

import pytest

from ja_translator.exceptions import NoTextAvailableError
from ja_translator.translation.text_source import (
    FirstAvailableTextSource,
    StaticTextSource,
    TextSource,
    TextSourceResult,
    read_text,
)


class FailingSource:
    """Source whose host API raises, like a selection API with nothing selected."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    async def get_text(self) -> str:
        self.calls += 1
        raise self.error


class CountingSource:
    def __init__(self, text: str):
        self.text = text
        self.calls = 0

    async def get_text(self) -> str:
        self.calls += 1
        return self.text


def test_sources_satisfy_protocol():
    assert isinstance(StaticTextSource("x"), TextSource)
    assert isinstance(CountingSource("x"), TextSource)


@pytest.mark.asyncio
async def test_static_source():
    assert await StaticTextSource("hello").get_text() == "hello"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
async def test_static_source_blank(text):
    with pytest.raises(NoTextAvailableError):
        await StaticTextSource(text).get_text()


class TestFirstAvailableTextSource:
    """Selection first, clipboard second."""

    @pytest.mark.asyncio
    async def test_primary_used_when_available(self):
        fallback = CountingSource("clipboard")
        source = FirstAvailableTextSource(CountingSource("selection"), fallback)

        result = await source.fetch()

        assert result == TextSourceResult(text="selection", used_fallback_source=False)
        assert fallback.calls == 0

    @pytest.mark.asyncio
    async def test_fallback_when_primary_raises(self):
        source = FirstAvailableTextSource(FailingSource(RuntimeError("no selection")), CountingSource("clipboard"))

        result = await source.fetch()

        assert result.text == "clipboard"
        assert result.used_fallback_source is True

    @pytest.mark.asyncio
    async def test_fallback_when_primary_blank(self):
        source = FirstAvailableTextSource(CountingSource("   "), CountingSource("clipboard"))

        assert (await source.fetch()).used_fallback_source is True

    @pytest.mark.asyncio
    async def test_both_empty(self):
        source = FirstAvailableTextSource(FailingSource(RuntimeError("no selection")), CountingSource(""))

        with pytest.raises(NoTextAvailableError) as exc_info:
            await source.fetch()

        assert "Copy text to clipboard" in exc_info.value.hint

    @pytest.mark.asyncio
    async def test_fallback_raising_becomes_no_text(self):
        source = FirstAvailableTextSource(CountingSource(""), FailingSource(OSError("clipboard locked")))

        with pytest.raises(NoTextAvailableError) as exc_info:
            await source.fetch()

        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_get_text(self):
        source = FirstAvailableTextSource(CountingSource(""), CountingSource("clipboard"))
        assert await source.get_text() == "clipboard"


class TestReadText:
    @pytest.mark.asyncio
    async def test_plain_source(self):
        assert await read_text(StaticTextSource("hi")) == TextSourceResult(text="hi")

    @pytest.mark.asyncio
    async def test_keeps_fallback_flag(self):
        source = FirstAvailableTextSource(CountingSource(""), CountingSource("clipboard"))

        result = await read_text(source)

        assert result.used_fallback_source is True

    @pytest.mark.asyncio
    async def test_blank_plain_source(self):
        with pytest.raises(NoTextAvailableError):
            await read_text(CountingSource("  "))
