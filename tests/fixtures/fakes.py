"""Test doubles shared by unit and integration tests.

- FakeClock / FakeSleep: deterministic time for deadline and backoff tests
- Scripted clients: provider clients whose invoke() replays a script
"""

from dataclasses import dataclass
from typing import Any, Callable

from ja_translator.llm.gemini_client import GeminiClient
from ja_translator.llm.groq_client import GroqClient


VALID_GEMINI_KEY = "AIzaSyD1234567890abcdefghijklmnopqrstuvwxyz"
VALID_GROQ_KEY = "gsk_" + "AaBbCc123456789" * 3


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSleep:
    """Replacement for asyncio.sleep that advances a FakeClock."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        self.clock.advance(delay)


@dataclass
class InvokeCall:
    model: str
    prompt: str
    api_key: str
    timeout: float


class ScriptedClientMixin:
    """
    invoke() replays `script`, one step per call.

    A step is the text to return, an exception to raise, or a callable
    taking the InvokeCall and returning either of those.
    """

    def __init__(self, script: list[Any] | None = None, **kwargs):
        super().__init__(base_url="http://provider.test", **kwargs)
        self.script = list(script or [])
        self.calls: list[InvokeCall] = []

    async def invoke(self, model: str, prompt: str, api_key: str, timeout: float) -> str:
        call = InvokeCall(model=model, prompt=prompt, api_key=api_key, timeout=timeout)
        self.calls.append(call)
        if not self.script:
            raise AssertionError(f"Unexpected provider call #{len(self.calls)} for {model}")
        step = self.script.pop(0)
        if callable(step) and not isinstance(step, BaseException):
            step = step(call)
        if isinstance(step, BaseException):
            raise step
        return step

    @property
    def models_called(self) -> list[str]:
        return [c.model for c in self.calls]


class ScriptedGeminiClient(ScriptedClientMixin, GeminiClient):
    pass


class ScriptedGroqClient(ScriptedClientMixin, GroqClient):
    pass


def advancing(clock: FakeClock, seconds: float, result: Any) -> Callable[[InvokeCall], Any]:
    """Script step that takes `seconds` of fake time before yielding `result`."""

    def step(call: InvokeCall) -> Any:
        clock.advance(seconds)
        return result

    return step
