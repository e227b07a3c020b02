"""
Japanese translation layer over external LLM providers.

Turns arbitrary text into Japanese by calling Google Gemini or Groq while
tolerating unreliable backends:
- Input sanitization and delimited prompts (prompt-injection mitigation)
- Quota-aware retry with exponential backoff
- Ordered fallback across models of the same provider
- A single overall deadline shared by every attempt

Architecture: FastAPI surface + TranslationOrchestrator + httpx provider clients
"""

__version__ = "0.1.0"
