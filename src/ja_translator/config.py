"""
Configuration settings for the Japanese translation layer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROMPT_TEMPLATES_DIR = str(Path(__file__).parent / "prompts")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Japanese Translation Layer"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Providers ===
    DEFAULT_PROVIDER: str = "groq"
    DEFAULT_GEMINI_MODEL: str = "gemini-2.5-flash-lite"
    DEFAULT_GROQ_MODEL: str = "openai/gpt-oss-120b"
    GEMINI_API_KEY: str = ""  # Used by the HTTP surface when the request carries no key
    GROQ_API_KEY: str = ""
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    GROQ_BASE_URL: str = "https://api.groq.com"
    HTTP_TIMEOUT: float = 120.0  # seconds, transport cap for calls nobody waits on anymore

    # === LLM Generation Parameters ===
    LLM_TEMPERATURE: float = 0.3
    LLM_MAX_TOKENS: int = 4096
    PROMPT_TEMPLATES_DIR: str = DEFAULT_PROMPT_TEMPLATES_DIR

    # === Input Validation ===
    MAX_TEXT_LENGTH: int = 10000  # chars, after sanitization
    MIN_API_KEY_LENGTH: int = 30  # floor applied before the provider pattern check

    # === Timeouts (seconds) ===
    API_TIMEOUT: float = 30.0  # cap for a single provider call
    OVERALL_TIMEOUT: float = 60.0  # cap for one translate() call, retries and fallbacks included
    RETRY_BUFFER: float = 1.0  # reserved before the deadline when scheduling attempts/waits
    MIN_ATTEMPT_TIMEOUT: float = 1.0

    # === Retry & Fallback ===
    MAX_RETRY_ATTEMPTS: int = 2  # 1 initial attempt + 1 retry on the primary model
    INITIAL_RETRY_DELAY: float = 2.0
    MAX_RETRY_DELAY: float = 10.0
    GEMINI_FALLBACK_MODELS: list[str] = [
        "gemini-2.5-flash-lite",
        "gemini-2.5-flash",
        "gemini-2.5-pro",
    ]
    GROQ_FALLBACK_MODELS: list[str] = [
        "openai/gpt-oss-120b",
        "openai/gpt-oss-20b",
        "llama-3.3-70b-versatile",
        "llama-3.1-70b-versatile",
        "mixtral-8x7b-32768",
    ]

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
