"""Structured logging configuration using structlog.

Console rendering in development, one JSON object per line in production.
Two processors keep provider credentials out of every sink: credential
fields are masked by name, and key-shaped substrings are scrubbed from
all string values (provider error bodies sometimes echo the key back).
"""

import logging
import re
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


APP_NAME = "ja-translator"

SECRET_FIELDS = frozenset({"api_key", "apikey", "authorization", "x-goog-api-key"})

# Gemini keys start with "AI", Groq keys with "gsk_"
KEY_LIKE_PATTERN = re.compile(r"\b(?:AI[A-Za-z0-9_-]{28,}|gsk_[A-Za-z0-9]{20,})")
MASK = "***"

# Third-party loggers that are chatty at INFO (httpx logs full request URLs)
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio", "uvicorn.access")


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the application name."""
    event_dict["app"] = APP_NAME
    return event_dict


def mask_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credential fields by name and key-shaped substrings everywhere else."""
    for key, value in list(event_dict.items()):
        if key.lower() in SECRET_FIELDS and value:
            event_dict[key] = MASK
        elif isinstance(value, str) and value:
            event_dict[key] = KEY_LIKE_PATTERN.sub(MASK, value)
    return event_dict


def _shared_processors(is_production: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        mask_secrets,
    ]
    if is_production:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer(is_production: bool) -> Processor:
    if is_production:
        # Translations are mostly non-ASCII; keep them readable in the JSON
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: "production" selects JSON output, anything else the console renderer
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"
    shared = _shared_processors(is_production)

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=_renderer(is_production), foreign_pre_chain=shared)
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )
