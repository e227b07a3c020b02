"""
FastAPI application for the Japanese translation layer.

Run with:
    uvicorn ja_translator.main:app
"""

from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from ja_translator.api.dependencies import get_provider_clients
from ja_translator.api.error_handlers import EXCEPTION_HANDLERS
from ja_translator.api.middleware import RequestTracingMiddleware
from ja_translator.api.routes import router
from ja_translator.config import Settings, settings
from ja_translator.logging_config import configure_logging
from ja_translator.models.enums import ProviderName

configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


def check_configuration(config: Settings) -> list[str]:
    """Problems that would make every request fail; logged at startup."""
    problems = []
    if config.DEFAULT_PROVIDER not in {p.value for p in ProviderName}:
        problems.append(f"Unknown DEFAULT_PROVIDER: {config.DEFAULT_PROVIDER}")
    if not (Path(config.PROMPT_TEMPLATES_DIR) / "translation_prompt.txt").is_file():
        problems.append(f"Prompt template not found in {config.PROMPT_TEMPLATES_DIR}")
    if config.API_TIMEOUT > config.OVERALL_TIMEOUT:
        problems.append("API_TIMEOUT exceeds OVERALL_TIMEOUT; attempts will be capped by the deadline")
    return problems


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        default_provider=settings.DEFAULT_PROVIDER,
        overall_timeout=settings.OVERALL_TIMEOUT,
        api_timeout=settings.API_TIMEOUT,
    )
    for problem in check_configuration(settings):
        logger.error("Configuration problem", problem=problem)

    yield

    # Provider clients own connection pools and possibly abandoned calls
    for provider, client in get_provider_clients().items():
        if client.in_flight_count:
            logger.info(
                "Closing client with calls in flight",
                provider=provider.value,
                in_flight=client.in_flight_count,
            )
        await client.close()
    logger.info("Application shutdown complete")


def create_app(config: Settings = settings) -> FastAPI:
    """Build the FastAPI application."""
    application = FastAPI(
        title=config.APP_NAME,
        description="Resilient Japanese translation over Gemini and Groq with quota-aware retry and model fallback",
        version=config.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(RequestTracingMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for exc_class, handler in EXCEPTION_HANDLERS.items():
        application.add_exception_handler(exc_class, handler)

    application.include_router(router, tags=["translation"])

    if config.PROMETHEUS_ENABLED:
        Instrumentator().instrument(application).expose(application)

    @application.get("/")
    async def root():
        """Service info and endpoint index."""
        return {
            "service": config.APP_NAME,
            "version": config.APP_VERSION,
            "docs": "/docs",
            "health": "/health",
            "models": "/models",
            "translate": "/translate",
            "metrics": "/metrics" if config.PROMETHEUS_ENABLED else None,
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ja_translator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
