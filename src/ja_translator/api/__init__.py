"""
FastAPI API routes and endpoints.

- routes.py: POST /translate, GET /models, GET /health
- dependencies.py: Dependency injection for provider clients, prompt builder, orchestrator
- models.py: API-specific request/response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request ID tracing
"""

from ja_translator.api import dependencies, error_handlers, models
from ja_translator.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
