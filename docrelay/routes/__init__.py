"""FastAPI routes package."""

from docrelay.routes.documents import router as documents_router
from docrelay.routes.health import router as health_router
from docrelay.routes.questions import router as questions_router

__all__ = ["documents_router", "health_router", "questions_router"]
