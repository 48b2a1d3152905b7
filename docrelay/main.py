"""FastAPI application entrypoint with RAG engine lifecycle management."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docrelay.config import get_settings
from docrelay.logging_config import setup_logging
from docrelay.rag import RAGEngine
from docrelay.routes import documents_router, health_router, questions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.rag is None:
        app.state.rag = RAGEngine.from_settings(get_settings())
    yield
    await app.state.rag.close()


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    logger.warning(f"Malformed request | path={request.url.path} | {message}")
    return JSONResponse(status_code=400, content={"error": message})


def create_app(engine: Optional[RAGEngine] = None) -> FastAPI:
    app = FastAPI(title="DocRelay", lifespan=lifespan)
    app.state.rag = engine

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(questions_router)
    return app


app = create_app()


def run():
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run("docrelay.main:app", host="0.0.0.0", port=settings.port)
