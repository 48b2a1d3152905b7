"""RAG-based question answering endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from docrelay.errors import UPSTREAM_ERRORS
from docrelay.rag import RAGEngine
from docrelay.routes.dependencies import get_rag_engine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["questions"])


class AskQuestionRequest(BaseModel):
    question: str


@router.post("/ask")
async def ask(q: AskQuestionRequest, rag: RAGEngine = Depends(get_rag_engine)):
    try:
        return await rag.ask_async(q.question)
    except UPSTREAM_ERRORS as e:
        logger.error(f"Ask failed: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})
