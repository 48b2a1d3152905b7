"""Document ingestion endpoint: embed a batch and store it in the vector database."""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from docrelay.errors import UPSTREAM_ERRORS, EmbeddingCountMismatch
from docrelay.rag import RAGEngine
from docrelay.routes.dependencies import get_rag_engine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


class AddDocumentsRequest(BaseModel):
    documents: List[str]


@router.post("/document")
async def add_documents(req: AddDocumentsRequest, rag: RAGEngine = Depends(get_rag_engine)):
    try:
        await rag.ingest_async(req.documents)
    except EmbeddingCountMismatch as e:
        logger.warning(f"Ingest rejected: {e}")
        return JSONResponse(status_code=400, content={"message": str(e)})
    except UPSTREAM_ERRORS as e:
        logger.error(f"Ingest failed: {e}")
        return JSONResponse(status_code=400, content={"error": str(e)})

    return {"message": "Successfully generated documents"}
