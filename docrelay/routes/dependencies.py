from fastapi import Request

from docrelay.rag import RAGEngine


async def get_rag_engine(request: Request) -> RAGEngine:
    return request.app.state.rag
