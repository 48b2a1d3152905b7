"""Core relay engine: ingest (embed + store) and ask (embed + retrieve + generate)."""

import logging
from typing import List

import google.genai as genai
from qdrant_client import AsyncQdrantClient

from docrelay.config import Settings
from docrelay.embeddings import EmbeddingModel
from docrelay.errors import EmbeddingCountMismatch
from docrelay.generator import AnswerGenerator
from docrelay.logging_config import log_latency
from docrelay.prompts import build_answer_prompt
from docrelay.vector_store import DocumentStore

logger = logging.getLogger(__name__)

TOP_K = 4


class RAGEngine:
    def __init__(self, embedder: EmbeddingModel, store: DocumentStore, generator: AnswerGenerator):
        self.embedder = embedder
        self.store = store
        self.generator = generator

    @classmethod
    def from_settings(cls, settings: Settings) -> "RAGEngine":
        client = genai.Client(api_key=settings.gemini_key)
        qdrant = AsyncQdrantClient(host=settings.vector_db_host, port=settings.vector_db_port)

        engine = cls(
            embedder=EmbeddingModel(client, settings.embedding_model),
            store=DocumentStore(qdrant, settings.collection_class),
            generator=AnswerGenerator(client, settings.llm_model),
        )
        logger.info(
            f"RAGEngine initialized | collection={settings.collection_class} "
            f"| vector_db={settings.vector_db_host}:{settings.vector_db_port}"
        )
        return engine

    async def close(self):
        await self.store.close()
        logger.info("RAGEngine resources closed")

    @log_latency("rag.ingest_async")
    async def ingest_async(self, documents: List[str]) -> int:
        vectors = await self.embedder.embed_async(documents)
        logger.info(f"Embeddings generated | count={len(vectors)}")

        if len(vectors) != len(documents):
            raise EmbeddingCountMismatch(expected=len(documents), got=len(vectors))

        stored = await self.store.add(documents, vectors)
        logger.info(f"Documents stored | count={stored}")
        return stored

    @log_latency("rag.ask_async")
    async def ask_async(self, question: str) -> str:
        logger.info(f"Query received | question_length={len(question)}")

        query_vector = await self.embedder.embed_one_async(question)
        context_chunks = await self.store.nearest(query_vector, limit=TOP_K)
        logger.info(f"Retrieval complete | chunks={len(context_chunks)}")

        prompt = build_answer_prompt(question, context_chunks)
        parts = await self.generator.generate_async(prompt)
        answer = "\n".join(parts)
        logger.info(f"LLM response received | parts={len(parts)} | answer_length={len(answer)}")
        return answer
