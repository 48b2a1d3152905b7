"""Qdrant adapter storing document text alongside precomputed vectors."""

import logging
import uuid
from typing import List, Sequence

from qdrant_client import AsyncQdrantClient
from qdrant_client.models import Distance, PointStruct, VectorParams

logger = logging.getLogger(__name__)

TEXT_FIELD = "text"


class DocumentStore:
    def __init__(self, client: AsyncQdrantClient, collection_name: str):
        self.client = client
        self.collection_name = collection_name

    async def close(self):
        await self.client.close()

    async def _ensure_collection(self, vector_size: int):
        if await self.client.collection_exists(self.collection_name):
            return
        try:
            await self.client.create_collection(
                collection_name=self.collection_name,
                vectors_config=VectorParams(size=vector_size, distance=Distance.COSINE),
            )
        except Exception:
            # a concurrent ingest may have created it first
            if await self.client.collection_exists(self.collection_name):
                logger.info(f"Collection '{self.collection_name}' created concurrently")
                return
            raise
        logger.info(f"Created collection '{self.collection_name}' | vector_size={vector_size}")

    async def add(self, texts: Sequence[str], vectors: Sequence[List[float]]) -> int:
        """Insert one point per text in a single upsert. Returns the number of points written."""
        if not texts:
            return 0

        await self._ensure_collection(len(vectors[0]))

        points = [
            PointStruct(id=str(uuid.uuid4()), vector=list(vector), payload={TEXT_FIELD: text})
            for text, vector in zip(texts, vectors)
        ]
        await self.client.upsert(collection_name=self.collection_name, points=points)
        return len(points)

    async def nearest(self, vector: List[float], limit: int) -> List[str]:
        result = await self.client.query_points(
            collection_name=self.collection_name,
            query=vector,
            limit=limit,
            with_payload=[TEXT_FIELD],
        )
        texts = []
        for point in result.points:
            payload = point.payload or {}
            text = payload.get(TEXT_FIELD)
            if text is None:
                logger.warning(f"Skipping point without text | id={point.id}")
                continue
            texts.append(text)
        return texts
