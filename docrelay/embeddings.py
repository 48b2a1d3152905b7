"""Gemini embedding adapter: text in, float vectors out, one vector per input."""

import asyncio
import logging
from typing import List, Union

import google.genai as genai

from docrelay.errors import RelayError

logger = logging.getLogger(__name__)


class EmbeddingModel:
    def __init__(self, client: genai.Client, model_name: str):
        self.client = client
        self.model_name = model_name

    def _embed_content(self, contents: Union[str, List[str]]) -> List[List[float]]:
        response = self.client.models.embed_content(model=self.model_name, contents=contents)
        embeddings = response.embeddings or []
        return [list(e.values or []) for e in embeddings]

    def embed(self, texts: List[str]) -> List[List[float]]:
        return self._embed_content(texts)

    def embed_one(self, text: str) -> List[float]:
        vectors = self._embed_content(text)
        if not vectors:
            raise RelayError("embedding service returned no vectors")
        return vectors[0]

    async def embed_async(self, texts: List[str]) -> List[List[float]]:
        return await asyncio.to_thread(self.embed, texts)

    async def embed_one_async(self, text: str) -> List[float]:
        return await asyncio.to_thread(self.embed_one, text)
