"""Errors raised by the relay pipelines, and the upstream failures mapped to HTTP 400."""

import httpx
from google.genai.errors import APIError
from qdrant_client.http.exceptions import ApiException


class RelayError(Exception):
    pass


class EmbeddingCountMismatch(RelayError):
    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"expected {expected} embeddings, got {got}")


class UnexpectedContentPart(RelayError):
    def __init__(self, part_type: str):
        self.part_type = part_type
        super().__init__(f"unexpected content part type {part_type}")


# Gemini API errors, Qdrant REST errors and transport failures from either client.
UPSTREAM_ERRORS = (RelayError, APIError, ApiException, httpx.HTTPError, ConnectionError)
