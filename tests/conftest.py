"""
Shared test fixtures: a RAGEngine wired to mocked adapters, and an HTTP client over it.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from docrelay.main import create_app
from docrelay.rag import RAGEngine


@pytest.fixture
def embedder():
    mock = Mock()
    mock.embed_async = AsyncMock(side_effect=lambda texts: [[0.1, 0.2, 0.3] for _ in texts])
    mock.embed_one_async = AsyncMock(return_value=[0.1, 0.2, 0.3])
    return mock


@pytest.fixture
def store():
    mock = Mock()
    mock.add = AsyncMock(side_effect=lambda texts, vectors: len(texts))
    mock.nearest = AsyncMock(return_value=["ctx1", "ctx2"])
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def generator():
    mock = Mock()
    mock.generate_async = AsyncMock(return_value=["foo", "bar"])
    return mock


@pytest.fixture
def engine(embedder, store, generator):
    return RAGEngine(embedder=embedder, store=store, generator=generator)


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine=engine)) as test_client:
        yield test_client
