"""
Tests for environment-driven settings.
"""

from docrelay.config import Settings


class TestSettings:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_KEY", "secret")
        monkeypatch.setenv("LLM_MODEL", "gemini-1.5-flash")
        monkeypatch.setenv("EMBEDDING_MODEL_NAME", "text-embedding-004")
        monkeypatch.setenv("COLLECTION_CLASS", "Document")
        monkeypatch.setenv("VECTOR_DB_PORT", "5555")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.gemini_key == "secret"
        assert settings.llm_model == "gemini-1.5-flash"
        assert settings.embedding_model == "text-embedding-004"
        assert settings.collection_class == "Document"
        assert settings.vector_db_port == 5555
        assert settings.log_level == "DEBUG"

    def test_defaults(self, monkeypatch):
        for name in ("VECTOR_DB_HOST", "VECTOR_DB_PORT", "PORT", "LOG_LEVEL", "COLLECTION_CLASS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.collection_class is None
        assert settings.vector_db_host == "localhost"
        assert settings.vector_db_port == 6333
        assert settings.port == 8080
        assert settings.log_level == "INFO"
