"""Environment-driven settings, read once at startup."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    gemini_key: Optional[str]
    llm_model: Optional[str]
    embedding_model: Optional[str]
    collection_class: Optional[str]
    vector_db_host: str = "localhost"
    vector_db_port: int = 6333
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_key=os.getenv("GEMINI_KEY"),
            llm_model=os.getenv("LLM_MODEL"),
            embedding_model=os.getenv("EMBEDDING_MODEL_NAME"),
            collection_class=os.getenv("COLLECTION_CLASS"),
            vector_db_host=os.getenv("VECTOR_DB_HOST", "localhost"),
            vector_db_port=int(os.getenv("VECTOR_DB_PORT", "6333")),
            port=int(os.getenv("PORT", "8080")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
