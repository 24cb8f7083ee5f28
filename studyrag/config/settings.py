"""Configuration management for the study knowledge engine."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CORPUS_DIR = Path("./rag_data")


def _sanitize(value: str) -> str:
    """Remove BOM characters and whitespace from environment values."""
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STUDYRAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Corpus
    corpus_dir: Path = DEFAULT_CORPUS_DIR
    use_seed_corpus: bool = True

    # Chunking
    chunk_max_length: int = 500
    chunk_overlap: int = 50

    # Retrieval
    default_max_results: int = 5
    default_min_score: float = 0.1
    answer_max_results: int = 3
    max_query_length: int = 1000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    @field_validator("corpus_dir", mode="before")
    @classmethod
    def sanitize_corpus_dir(cls, value):
        """Remove BOM and whitespace; an empty value keeps the default directory."""
        if isinstance(value, str):
            return _sanitize(value) or DEFAULT_CORPUS_DIR
        return value

    @field_validator("log_file", mode="before")
    @classmethod
    def sanitize_log_file(cls, value):
        """Remove BOM and whitespace; an empty value disables file logging."""
        if isinstance(value, str):
            return _sanitize(value) or None
        return value


# Global settings instance
settings = Settings()
