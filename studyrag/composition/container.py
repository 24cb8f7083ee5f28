"""Composition root wiring corpus sources to the retrieval services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.corpus import DirectoryCorpusSource, SeedCorpusSource
from ..config import settings
from ..config.settings import Settings
from ..core.domain.exceptions import InvalidConfigurationError
from ..core.services import AnswerService, KnowledgeBase, RetrievalService, TopicService

logger = logging.getLogger(__name__)


def check_settings(config: Settings) -> None:
    """Reject settings the engine cannot run with.

    Raises:
        InvalidConfigurationError: If chunking or retrieval limits are out of range.
    """
    if config.chunk_max_length <= 0:
        raise InvalidConfigurationError(
            "chunk_max_length must be positive",
            context={"chunk_max_length": config.chunk_max_length},
        )
    if not 0 <= config.chunk_overlap < config.chunk_max_length:
        raise InvalidConfigurationError(
            "chunk_overlap must be between 0 and chunk_max_length",
            context={
                "chunk_overlap": config.chunk_overlap,
                "chunk_max_length": config.chunk_max_length,
            },
        )
    if config.default_max_results < 1 or config.answer_max_results < 1:
        raise InvalidConfigurationError(
            "max results settings must be at least 1",
            context={
                "default_max_results": config.default_max_results,
                "answer_max_results": config.answer_max_results,
            },
        )


def build_knowledge_base(config: Settings) -> KnowledgeBase:
    """Create a knowledge base and load the configured corpus into it."""
    check_settings(config)
    knowledge_base = KnowledgeBase(
        max_length=config.chunk_max_length,
        overlap=config.chunk_overlap,
    )
    knowledge_base.rebuild(
        [DirectoryCorpusSource(config.corpus_dir)],
        fallback=SeedCorpusSource() if config.use_seed_corpus else None,
    )
    return knowledge_base


@lru_cache
def get_knowledge_base() -> KnowledgeBase:
    logger.info(f"Loading knowledge base from {settings.corpus_dir} (composition root)...")
    return build_knowledge_base(settings)


@lru_cache
def get_retrieval_service() -> RetrievalService:
    logger.info("Initializing RetrievalService...")
    return RetrievalService(
        get_knowledge_base(),
        default_max_results=settings.default_max_results,
        default_min_score=settings.default_min_score,
        max_query_length=settings.max_query_length,
    )


@lru_cache
def get_answer_service() -> AnswerService:
    logger.info("Initializing AnswerService...")
    return AnswerService(get_retrieval_service(), max_results=settings.answer_max_results)


def refresh_knowledge_base() -> KnowledgeBase:
    """Reload the corpus into a new index generation and swap it in."""
    knowledge_base = get_knowledge_base()
    knowledge_base.rebuild(
        [DirectoryCorpusSource(settings.corpus_dir)],
        fallback=SeedCorpusSource() if settings.use_seed_corpus else None,
    )
    return knowledge_base


@lru_cache
def get_topic_service() -> TopicService:
    logger.info("Initializing TopicService...")
    return TopicService(get_retrieval_service())
