"""Retrieval engine services.

- tokenizer / chunker / term_weights: text to weighted passages
- passage_index: document and passage tables, bulk loading
- knowledge_base: current index generation with rebuild-and-swap
- retrieval_service: cosine ranking and highlights
- answer_service: context assembly for question answering
- topic_service: exam-topic lookups and study tips
"""

from .answer_service import AnswerService
from .chunker import chunk
from .knowledge_base import KnowledgeBase
from .passage_index import IngestionReport, PassageIndex, bootstrap_index
from .retrieval_service import RetrievalService, search
from .term_weights import cosine_similarity, vectorize
from .tokenizer import fold_case, tokenize
from .topic_service import TopicService

__all__ = [
    "AnswerService",
    "IngestionReport",
    "KnowledgeBase",
    "PassageIndex",
    "RetrievalService",
    "TopicService",
    "bootstrap_index",
    "chunk",
    "cosine_similarity",
    "fold_case",
    "search",
    "tokenize",
    "vectorize",
]
