"""Domain models for the study knowledge engine.

- document: SourceDocument (boundary shape), Document and Passage
- results: Highlight, SearchResult, AnswerContext, IndexStats and the
  exam-topic TopicMatch / TopicSearch

All models are re-exported here for convenient importing:

    from studyrag.core.domain import Passage, SearchResult
"""

from .document import Document, Passage, SourceDocument
from .results import (
    AnswerContext,
    Highlight,
    IndexStats,
    SearchResult,
    TopicMatch,
    TopicSearch,
)

__all__ = [
    # Document models
    "SourceDocument",
    "Document",
    "Passage",
    # Result models
    "Highlight",
    "SearchResult",
    "AnswerContext",
    "IndexStats",
    "TopicMatch",
    "TopicSearch",
]
