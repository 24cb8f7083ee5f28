"""Passage ranking by cosine similarity with term highlighting."""

import logging
import re
from collections.abc import Iterable

from ..domain import Highlight, IndexStats, Passage, SearchResult
from ..domain.exceptions import (
    EmptyQueryError,
    InvalidSearchOptionsError,
    NotInitializedError,
    QueryTooLongError,
)
from .knowledge_base import KnowledgeBase
from .passage_index import PassageIndex
from .term_weights import TermWeights, cosine_similarity, vectorize
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5
DEFAULT_MIN_SCORE = 0.1


def validate_query(query: str | None, max_length: int | None = None) -> str:
    """Return the trimmed query or raise before any work is done.

    Raises:
        EmptyQueryError: If the query is missing or whitespace only.
        QueryTooLongError: If max_length is set and exceeded.
    """
    if query is None or not isinstance(query, str) or not query.strip():
        raise EmptyQueryError("Query cannot be empty or whitespace only")

    clean_query = query.strip()
    if max_length is not None and len(clean_query) > max_length:
        raise QueryTooLongError(
            f"Query exceeds {max_length} characters",
            context={"length": len(clean_query), "max_length": max_length},
        )
    return clean_query


def score_passages(
    index: PassageIndex,
    query_weights: TermWeights,
    category: str | None = None,
) -> list[tuple[Passage, float]]:
    """Score every passage (optionally one category) against a query vector.

    Pure function over a read-only index, safe to call concurrently.
    """
    return [
        (passage, cosine_similarity(query_weights, passage.weights))
        for passage in index.passages
        if category is None or passage.category == category
    ]


def find_highlights(text: str, terms: Iterable[str]) -> list[Highlight]:
    """Whole-word, case-insensitive occurrences of each distinct term.

    Terms without any match are left out.
    """
    highlights = []
    for term in dict.fromkeys(terms):
        pattern = re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)
        positions = [m.start() for m in pattern.finditer(text)]
        if positions:
            highlights.append(Highlight(term=term, count=len(positions), positions=positions))
    return highlights


def search(
    index: PassageIndex,
    query: str,
    category: str | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    min_score: float = DEFAULT_MIN_SCORE,
    max_query_length: int | None = None,
) -> list[SearchResult]:
    """Rank indexed passages against a free-text query.

    Args:
        index: A fully loaded passage index.
        query: Free-text query.
        category: Restrict to passages with exactly this category.
        max_results: Maximum number of results.
        min_score: Passages scoring below this are dropped.
        max_query_length: Optional limit on the trimmed query length.

    Returns:
        Results by descending score; equal scores keep index order.

    Raises:
        ValidationError: For an empty query or invalid options.
        NotInitializedError: If the index has not finished loading.
    """
    validate_query(query, max_query_length)
    if max_results < 1:
        raise InvalidSearchOptionsError(
            "max_results must be at least 1", context={"max_results": max_results}
        )
    if not index.initialized:
        raise NotInitializedError("Passage index is not initialized")

    query_terms = tokenize(query)
    query_weights = vectorize(query_terms)

    scored = [
        (passage, score)
        for passage, score in score_passages(index, query_weights, category)
        if score >= min_score
    ]
    # sorted() is stable, ties keep encounter order
    scored = sorted(scored, key=lambda item: item[1], reverse=True)[:max_results]

    results = [
        SearchResult(
            passage_id=passage.passage_id,
            passage=passage,
            score=score,
            highlights=find_highlights(passage.content, query_terms),
        )
        for passage, score in scored
    ]
    logger.debug(f"Search {query!r} (category={category}) returned {len(results)} result(s)")
    return results


class RetrievalService:
    """Search entry point bound to the current knowledge base generation."""

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        default_max_results: int = DEFAULT_MAX_RESULTS,
        default_min_score: float = DEFAULT_MIN_SCORE,
        max_query_length: int | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            knowledge_base: Holder of the current passage index.
            default_max_results: Used when search is called without max_results.
            default_min_score: Used when search is called without min_score.
            max_query_length: Optional limit on query length.
        """
        self.knowledge_base = knowledge_base
        self.default_max_results = default_max_results
        self.default_min_score = default_min_score
        self.max_query_length = max_query_length

    def search(
        self,
        query: str,
        category: str | None = None,
        max_results: int | None = None,
        min_score: float | None = None,
    ) -> list[SearchResult]:
        """Search the current index generation. See ``search``."""
        return search(
            self.knowledge_base.index,
            query,
            category=category,
            max_results=self.default_max_results if max_results is None else max_results,
            min_score=self.default_min_score if min_score is None else min_score,
            max_query_length=self.max_query_length,
        )

    def categories(self) -> list[str]:
        return self.knowledge_base.index.categories()

    def passages_by_category(self, category: str, strict: bool = False) -> list[Passage]:
        return self.knowledge_base.index.passages_by_category(category, strict=strict)

    def stats(self) -> IndexStats:
        return self.knowledge_base.index.stats()
