"""Search, answer and statistics models returned by the engine."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .document import Passage


@dataclass
class Highlight:
    """Occurrences of one query term inside a passage.

    Attributes:
        term: The query term.
        count: Number of whole-word, case-insensitive matches.
        positions: Starting character offset of each match.
    """

    term: str
    count: int
    positions: list[int]


@dataclass
class SearchResult:
    """A passage with its similarity score for a query.

    Attributes:
        passage_id: Identifier of the matched passage.
        passage: The matched Passage.
        score: Cosine similarity (0.0 to 1.0, higher is more relevant).
        highlights: Query term matches inside the passage text.
    """

    passage_id: str
    passage: Passage
    score: float
    highlights: list[Highlight] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Presentation form used by the CLI, score rounded to two decimals."""
        return {
            "id": self.passage_id,
            "title": self.passage.title,
            "content": self.passage.content,
            "category": self.passage.category,
            "score": round(self.score, 2),
            "highlights": [
                {"term": h.term, "count": h.count, "positions": h.positions}
                for h in self.highlights
            ],
            "metadata": {
                "tags": list(self.passage.tags),
                "chunk_index": self.passage.index,
            },
        }


@dataclass
class AnswerContext:
    """Context assembled for an external answer generator.

    Attributes:
        question: The question as asked (trimmed).
        context_text: Passage bodies followed by caller-supplied context.
        search_results: Passages used to build the context.
        has_relevant_info: True when at least one passage matched.
        created_at: Assembly time (UTC).
    """

    question: str
    context_text: str
    search_results: list[SearchResult]
    has_relevant_info: bool
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class IndexStats:
    """Corpus size figures reported by the passage index."""

    document_count: int
    passage_count: int
    category_count: int
    avg_passages_per_document: float
    categories: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "document_count": self.document_count,
            "passage_count": self.passage_count,
            "category_count": self.category_count,
            "avg_passages_per_document": self.avg_passages_per_document,
            "categories": list(self.categories),
        }


@dataclass
class TopicMatch:
    """A search result labelled with the exam subject and level it covers."""

    result: SearchResult
    subject: str
    level: str

    def to_dict(self) -> dict[str, Any]:
        data = self.result.to_dict()
        data["subject"] = self.subject
        data["level"] = self.level
        return data


@dataclass
class TopicSearch:
    """Exam-topic lookup: the query that was run and its labelled matches."""

    query: str
    subject: str | None
    level: str | None
    matches: list[TopicMatch] = field(default_factory=list)

    @property
    def subjects(self) -> list[str]:
        """Distinct subjects among the matches, first-seen order."""
        return list(dict.fromkeys(m.subject for m in self.matches))

    @property
    def levels(self) -> list[str]:
        return list(dict.fromkeys(m.level for m in self.matches))

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "subject": self.subject,
            "level": self.level,
            "total_results": len(self.matches),
            "results": [m.to_dict() for m in self.matches],
            "subjects": self.subjects,
            "levels": self.levels,
        }
