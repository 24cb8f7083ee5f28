"""Document and passage models for the passage index."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import clean_text


class SourceDocument(BaseModel):
    """Boundary shape of a document supplied by a corpus source.

    Every loader (files, network, built-in seed) must produce records
    matching ``{title, content, category, tags}``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(..., min_length=1)
    content: str
    category: str = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)

    @field_validator("title", "content", "category", mode="after")
    @classmethod
    def clean(cls, value: str) -> str:
        """Remove BOM markers and compose characters to NFC."""
        return clean_text(value)

    @field_validator("tags", mode="before")
    @classmethod
    def missing_tags(cls, value):
        """Treat an explicit null as no tags."""
        return [] if value is None else value


@dataclass(frozen=True)
class Document:
    """A single ingested knowledge unit.

    Attributes:
        doc_id: Unique identifier generated at ingestion.
        title: Document title.
        content: Full body text.
        category: Single topic label.
        tags: Ordered free-form tags.
        passage_count: Number of passages derived from the body.
        created_at: Ingestion time (UTC).
    """

    doc_id: str
    title: str
    content: str
    category: str
    tags: tuple[str, ...] = ()
    passage_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class Passage:
    """A bounded slice of a document body, the unit of retrieval.

    Title, category and tags are copied from the owning document so that
    filtering never has to consult the document table. ``doc_id`` is a
    lookup key only.

    Attributes:
        passage_id: ``{doc_id}_{index}``, unique across the corpus.
        doc_id: Identifier of the owning document.
        title: Owning document title.
        category: Owning document category.
        tags: Owning document tags.
        index: Ordinal position within the document.
        content: Passage text.
        weights: Term-weight vector of the passage text.
    """

    passage_id: str
    doc_id: str
    title: str
    category: str
    tags: tuple[str, ...]
    index: int
    content: str
    weights: dict[str, float] = field(default_factory=dict, compare=False)
