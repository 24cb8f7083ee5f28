"""In-memory passage index: a document table plus a passage table."""

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..domain import Document, IndexStats, Passage, SourceDocument
from ..domain.exceptions import (
    CategoryNotFoundError,
    DocumentValidationError,
    EmptyDocumentError,
    IngestionError,
)
from ..ports.corpus_source_port import CorpusSourcePort
from .chunker import DEFAULT_MAX_LENGTH, DEFAULT_OVERLAP, chunk
from .term_weights import vectorize
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    """Outcome of a bulk corpus load."""

    loaded: int = 0
    skipped: int = 0
    used_fallback: bool = False
    errors: list[str] = field(default_factory=list)


class PassageIndex:
    """Owns every ingested document and the passages derived from it.

    Passages refer to their document by id only. The index is populated
    once (``ingest_all`` / ``bootstrap_index``) and then only read; a
    refresh builds a new ``PassageIndex`` instead of mutating this one.
    """

    def __init__(
        self,
        max_length: int = DEFAULT_MAX_LENGTH,
        overlap: int = DEFAULT_OVERLAP,
    ) -> None:
        """Initialize an empty index.

        Args:
            max_length: Passage length used when chunking document bodies.
            overlap: Characters shared by consecutive passages.
        """
        self.max_length = max_length
        self.overlap = overlap
        self.initialized = False
        self._documents: dict[str, Document] = {}
        self._passages: dict[str, Passage] = {}

    def __len__(self) -> int:
        return len(self._passages)

    @property
    def documents(self) -> list[Document]:
        return list(self._documents.values())

    @property
    def passages(self) -> list[Passage]:
        return list(self._passages.values())

    def get_document(self, doc_id: str) -> Document | None:
        return self._documents.get(doc_id)

    def ingest(self, document: SourceDocument | Mapping[str, Any]) -> Document:
        """Chunk, vectorize and store one source document.

        There is no de-duplication: ingesting the same document twice
        stores it twice under fresh identifiers.

        Args:
            document: A SourceDocument or a raw ``{title, content,
                category, tags}`` mapping.

        Returns:
            The stored Document.

        Raises:
            DocumentValidationError: If a raw mapping has the wrong shape.
            EmptyDocumentError: If the body yields no passage.
        """
        source = self._validate(document)

        texts = chunk(source.content, self.max_length, self.overlap)
        if not texts:
            raise EmptyDocumentError(
                f"Document '{source.title}' has no content to index",
                context={"title": source.title, "category": source.category},
            )

        doc_id = str(uuid.uuid4())
        tags = tuple(source.tags)
        stored = Document(
            doc_id=doc_id,
            title=source.title,
            content=source.content,
            category=source.category,
            tags=tags,
            passage_count=len(texts),
        )
        self._documents[doc_id] = stored

        for i, text in enumerate(texts):
            passage_id = f"{doc_id}_{i}"
            self._passages[passage_id] = Passage(
                passage_id=passage_id,
                doc_id=doc_id,
                title=source.title,
                category=source.category,
                tags=tags,
                index=i,
                content=text,
                weights=vectorize(tokenize(text)),
            )

        logger.debug(f"Indexed '{source.title}' ({source.category}) as {len(texts)} passage(s)")
        return stored

    def ingest_all(
        self,
        documents: Iterable[SourceDocument | Mapping[str, Any]],
        report: IngestionReport | None = None,
    ) -> IngestionReport:
        """Ingest many documents, skipping (and logging) the bad ones.

        Args:
            documents: Source documents or raw mappings.
            report: Existing report to accumulate into.

        Returns:
            Counts of loaded and skipped documents.
        """
        report = report or IngestionReport()
        for document in documents:
            try:
                self.ingest(document)
                report.loaded += 1
            except IngestionError as e:
                report.skipped += 1
                report.errors.append(e.message)
                logger.warning(f"Skipping document: {e.message}")
        return report

    def mark_initialized(self) -> None:
        """Flag the bulk load as complete; queries are refused until then."""
        self.initialized = True

    def categories(self) -> list[str]:
        """Distinct categories of the stored passages, in first-seen order."""
        return list(dict.fromkeys(p.category for p in self._passages.values()))

    def passages_by_category(self, category: str, strict: bool = False) -> list[Passage]:
        """All passages in ``category`` (exact match), in insertion order.

        Args:
            category: Category label.
            strict: Raise instead of returning an empty list for an
                unknown category.

        Raises:
            CategoryNotFoundError: If strict and nothing matches.
        """
        passages = [p for p in self._passages.values() if p.category == category]
        if strict and not passages:
            raise CategoryNotFoundError(
                f"No passages in category '{category}'",
                context={"category": category, "available": self.categories()},
            )
        return passages

    def stats(self) -> IndexStats:
        """Document, passage and category counts; the average is 0 when empty."""
        document_count = len(self._documents)
        passage_count = len(self._passages)
        categories = self.categories()
        return IndexStats(
            document_count=document_count,
            passage_count=passage_count,
            category_count=len(categories),
            avg_passages_per_document=(
                passage_count / document_count if document_count else 0.0
            ),
            categories=tuple(categories),
        )

    @staticmethod
    def _validate(document: SourceDocument | Mapping[str, Any]) -> SourceDocument:
        if isinstance(document, SourceDocument):
            return document
        try:
            return SourceDocument.model_validate(document)
        except PydanticValidationError as e:
            title = document.get("title") if isinstance(document, Mapping) else None
            raise DocumentValidationError(
                f"Malformed source document {title!r}",
                cause=e,
                context={"errors": e.error_count()},
            ) from e


def bootstrap_index(
    sources: Iterable[CorpusSourcePort],
    fallback: CorpusSourcePort | None = None,
    *,
    max_length: int = DEFAULT_MAX_LENGTH,
    overlap: int = DEFAULT_OVERLAP,
) -> tuple[PassageIndex, IngestionReport]:
    """Build a fully loaded index from corpus sources.

    A source that fails to load is logged and skipped. When nothing at
    all ends up indexed, ``fallback`` (the built-in seed corpus) is loaded
    so the engine is always queryable.

    Args:
        sources: External corpus sources, loaded in order.
        fallback: Source used when the others yield no passage.
        max_length: Passage length for chunking.
        overlap: Passage overlap for chunking.

    Returns:
        The initialized index and a report of what was loaded.
    """
    index = PassageIndex(max_length=max_length, overlap=overlap)
    report = IngestionReport()

    for source in sources:
        try:
            index.ingest_all(source.load(), report)
        except IngestionError as e:
            report.errors.append(e.message)
            logger.error(f"Corpus source {source.name} failed: {e.message}")

    if len(index) == 0 and fallback is not None:
        logger.info(f"No external corpus found, loading {fallback.name}")
        index.ingest_all(fallback.load(), report)
        report.used_fallback = True

    index.mark_initialized()
    stats = index.stats()
    logger.info(
        f"Passage index ready: {stats.document_count} documents, "
        f"{stats.passage_count} passages, {stats.category_count} categories "
        f"({report.skipped} skipped)"
    )
    return index, report
