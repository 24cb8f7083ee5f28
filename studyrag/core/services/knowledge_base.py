"""Holder of the current passage index generation."""

import logging
import threading
from collections.abc import Iterable

from ..ports.corpus_source_port import CorpusSourcePort
from .chunker import DEFAULT_MAX_LENGTH, DEFAULT_OVERLAP
from .passage_index import IngestionReport, PassageIndex, bootstrap_index

logger = logging.getLogger(__name__)


class KnowledgeBase:
    """Single-writer, many-reader access to the passage index.

    Readers take ``index`` once per call and work on that generation.
    ``rebuild`` loads a complete new index off to the side and swaps the
    reference, so a reader never sees a half-populated corpus.
    """

    def __init__(
        self,
        index: PassageIndex | None = None,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
        overlap: int = DEFAULT_OVERLAP,
    ) -> None:
        self.max_length = max_length
        self.overlap = overlap
        self._index = index if index is not None else PassageIndex(max_length, overlap)
        self._write_lock = threading.Lock()
        self.generation = 0

    @property
    def index(self) -> PassageIndex:
        return self._index

    @property
    def initialized(self) -> bool:
        return self._index.initialized

    def rebuild(
        self,
        sources: Iterable[CorpusSourcePort],
        fallback: CorpusSourcePort | None = None,
    ) -> IngestionReport:
        """Load a fresh index from ``sources`` and make it current.

        Args:
            sources: External corpus sources.
            fallback: Built-in corpus used when the sources yield nothing.

        Returns:
            Report of the load that produced the new generation.
        """
        with self._write_lock:
            index, report = bootstrap_index(
                sources,
                fallback,
                max_length=self.max_length,
                overlap=self.overlap,
            )
            self._index = index
            self.generation += 1
        logger.info(f"Knowledge base generation {self.generation} is live")
        return report
