"""Corpus Source Port Interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class CorpusSourcePort(ABC):
    """Abstract interface for anything that supplies source documents.

    Records use the ``{title, content, category, tags}`` shape; the index
    validates each one and skips those that do not fit.
    """

    name: str = "corpus"

    @abstractmethod
    def load(self) -> Iterator[dict[str, Any]]:
        """Yield raw source document records."""
        ...
