"""Port interfaces implemented by adapters."""

from .corpus_source_port import CorpusSourcePort

__all__ = ["CorpusSourcePort"]
