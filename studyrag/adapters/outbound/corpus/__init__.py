"""Corpus source adapters."""

from .directory_source import DirectoryCorpusSource
from .seed_source import SEED_DOCUMENTS, SeedCorpusSource

__all__ = ["DirectoryCorpusSource", "SeedCorpusSource", "SEED_DOCUMENTS"]
