"""studyrag: lexical passage retrieval for short educational documents.

Documents are split into overlapping passages, each passage gets a
normalized term-frequency vector, and queries are ranked against the
passages by cosine similarity, optionally within one topic category.

    from studyrag.core.services import KnowledgeBase, RetrievalService
"""

__version__ = "0.1.0"
